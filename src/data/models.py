"""
Immutable value types for grocery transactions.
"""

from dataclasses import dataclass
from datetime import date, time
from typing import Tuple


@dataclass(frozen=True)
class Item:
    """One line of a transaction: what was bought and how many."""

    name: str
    quantity: int


@dataclass(frozen=True)
class Transaction:
    """
    A single checkout at the store.

    `items` may be empty; sums and averages over it are then 0.
    """

    transaction_id: str
    date: date
    time: time
    items: Tuple[Item, ...]
    payment_method: str
    transaction_type: str  # In-Store / Online
    transaction_status: str  # Completed / Pending / Returned
    customer_type: str  # Regular / New
    store_section: str

    @property
    def hour(self) -> int:
        return self.time.hour

    @property
    def total_quantity(self) -> int:
        """Sum of quantities over all items in this transaction."""
        return sum(item.quantity for item in self.items)
