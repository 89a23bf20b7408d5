"""
Transaction data package.

Usage:
    from src.data import load_transactions, Transaction, Item
"""

from .exceptions import FixtureLoadError, InvalidArgumentError
from .models import Item, Transaction
from .loader import load_transactions

__all__ = [
    # Exceptions
    "FixtureLoadError",
    "InvalidArgumentError",
    # Models
    "Item",
    "Transaction",
    # Main functions
    "load_transactions",
]
