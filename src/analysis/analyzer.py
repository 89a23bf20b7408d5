"""
Transaction analyzer with clean dataclass-based return types.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Sequence

from configs import get_logger
from src.data.models import Transaction
from .aggregator import (
    KeyOrdering,
    aggregate,
    average_quantities,
    count,
    distinct_item_names,
    hour_interval_label,
    quantity_per_item,
    sum_quantities,
    week_of_month_label,
)

logger = get_logger(__name__)


@dataclass
class ChartSeries:
    """
    One chart, ready to print.

    `labels` and `values` are parallel lists.
    """

    title: str
    labels: List[str] = field(default_factory=list)
    values: List[int] = field(default_factory=list)

    @classmethod
    def from_mapping(
        cls, title: str, data: Dict, label_fn: Callable = str
    ) -> "ChartSeries":
        return cls(
            title=title,
            labels=[label_fn(key) for key in data],
            values=[int(value) for value in data.values()],
        )


class Analyzer:
    """
    analyzing a month of grocery transactions.

    I take the transactions and build one ChartSeries per view.
    """

    def __init__(self, transactions: Sequence[Transaction]):
        """
        Initialize analyzer with the transactions to chart.

        Args:
            transactions: Transactions in the order they were recorded
        """
        self.transactions = list(transactions)
        logger.info(f"Analyzer initialized with {len(self.transactions)} transactions")

    # ========================================================================
    # TIME-BASED VIEWS
    # ========================================================================

    def items_sold_by_hour(self) -> ChartSeries:
        return self._by_hour("Total Items Sold by Hourly Interval", sum_quantities)

    def transactions_by_hour(self) -> ChartSeries:
        return self._by_hour("Total Transactions Count by Hour", count)

    def avg_items_by_hour(self) -> ChartSeries:
        """Average item quantity per transaction, rounded half-up per hour."""
        return self._by_hour("Avg. Items per Transaction by Hour", average_quantities)

    def distinct_items_by_hour(self) -> ChartSeries:
        return self._by_hour("Distinct Items Sold by Hour", distinct_item_names)

    # ========================================================================
    # WEEK-BASED VIEWS
    # ========================================================================

    def transactions_per_week(self) -> ChartSeries:
        return self._by_week("Total Transactions Per Week", count)

    def items_sold_per_week(self) -> ChartSeries:
        return self._by_week("Total Items Sold per Week", sum_quantities)

    # ========================================================================
    # CATEGORICAL VIEWS
    # ========================================================================

    def transactions_by_payment_method(self) -> ChartSeries:
        data = aggregate(
            self.transactions,
            key_fn=lambda tx: tx.payment_method,
            reduce_fn=count,
            key_ordering=KeyOrdering.INSERTION,
        )
        return self._series("Transactions by Payment Method", data)

    def transaction_status_distribution(self) -> ChartSeries:
        data = aggregate(
            self.transactions,
            key_fn=lambda tx: tx.transaction_status,
            reduce_fn=count,
            key_ordering=KeyOrdering.INSERTION,
        )
        return self._series("Transaction Status Distribution", data)

    # ========================================================================
    # ITEM-LEVEL VIEWS
    # ========================================================================

    def total_quantity_per_item(self) -> ChartSeries:
        """Groups individual items, not transactions."""
        data = quantity_per_item(self.transactions)
        return self._series("Total Quantity Sold per Item", data)

    def items_sold_by_store_section(self) -> ChartSeries:
        data = aggregate(
            self.transactions,
            key_fn=lambda tx: tx.store_section,
            reduce_fn=sum_quantities,
            key_ordering=KeyOrdering.INSERTION,
        )
        return self._series("Items Sold by Store Section", data)

    def all_views(self) -> List[ChartSeries]:
        """
        Every chart, in the order they are printed.

        Returns:
            Ten ChartSeries: four hourly, two weekly, two categorical, two item-level
        """
        return [
            self.items_sold_by_hour(),
            self.transactions_by_hour(),
            self.avg_items_by_hour(),
            self.distinct_items_by_hour(),
            self.transactions_per_week(),
            self.items_sold_per_week(),
            self.transactions_by_payment_method(),
            self.transaction_status_distribution(),
            self.total_quantity_per_item(),
            self.items_sold_by_store_section(),
        ]

    # ============================================================================
    # HELPER FUNCTIONS
    # ============================================================================

    def _by_hour(self, title: str, reduce_fn: Callable) -> ChartSeries:
        """grouping by hour of day, hours in ascending order."""
        data = aggregate(
            self.transactions,
            key_fn=lambda tx: tx.hour,
            reduce_fn=reduce_fn,
            key_ordering=KeyOrdering.NUMERIC,
        )
        return self._series(title, data, label_fn=hour_interval_label)

    def _by_week(self, title: str, reduce_fn: Callable) -> ChartSeries:
        """grouping by week-of-month label, weeks in first-seen order."""
        data = aggregate(
            self.transactions,
            key_fn=lambda tx: week_of_month_label(tx.date),
            reduce_fn=reduce_fn,
            key_ordering=KeyOrdering.INSERTION,
        )
        return self._series(title, data)

    def _series(self, title: str, data: Dict, label_fn: Callable = str) -> ChartSeries:
        series = ChartSeries.from_mapping(title, data, label_fn=label_fn)
        logger.debug(f"{title}: {dict(zip(series.labels, series.values))}")
        return series
