"""
Grouping and reducing transactions.

Every chart is the same recipe: derive a key per transaction, group the
transactions by that key with pandas, then collapse each group to one number.
"""

import calendar
import math
from datetime import date, datetime, time, timedelta
from enum import Enum
from typing import Callable, Dict, Hashable, Iterable, List, Sequence

import pandas as pd

from configs import get_logger
from src.data.models import Item, Transaction

logger = get_logger(__name__)

WEEKS_PER_MONTH = 4


class KeyOrdering(Enum):
    """Order in which groups come out of `aggregate`."""

    NUMERIC = "numeric"  # ascending keys (hours 0-23)
    INSERTION = "insertion"  # first time a key is seen


def aggregate(
    records: Iterable,
    key_fn: Callable[..., Hashable],
    reduce_fn: Callable[[List], float],
    key_ordering: KeyOrdering = KeyOrdering.INSERTION,
) -> Dict:
    """
    Group records by `key_fn` and reduce each group with `reduce_fn`.

    Args:
        records: Transactions (or items, for item-level charts)
        key_fn: Maps one record to its group key
        reduce_fn: Maps the list of records in a group to a number
        key_ordering: NUMERIC sorts the keys, INSERTION keeps first-seen order

    Returns:
        Ordered dict of key -> reduced value
    """
    series = pd.Series(list(records), dtype=object)
    if series.empty:
        return {}

    keys = series.map(key_fn)
    grouped = series.groupby(
        keys, sort=key_ordering is KeyOrdering.NUMERIC, dropna=False
    )

    result = {}
    for key, group in grouped:
        result[key] = reduce_fn(group.tolist())

    logger.debug(f"Aggregated {len(series)} records into {len(result)} groups")
    return result


# ============================================================================
# REDUCERS
# ============================================================================


def count(group: Sequence[Transaction]) -> int:
    return len(group)


def sum_quantities(group: Sequence[Transaction]) -> int:
    """Total item quantity over every transaction in the group."""
    return sum(tx.total_quantity for tx in group)


def average_quantities(group: Sequence[Transaction]) -> int:
    """
    Mean item quantity per transaction, rounded half-up for display.

    An empty group averages to 0 instead of dividing by zero.
    """
    if not group:
        return 0
    return round_half_up(sum_quantities(group) / len(group))


def distinct_item_names(group: Sequence[Transaction]) -> int:
    """Number of different item names bought in the group."""
    return len({item.name for tx in group for item in tx.items})


def round_half_up(value: float) -> int:
    # round() would send 2.5 to 2
    return math.floor(value + 0.5)


# ============================================================================
# KEYS AND LABELS
# ============================================================================


def week_of_month_label(day: date) -> str:
    """
    Bucket a date into one of four roughly equal chunks of its month.

    Not calendar weeks: a 30-day month splits into 8-day chunks, so day 1 is
    "Week 1" and day 30 is "Week 4".
    """
    days_in_month = calendar.monthrange(day.year, day.month)[1]
    week_size = math.ceil(days_in_month / WEEKS_PER_MONTH)
    week = (day.day - 1) // week_size + 1
    return f"Week {min(week, WEEKS_PER_MONTH)}"


def hour_interval_label(hour: int) -> str:
    """'10:00–11:00' style label; hour 23 wraps to '23:00–00:00'."""
    return "%02d:00–%02d:00" % (hour, (hour + 1) % 24)


def hourly_interval_label(moment: time) -> str:
    """'10:00 - 11:00' label for the hour containing `moment`."""
    start = datetime.combine(date.min, time(moment.hour))
    end = start + timedelta(hours=1)
    return f"{start:%H:%M} - {end:%H:%M}"


# ============================================================================
# ITEM-LEVEL GROUPING
# ============================================================================


def flatten_items(transactions: Iterable[Transaction]) -> List[Item]:
    return [item for tx in transactions for item in tx.items]


def quantity_per_item(transactions: Iterable[Transaction]) -> Dict[str, int]:
    """Total quantity per item name, grouping individual items (first-seen order)."""
    return aggregate(
        flatten_items(transactions),
        key_fn=lambda item: item.name,
        reduce_fn=lambda items: sum(item.quantity for item in items),
        key_ordering=KeyOrdering.INSERTION,
    )
