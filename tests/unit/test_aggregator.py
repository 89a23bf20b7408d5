from datetime import date, time

import pytest

from src.analysis.aggregator import (
    KeyOrdering,
    aggregate,
    average_quantities,
    count,
    distinct_item_names,
    hour_interval_label,
    hourly_interval_label,
    quantity_per_item,
    round_half_up,
    sum_quantities,
    week_of_month_label,
)
from src.data.models import Item, Transaction


def make_tx(tx_id, hour, items, section="Mixed"):
    return Transaction(
        transaction_id=tx_id,
        date=date(2025, 6, 1),
        time=time(hour, 0),
        items=tuple(Item(name, qty) for name, qty in items),
        payment_method="Cash",
        transaction_type="In-Store",
        transaction_status="Completed",
        customer_type="Regular",
        store_section=section,
    )


def test_numeric_ordering_sorts_hours():
    txs = [make_tx("a", 15, []), make_tx("b", 9, []), make_tx("c", 12, [])]
    result = aggregate(txs, lambda tx: tx.hour, count, KeyOrdering.NUMERIC)
    assert list(result) == [9, 12, 15]


def test_insertion_ordering_keeps_first_seen():
    txs = [
        make_tx("a", 9, [], section="Pantry"),
        make_tx("b", 9, [], section="Dairy"),
        make_tx("c", 9, [], section="Pantry"),
        make_tx("d", 9, [], section="Bakery"),
    ]
    result = aggregate(txs, lambda tx: tx.store_section, count, KeyOrdering.INSERTION)
    assert list(result.items()) == [("Pantry", 2), ("Dairy", 1), ("Bakery", 1)]


def test_aggregate_empty_input():
    assert aggregate([], lambda tx: tx.hour, count, KeyOrdering.NUMERIC) == {}


def test_reducers_on_empty_group():
    assert count([]) == 0
    assert sum_quantities([]) == 0
    assert average_quantities([]) == 0
    assert distinct_item_names([]) == 0


def test_transaction_without_items_counts_as_zero_quantity():
    txs = [make_tx("a", 9, []), make_tx("b", 9, [("milk", 3)])]
    assert sum_quantities(txs) == 3
    assert average_quantities(txs) == 2  # 1.5 rounds up


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(0.5) == 1
    assert round_half_up(2.4999) == 2
    assert round_half_up(6.25) == 6


def test_distinct_item_names_counts_unique_names():
    txs = [make_tx("a", 9, [("milk", 2), ("bread", 1)]), make_tx("b", 9, [("milk", 5)])]
    assert distinct_item_names(txs) == 2


def test_week_of_month_label_30_day_month():
    assert week_of_month_label(date(2025, 6, 1)) == "Week 1"
    assert week_of_month_label(date(2025, 6, 8)) == "Week 1"
    assert week_of_month_label(date(2025, 6, 9)) == "Week 2"
    assert week_of_month_label(date(2025, 6, 30)) == "Week 4"


@pytest.mark.parametrize(
    "year, month", [(2024, 2), (2025, 2), (2025, 1), (2025, 4)]
)
def test_week_of_month_label_always_one_to_four(year, month):
    day = date(year, month, 1)
    labels = set()
    while day.month == month:
        labels.add(week_of_month_label(day))
        day = date.fromordinal(day.toordinal() + 1)
    assert labels == {"Week 1", "Week 2", "Week 3", "Week 4"}


def test_week_of_month_label_leap_february():
    # 29 days -> chunks of 8, day 29 lands in week 4
    assert week_of_month_label(date(2024, 2, 24)) == "Week 3"
    assert week_of_month_label(date(2024, 2, 25)) == "Week 4"
    assert week_of_month_label(date(2024, 2, 29)) == "Week 4"


def test_hour_interval_label():
    assert hour_interval_label(0) == "00:00–01:00"
    assert hour_interval_label(9) == "09:00–10:00"
    assert hour_interval_label(23) == "23:00–00:00"


def test_hourly_interval_label():
    assert hourly_interval_label(time(10, 15)) == "10:00 - 11:00"
    assert hourly_interval_label(time(23, 59)) == "23:00 - 00:00"


def test_quantity_per_item_groups_items_not_transactions():
    txs = [
        make_tx("a", 9, [("milk", 2), ("bread", 1)]),
        make_tx("b", 10, [("bread", 4), ("milk", 1)]),
    ]
    assert list(quantity_per_item(txs).items()) == [("milk", 3), ("bread", 5)]


def test_count_partitions_fixture(transactions):
    by_section = aggregate(transactions, lambda tx: tx.store_section, count)
    by_hour = aggregate(transactions, lambda tx: tx.hour, count, KeyOrdering.NUMERIC)
    assert sum(by_section.values()) == len(transactions) == 30
    assert sum(by_hour.values()) == 30


def test_sum_partitions_fixture(transactions):
    total = sum(tx.total_quantity for tx in transactions)
    by_payment = aggregate(transactions, lambda tx: tx.payment_method, sum_quantities)
    by_week = aggregate(
        transactions, lambda tx: week_of_month_label(tx.date), sum_quantities
    )
    assert total == 126
    assert sum(by_payment.values()) == total
    assert sum(by_week.values()) == total
    assert sum(quantity_per_item(transactions).values()) == total


def test_average_matches_sum_over_size(transactions):
    hour_of = lambda tx: tx.hour  # noqa: E731
    sums = aggregate(transactions, hour_of, sum_quantities, KeyOrdering.NUMERIC)
    sizes = aggregate(transactions, hour_of, count, KeyOrdering.NUMERIC)
    averages = aggregate(transactions, hour_of, average_quantities, KeyOrdering.NUMERIC)
    for hour in averages:
        assert averages[hour] == round_half_up(sums[hour] / sizes[hour])


def test_distinct_bounded_by_occurrences(transactions):
    hour_of = lambda tx: tx.hour  # noqa: E731
    distinct = aggregate(transactions, hour_of, distinct_item_names)
    occurrences = aggregate(
        transactions, hour_of, lambda group: sum(len(tx.items) for tx in group)
    )
    for hour, value in distinct.items():
        assert 1 <= value <= occurrences[hour]
