"""Transaction analysis package."""

from .aggregator import (
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
from .analyzer import Analyzer, ChartSeries
from .visualizations import center_text, print_bar_chart, render_bar_chart

__all__ = [
    "Analyzer",
    "ChartSeries",
    "KeyOrdering",
    "aggregate",
    "count",
    "sum_quantities",
    "average_quantities",
    "distinct_item_names",
    "round_half_up",
    "week_of_month_label",
    "hour_interval_label",
    "hourly_interval_label",
    "quantity_per_item",
    "print_bar_chart",
    "render_bar_chart",
    "center_text",
]
