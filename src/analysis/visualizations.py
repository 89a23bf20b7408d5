"""
Text bar charts for the terminal.

Every chart is a centered title followed by one `label | ████ (value)` row
per entry, scaled so the longest bar stays around 50 blocks.
"""

import sys
from typing import List, Optional, Sequence, TextIO

from configs import get_logger
from src.data.exceptions import InvalidArgumentError

logger = get_logger(__name__)

# Default configuration
CHART_WIDTH = 80
MAX_BAR_LENGTH = 50
BAR_CHAR = "█"  # full block


def center_text(text: str, width: int = CHART_WIDTH) -> str:
    """Left-pad `text` so it sits in the middle of `width` columns."""
    padding = max(0, (width - len(text)) // 2)
    return " " * padding + text


def render_bar_chart(title: str, labels: Sequence[str], values: Sequence[int]) -> str:
    """
    Build the text of a horizontal bar chart.

    Args:
        title: Chart title (skipped when empty)
        labels: One label per bar
        values: One integer per bar, same order as labels

    Returns:
        The chart as a string, every line ending in a newline

    Raises:
        InvalidArgumentError: If labels and values differ in length
    """
    if len(labels) != len(values):
        error_msg = "Labels and values must have the same length."
        logger.error(f"{error_msg} Got {len(labels)} labels, {len(values)} values")
        raise InvalidArgumentError(error_msg)

    max_label_length = max((len(label) for label in labels), default=0)
    max_value = max(values, default=0)
    scale_factor = max_value // MAX_BAR_LENGTH if max_value > MAX_BAR_LENGTH else 1

    lines: List[str] = []
    if title:
        lines.append(center_text(title, CHART_WIDTH))
        lines.append("")

    for label, value in zip(labels, values):
        bar = BAR_CHAR * (value // scale_factor)
        lines.append(f"{label:<{max_label_length}} | {bar} ({value})")
        lines.append("")

    return "".join(line + "\n" for line in lines)


def print_bar_chart(
    title: str,
    labels: Sequence[str],
    values: Sequence[int],
    stream: Optional[TextIO] = None,
) -> None:
    """
    Print a horizontal bar chart (to stdout unless `stream` is given).

    Nothing is printed when labels and values differ in length.
    """
    chart = render_bar_chart(title, labels, values)
    (stream or sys.stdout).write(chart)
