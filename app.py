"""
Grocery Transaction Charts

Prints ten bar charts summarising a month of grocery transactions.
"""

import sys
from typing import List, Optional

from configs import setup_logging, get_logger
from src.data import load_transactions
from src.analysis import Analyzer, print_bar_chart


# Setup logging
setup_logging()
logger = get_logger(__name__)

LEADING_BLANK_LINES = 5


def main(argv: Optional[List[str]] = None) -> int:
    """
    Load the fixture, aggregate every view and print the charts.

    Args:
        argv: Ignored; there are no command-line options

    Returns:
        Exit code (0). A labels/values mismatch is not caught and ends the run.
    """
    transactions = load_transactions()
    analyzer = Analyzer(transactions)

    print("\n" * LEADING_BLANK_LINES)

    views = analyzer.all_views()
    for series in views:
        print_bar_chart(series.title, series.labels, series.values)

    logger.info(f"Printed {len(views)} charts")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
