"""
Simple logging setup for the transaction charts.
"""

import logging
import sys


def setup_logging(level=logging.WARNING):
    """
    Set up logging for the entire app.

    Call this ONCE at the start

    What it does:
    1. Captures everything on the root logger
    2. Shows WARNING and above in the terminal (on stderr, so the charts
       printed on stdout stay readable)

    Args:
        level: Lowest level the console handler shows (default WARNING)

    Example:
        from configs import setup_logging
        setup_logging()  # That's it!
    """
    # Example output: "2025-06-01 10:30:45 - INFO - Loaded 30 transactions"
    log_format = logging.Formatter(
        fmt="%(asctime)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
    )

    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG)  # Capture everything

    # Remove any existing handlers (prevents duplicates)
    logger.handlers.clear()

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(log_format)
    logger.addHandler(console)


def get_logger(name):
    """
    Get a logger for the module.

    Args:
        name: Usually just pass __name__ (the module name)

    Returns:
        A logger you can use

    Example in the file:
        from configs import get_logger
        logger = get_logger(__name__)

        logger.info("Loaded fixture")
    """
    return logging.getLogger(name)
