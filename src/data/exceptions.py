"""
Custom exceptions for loading and charting transaction data.

These give users clear error messages instead of confusing technical errors.
"""


class FixtureLoadError(Exception):
    """
    Raised when the transaction fixture can't be read or has a bad record.

    Example:
        raise FixtureLoadError("Missing 'transactions' key in transactions.yaml")
    """

    pass


class InvalidArgumentError(ValueError):
    """
    Raised when a chart is asked to draw labels and values of different lengths.

    Example:
        raise InvalidArgumentError("Labels and values must have the same length.")
    """

    pass
