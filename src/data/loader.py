"""
YAML fixture loader for grocery transactions.

reading the sample month of transactions from configs/transactions.yaml
and turning every record into an immutable Transaction.
The file order is kept - the categorical charts depend on it.
"""

import os
from datetime import date, time
from pathlib import Path
from typing import Dict, List, Optional, Union

import yaml

from configs import get_logger
from .exceptions import FixtureLoadError
from .models import Item, Transaction

# Get logger for this module
logger = get_logger(__name__)

# Default path relative to project root
DEFAULT_FIXTURE_PATH = os.path.join(
    os.path.dirname(os.path.abspath(__file__)),
    "..",
    "..",
    "configs",
    "transactions.yaml",
)


def load_transactions(
    path: Optional[Union[str, Path]] = None,
) -> List[Transaction]:
    """
    loading transactions from a YAML fixture.

    This function:
    1. Reads the YAML file with yaml.safe_load
    2. Checks there is a top-level 'transactions' list
    3. Converts each record into a Transaction (in file order)

    Args:
        path: Path to the fixture (optional, uses configs/transactions.yaml)

    Returns:
        List of Transaction objects, same order as in the file

    Raises:
        FixtureLoadError: If the file is missing, isn't valid YAML,
            or holds a malformed record

    Example:
        >>> transactions = load_transactions()
        >>> print(transactions[0].transaction_id)
        TXN-0001
    """
    if path is None:
        path = DEFAULT_FIXTURE_PATH

    logger.info(f"Loading transactions from: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError as e:
        error_msg = f"Transaction fixture not found: {path}"
        logger.error(error_msg)
        raise FixtureLoadError(error_msg) from e
    except yaml.YAMLError as e:
        error_msg = f"Invalid YAML in {path}: {e}"
        logger.error(error_msg)
        raise FixtureLoadError(error_msg) from e

    if not isinstance(data, dict) or not isinstance(data.get("transactions"), list):
        error_msg = f"Missing 'transactions' list in {path}"
        logger.error(error_msg)
        raise FixtureLoadError(error_msg)

    transactions = [_parse_transaction(record) for record in data["transactions"]]

    logger.info(f"Loaded {len(transactions)} transactions")
    return transactions


# ============================================================================
# HELPER FUNCTIONS
# ============================================================================


def _parse_transaction(record: Dict) -> Transaction:
    """
    converting one YAML mapping into a Transaction.

    Raises:
        FixtureLoadError: If a field is missing or has the wrong format
    """
    try:
        items = tuple(
            Item(name=str(item["name"]), quantity=int(item["quantity"]))
            for item in record.get("items") or []
        )
        if any(item.quantity < 0 for item in items):
            raise ValueError("item quantity must be >= 0")

        return Transaction(
            transaction_id=str(record["id"]),
            date=date.fromisoformat(str(record["date"])),
            time=time.fromisoformat(str(record["time"])),
            items=items,
            payment_method=str(record["payment_method"]),
            transaction_type=str(record["transaction_type"]),
            transaction_status=str(record["transaction_status"]),
            customer_type=str(record["customer_type"]),
            store_section=str(record["store_section"]),
        )
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        error_msg = f"Malformed transaction record {record!r}: {e}"
        logger.error(error_msg)
        raise FixtureLoadError(error_msg) from e
