"""Project-wide configuration: logging setup and the transaction fixture."""

from .logging_config import setup_logging, get_logger

__all__ = ["setup_logging", "get_logger"]
