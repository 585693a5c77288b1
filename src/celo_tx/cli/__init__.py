"""Command line interface for `celo_tx`."""

from .classify import RecordLoadError, classify_command, load_records
from .main import celo_tx

__all__ = [
    "RecordLoadError",
    "celo_tx",
    "classify_command",
    "load_records",
]
