"""
Logging utilities for `celo_tx`.

Provides a VERBOSE log level, UTC timestamps and a standalone
`configure_logging` for the command line.
"""

from .logger import (
    DEFAULT_LOG_FORMAT,
    VERBOSE_LEVEL,
    CeloTxLogger,
    LogLevel,
    UTCFormatter,
    configure_logging,
    get_logger,
)

__all__ = [
    "DEFAULT_LOG_FORMAT",
    "VERBOSE_LEVEL",
    "CeloTxLogger",
    "LogLevel",
    "UTCFormatter",
    "configure_logging",
    "get_logger",
]
