"""
Logger class and handler setup shared by `celo_tx` and its command line.
"""

import logging
import sys
from datetime import datetime, timezone
from logging import LogRecord
from pathlib import Path
from typing import Any, Optional, cast

VERBOSE_LEVEL = 15  # Between DEBUG (10) and INFO (20)

logging.addLevelName(VERBOSE_LEVEL, "VERBOSE")

DEFAULT_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class CeloTxLogger(logging.Logger):
    """Logger that understands the VERBOSE level used for decisions."""

    def verbose(
        self,
        msg: object,
        *args: Any,
        exc_info: BaseException | bool | None = None,
        stack_info: bool = False,
        stacklevel: int = 1,
        extra: Optional[dict[str, Any]] = None,
    ) -> None:
        """
        Log a message with VERBOSE level severity (15).

        Classification decisions are reported at this level: too chatty for
        INFO, but more useful than the DEBUG traces of individual field
        values.
        """
        if self.isEnabledFor(VERBOSE_LEVEL):
            self._log(
                VERBOSE_LEVEL,
                msg,
                args,
                exc_info,
                extra,
                stack_info,
                stacklevel,
            )


logging.setLoggerClass(CeloTxLogger)


def get_logger(name: str) -> CeloTxLogger:
    """Get a logger typed with the VERBOSE helper."""
    return cast(CeloTxLogger, logging.getLogger(name))


logger = get_logger(__name__)


class UTCFormatter(logging.Formatter):
    """
    Log formatter that renders timestamps in UTC with millisecond precision
    and a +00:00 suffix.
    """

    def formatTime(self, record: LogRecord, datefmt: str | None = None) -> str:  # noqa: D102,N802
        del datefmt

        dt = datetime.fromtimestamp(record.created, tz=timezone.utc)
        return dt.strftime("%Y-%m-%d %H:%M:%S.%f")[:-3] + "+00:00"


class LogLevel:
    """Parse a log level given on the command line."""

    @classmethod
    def from_cli(cls, value: str) -> int:
        """
        Parse a logging level from a string.

        Accepts level names in any case (`info`, `VERBOSE`) or numeric values.
        """
        try:
            return int(value)
        except ValueError:
            pass

        level_name = value.upper()
        level = logging.getLevelName(level_name)
        if isinstance(level, int):
            return level

        valid = ", ".join(
            logging.getLevelName(number)
            for number in sorted(
                {
                    logging.DEBUG,
                    VERBOSE_LEVEL,
                    logging.INFO,
                    logging.WARNING,
                    logging.ERROR,
                    logging.CRITICAL,
                }
            )
        )
        raise ValueError(
            f"Invalid log level '{value}'. "
            f"Expected one of: {valid} or a number."
        )


def configure_logging(
    log_level: int | str = "INFO",
    log_file: Optional[str | Path] = None,
    log_to_stderr: bool = True,
    log_format: str = DEFAULT_LOG_FORMAT,
) -> Optional[logging.FileHandler]:
    """
    Configure the root logger for `celo_tx`.

    Existing root handlers are replaced. Console output goes to stderr so
    that command output on stdout can be piped.

    Args:
      log_level: The logging level to use (name or numeric value)
      log_file: Path to the log file (if None, no file logging is set up)
      log_to_stderr: Whether to log to stderr
      log_format: The log format string

    Returns: The file handler if log_file is provided, otherwise None

    """
    root_logger = logging.getLogger()

    if isinstance(log_level, str):
        log_level = LogLevel.from_cli(log_level)
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    file_handler_instance = None
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(exist_ok=True, parents=True)

        file_handler_instance = logging.FileHandler(log_path, mode="w")
        file_handler_instance.setFormatter(UTCFormatter(fmt=log_format))
        root_logger.addHandler(file_handler_instance)

    if log_to_stderr:
        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setFormatter(UTCFormatter(fmt=log_format))
        root_logger.addHandler(stream_handler)

    logger.verbose("Logging configured at level %s.", log_level)
    return file_handler_instance
