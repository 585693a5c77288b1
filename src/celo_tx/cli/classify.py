"""
Classify JSON transaction requests from the command line.

Example:
  echo '{"maxFeePerGas": "0x1", "maxPriorityFeePerGas": "0x1"}' \
    | celo-tx classify
"""

import json
from typing import IO, Any

import click

from ..logging import LogLevel, configure_logging, get_logger
from ..transaction import TransactionRecord
from ..variants import classify

logger = get_logger(__name__)


class RecordLoadError(click.ClickException):
    """The input could not be read as transaction records."""


def load_records(stream: IO[str]) -> list[TransactionRecord]:
    """
    Read a JSON object, or an array of JSON objects, from `stream`.
    """
    source = getattr(stream, "name", "<input>")
    try:
        data: Any = json.load(stream)
    except UnicodeDecodeError as e:
        raise RecordLoadError(f"{source}: input is not UTF-8 ({e})") from e
    except json.JSONDecodeError as e:
        raise RecordLoadError(f"{source}: invalid JSON ({e})") from e

    records = [data] if isinstance(data, dict) else data
    if not isinstance(records, list):
        raise RecordLoadError(
            f"{source}: expected a JSON object or an array of objects"
        )
    for index, record in enumerate(records):
        if not isinstance(record, dict):
            raise RecordLoadError(
                f"{source}: record {index} is a "
                f"{type(record).__name__}, not an object"
            )
    logger.debug("Loaded %d record(s) from %s.", len(records), source)
    return records


def parse_log_level(
    ctx: click.Context, param: click.Parameter, value: str
) -> int:
    """Click callback turning `--log-level` into a numeric level."""
    del ctx, param
    try:
        return LogLevel.from_cli(value)
    except ValueError as e:
        raise click.BadParameter(str(e)) from e


@click.command(name="classify")
@click.argument(
    "records_file",
    type=click.File("r"),
    default="-",
    required=False,
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print the variant and envelope type of each record as JSON.",
)
@click.option(
    "--log-level",
    default="WARNING",
    show_default=True,
    callback=parse_log_level,
    help="Logging level name (e.g. INFO, VERBOSE) or number.",
)
def classify_command(
    records_file: IO[str], as_json: bool, log_level: int
) -> None:
    """
    Print the variant of each transaction request in RECORDS_FILE.

    RECORDS_FILE holds a JSON object or array of objects with camelCase
    field names; omit it or pass `-` to read from stdin.
    """
    configure_logging(log_level=log_level)
    for record in load_records(records_file):
        variant = classify(record)
        if as_json:
            click.echo(
                json.dumps(
                    {
                        "variant": variant.value,
                        "envelopeType": f"{int(variant.envelope_type):#04x}",
                    }
                )
            )
        else:
            click.echo(variant.value)
