"""Entry point for the `celo-tx` command."""

import click

from .. import __version__
from .classify import classify_command


@click.group()
@click.version_option(__version__, prog_name="celo-tx")
def celo_tx() -> None:
    """Tools for inspecting Celo transaction requests."""


celo_tx.add_command(classify_command)
