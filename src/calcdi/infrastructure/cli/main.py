from __future__ import annotations

import click

from calcdi.infrastructure.cli.wiring_commands import (
    list_components,
    run_from_config,
    run_from_container,
    run_manual,
)
from calcdi.infrastructure.logging_config import configure_logging
from calcdi.infrastructure.settings import LOG_LEVELS


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Override $CALCDI_LOG_LEVEL.",
)
def cli(log_level: str | None) -> None:
    """calcdi: wire a Calculator to a DataProvider three ways"""
    configure_logging(log_level.upper() if log_level else None)


# Register subcommands
cli.add_command(run_from_config)
cli.add_command(run_from_container)
cli.add_command(run_manual)
cli.add_command(list_components)
