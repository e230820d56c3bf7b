"""CLI commands that wire the components and run the calculation."""

from __future__ import annotations

import click

from calcdi.application.dto import ComputationDTO
from calcdi.application.run_computation import RunComputationHandler
from calcdi.domain.exceptions import CalcDIException
from calcdi.domain.model.assembly import Assembly
from calcdi.infrastructure.bootstrap import (
    assemble_from_config,
    assemble_from_container,
    compose_manually,
    default_registry,
)


def _failure(exc: CalcDIException) -> click.ClickException:
    """Prefix the error with the startup step that failed."""
    if exc.step is None:
        return click.ClickException(str(exc))
    return click.ClickException(f"{exc.step.value}: {exc}")


def _run(assembly: Assembly) -> ComputationDTO:
    try:
        return RunComputationHandler(assembly).handle()
    except CalcDIException as exc:
        raise _failure(exc)


def _display(dto: ComputationDTO) -> None:
    click.echo(str(dto.reading))
    if dto.has_result:
        click.echo(f"RES: {dto.result}")


@click.command("run")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Wiring config (default: $CALCDI_CONFIG_PATH or ./config.txt).",
)
def run_from_config(config_path: str | None) -> None:
    """Wire components named in the config file and run them."""
    try:
        assembly = assemble_from_config(config_path)
    except CalcDIException as exc:
        raise _failure(exc)

    _display(_run(assembly))


@click.command("container")
@click.option("--qualifier", default=None, help="Provider qualifier (e.g. dao, sensor).")
def run_from_container(qualifier: str | None) -> None:
    """Wire components by role and qualifier and run them."""
    try:
        assembly = assemble_from_container(qualifier)
    except CalcDIException as exc:
        raise _failure(exc)

    _display(_run(assembly))


@click.command("manual")
def run_manual() -> None:
    """Wire the reference components by hand and run them."""
    _display(_run(compose_manually()))


@click.command("components")
def list_components() -> None:
    """List every registered component."""
    click.echo(f"  {'Name':<64} {'Role':<12} {'Qualifier':<10}")
    click.echo(f"  {'-'*88}")
    for entry in default_registry().entries():
        click.echo(
            f"  {entry.name:<64} {entry.role.value:<12} {entry.qualifier or '-':<10}"
        )
