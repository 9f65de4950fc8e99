"""Catalog browsing commands: missions, runtimes, validate."""

from __future__ import annotations

from pathlib import Path

import click

from launchpad.catalog import BoosterCatalog, Mission, Runtime
from launchpad.cli.context import ExitCode, get_cli_context
from launchpad.cli.output import format_error, format_json, format_table
from launchpad.exceptions import CatalogError
from launchpad.wizard import ChooseRuntimeStep, DeploymentType, WizardSelection

_catalog_option = click.option(
    "--catalog",
    "catalog_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Booster catalog file (defaults to catalog.path from config).",
)

_format_option = click.option(
    "-f",
    "--format",
    "fmt",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format.",
)


def _load_catalog(ctx: click.Context, catalog_path: Path | None) -> BoosterCatalog:
    try:
        return get_cli_context(ctx).load_catalog(catalog_path)
    except CatalogError as e:
        click.echo(format_error(e.message, suggestion="Pass --catalog"), err=True)
        raise SystemExit(ExitCode.FAILURE) from e


def _load_step(ctx: click.Context, catalog_path: Path | None) -> ChooseRuntimeStep:
    catalog = _load_catalog(ctx, catalog_path)
    return ChooseRuntimeStep(catalog, get_cli_context(ctx).cluster_registry())


@click.command()
@_catalog_option
@_format_option
@click.pass_context
def missions(ctx: click.Context, catalog_path: Path | None, fmt: str) -> None:
    """List the missions available in the booster catalog."""
    found = _load_catalog(ctx, catalog_path).get_missions()
    if fmt == "json":
        click.echo(format_json([{"id": m.id, "name": m.name} for m in found]))
    else:
        click.echo(format_table(["Mission", "Name"], [[m.id, m.name] for m in found]))


@click.command()
@click.option("-m", "--mission", required=True, help="Mission id.")
@click.option(
    "-d",
    "--deployment-type",
    type=click.Choice([t.value for t in DeploymentType]),
    default=DeploymentType.ZIP.value,
    show_default=True,
    help="Delivery mode; 'cd' filters by the cluster type.",
)
@click.option("--cluster", default=None, help="Target OpenShift cluster id.")
@_catalog_option
@_format_option
@click.pass_context
def runtimes(
    ctx: click.Context,
    mission: str,
    deployment_type: str,
    cluster: str | None,
    catalog_path: Path | None,
    fmt: str,
) -> None:
    """List the runtimes that have a booster for MISSION.

    Examples:
        launchpad runtimes --mission rest-http
        launchpad runtimes -m rest-http -d cd --cluster starter-us-east-1
    """
    step = _load_step(ctx, catalog_path)
    selection = WizardSelection(
        mission=Mission(mission),
        deployment_type=DeploymentType(deployment_type),
        openshift_cluster=cluster,
    )
    choices = step.runtime_choices(selection)
    default = step.default_runtime(selection)

    if fmt == "json":
        click.echo(
            format_json(
                {
                    "mission": mission,
                    "runtimes": [r.id for r in choices],
                    "default": default.id if default else None,
                }
            )
        )
    elif choices:
        rows = [
            [step.item_label(r, gui=False), r.name, "*" if r == default else ""]
            for r in choices
        ]
        click.echo(format_table(["Runtime", "Name", "Default"], rows))
    else:
        click.echo(f"No runtimes available for mission '{mission}'", err=True)

    if not choices:
        raise SystemExit(ExitCode.FAILURE)


@click.command()
@click.option("-m", "--mission", required=True, help="Mission id.")
@click.option("-r", "--runtime", required=True, help="Runtime id.")
@_catalog_option
@click.pass_context
def validate(
    ctx: click.Context, mission: str, runtime: str, catalog_path: Path | None
) -> None:
    """Check that a booster exists for MISSION and RUNTIME."""
    step = _load_step(ctx, catalog_path)
    selection = step.next(WizardSelection(mission=Mission(mission)), Runtime(runtime))
    errors = step.validate(selection)
    if errors:
        for error in errors:
            click.echo(format_error(error.message), err=True)
        raise SystemExit(ExitCode.FAILURE)
    click.echo(f"Booster available for mission '{mission}' and runtime '{runtime}'")
