from __future__ import annotations

from pathlib import Path

import click

from launchpad.cli.context import ExitCode, get_cli_context
from launchpad.cli.output import format_error, format_json, format_success
from launchpad.exceptions import ClusterNotFoundError, LaunchpadError
from launchpad.logging import get_logger
from launchpad.provisioning import (
    CreateProjectile,
    StatusEmitter,
    StatusMessageEvent,
    create_pipeline,
    log_status_event,
)


@click.command()
@click.option(
    "-p",
    "--project-location",
    required=True,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Directory containing the generated project.",
)
@click.option(
    "--openshift-project",
    required=True,
    help="OpenShift project to deploy to (default repository name).",
)
@click.option("--cluster", required=True, help="OpenShift cluster id from config.")
@click.option("--repository-name", default=None, help="GitHub repository name.")
@click.option("--description", default=None, help="GitHub repository description.")
@click.option(
    "-f",
    "--format",
    "fmt",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format for status events.",
)
@click.pass_context
def launch(
    ctx: click.Context,
    project_location: Path,
    openshift_project: str,
    cluster: str,
    repository_name: str | None,
    description: str | None,
    fmt: str,
) -> None:
    """Create a GitHub repository, push the project and wire webhooks.

    Examples:
        launchpad launch -p ./demo --openshift-project demo --cluster starter
    """
    logger = get_logger(__name__)
    cli_ctx = get_cli_context(ctx)

    # The webhook step needs the cluster; check it before anything is created.
    registry = cli_ctx.cluster_registry()
    if registry.find_cluster_by_id(cluster) is None:
        known = ", ".join(c.id for c in registry.clusters) or "none configured"
        click.echo(
            format_error(
                ClusterNotFoundError(cluster).message,
                details=[f"Known clusters: {known}"],
                suggestion="Add the cluster under openshift.clusters in launchpad.yaml",
            ),
            err=True,
        )
        raise SystemExit(ExitCode.FAILURE)

    def _echo_status(event: StatusMessageEvent) -> None:
        if fmt == "json":
            click.echo(format_json(event.to_dict()))
            return
        line = f"[{event.status_type.value}] {event.status_type.message}"
        if "location" in event.data:
            line += f": {event.data['location']}"
        click.echo(line)

    emitter = StatusEmitter(log_status_event, _echo_status)
    pipeline = create_pipeline(cli_ctx.config, emitter)
    projectile = CreateProjectile(
        project_location=project_location,
        openshift_project_name=openshift_project,
        openshift_cluster_name=cluster,
        github_repository_name=repository_name,
        github_repository_description=description,
    )

    try:
        state = pipeline.run(projectile)
    except LaunchpadError as e:
        logger.debug("launch_failed", projectile_id=projectile.id, exc_info=True)
        click.echo(format_error(e.message), err=True)
        raise SystemExit(ExitCode.FAILURE) from e

    if fmt == "text" and state.github_repository is not None:
        click.echo(
            format_success(
                f"{state.github_repository.homepage} "
                f"({len(state.webhooks)} webhook(s) registered)"
            )
        )
