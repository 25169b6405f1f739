"""
Deployment Commands.
"""

from typing import Optional

import typer

from mender_cli.api.deployments import deploy as create_deployment
from mender_cli.api.deployments import deployment_target
from mender_cli.cli.common import reported_errors, run_with_client


def deploy(
    artifact: str = typer.Argument(..., help="Name of the artifact to deploy"),
    group: Optional[str] = typer.Option(None, "--group", "-g", help="Deploy to every device of this group"),
    device: Optional[str] = typer.Option(None, "--device", help="Deploy to this device id only"),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Deployment name (defaults to group or device)"),
) -> None:
    """
    Deploy an artifact to a group or a single device.

    Exactly one of --group and --device must be given.

    Examples:
        mender-cli deploy release-2 --group production
        mender-cli deploy release-2 --device 5c9a4e3f2b1d --name hotfix
    """
    with reported_errors():
        target = deployment_target(group=group, device=device)

    count = run_with_client(
        lambda client: create_deployment(client, target, artifact, name=name),
    )
    typer.echo(f"Deployed to {count} devices")
