#!/usr/bin/env python3
"""
Mender CLI.

A small command line tool to perform tasks on a Mender server using its APIs.
Built with Typer for type-safe commands and Rich for formatted output.

Usage:
    python cli.py --help                                  # Show help

    # Authentication
    python cli.py login admin@example.com                 # Print a token

    # Devices
    python cli.py getid SN-0042                           # Mender id from serial number
    python cli.py getinfo 5c9a4e3f2b1d                    # Inventory record of a device

    # Deployments and artifacts
    python cli.py deploy release-2 --group production     # Deploy to a whole group
    python cli.py deploy release-2 --device 5c9a4e3f2b1d  # Deploy to one device
    python cli.py count-artifacts                         # Devices per artifact

    # Configuration
    python cli.py env                                     # Show effective settings

Environment:
    MENDER_SERVER_URL   Mender server base URL (required)
    MENDER_TOKEN        Token printed by `login` (required except for login/env)
    MENDER_CERT_FILE    PEM certificate to trust instead of the system store

Options:
    --verbose, -v     Enable verbose output
    --debug, -d       Enable debug mode (detailed logging)
    --version         Show version and exit
    --help            Show help message
"""

import typer

from mender_cli.cli.commands import count_artifacts, deploy, env, getid, getinfo, login
from mender_cli.cli.common import console
from mender_cli.core.config import get_app_config
from mender_cli.core.logging import setup_logging

app = typer.Typer(
    name="mender-cli",
    help="Mender CLI - Tasks on a Mender server: login, device lookup, deployments, artifact census.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.command()(login)
app.command()(deploy)
app.command()(getid)
app.command()(getinfo)
app.command("count-artifacts")(count_artifacts)
app.command()(env)


def _show_version(value: bool) -> None:
    if value:
        console.print(get_app_config().application.version)
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output (INFO level logging)",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug mode (DEBUG level logging)",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_show_version,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    Mender CLI.

    Login, device lookup, deployments and artifact census against a Mender
    server configured through MENDER_* environment variables.
    """
    if debug:
        setup_logging(level="DEBUG", format_type="console")
    elif verbose:
        setup_logging(level="INFO", format_type="console")
    else:
        setup_logging()


if __name__ == "__main__":
    app()
