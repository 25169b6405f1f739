"""
Authentication Commands.
"""

import typer

from mender_cli.api.auth import login as request_token
from mender_cli.cli.common import reported_errors, run_with_client
from mender_cli.core.config import load_settings


def login(
    email: str = typer.Argument(..., help="User email used to login to the Mender server"),
) -> None:
    """
    Return a token used by the other commands.

    The password is prompted for. Export the printed token as MENDER_TOKEN.

    Examples:
        mender-cli login admin@example.com
    """
    with reported_errors():
        settings = load_settings(require_token=False)
    password = typer.prompt("Password", hide_input=True)
    token = run_with_client(
        lambda client: request_token(client, email, password),
        authenticated=False,
        settings=settings,
    )
    typer.echo(f"Token {token}")
