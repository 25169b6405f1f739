"""
System Commands.

Commands for inspecting the effective configuration.
"""

from rich.table import Table

from mender_cli.cli.common import console, reported_errors
from mender_cli.core.config import load_settings


def env() -> None:
    """
    Display environment settings (non-sensitive).

    Shows the server URL, whether a token is set and the certificate file.
    """
    with reported_errors():
        settings = load_settings(require_token=False)

    table = Table(title="Environment Settings", show_header=True)
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    table.add_row("MENDER_SERVER_URL", settings.server_url)
    table.add_row("MENDER_TOKEN", "set" if settings.token else "[yellow]not set[/yellow]")
    table.add_row(
        "MENDER_CERT_FILE",
        str(settings.cert_file) if settings.cert_file else "[dim]system trust store[/dim]",
    )

    console.print(table)
