"""
Artifact Commands.
"""

from rich.table import Table

from mender_cli.api.inventory import census, rank_artifacts
from mender_cli.cli.common import console, run_with_client


def count_artifacts() -> None:
    """
    Count devices per installed artifact.

    Walks the whole inventory. Devices reporting no artifact are listed
    as (none).

    Examples:
        mender-cli count-artifacts
    """
    counts = run_with_client(census)

    table = Table(title="Artifacts", show_header=True)
    table.add_column("Artifact", style="cyan")
    table.add_column("Devices", justify="right")

    for artifact, count in rank_artifacts(counts):
        table.add_row(artifact or "[dim](none)[/dim]", str(count))

    console.print(table)
    console.print(f"[dim]{sum(counts.values())} devices[/dim]")
