"""
Device Commands.

Commands for looking up devices by serial number or id.
"""

import typer

from mender_cli.api.identity import resolve_device_id
from mender_cli.api.inventory import get_device_info
from mender_cli.cli.common import PageDots, console, run_with_client


def getid(
    serial_number: str = typer.Argument(..., help="Serial number of the device"),
) -> None:
    """
    Return the Mender id of a device from its serial number.

    Searches the inventory first, then scans accepted devices.

    Examples:
        mender-cli getid SN-0042
    """
    progress = PageDots()
    try:
        device_id = run_with_client(
            lambda client: resolve_device_id(client, serial_number, on_page=progress),
        )
    finally:
        progress.done()
    typer.echo(f"Mender id is: {device_id}")


def getinfo(
    device_id: str = typer.Argument(..., help="Mender id of the device"),
) -> None:
    """
    Show the inventory record of a device.

    Examples:
        mender-cli getinfo 5c9a4e3f2b1d
    """
    info = run_with_client(lambda client: get_device_info(client, device_id))
    console.print_json(data=info)
