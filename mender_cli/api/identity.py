"""
Device Identity Resolution.

Maps a human-assigned serial number to the Mender device id in two tiers:

1. The inventory attribute index, filtered server-side by SerialNumber.
   Fast, but may lag behind devices not yet reconciled into inventory.
2. A full scan of accepted devices in the device authentication table,
   which is authoritative but unindexed.
"""

from mender_cli.api import paths
from mender_cli.api.client import MenderClient
from mender_cli.api.pagination import PageCallback, paginate
from mender_cli.api.schemas import IdentityDevice, InventoryDevice
from mender_cli.core.exceptions import NotFoundError
from mender_cli.core.logging import get_logger, log_with_source

logger = get_logger(__name__)


async def search_inventory(client: MenderClient, serial_number: str) -> str | None:
    """
    Look up a device id in the inventory by its SerialNumber attribute.

    Single request, filtering left to the server. When several devices
    match, the last one returned wins.
    """
    devices = await client.get_json(
        paths.INVENTORY_DEVICES,
        list[InventoryDevice],
        params={"SerialNumber": serial_number},
    )
    if not devices:
        return None
    return devices[-1].id


async def scan_identities(
    client: MenderClient,
    serial_number: str,
    on_page: PageCallback | None = None,
) -> str | None:
    """Scan accepted devices page by page for an exact SerialNumber match."""
    async for device in paginate(
        client,
        paths.DEVAUTH_DEVICES,
        IdentityDevice,
        params={"status": "accepted"},
        on_page=on_page,
    ):
        if device.serial_number == serial_number:
            return device.id
    return None


async def resolve_device_id(
    client: MenderClient,
    serial_number: str,
    on_page: PageCallback | None = None,
) -> str:
    """
    Resolve the Mender id of the device with the given serial number.

    Args:
        client: Authenticated Mender API client
        serial_number: Serial number, matched exactly (case-sensitive)
        on_page: Called once per identity-table page scanned

    Raises:
        NotFoundError: If neither tier knows the serial number
        FetchError: If any request fails
    """
    device_id = await search_inventory(client, serial_number)
    if device_id is not None:
        log_with_source(
            logger, "api", "debug", "Serial number found in inventory",
            serial_number=serial_number, device_id=device_id,
        )
        return device_id

    log_with_source(
        logger, "api", "info", "Serial number not in inventory, scanning accepted devices",
        serial_number=serial_number,
    )
    device_id = await scan_identities(client, serial_number, on_page=on_page)
    if device_id is None:
        raise NotFoundError(f"No device found with serial number {serial_number}")
    return device_id
