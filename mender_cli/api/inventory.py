"""
Inventory Queries.

Artifact census over the whole device inventory, and raw device lookup.
"""

from collections import Counter
from typing import Any
from urllib.parse import quote

from mender_cli.api import paths
from mender_cli.api.client import MenderClient
from mender_cli.api.pagination import PageCallback, paginate
from mender_cli.api.schemas import InventoryDevice
from mender_cli.core.logging import get_logger, log_with_source

logger = get_logger(__name__)

ARTIFACT_ATTRIBUTE = "artifact_name"


async def census(
    client: MenderClient,
    on_page: PageCallback | None = None,
) -> dict[str, int]:
    """
    Count devices per installed artifact across the whole inventory.

    Devices without an artifact_name attribute are counted under "".
    Keys keep first-seen order. Any failed page aborts the census.
    """
    counts: Counter[str] = Counter()
    async for device in paginate(client, paths.INVENTORY_DEVICES, InventoryDevice, on_page=on_page):
        artifact = device.attribute(ARTIFACT_ATTRIBUTE)
        counts["" if artifact is None else str(artifact)] += 1

    log_with_source(
        logger, "api", "info", "Artifact census complete",
        devices=sum(counts.values()), artifacts=len(counts),
    )
    return dict(counts)


def rank_artifacts(counts: dict[str, int]) -> list[tuple[str, int]]:
    """Order (artifact, count) pairs by count descending; ties keep input order."""
    return Counter(counts).most_common()


async def get_device_info(client: MenderClient, device_id: str) -> Any:
    """Fetch the inventory record of one device, uninterpreted."""
    path = paths.INVENTORY_DEVICE.format(id=quote(device_id, safe=""))
    return await client.get_json(path, Any)
