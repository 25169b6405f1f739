"""
Pagination Utilities.

Page-numbered listing walk shared by every Mender listing endpoint.

Pages are requested in strictly increasing order starting at 1. A page
that decodes to zero items is the only end-of-stream signal: a short page
does not end the walk, and no total-count header is trusted. Any failed
page aborts the walk with FetchError; there is no resume.
"""

from collections.abc import AsyncIterator, Callable
from typing import Any, TypeVar

from mender_cli.api.client import MenderClient
from mender_cli.core.logging import get_logger, log_with_source

logger = get_logger(__name__)

T = TypeVar("T")

PAGE_SIZE = 500

PageCallback = Callable[[int, int], None]
"""Called with (page_number, item_count) after each decoded page."""


async def paginate(
    client: MenderClient,
    path: str,
    item_type: type[T] | Any,
    params: dict[str, Any] | None = None,
    page_size: int = PAGE_SIZE,
    on_page: PageCallback | None = None,
) -> AsyncIterator[T]:
    """
    Walk a page-numbered listing endpoint, yielding decoded items.

    Args:
        client: Mender API client
        path: Listing endpoint path
        item_type: Type each listed item is validated against
        params: Extra query parameters sent with every page
        page_size: Value of the per_page query parameter
        on_page: Optional progress callback

    Yields:
        Items in server order, page after page

    Raises:
        FetchError: On a non-success status or an undecodable page

    Usage:
        async for device in paginate(client, paths.INVENTORY_DEVICES, InventoryDevice):
            ...
    """
    page = 1
    while True:
        query = {"per_page": page_size, "page": page, **(params or {})}
        items = await client.get_json(path, list[item_type], params=query)

        log_with_source(
            logger,
            "api",
            "debug",
            "Page fetched",
            path=path,
            page=page,
            items=len(items),
        )
        if on_page is not None:
            on_page(page, len(items))

        if not items:
            return

        for item in items:
            yield item
        page += 1


async def collect(
    client: MenderClient,
    path: str,
    item_type: type[T] | Any,
    params: dict[str, Any] | None = None,
    page_size: int = PAGE_SIZE,
    on_page: PageCallback | None = None,
) -> list[T]:
    """Walk every page of a listing and return all items in order."""
    return [
        item
        async for item in paginate(
            client, path, item_type, params=params, page_size=page_size, on_page=on_page,
        )
    ]
