"""
Unit Tests for Inventory Queries.

Tests the artifact census, its ranking, and raw device lookup.
"""

import pytest

from mender_cli.api import paths
from mender_cli.api.inventory import census, get_device_info, rank_artifacts
from mender_cli.core.exceptions import FetchError
from tests.unit.fakes import inventory_device


class TestCensus:
    """Tests for census()."""

    @pytest.mark.asyncio
    async def test_counts_across_pages(self, client, mender):
        """Devices without artifact_name land in the empty bucket."""
        mender.paged(
            paths.INVENTORY_DEVICES,
            [inventory_device("d1", "a"), {"id": "d2"}],
            [inventory_device("d3", "a")],
            [],
        )

        counts = await census(client)

        assert counts == {"a": 2, "": 1}
        assert rank_artifacts(counts) == [("a", 2), ("", 1)]

    @pytest.mark.asyncio
    async def test_missing_attribute_and_null_attributes(self, client, mender):
        mender.paged(
            paths.INVENTORY_DEVICES,
            [
                {"id": "d1", "attributes": None},
                inventory_device("d2", device_type="rpi4"),
                inventory_device("d3", "release-2", device_type="rpi4"),
            ],
            [],
        )

        assert await census(client) == {"": 2, "release-2": 1}

    @pytest.mark.asyncio
    async def test_lists_whole_inventory_without_filter(self, client, mender):
        mender.paged(paths.INVENTORY_DEVICES, [inventory_device("d1", "a")], [])

        await census(client)

        for request in mender.paged_calls(paths.INVENTORY_DEVICES):
            assert set(request.url.params.keys()) == {"per_page", "page"}
            assert request.url.params["per_page"] == "500"

    @pytest.mark.asyncio
    async def test_failed_page_aborts(self, client, mender):
        """No partial counts escape a failed census."""
        mender.paged(paths.INVENTORY_DEVICES, [inventory_device("d1", "a")], [inventory_device("d2", "b")], [])
        mender.fail_page(paths.INVENTORY_DEVICES, 2, status_code=502, body="bad gateway")

        with pytest.raises(FetchError) as exc_info:
            await census(client)

        assert exc_info.value.status_code == 502


class TestRankArtifacts:
    """Tests for rank_artifacts()."""

    def test_orders_by_count_descending(self):
        assert rank_artifacts({"x": 1, "y": 3, "z": 2}) == [("y", 3), ("z", 2), ("x", 1)]

    def test_ties_keep_first_seen_order(self):
        assert rank_artifacts({"x": 1, "y": 2, "z": 1}) == [("y", 2), ("x", 1), ("z", 1)]

    def test_empty(self):
        assert rank_artifacts({}) == []


class TestGetDeviceInfo:
    """Tests for get_device_info()."""

    @pytest.mark.asyncio
    async def test_returns_record_uninterpreted(self, client, mender):
        record = {"id": "d1", "attributes": [{"name": "mac", "value": "aa", "scope": "identity"}]}
        mender.route("GET", paths.INVENTORY_DEVICE.format(id="d1"), json=record)

        assert await get_device_info(client, "d1") == record

    @pytest.mark.asyncio
    async def test_unknown_device(self, client, mender):
        mender.route("GET", paths.INVENTORY_DEVICE.format(id="nope"), status_code=404, text="device not found")

        with pytest.raises(FetchError) as exc_info:
            await get_device_info(client, "nope")

        assert exc_info.value.status_code == 404
        assert exc_info.value.body == "device not found"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("device_id", "escaped"),
        [
            ("a?b", "a%3Fb"),
            ("a#b", "a%23b"),
            ("../../deployments/deployments", "..%2F..%2Fdeployments%2Fdeployments"),
        ],
    )
    async def test_device_id_is_escaped(self, client, mender, device_id, escaped):
        """The id stays a single path segment and never adds a query."""
        mender.route("GET", paths.INVENTORY_DEVICE.format(id=device_id), json={"id": device_id})

        assert await get_device_info(client, device_id) == {"id": device_id}

        [request] = mender.requests
        assert request.url.raw_path == f"/api/management/v1/inventory/devices/{escaped}".encode()
        assert request.url.query == b""
