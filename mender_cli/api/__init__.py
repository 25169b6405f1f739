"""
Mender Management API.

Async operations against a Mender server. Every operation takes a
MenderClient and awaits its requests one after another.
"""

from mender_cli.api.auth import login
from mender_cli.api.client import MenderClient, create_client
from mender_cli.api.deployments import (
    DeviceTarget,
    GroupTarget,
    deploy,
    deployment_target,
)
from mender_cli.api.identity import resolve_device_id
from mender_cli.api.inventory import census, get_device_info, rank_artifacts
from mender_cli.api.pagination import PAGE_SIZE, collect, paginate

__all__ = [
    "PAGE_SIZE",
    "DeviceTarget",
    "GroupTarget",
    "MenderClient",
    "census",
    "collect",
    "create_client",
    "deploy",
    "deployment_target",
    "get_device_info",
    "login",
    "paginate",
    "rank_artifacts",
    "resolve_device_id",
]
