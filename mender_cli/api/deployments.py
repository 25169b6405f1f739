"""
Deployment Orchestration.

A deployment names an artifact and an explicit list of device ids. Group
targets are expanded into their full membership before anything is
submitted, so a group that cannot be listed completely is never deployed.
Once the submission succeeds the deployment is committed; there is no
rollback.
"""

from dataclasses import dataclass
from urllib.parse import quote

from mender_cli.api import paths
from mender_cli.api.client import MenderClient
from mender_cli.api.pagination import collect
from mender_cli.api.schemas import DeploymentRequest
from mender_cli.core.exceptions import UsageError
from mender_cli.core.logging import get_logger, log_with_source

logger = get_logger(__name__)


@dataclass(frozen=True)
class GroupTarget:
    """Every device of a named group."""

    name: str


@dataclass(frozen=True)
class DeviceTarget:
    """A single device, by Mender id."""

    device_id: str


Target = GroupTarget | DeviceTarget


def deployment_target(group: str | None = None, device: str | None = None) -> Target:
    """
    Build a deployment target from exactly one of group or device.

    Raises:
        UsageError: If both or neither are given.
    """
    if bool(group) == bool(device):
        raise UsageError("Exactly one of group or device must be given")
    if group:
        return GroupTarget(group)
    return DeviceTarget(device)


def deployment_name(target: Target, name: str | None = None) -> str:
    """Explicit name if given, else the group name, else the device id."""
    if name:
        return name
    if isinstance(target, GroupTarget):
        return target.name
    return target.device_id


async def resolve_devices(client: MenderClient, target: Target) -> list[str]:
    """
    Materialize the device ids a deployment will address.

    Group membership is listed to the last page; ids are kept in server
    order, duplicates included.
    """
    if isinstance(target, DeviceTarget):
        return [target.device_id]
    if isinstance(target, GroupTarget):
        return await collect(
            client,
            paths.INVENTORY_GROUP_DEVICES.format(name=quote(target.name, safe="")),
            str,
        )
    raise TypeError(f"Unsupported deployment target: {target!r}")


async def deploy(
    client: MenderClient,
    target: Target,
    artifact_name: str,
    name: str | None = None,
) -> int:
    """
    Deploy an artifact to a group or a single device.

    Args:
        client: Authenticated Mender API client
        target: GroupTarget or DeviceTarget
        artifact_name: Name of the artifact to install
        name: Deployment name; defaults to the group name or device id

    Returns:
        Number of devices in the submitted deployment

    Raises:
        FetchError: If listing the group or submitting the deployment fails
    """
    devices = await resolve_devices(client, target)
    request = DeploymentRequest(
        artifact_name=artifact_name,
        name=deployment_name(target, name),
        devices=devices,
    )

    await client.post_checked(paths.DEPLOYMENTS, json=request.model_dump())

    log_with_source(
        logger, "api", "info", "Deployment created",
        deployment=request.name, artifact=artifact_name, devices=len(devices),
    )
    return len(devices)
