"""
Wire Schemas.

Pydantic models for the payloads exchanged with the Mender management API.
Unknown fields are ignored: the server returns far more than the CLI reads.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class _WireBase(BaseModel):
    """Base for server payloads; tolerates fields this client does not use."""

    model_config = ConfigDict(extra="ignore")


class Attribute(_WireBase):
    """A single inventory attribute."""

    name: str
    value: Any = None
    scope: str | None = None


class InventoryDevice(_WireBase):
    """Device as listed by the inventory service."""

    id: str
    attributes: list[Attribute] | None = None

    def attribute(self, name: str) -> Any | None:
        """Return the value of the first attribute called `name`."""
        for attribute in self.attributes or []:
            if attribute.name == name:
                return attribute.value
        return None


class IdentityData(_WireBase):
    """Identity data recorded by device authentication at provisioning time."""

    serial_number: Any = Field(default=None, alias="SerialNumber")


class IdentityDevice(_WireBase):
    """Device as listed by the device authentication (identity) service."""

    id: str
    identity_data: IdentityData | None = None

    @property
    def serial_number(self) -> Any:
        return self.identity_data.serial_number if self.identity_data else None


class DeploymentRequest(_WireBase):
    """Body of a new deployment."""

    artifact_name: str
    name: str
    devices: list[str]
