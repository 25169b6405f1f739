"""
Configuration Schemas.

Pydantic models defining the expected structure of each YAML settings file.
Used by AppConfig to validate configuration at load time. If a YAML file
has missing keys, wrong types, or unknown fields, a clear error is raised
at startup instead of a cryptic KeyError deep in application code.

Each top-level class corresponds to one file in mender_cli/settings/:
    ApplicationSchema  → application.yaml
    LoggingSchema      → logging.yaml
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, PositiveFloat, PositiveInt


class _StrictBase(BaseModel):
    """Base with extra='forbid' so unknown YAML keys are caught immediately."""

    model_config = ConfigDict(extra="forbid")


# =============================================================================
# application.yaml
# =============================================================================


class TimeoutsSchema(_StrictBase):
    http: PositiveFloat


class ApplicationSchema(_StrictBase):
    name: str
    version: str
    description: str
    timeouts: TimeoutsSchema


# =============================================================================
# logging.yaml
# =============================================================================


class ConsoleHandlerSchema(_StrictBase):
    enabled: bool


class FileHandlerSchema(_StrictBase):
    enabled: bool
    path: str
    max_bytes: PositiveInt
    backup_count: int


class HandlersSchema(_StrictBase):
    console: ConsoleHandlerSchema
    file: FileHandlerSchema


class LoggingSchema(_StrictBase):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    format: Literal["console", "json"]
    handlers: HandlersSchema
