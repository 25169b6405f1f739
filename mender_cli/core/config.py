"""
Configuration Management.

Loads connection settings from the environment (or a .env file in the
working directory) and static settings from mender_cli/settings/*.yaml.

Environment (MENDER_ prefix):
    MENDER_SERVER_URL  - Base URL of the Mender server (required)
    MENDER_TOKEN       - Bearer token returned by `login` (required by fleet commands)
    MENDER_CERT_FILE   - PEM certificate used as root of trust (optional)

Settings (YAML):
    application.yaml   - App identity, HTTP timeout
    logging.yaml       - Logging configuration

Settings are built once per command and passed explicitly to the HTTP
client. Nothing under mender_cli.api reads the environment.
"""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from mender_cli.core.config_schema import ApplicationSchema, LoggingSchema
from mender_cli.core.exceptions import ConfigError

SETTINGS_DIR = Path(__file__).resolve().parent.parent / "settings"


def load_yaml_config(filename: str, directory: Path | None = None) -> dict[str, Any]:
    """Load a YAML configuration file from the settings directory."""
    config_path = (directory or SETTINGS_DIR) / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path) as f:
        return yaml.safe_load(f) or {}


class Settings(BaseSettings):
    """Connection settings read from MENDER_* environment variables."""

    server_url: str
    token: str | None = None
    cert_file: Path | None = None

    model_config = SettingsConfigDict(
        env_prefix="MENDER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    def read_certificate(self) -> bytes | None:
        """Return the PEM bytes of the configured certificate, if any."""
        if self.cert_file is None:
            return None
        try:
            return self.cert_file.expanduser().read_bytes()
        except OSError as e:
            raise ConfigError(f"Cannot read certificate file {self.cert_file}: {e}") from e


def load_settings(require_token: bool = True) -> Settings:
    """
    Build Settings from the environment.

    Args:
        require_token: Fail when MENDER_TOKEN is not set.

    Raises:
        ConfigError: If the server URL (or the token, when required) is missing.
    """
    try:
        settings = Settings()
    except ValidationError as e:
        missing = [
            f"MENDER_{'_'.join(str(part) for part in err['loc']).upper()}"
            for err in e.errors()
        ]
        raise ConfigError(f"Missing or invalid environment variables: {', '.join(missing)}") from e

    if not settings.server_url.strip():
        raise ConfigError("MENDER_SERVER_URL is empty")
    if require_token and not settings.token:
        raise ConfigError("MENDER_TOKEN is not set, run the login command first")
    return settings


def _load_validated(schema_cls: type, filename: str) -> Any:
    """Load YAML and validate against schema. Returns typed model instance."""
    raw = load_yaml_config(filename)
    try:
        return schema_cls(**raw)
    except ValidationError as e:
        raise ConfigError(
            f"Invalid configuration in {filename}:\n{e}"
        ) from e


class AppConfig:
    """
    Application configuration loaded from YAML files.

    Each YAML file is validated against its Pydantic schema at load time.
    """

    def __init__(self) -> None:
        self._application = _load_validated(ApplicationSchema, "application.yaml")
        self._logging = _load_validated(LoggingSchema, "logging.yaml")

    @property
    def application(self) -> ApplicationSchema:
        """Application settings."""
        return self._application

    @property
    def logging(self) -> LoggingSchema:
        """Logging settings."""
        return self._logging


@lru_cache
def get_app_config() -> AppConfig:
    """Get cached application configuration."""
    return AppConfig()
