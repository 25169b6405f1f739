"""
Unit Tests for Configuration Management.

Black box tests against the public interface of config.py.
YAML tests run against the bundled settings files; environment tests use
monkeypatch and tmp_path to control what is visible.
"""

from unittest.mock import patch

import pytest

from mender_cli.core.config import (
    SETTINGS_DIR,
    AppConfig,
    Settings,
    get_app_config,
    load_settings,
    load_yaml_config,
)
from mender_cli.core.config_schema import ApplicationSchema, LoggingSchema
from mender_cli.core.exceptions import ConfigError


# =============================================================================
# load_settings
# =============================================================================


class TestLoadSettings:
    """Tests for environment-derived settings."""

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("MENDER_SERVER_URL", "https://mender.example.com")
        monkeypatch.setenv("MENDER_TOKEN", "abc")

        settings = load_settings()

        assert settings.server_url == "https://mender.example.com"
        assert settings.token == "abc"
        assert settings.cert_file is None

    def test_missing_server_url(self, monkeypatch):
        monkeypatch.setenv("MENDER_TOKEN", "abc")

        with pytest.raises(ConfigError, match="MENDER_SERVER_URL"):
            load_settings()

    def test_empty_server_url(self, monkeypatch):
        monkeypatch.setenv("MENDER_SERVER_URL", "  ")

        with pytest.raises(ConfigError, match="MENDER_SERVER_URL"):
            load_settings(require_token=False)

    def test_missing_token(self, monkeypatch):
        monkeypatch.setenv("MENDER_SERVER_URL", "https://mender.example.com")

        with pytest.raises(ConfigError, match="MENDER_TOKEN"):
            load_settings()

    def test_token_optional_for_login(self, monkeypatch):
        monkeypatch.setenv("MENDER_SERVER_URL", "https://mender.example.com")

        settings = load_settings(require_token=False)

        assert settings.token is None

    def test_reads_dotenv_in_working_directory(self, tmp_path):
        (tmp_path / ".env").write_text(
            "MENDER_SERVER_URL=https://dotenv.example.com\nMENDER_TOKEN=from-file\n"
        )

        settings = load_settings()

        assert settings.server_url == "https://dotenv.example.com"
        assert settings.token == "from-file"

    def test_config_error_code(self):
        with pytest.raises(ConfigError) as exc_info:
            load_settings()

        assert exc_info.value.code == "CFG_INVALID"


class TestReadCertificate:
    """Tests for Settings.read_certificate()."""

    def test_no_certificate(self):
        assert Settings(server_url="https://m").read_certificate() is None

    def test_reads_pem_bytes(self, tmp_path):
        pem = tmp_path / "server.crt"
        pem.write_bytes(b"-----BEGIN CERTIFICATE-----\n...\n")

        settings = Settings(server_url="https://m", cert_file=pem)

        assert settings.read_certificate() == b"-----BEGIN CERTIFICATE-----\n...\n"

    def test_cert_file_from_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("MENDER_SERVER_URL", "https://m")
        monkeypatch.setenv("MENDER_CERT_FILE", str(tmp_path / "ca.pem"))

        assert load_settings(require_token=False).cert_file == tmp_path / "ca.pem"

    def test_missing_file(self, tmp_path):
        settings = Settings(server_url="https://m", cert_file=tmp_path / "nope.pem")

        with pytest.raises(ConfigError, match="nope.pem"):
            settings.read_certificate()


# =============================================================================
# YAML settings
# =============================================================================


class TestLoadYamlConfig:
    """Tests for load_yaml_config()."""

    def test_loads_bundled_file(self):
        config = load_yaml_config("application.yaml")
        assert config["name"] == "mender-cli"

    def test_settings_directory_is_bundled(self):
        assert (SETTINGS_DIR / "logging.yaml").is_file()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Configuration file not found"):
            load_yaml_config("missing.yaml", directory=tmp_path)

    def test_empty_file_is_empty_dict(self, tmp_path):
        (tmp_path / "empty.yaml").write_text("")
        assert load_yaml_config("empty.yaml", directory=tmp_path) == {}


class TestAppConfig:
    """Tests for AppConfig and its schemas."""

    def test_sections_are_typed(self):
        config = AppConfig()

        assert isinstance(config.application, ApplicationSchema)
        assert isinstance(config.logging, LoggingSchema)
        assert config.application.timeouts.http > 0

    def test_cached(self):
        assert get_app_config() is get_app_config()

    def test_unknown_key_rejected(self):
        bad = {
            "name": "x",
            "version": "1",
            "description": "d",
            "timeouts": {"http": 5},
            "unexpected": True,
        }
        with patch("mender_cli.core.config.load_yaml_config", return_value=bad):
            with pytest.raises(ConfigError, match="application.yaml"):
                AppConfig()

    def test_invalid_log_level_rejected(self):
        good_app = load_yaml_config("application.yaml")
        bad_logging = load_yaml_config("logging.yaml") | {"level": "LOUD"}

        def fake_load(filename):
            return good_app if filename == "application.yaml" else bad_logging

        with patch("mender_cli.core.config.load_yaml_config", side_effect=fake_load):
            with pytest.raises(ConfigError, match="logging.yaml"):
                AppConfig()
