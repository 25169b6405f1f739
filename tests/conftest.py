"""
Root Pytest Fixtures.

Shared fixtures available to all test types.

Tests never read the developer's real MENDER_* variables or .env file:
every test runs from an empty temporary directory with a controlled
environment.
"""

import logging
from collections.abc import Iterator

import pytest

from mender_cli.core.config import get_app_config


# =============================================================================
# Environment Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def _isolated_environment(tmp_path, monkeypatch) -> Iterator[None]:
    """Run each test in an empty directory without MENDER_* variables."""
    for name in ("MENDER_SERVER_URL", "MENDER_TOKEN", "MENDER_CERT_FILE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_app_config.cache_clear()
    yield
    get_app_config.cache_clear()


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Iterator[None]:
    """Undo handlers installed by setup_logging() during a test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
