# tests/conftest.py

"""Pytest configuration and fixtures for test suite"""

# Standard library imports
from logging import WARNING
from logging import getLogger

# Third party imports
from hypothesis import HealthCheck
from hypothesis import settings
import pytest

# Local imports
from bookcenter_search.application.processing.phonetics import default_transliterator
from bookcenter_search.application.processing.transliteration import default_dictionary
from bookcenter_search.infrastructure.config import _loader

# Shared fixtures
from tests.fixtures.records import books  # noqa: F401
from tests.fixtures.records import memory_catalog  # noqa: F401

# Property tests share the autouse isolation fixture; it holds no per-example state
settings.register_profile(
    "bookcenter", suppress_health_check=[HealthCheck.function_scoped_fixture], deadline=None
)
settings.load_profile("bookcenter")


# Custom markers
def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line("markers", "slow: mark test as slow running")


@pytest.fixture(autouse=True, scope="function")
def basic_isolation(tmp_path, monkeypatch):
    """Minimal isolation for most tests

    Resets logging, runs each test in its own working directory so no stray
    config.json, wordlists.json or logs/ are picked up, and drops the cached
    process-wide configuration.
    """
    # Reset logging to avoid handler conflicts
    root_logger = getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()
    root_logger.setLevel(WARNING)

    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(_loader, "_default_config", None)
    default_dictionary.cache_clear()
    default_transliterator.cache_clear()

    yield

    default_dictionary.cache_clear()
    default_transliterator.cache_clear()


@pytest.fixture
def temp_test_dir(tmp_path):
    """Provide a temporary directory for tests that need file operations"""
    work_dir = tmp_path / "work"
    work_dir.mkdir()
    return work_dir
