"""Shared test fixtures for condlang."""

import logging
from pathlib import Path

import pytest
from click.testing import CliRunner

from condlang.config import clear_config_cache


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Point config loading at an empty location and drop CONDLANG_* vars."""
    for var in (
        "CONDLANG_LOG_LEVEL",
        "CONDLANG_LOG_FILE",
        "CONDLANG_LOG_FORMAT",
        "CONDLANG_LOG_STDERR",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("CONDLANG_CONFIG_PATH", str(tmp_path / "missing.toml"))
    clear_config_cache()
    yield
    clear_config_cache()


@pytest.fixture(autouse=True)
def reset_root_logger():
    """Save and restore root logger state between tests."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    root.handlers[:] = original_handlers
    root.setLevel(original_level)


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI test runner."""
    return CliRunner()


@pytest.fixture
def sample_document() -> dict:
    """A nested document for path lookups and embedded comparisons."""
    return {
        "user": {
            "name": "ada",
            "age": 36,
            "roles": ["admin", "dev"],
            "address": None,
        },
        "items": [{"id": 1, "tags": ["a"]}, {"id": 2, "tags": []}],
        "active": True,
    }
