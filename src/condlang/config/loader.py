"""Configuration loader with precedence handling.

Configuration is loaded with the following precedence (highest to lowest):
1. CLI arguments (applied by build_logging_config)
2. Environment variables (CONDLANG_*)
3. Config file (~/.condlang/config.toml)
4. Default values

Environment variables:
- CONDLANG_CONFIG_PATH: Path to config file (overrides default location)
- CONDLANG_LOG_LEVEL: Log level (debug, info, warning, error)
- CONDLANG_LOG_FILE: Log file path
- CONDLANG_LOG_FORMAT: Log format (text, json)
- CONDLANG_LOG_STDERR: Also log to stderr when a log file is set
"""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Mapping
from dataclasses import fields
from pathlib import Path
from typing import Any

from condlang.config.env import EnvReader
from condlang.config.models import CondlangConfig, LoggingConfig

logger = logging.getLogger(__name__)

ENV_PREFIX = "CONDLANG_"
DEFAULT_CONFIG_DIR = Path.home() / ".condlang"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.toml"

_config_cache: dict[Path, CondlangConfig] = {}

_LOGGING_FIELDS = frozenset(f.name for f in fields(LoggingConfig))


def get_default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Return CONDLANG_CONFIG_PATH, or ~/.condlang/config.toml when unset."""
    return EnvReader(env, prefix=ENV_PREFIX).get_path(
        "CONFIG_PATH", DEFAULT_CONFIG_FILE
    )


def load_config_file(path: Path | None = None) -> dict[str, Any]:
    """Load a TOML config file.

    Args:
        path: Path to config file. If None, uses the default location.

    Returns:
        Parsed config dict, empty when the file is missing or unreadable.
    """
    if path is None:
        path = get_default_config_path()

    if not path.exists():
        logger.debug("Config file not found: %s", path)
        return {}

    try:
        with path.open("rb") as f:
            config = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Failed to load config file %s: %s", path, e)
        return {}

    logger.debug("Loaded config from %s", path)
    return config


def build_config(
    file_config: Mapping[str, Any],
    env: Mapping[str, str] | None = None,
) -> CondlangConfig:
    """Merge config file values and environment variables over defaults.

    Args:
        file_config: Parsed config file; only its ``[logging]`` table is read.
        env: Environment mapping (os.environ when None).

    Raises:
        ValueError: If a merged value fails validation.
    """
    reader = EnvReader(env, prefix=ENV_PREFIX)
    section = dict(file_config.get("logging", {}))
    if section.get("file"):
        section["file"] = Path(section["file"]).expanduser()
    else:
        section.pop("file", None)

    # Environment first, then the [logging] table, then the dataclass default
    merged: dict[str, Any] = {
        name: value
        for name, value in section.items()
        if name in _LOGGING_FIELDS
    }
    overrides = {
        "level": reader.get_str("LOG_LEVEL"),
        "file": reader.get_path("LOG_FILE"),
        "format": reader.get_str("LOG_FORMAT"),
        "include_stderr": reader.get_bool("LOG_STDERR"),
    }
    merged.update({k: v for k, v in overrides.items() if v is not None})

    return CondlangConfig(logging=LoggingConfig(**merged))


def get_config(config_path: Path | None = None) -> CondlangConfig:
    """Get condlang configuration with full precedence handling.

    Results are cached per config file path; see clear_config_cache().

    Args:
        config_path: Path to config file (overrides CONDLANG_CONFIG_PATH).

    Returns:
        CondlangConfig with merged configuration.
    """
    path = config_path if config_path is not None else get_default_config_path()
    cached = _config_cache.get(path)
    if cached is not None:
        return cached

    config = build_config(load_config_file(path))
    _config_cache[path] = config
    return config


def clear_config_cache() -> None:
    """Forget cached configurations (used by tests and after env changes)."""
    _config_cache.clear()
