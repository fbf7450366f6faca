"""Configuration management for condlang.

Configuration is loaded with precedence handling:
1. CLI flags (highest priority)
2. Environment variables (CONDLANG_*)
3. Config file (~/.condlang/config.toml)
4. Default values (lowest priority)
"""

from condlang.config.env import EnvReader
from condlang.config.loader import (
    build_config,
    clear_config_cache,
    get_config,
    get_default_config_path,
    load_config_file,
)
from condlang.config.logging_factory import (
    build_logging_config,
    configure_logging_from_cli,
)
from condlang.config.models import CondlangConfig, LoggingConfig

__all__ = [
    # Models
    "CondlangConfig",
    "LoggingConfig",
    # Loader
    "build_config",
    "clear_config_cache",
    "get_config",
    "get_default_config_path",
    "load_config_file",
    # Helpers
    "EnvReader",
    "build_logging_config",
    "configure_logging_from_cli",
]
