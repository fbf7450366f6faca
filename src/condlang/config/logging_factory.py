"""Apply command-line logging overrides on top of loaded configuration."""

from __future__ import annotations

import dataclasses
from pathlib import Path

from condlang.config.models import LoggingConfig


def build_logging_config(
    base: LoggingConfig,
    *,
    level: str | None = None,
    file: Path | None = None,
    format: str | None = None,
    include_stderr: bool | None = None,
) -> LoggingConfig:
    """Return a copy of base with every non-None override applied.

    Raises:
        ValueError: If an override fails LoggingConfig validation.
    """
    overrides = {
        "level": level,
        "file": file,
        "format": format,
        "include_stderr": include_stderr,
    }
    return dataclasses.replace(
        base, **{name: value for name, value in overrides.items() if value is not None}
    )


def configure_logging_from_cli(
    *,
    config_path: Path | None = None,
    level: str | None = None,
    file: Path | None = None,
    format: str | None = None,
    include_stderr: bool | None = None,
) -> None:
    """Load configuration, apply CLI overrides and install the handlers.

    Raises:
        ValueError: If the merged configuration is invalid.
    """
    from condlang.config.loader import get_config
    from condlang.logging import configure_logging

    base = get_config(config_path=config_path).logging
    configure_logging(
        build_logging_config(
            base,
            level=level,
            file=file,
            format=format,
            include_stderr=include_stderr,
        )
    )
