"""Typed access to environment variables.

EnvReader takes an optional mapping so tests never need to touch
os.environ, and an optional prefix so callers can name variables by
their suffix:

    reader = EnvReader(prefix="CONDLANG_")
    reader.get_str("LOG_LEVEL", "warning")   # reads CONDLANG_LOG_LEVEL
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

logger = logging.getLogger(__name__)

_TRUTHY = frozenset({"1", "true", "yes", "on"})


class EnvReader:
    """Read and convert environment variables.

    Unset variables yield the supplied default.
    """

    def __init__(
        self,
        env: Mapping[str, str] | None = None,
        prefix: str = "",
    ) -> None:
        self._env: Mapping[str, str] = os.environ if env is None else env
        self._prefix = prefix

    def _raw(self, var: str) -> str | None:
        return self._env.get(self._prefix + var)

    def get_str(self, var: str, default: str | None = None) -> str | None:
        value = self._raw(var)
        return default if value is None else value

    def get_int(self, var: str, default: int | None = None) -> int | None:
        """Parse an integer; unparseable values log a warning and use default."""
        value = self._raw(var)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            logger.warning(
                "Ignoring non-integer %s=%r", self._prefix + var, value
            )
            return default

    def get_bool(self, var: str, default: bool | None = None) -> bool | None:
        """Parse a flag: 1/true/yes/on (any case) is True, anything else False."""
        value = self._raw(var)
        if value is None:
            return default
        return value.strip().lower() in _TRUTHY

    def get_path(self, var: str, default: Path | None = None) -> Path | None:
        """Parse a path with ``~`` expanded; an empty value counts as unset."""
        value = self._raw(var)
        if not value:
            return default
        return Path(value).expanduser()
