"""Configuration dataclasses."""

from dataclasses import dataclass, field
from pathlib import Path

LOG_LEVELS = ("debug", "info", "warning", "error")
LOG_FORMATS = ("text", "json")


@dataclass
class LoggingConfig:
    """Where and how condlang writes its log.

    With no ``file`` the log goes to stderr. ``max_bytes`` and
    ``backup_count`` control rotation of the log file.
    """

    level: str = "warning"
    file: Path | None = None
    format: str = "text"
    include_stderr: bool = False
    max_bytes: int = 10 * 1024 * 1024
    backup_count: int = 5

    def __post_init__(self) -> None:
        if self.level.lower() not in LOG_LEVELS:
            raise ValueError(f"level must be one of {LOG_LEVELS}, got {self.level!r}")
        if self.format.lower() not in LOG_FORMATS:
            raise ValueError(
                f"format must be one of {LOG_FORMATS}, got {self.format!r}"
            )
        if self.max_bytes <= 0:
            raise ValueError(f"max_bytes must be positive, got {self.max_bytes}")
        if self.backup_count < 0:
            raise ValueError(
                f"backup_count must be non-negative, got {self.backup_count}"
            )


@dataclass
class CondlangConfig:
    """Top-level condlang configuration."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
