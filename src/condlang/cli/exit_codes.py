"""Centralized exit codes for all CLI commands.

Exit code ranges:
    0: Success
    1-9: General errors
    10-19: Validation errors (input, config)
    60-69: Evaluation outcomes
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes for condlang CLI commands."""

    # Success (0)
    SUCCESS = 0

    # General errors (1-9)
    GENERAL_ERROR = 1
    INTERRUPTED = 2

    # Validation errors (10-19)
    INVALID_INPUT = 10
    CONFIG_ERROR = 11

    # Evaluation outcomes (60-69)
    CONDITION_FALSE = 60
