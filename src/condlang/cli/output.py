"""Text and JSON output shared by every command."""

from __future__ import annotations

import json
import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, NoReturn, TypeVar

import click

from condlang.cli.exit_codes import ExitCode
from condlang.values.types import Undefined

F = TypeVar("F", bound=Callable[..., Any])


def format_option(func: F) -> F:
    """Add the shared ``--format text|json`` option as ``output_format``."""
    return click.option(
        "--format",
        "output_format",
        type=click.Choice(["text", "json"], case_sensitive=False),
        default="text",
        show_default=True,
        help="Output format.",
    )(func)


def json_default(value: Any) -> Any:
    """json.dumps() fallback: ``undefined`` becomes null, the rest text."""
    if isinstance(value, Undefined):
        return None
    return str(value)


def _code_name(code: ExitCode | int) -> str:
    return code.name if isinstance(code, ExitCode) else "UNKNOWN_ERROR"


def _failure(message: str, code: ExitCode | int) -> dict[str, Any]:
    return {"status": "failed", "error": {"code": _code_name(code), "message": message}}


@dataclass
class CLIResult:
    """Outcome of a command.

    ``message`` is what text mode prints. JSON mode prints ``message``
    together with ``data`` on success, or an error object on failure.
    """

    success: bool
    message: str
    data: dict[str, Any] = field(default_factory=dict)
    exit_code: ExitCode | int = ExitCode.SUCCESS

    def to_json(self) -> str:
        if not self.success:
            payload = _failure(self.message, self.exit_code)
        else:
            payload = {"status": "completed", "message": self.message, **self.data}
        return json.dumps(payload, indent=2, default=json_default)


def error_exit(
    message: str,
    code: ExitCode | int,
    json_output: bool = False,
) -> NoReturn:
    """Report an error on stderr and exit with code.

    Args:
        message: Error message to display.
        code: Exit status; plain ints are reported as UNKNOWN_ERROR in JSON.
        json_output: Emit a JSON error object instead of ``Error: ...``.
    """
    if json_output:
        click.echo(json.dumps(_failure(message, code)), err=True)
    else:
        click.echo(f"Error: {message}", err=True)
    sys.exit(int(code))


def success_output(result: CLIResult, json_output: bool = False) -> None:
    """Print a result as its message or as a JSON document."""
    click.echo(result.to_json() if json_output else result.message)
