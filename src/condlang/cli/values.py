"""Commands for converting values to and from their canonical text form."""

import json
import logging
from typing import Any

import click

from condlang.cli.exit_codes import ExitCode
from condlang.cli.output import (
    CLIResult,
    error_exit,
    format_option,
    json_default,
    success_output,
)
from condlang.values import deserialize, lookup_path, serialize

logger = logging.getLogger(__name__)


def _load_json(text: str, json_output: bool) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        error_exit(f"Invalid JSON input: {e}", ExitCode.INVALID_INPUT, json_output)


@click.command("serialize")
@click.argument("value")
@format_option
def serialize_command(value: str, output_format: str) -> None:
    """Print the canonical text form of a JSON VALUE.

    Examples:

    \b
        condlang serialize '{"a": [1, "b", null]}'
    """
    json_output = output_format == "json"
    text = serialize(_load_json(value, json_output))
    success_output(
        CLIResult(success=True, message=text, data={"serialized": text}),
        json_output=json_output,
    )


@click.command("deserialize")
@click.argument("text")
@format_option
def deserialize_command(text: str, output_format: str) -> None:
    """Decode canonical TEXT and print it as JSON.

    ``undefined`` is printed as null.
    """
    value = deserialize(text)
    rendered = json.dumps(value, default=json_default)
    success_output(
        CLIResult(success=True, message=rendered, data={"value": value}),
        json_output=output_format == "json",
    )


@click.command("lookup")
@click.argument("path")
@click.option(
    "--data",
    "data",
    required=True,
    help="JSON document to read from.",
)
@click.option(
    "--raw",
    is_flag=True,
    default=False,
    help="Print the value as JSON instead of its canonical text form.",
)
@format_option
def lookup_command(path: str, data: str, raw: bool, output_format: str) -> None:
    """Read the value at PATH (e.g. a.b[0].c) from a JSON document.

    Unresolvable paths print ``undefined``.

    Examples:

    \b
        condlang lookup 'user.roles[0]' --data '{"user": {"roles": ["admin"]}}'
    """
    json_output = output_format == "json"
    document = _load_json(data, json_output)
    value = lookup_path(document, path, as_serialized=not raw)
    logger.debug("Lookup %r resolved to %r", path, value)

    message = json.dumps(value, default=json_default) if raw else value
    success_output(
        CLIResult(success=True, message=message, data={"path": path, "value": value}),
        json_output=json_output,
    )
