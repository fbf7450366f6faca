"""Commands for escaping condition text."""

import click

from condlang.cli.output import CLIResult, format_option, success_output
from condlang.escaping import escape, unescape


@click.command("escape")
@click.argument("text")
@format_option
def escape_command(text: str, output_format: str) -> None:
    """Replace reserved symbols in TEXT with @word tokens."""
    escaped = escape(text)
    success_output(
        CLIResult(
            success=True,
            message=escaped,
            data={"text": text, "escaped": escaped},
        ),
        json_output=output_format == "json",
    )


@click.command("unescape")
@click.argument("text")
@format_option
def unescape_command(text: str, output_format: str) -> None:
    """Restore reserved symbols from @word tokens in TEXT."""
    unescaped = unescape(text)
    success_output(
        CLIResult(
            success=True,
            message=unescaped,
            data={"text": text, "unescaped": unescaped},
        ),
        json_output=output_format == "json",
    )
