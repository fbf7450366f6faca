"""CLI module for condlang."""

import logging
from pathlib import Path

import click

from condlang.cli.exit_codes import ExitCode
from condlang.cli.output import error_exit
from condlang.config.models import LOG_LEVELS

logger = logging.getLogger(__name__)


def _configure_logging(
    config_path: Path | None,
    log_level: str | None,
    log_file: Path | None,
    log_json: bool,
) -> None:
    """Configure logging from CLI options.

    Args:
        config_path: Config file to read instead of the default.
        log_level: Override log level (debug, info, warning, error).
        log_file: Override log file path.
        log_json: Use JSON log format.
    """
    from condlang.config.logging_factory import configure_logging_from_cli

    try:
        configure_logging_from_cli(
            config_path=config_path,
            level=log_level,
            file=log_file,
            format="json" if log_json else None,
        )
    except ValueError as e:
        error_exit(f"Invalid logging configuration: {e}", ExitCode.CONFIG_ERROR)


@click.group()
@click.version_option(package_name="condlang")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Config file (default: ~/.condlang/config.toml).",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Override log level (default: warning).",
)
@click.option(
    "--log-file",
    type=click.Path(path_type=Path),
    default=None,
    help="Override log file path.",
)
@click.option(
    "--log-json",
    is_flag=True,
    default=False,
    help="Use JSON log format.",
)
@click.pass_context
def main(
    ctx: click.Context,
    config_path: Path | None,
    log_level: str | None,
    log_file: Path | None,
    log_json: bool,
) -> None:
    """condlang - evaluate condition expressions over structured values."""
    ctx.ensure_object(dict)
    _configure_logging(config_path, log_level, log_file, log_json)
    logger.debug("condlang starting: subcommand=%s", ctx.invoked_subcommand)


# Defer import to avoid circular dependency
def _register_commands():
    from condlang.cli.condition import eval_command, solve_command
    from condlang.cli.escaping import escape_command, unescape_command
    from condlang.cli.values import (
        deserialize_command,
        lookup_command,
        serialize_command,
    )

    main.add_command(eval_command)
    main.add_command(solve_command)
    main.add_command(escape_command)
    main.add_command(unescape_command)
    main.add_command(serialize_command)
    main.add_command(deserialize_command)
    main.add_command(lookup_command)


_register_commands()
