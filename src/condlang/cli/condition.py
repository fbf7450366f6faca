"""Commands for evaluating and reducing condition expressions."""

import logging

import click

from condlang.cli.exit_codes import ExitCode
from condlang.cli.output import CLIResult, error_exit, format_option, success_output
from condlang.conditions import evaluate_condition, solve

logger = logging.getLogger(__name__)


@click.command("eval")
@click.argument("expression")
@click.option(
    "--exit-status",
    is_flag=True,
    default=False,
    help="Exit with a non-zero status when the condition is false.",
)
@format_option
def eval_command(expression: str, exit_status: bool, output_format: str) -> None:
    """Evaluate a condition expression and print true or false.

    Malformed expressions evaluate to false.

    Examples:

    \b
        condlang eval '5 > 3 && "a" == "a"'
        condlang eval --exit-status '{"x": 1} == {"x": 1}'
    """
    result = evaluate_condition(expression)
    text = "true" if result else "false"

    success_output(
        CLIResult(
            success=True,
            message=text,
            data={"expression": expression, "result": result},
        ),
        json_output=output_format == "json",
    )

    if exit_status and not result:
        raise SystemExit(int(ExitCode.CONDITION_FALSE))


@click.command("solve")
@click.argument("expression")
@format_option
def solve_command(expression: str, output_format: str) -> None:
    """Reduce a condition expression to boolean literals.

    Examples:

    \b
        condlang solve '(1 > 0 && 2 > 1'
    """
    json_output = output_format == "json"
    try:
        reduced = solve(expression)
    except (ValueError, RecursionError) as e:
        logger.debug("Solve failed", exc_info=True)
        error_exit(f"Cannot solve expression: {e}", ExitCode.INVALID_INPUT, json_output)

    success_output(
        CLIResult(
            success=True,
            message=reduced,
            data={"expression": expression, "reduced": reduced},
        ),
        json_output=json_output,
    )
