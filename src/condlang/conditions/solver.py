"""Reduce condition expressions to boolean literals.

The solver works on raw text. It splits the expression on ``(``, then on
``&&`` and ``||``, and replaces every comparison it finds with ``true`` or
``false``. What remains is handed to the boolean evaluator.

The splitting is shallow:

- Only the first ``)`` of a sub-condition is kept; text after it is dropped.
- solve_or() does not look for ``&&`` inside its operands.
- Missing ``)`` are appended at the very end of the reduced text.
"""

from __future__ import annotations

import logging
import operator as _operator
import re
from collections.abc import Callable
from typing import Any

from condlang.conditions.equality import safe_deep_equal
from condlang.values.codec import deserialize, parse_number

logger = logging.getLogger(__name__)

# Checked in this order; the first operator present wins
OPERATORS: tuple[str, ...] = ("==", "!=", ">", "<", ">=", "<=")

# '>' and '<' must not match the first character of '>=' / '<='
_OPERATOR_PATTERNS: dict[str, re.Pattern[str]] = {
    op: re.compile(re.escape(op) + ("(?!=)" if op in (">", "<") else ""))
    for op in OPERATORS
}

_ORDERINGS: dict[str, Callable[[Any, Any], bool]] = {
    ">": _operator.gt,
    "<": _operator.lt,
    ">=": _operator.ge,
    "<=": _operator.le,
}


def find_operator(text: str) -> str | None:
    """Return the highest-priority comparison operator in text, if any."""
    for op in OPERATORS:
        if _OPERATOR_PATTERNS[op].search(text):
            return op
    return None


def _split_operands(fragment: str, op: str) -> tuple[str, str]:
    pattern = _OPERATOR_PATTERNS.get(op)
    if pattern is None:
        msg = f"Unknown comparison operator: {op!r}"
        raise ValueError(msg)
    match = pattern.search(fragment)
    if match is None:
        msg = f"Operator {op!r} not found in {fragment!r}"
        raise ValueError(msg)
    return fragment[: match.start()].strip(), fragment[match.end() :].strip()


def _to_ordered(text: str) -> int | float | str:
    if not text:
        return 0
    number = parse_number(text)
    return text if number is None else number


def solve_comparison(fragment: str, op: str) -> bool:
    """Resolve a single ``lhs OP rhs`` comparison.

    ``==`` and ``!=`` decode both operands and compare them structurally.
    Ordering operators compare numbers numerically and text
    lexicographically; a number never orders against text.

    Args:
        fragment: Comparison text.
        op: One of OPERATORS; split on its first occurrence.

    Returns:
        The comparison result.

    Raises:
        ValueError: If op is unknown or not present in fragment.
    """
    lhs, rhs = _split_operands(fragment, op)

    if op == "==":
        return safe_deep_equal(deserialize(lhs), deserialize(rhs))
    if op == "!=":
        return not safe_deep_equal(deserialize(lhs), deserialize(rhs))

    compare = _ORDERINGS[op]
    left = _to_ordered(lhs)
    right = _to_ordered(rhs)
    if isinstance(left, str) != isinstance(right, str):
        return False
    return compare(left, right)


def _split_bracket(condition: str) -> tuple[str, str]:
    """Separate a comparison body from the ``)`` that may trail it."""
    bracket = ")" if ")" in condition else ""
    return condition.split(")")[0], bracket


def _solve_parts(part: str, separator: str, delegate_or: bool) -> str:
    resolved: list[str] = []

    for condition in part.split(separator):
        condition = condition.strip()
        if not condition:
            resolved.append("")
            continue

        body, bracket = _split_bracket(condition)

        if delegate_or and "||" in body:
            resolved.append(solve_or(body) + bracket)
            continue

        op = find_operator(body)
        if op is None:
            resolved.append(condition)
            continue

        result = solve_comparison(body, op)
        resolved.append(("true" if result else "false") + bracket)

    return separator.join(resolved)


def solve_and(part: str) -> str:
    """Resolve the ``&&``-separated comparisons of one segment.

    Sub-conditions containing ``||`` are handed to solve_or().
    """
    return _solve_parts(part, "&&", delegate_or=True)


def solve_or(part: str) -> str:
    """Resolve the ``||``-separated comparisons of one segment.

    ``&&`` inside an operand is not split again; such operands resolve as a
    single comparison on the first operator found.
    """
    return _solve_parts(part, "||", delegate_or=False)


def solve(expression: str) -> str:
    """Reduce a condition expression to boolean literals.

    Args:
        expression: Condition text, e.g. ``(a == a && 2 > 1) || 0 > 1``.

    Returns:
        The reduced expression, e.g. ``(true&&true)``.

    Raises:
        ValueError: If a comparison cannot be split.
    """
    segments = []
    for segment in expression.split("("):
        if not segment.strip():
            segments.append("")
            continue
        segments.append(solve_and(segment))

    result = "(".join(segments)

    missing = result.count("(") - result.count(")")
    if missing > 0:
        result += ")" * missing

    logger.debug(
        "Solved %r -> %r",
        expression,
        result,
        extra={"expression": expression, "reduced": result},
    )
    return result
