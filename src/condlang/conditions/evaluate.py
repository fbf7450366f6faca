"""Fail-closed evaluation of condition expressions."""

from __future__ import annotations

import logging
from typing import Any

from condlang.conditions.parser import evaluate_boolean
from condlang.conditions.solver import solve
from condlang.errors import ExpressionError
from condlang.values.codec import serialize

logger = logging.getLogger(__name__)


def evaluate_condition(code: Any) -> bool:
    """Evaluate a condition expression.

    The text is normalized through serialize(), reduced with solve() and
    the reduced text evaluated as a boolean expression. Any failure along
    the way yields False; no exception escapes.

    Args:
        code: Condition text such as ``5 > 3 && "a" == "a"``. Anything
            that is not a str is not a condition and evaluates to False.

    Returns:
        True if the condition holds, False otherwise or on error.
    """
    if not isinstance(code, str):
        logger.debug("Condition %r is not text, evaluated to false", code)
        return False

    try:
        reduced = solve(serialize(code))
        return evaluate_boolean(reduced)
    except (ExpressionError, ValueError, TypeError, LookupError, RecursionError) as e:
        logger.debug("Condition %r evaluated to false: %s", code, e)
        return False
