"""Condition expressions.

Provides evaluate_condition() to decide expressions like
'(1 > 0 && "a" == "a") || 0 > 1', solve() to reduce them to boolean
literals, and parse_boolean()/evaluate_boolean() for the reduced form.
"""

from condlang.conditions.equality import deep_equal, safe_deep_equal
from condlang.conditions.evaluate import evaluate_condition
from condlang.conditions.parser import evaluate_boolean, parse_boolean
from condlang.conditions.solver import (
    OPERATORS,
    find_operator,
    solve,
    solve_and,
    solve_comparison,
    solve_or,
)
from condlang.conditions.types import AndExpression, BoolLiteral, OrExpression

__all__ = [
    "OPERATORS",
    "AndExpression",
    "BoolLiteral",
    "OrExpression",
    "deep_equal",
    "evaluate_boolean",
    "evaluate_condition",
    "find_operator",
    "parse_boolean",
    "safe_deep_equal",
    "solve",
    "solve_and",
    "solve_comparison",
    "solve_or",
]
