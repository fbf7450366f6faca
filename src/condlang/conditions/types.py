"""Node types for parsed boolean expressions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class BoolLiteral:
    """A ``true`` or ``false`` literal."""

    value: bool

    def evaluate(self) -> bool:
        return self.value


@dataclass(frozen=True)
class AndExpression:
    """All operands must be true (logical AND)."""

    operands: tuple["BoolNode", ...]

    def evaluate(self) -> bool:
        # all() stops at the first false operand
        return all(operand.evaluate() for operand in self.operands)


@dataclass(frozen=True)
class OrExpression:
    """At least one operand must be true (logical OR)."""

    operands: tuple["BoolNode", ...]

    def evaluate(self) -> bool:
        return any(operand.evaluate() for operand in self.operands)


BoolNode = Union[BoolLiteral, AndExpression, OrExpression]
