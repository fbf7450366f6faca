"""Token types and data structures for the boolean expression lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """All token types in a reduced boolean expression."""

    BOOLEAN = auto()  # true, false

    # Delimiters
    LPAREN = auto()  # (
    RPAREN = auto()  # )

    # Logical operators
    OP_AND = auto()  # &&
    OP_OR = auto()  # ||

    # End of input
    EOF = auto()


# Literal words that map to specific token types
KEYWORDS: dict[str, TokenType] = {
    "true": TokenType.BOOLEAN,
    "false": TokenType.BOOLEAN,
}


@dataclass(frozen=True)
class Token:
    """A single token produced by the lexer."""

    type: TokenType
    value: str
    position: int  # character offset in source
    line: int
    column: int
