"""Lexer for reduced boolean expressions.

The only tokens are ``true``, ``false``, ``&&``, ``||`` and parentheses.
Scanning walks one master pattern across the source; any character the
pattern cannot start a token with is an error.
"""

from __future__ import annotations

import re

from condlang.conditions.tokens import KEYWORDS, Token, TokenType
from condlang.errors import LexError

_TOKEN_RE = re.compile(
    r"""
    (?P<space>[ \t\r\n]+)
  | (?P<word>[A-Za-z_][A-Za-z0-9_]*)
  | (?P<op>&&|\|\||[()])
    """,
    re.VERBOSE,
)

_OPERATORS: dict[str, TokenType] = {
    "&&": TokenType.OP_AND,
    "||": TokenType.OP_OR,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
}


def tokenize(source: str) -> list[Token]:
    """Tokenize a reduced boolean expression.

    Returns:
        List of tokens, always ending with an EOF token.

    Raises:
        LexError: On invalid characters or words other than true/false.
    """
    tokens: list[Token] = []
    pos = 0
    line = 1
    line_start = 0

    while pos < len(source):
        match = _TOKEN_RE.match(source, pos)
        column = pos - line_start + 1
        if match is None:
            raise LexError(
                f"Unexpected character: '{source[pos]}'",
                source=source,
                position=pos,
                line=line,
                column=column,
            )

        text = match.group()
        kind = match.lastgroup
        if kind == "space":
            newlines = text.count("\n")
            if newlines:
                line += newlines
                line_start = pos + text.rindex("\n") + 1
        elif kind == "word":
            if text not in KEYWORDS:
                raise LexError(
                    f"Unknown word: '{text}' (expected 'true' or 'false')",
                    source=source,
                    position=pos,
                    line=line,
                    column=column,
                )
            tokens.append(Token(KEYWORDS[text], text, pos, line, column))
        else:
            tokens.append(Token(_OPERATORS[text], text, pos, line, column))
        pos = match.end()

    tokens.append(Token(TokenType.EOF, "", pos, line, pos - line_start + 1))
    return tokens
