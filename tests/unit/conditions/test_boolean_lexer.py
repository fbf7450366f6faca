"""Tests for the reduced boolean expression lexer."""

import pytest

from condlang.conditions.lexer import tokenize
from condlang.conditions.tokens import TokenType
from condlang.errors import LexError


def _types(tokens):
    """Extract token types, excluding EOF."""
    return [t.type for t in tokens if t.type != TokenType.EOF]


class TestTokenize:
    def test_empty_string(self):
        tokens = tokenize("")
        assert len(tokens) == 1
        assert tokens[0].type == TokenType.EOF

    def test_literals(self):
        tokens = tokenize("true false")
        assert _types(tokens) == [TokenType.BOOLEAN, TokenType.BOOLEAN]
        assert [t.value for t in tokens[:2]] == ["true", "false"]

    def test_operators_and_parens(self):
        tokens = tokenize("(true&&false)||true")
        assert _types(tokens) == [
            TokenType.LPAREN,
            TokenType.BOOLEAN,
            TokenType.OP_AND,
            TokenType.BOOLEAN,
            TokenType.RPAREN,
            TokenType.OP_OR,
            TokenType.BOOLEAN,
        ]

    def test_positions(self):
        tokens = tokenize("true ||\n false")
        assert tokens[1].position == 5
        assert tokens[1].column == 6
        assert tokens[2].line == 2
        assert tokens[2].column == 2


class TestLexErrors:
    @pytest.mark.parametrize(
        "source", ["1", "&", "|", "!true", "True", "abc", "true & false"]
    )
    def test_rejected(self, source):
        with pytest.raises(LexError):
            tokenize(source)

    def test_unknown_word_message(self):
        with pytest.raises(LexError, match="Unknown word: 'maybe'"):
            tokenize("true && maybe")
