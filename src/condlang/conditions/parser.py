"""Recursive descent parser for reduced boolean expressions.

A reduced expression is what the condition solver leaves behind once every
comparison has been replaced by a literal. The grammar is:

    expression = or_expr
    or_expr    = and_expr ('||' and_expr)*
    and_expr   = atom ('&&' atom)*
    atom       = '(' expression ')' | 'true' | 'false'
"""

from __future__ import annotations

from collections.abc import Callable

from condlang.conditions.lexer import tokenize
from condlang.conditions.tokens import Token, TokenType
from condlang.conditions.types import (
    AndExpression,
    BoolLiteral,
    BoolNode,
    OrExpression,
)
from condlang.errors import ParseError

_MAX_DEPTH = 50  # Guard against pathological nesting


def parse_boolean(source: str) -> BoolNode:
    """Parse a reduced boolean expression into a node tree.

    Args:
        source: The expression string to parse.

    Returns:
        The root node of the expression.

    Raises:
        LexError: If the string contains anything but literals, operators
            and parentheses.
        ParseError: If the expression is empty or malformed.
    """
    if not source or not source.strip():
        raise ParseError(
            "Empty expression",
            source=source,
            position=0,
        )

    tokens = tokenize(source)
    parser = _Parser(tokens, source)
    result = parser.parse_expression()

    # Ensure all tokens consumed
    if parser.current().type != TokenType.EOF:
        tok = parser.current()
        raise ParseError(
            f"Unexpected token '{tok.value}' after expression",
            source=source,
            position=tok.position,
            line=tok.line,
            column=tok.column,
        )

    return result


def evaluate_boolean(source: str) -> bool:
    """Parse and evaluate a reduced boolean expression.

    Raises:
        ExpressionError: If the expression cannot be parsed.
    """
    return parse_boolean(source).evaluate()


class _Parser:
    """Recursive descent parser for boolean expressions."""

    def __init__(self, tokens: list[Token], source: str) -> None:
        self._tokens = tokens
        self._source = source
        self._pos = 0
        self._depth = 0

    def current(self) -> Token:
        """Return the current token without consuming it."""
        return self._tokens[self._pos]

    def advance(self) -> Token:
        """Consume and return the current token."""
        tok = self._tokens[self._pos]
        if tok.type != TokenType.EOF:
            self._pos += 1
        return tok

    def expect(self, token_type: TokenType) -> Token:
        """Consume the current token, raising if it doesn't match."""
        tok = self.current()
        if tok.type != token_type:
            raise self._error(f"Expected {token_type.name}, got '{tok.value}'")
        return self.advance()

    def _error(self, message: str) -> ParseError:
        """Create a ParseError at the current position."""
        tok = self.current()
        return ParseError(
            message,
            source=self._source,
            position=tok.position,
            line=tok.line,
            column=tok.column,
        )

    # --- Grammar productions ---

    def parse_expression(self) -> BoolNode:
        """expression = or_expr"""
        return self._parse_or_expr()

    def _parse_or_expr(self) -> BoolNode:
        """or_expr = and_expr ('||' and_expr)*"""
        return self._parse_chain(TokenType.OP_OR, self._parse_and_expr, OrExpression)

    def _parse_and_expr(self) -> BoolNode:
        """and_expr = atom ('&&' atom)*"""
        return self._parse_chain(TokenType.OP_AND, self._parse_atom, AndExpression)

    def _parse_chain(
        self,
        separator: TokenType,
        parse_operand: Callable[[], BoolNode],
        node_type: type[AndExpression] | type[OrExpression],
    ) -> BoolNode:
        operands = [parse_operand()]
        while self.current().type == separator:
            self.advance()
            operands.append(parse_operand())
        if len(operands) == 1:
            return operands[0]
        return node_type(operands=tuple(operands))

    def _parse_atom(self) -> BoolNode:
        """atom = '(' expression ')' | 'true' | 'false'"""
        tok = self.current()

        if tok.type == TokenType.LPAREN:
            self._depth += 1
            if self._depth > _MAX_DEPTH:
                raise self._error(
                    f"Expression nesting exceeds maximum depth of {_MAX_DEPTH}"
                )
            self.advance()
            expr = self.parse_expression()
            self.expect(TokenType.RPAREN)
            self._depth -= 1
            return expr

        if tok.type == TokenType.BOOLEAN:
            self.advance()
            return BoolLiteral(value=tok.value == "true")

        if tok.type == TokenType.EOF:
            raise self._error("Unexpected end of expression")

        raise self._error(f"Expected 'true', 'false' or '(', got '{tok.value}'")
