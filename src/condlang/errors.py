"""Error types for the condition language and value paths."""

from __future__ import annotations


class ExpressionError(Exception):
    """Base class for condition language errors."""

    def __init__(
        self,
        message: str,
        source: str = "",
        position: int = 0,
        line: int = 1,
        column: int = 1,
    ) -> None:
        self.source = source
        self.position = position
        self.line = line
        self.column = column
        super().__init__(message)

    def format_error(self) -> str:
        """Render the message with the offending source line and a caret."""
        if not self.source:
            return str(self)
        lines = self.source.splitlines() or [""]
        text = lines[min(self.line, len(lines)) - 1]
        caret = " " * (self.column - 1) + "^"
        return f"{self}\n  {text}\n  {caret}"


class LexError(ExpressionError):
    """Raised when tokenization fails."""


class ParseError(ExpressionError):
    """Raised when parsing fails."""


class PathError(ExpressionError):
    """Raised when a property path is malformed or cannot be resolved."""
