"""Canonical text form for structured values.

serialize() renders a value as text that can be embedded in a condition
expression; deserialize() reads that text back. The grammar is deliberately
loose: objects are ``{ "key": value, ... }``, arrays are ``[value, ...]``
and anything else is a bare primitive token.

Parsing is best-effort. Malformed nesting yields a partial result and
never raises.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from typing import Any

from condlang.values.types import UNDEFINED

# Decimal literal accepted by JavaScript's Number(): 1, -2.5, .5, 5., 1e3
_DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_INTEGER_RE = re.compile(r"[+-]?\d+", re.ASCII)

# Prefixed integer literals (unsigned only)
_RADIX_RE = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")
_RADIX_BASES: dict[str, int] = {"x": 16, "o": 8, "b": 2}

_INFINITIES: dict[str, float] = {
    "Infinity": math.inf,
    "+Infinity": math.inf,
    "-Infinity": -math.inf,
}

_QUOTES = ('"', "'")

_MAX_DEPTH = 100  # Deeper containers are kept as raw text

_KEY_QUOTES_RE = re.compile(r"^[\"']|[\"']$")


def parse_number(text: str) -> int | float | None:
    """Convert numeric-looking text to a number.

    Args:
        text: Trimmed token text.

    Returns:
        An int for plain integer literals, a float for anything with a
        fraction, exponent or infinity (including integers too long for
        int()), or None when the text is not numeric-looking.
    """
    if not text:
        return None
    if text in _INFINITIES:
        return _INFINITIES[text]

    if _RADIX_RE.fullmatch(text):
        return int(text[2:], _RADIX_BASES[text[1].lower()])
    if _INTEGER_RE.fullmatch(text):
        try:
            return int(text)
        except ValueError:
            # Beyond int()'s digit limit; float() overflows to +-inf instead
            return float(text)
    if _DECIMAL_RE.fullmatch(text):
        return float(text)
    return None


def serialize(value: Any) -> str:
    """Render a value in canonical text form.

    Strings are emitted verbatim at the top level and quoted when nested
    inside an object or array, so they read back as strings.

    Args:
        value: Value to render.

    Returns:
        The canonical text form.
    """
    return _serialize(value, nested=False)


def _serialize(value: Any, nested: bool) -> str:
    if isinstance(value, Mapping):
        entries = [f'"{key}": {_serialize(item, True)}' for key, item in value.items()]
        return "{ " + ", ".join(entries) + " }"
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(_serialize(item, True) for item in value) + "]"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, int):
        return _format_int(value)
    if isinstance(value, str):
        return _quote(value) if nested else value
    return str(value)


def _format_int(value: int) -> str:
    try:
        return str(value)
    except ValueError:
        # Too many digits to render; the same number read back is infinite
        return "Infinity" if value > 0 else "-Infinity"


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return repr(value)


def _quote(text: str) -> str:
    if '"' in text and "'" not in text:
        return f"'{text}'"
    return f'"{text}"'


def deserialize(text: str, depth: int = 0) -> Any:
    """Read a value back from its canonical text form.

    Args:
        text: Canonical text, e.g. ``{ "a": [1, 2] }``.
        depth: Nesting level of text within the outermost value.

    Returns:
        A dict, list or primitive value. Containers nested more than
        _MAX_DEPTH levels deep are returned as their raw text.
    """
    trimmed = text.strip()

    is_object = trimmed.startswith("{") and trimmed.endswith("}")
    is_array = trimmed.startswith("[") and trimmed.endswith("]")
    if (is_object or is_array) and depth > _MAX_DEPTH:
        return trimmed
    if is_object:
        return parse_object(trimmed, depth)
    if is_array:
        return parse_array(trimmed, depth)
    return parse_value(trimmed)


class _Scanner:
    """Tracks quote and bracket state while walking a container body."""

    def __init__(self) -> None:
        self.in_string = False
        self.delimiter = ""
        self.depth = 0

    def feed(self, char: str) -> None:
        """Update quote and depth state for one character."""
        if char in _QUOTES:
            if self.in_string and self.delimiter == char:
                self.in_string = False
            elif not self.in_string:
                self.in_string = True
                self.delimiter = char

        if self.in_string:
            return
        if char in "{[":
            self.depth += 1
        elif char in "}]":
            self.depth -= 1

    @property
    def at_top_level(self) -> bool:
        return not self.in_string and self.depth == 0


def parse_object(text: str, depth: int = 0) -> dict[str, Any]:
    """Parse ``{ ... }`` text into a dict.

    A ``:`` at depth zero outside a string ends the key; a ``,`` at depth
    zero closes the pair. The final pair is kept only when both its raw key
    and raw value are non-empty.
    """
    result: dict[str, Any] = {}
    key = ""
    value = ""
    parsing_key = True
    scanner = _Scanner()

    for char in text[1:-1]:
        scanner.feed(char)

        if scanner.at_top_level and char == ":" and parsing_key:
            parsing_key = False
        elif scanner.at_top_level and char == "," and not parsing_key:
            result[parse_key(key)] = deserialize(value.strip(), depth + 1)
            key = ""
            value = ""
            parsing_key = True
        elif parsing_key:
            key += char
        else:
            value += char

    if key and value:
        result[parse_key(key)] = deserialize(value.strip(), depth + 1)

    return result


def parse_array(text: str, depth: int = 0) -> list[Any]:
    """Parse ``[ ... ]`` text into a list, splitting on top-level commas."""
    result: list[Any] = []
    value = ""
    scanner = _Scanner()

    for char in text[1:-1]:
        scanner.feed(char)

        if scanner.at_top_level and char == ",":
            result.append(deserialize(value.strip(), depth + 1))
            value = ""
        else:
            value += char

    if value.strip():
        result.append(deserialize(value.strip(), depth + 1))

    return result


def parse_value(text: str) -> Any:
    """Parse a primitive token.

    Unrecognized tokens are returned unchanged as strings.
    """
    if text == "undefined":
        return UNDEFINED
    if text == "null":
        return None
    if text == "true":
        return True
    if text == "false":
        return False

    number = parse_number(text)
    if number is not None:
        return number

    if text and text[0] in _QUOTES and text[0] == text[-1]:
        return text[1:-1]
    return text


def parse_key(text: str) -> str:
    """Trim a raw key and strip one surrounding quote from each end."""
    return _KEY_QUOTES_RE.sub("", text.strip())
