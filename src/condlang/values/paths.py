"""Property path lookup against structured values.

Paths use dot and bracket syntax, e.g. ``a.b[0].c`` or ``["key"][2]``.
Only this syntax is interpreted; paths are never evaluated as code.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from condlang.errors import PathError
from condlang.values.codec import serialize
from condlang.values.types import UNDEFINED

logger = logging.getLogger(__name__)

PathSegment = str | int


def parse_path(path: str) -> list[PathSegment]:
    """Split a property path into keys and indices.

    Args:
        path: Path such as ``a.b[0]["c d"]``.

    Returns:
        List of segments; string keys and integer indices.

    Raises:
        PathError: If the path is malformed.
    """
    source = path.strip()
    if not source:
        raise PathError("Empty path", source=path)

    segments: list[PathSegment] = []
    pos = 0
    length = len(source)

    # A path starts with an identifier or a bracket
    if source[0] != "[":
        name, pos = _scan_identifier(source, pos)
        segments.append(name)

    while pos < length:
        ch = source[pos]
        if ch == ".":
            name, pos = _scan_identifier(source, pos + 1)
            segments.append(name)
        elif ch == "[":
            segment, pos = _scan_bracket(source, pos)
            segments.append(segment)
        else:
            raise _error(f"Unexpected character: '{ch}'", source, pos)

    return segments


def _error(message: str, source: str, pos: int) -> PathError:
    return PathError(message, source=source, position=pos, column=pos + 1)


def _scan_identifier(source: str, pos: int) -> tuple[str, int]:
    """Scan an identifier: [A-Za-z_$][A-Za-z0-9_$]*"""
    end = pos
    while end < len(source) and (source[end].isalnum() or source[end] in "_$"):
        end += 1
    name = source[pos:end]
    if not name or name[0].isdigit():
        raise _error("Expected property name", source, pos)
    return name, end


def _scan_bracket(source: str, pos: int) -> tuple[PathSegment, int]:
    """Scan ``[123]``, ``["key"]`` or ``['key']`` starting at the ``[``."""
    close = source.find("]", pos)
    if close == -1:
        raise _error("Unterminated '['", source, pos)

    # Quoted keys may contain ']' themselves
    inner_start = pos + 1
    while inner_start < len(source) and source[inner_start] == " ":
        inner_start += 1
    if inner_start < len(source) and source[inner_start] in ('"', "'"):
        quote = source[inner_start]
        end_quote = source.find(quote, inner_start + 1)
        if end_quote == -1:
            raise _error(f"Unterminated string starting with {quote}", source, pos)
        close = source.find("]", end_quote)
        if close == -1 or source[end_quote + 1 : close].strip():
            raise _error("Expected ']' after quoted key", source, end_quote)
        return source[inner_start + 1 : end_quote], close + 1

    inner = source[pos + 1 : close].strip()
    if not (inner.isascii() and inner.isdigit()):
        raise _error(f"Invalid index: '{inner}'", source, pos)
    return int(inner), close + 1


def _step(value: Any, segment: PathSegment) -> Any:
    """Resolve one segment against a value."""
    if value is UNDEFINED or value is None:
        raise PathError(f"Cannot read property '{segment}' of {serialize(value)}")

    if isinstance(value, Mapping):
        if segment in value:
            return value[segment]
        return value.get(str(segment), UNDEFINED)

    if isinstance(value, (list, tuple, str)):
        if segment == "length":
            return len(value)
        if isinstance(segment, str):
            if not (segment.isascii() and segment.isdigit()):
                return UNDEFINED
            segment = int(segment)
        if segment < len(value):
            return value[segment]
        return UNDEFINED

    return UNDEFINED


def lookup_path(
    obj: Any,
    path: str | None = None,
    as_serialized: bool = True,
) -> Any:
    """Read the value at a property path.

    Missing keys and out-of-range indices resolve to ``UNDEFINED``. Stepping
    past ``UNDEFINED`` or ``None`` and malformed paths yield the text
    ``"undefined"`` whatever ``as_serialized`` says. So does a value whose
    text form cannot be rendered.

    Args:
        obj: Value to read from.
        path: Dot/bracket path. When empty or None, ``obj`` is returned as is.
        as_serialized: Return the canonical text form instead of the value.

    Returns:
        The value at the path, or its canonical text form.
    """
    if not path:
        return obj

    try:
        value = obj
        for segment in parse_path(path):
            value = _step(value, segment)
        return serialize(value) if as_serialized else value
    except (PathError, TypeError, ValueError, LookupError, RecursionError) as e:
        logger.debug("Path lookup failed for %r: %s", path, e)
        return serialize(UNDEFINED)
