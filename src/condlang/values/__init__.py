"""Structured values and their canonical text form.

Provides serialize()/deserialize() for the text encoding used to embed
values in condition expressions, and lookup_path() for reading a value
at a dotted/bracketed property path.
"""

from condlang.values.codec import (
    deserialize,
    parse_array,
    parse_key,
    parse_number,
    parse_object,
    parse_value,
    serialize,
)
from condlang.values.paths import lookup_path, parse_path
from condlang.values.types import UNDEFINED, Undefined

__all__ = [
    "UNDEFINED",
    "Undefined",
    "deserialize",
    "lookup_path",
    "parse_array",
    "parse_key",
    "parse_number",
    "parse_object",
    "parse_path",
    "parse_value",
    "serialize",
]
