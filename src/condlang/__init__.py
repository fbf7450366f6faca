"""condlang - boolean condition expressions over embedded structured values.

Conditions such as ``{ "x": 1 } == { "x": 1 } && 5 > 3`` are reduced to
boolean literals and evaluated without ever executing code. Values travel
inside conditions in a canonical text form (see condlang.values), and
condition text can be escaped for templates that reserve its symbols
(see condlang.escaping).
"""

from condlang.conditions import evaluate_condition, solve
from condlang.errors import ExpressionError, LexError, ParseError, PathError
from condlang.escaping import escape, unescape
from condlang.values import UNDEFINED, deserialize, lookup_path, serialize

__version__ = "0.1.0"

__all__ = [
    "UNDEFINED",
    "ExpressionError",
    "LexError",
    "ParseError",
    "PathError",
    "deserialize",
    "escape",
    "evaluate_condition",
    "lookup_path",
    "serialize",
    "solve",
    "unescape",
]
