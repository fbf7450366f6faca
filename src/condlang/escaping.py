"""Reversible escaping of condition symbols.

Condition text often has to pass through an outer template that reserves
brackets, colons, comparison and logical operators. escape() swaps each
reserved symbol for an ``@word`` token; unescape() swaps them back.
"""

from __future__ import annotations

import re

# Applied in this order by escape(). '@' must go first so the tokens
# introduced afterwards are not escaped again.
ESCAPE_SEQUENCES: tuple[tuple[str, str], ...] = (
    ("@", "@at"),
    ("]", "@right"),
    ("[", "@left"),
    (";", "@semi"),
    (":", "@colon"),
    ("=", "@equal"),
    ("||", "@or"),
    ("&&", "@and"),
    (">", "@higher"),
    ("<", "@lower"),
    ("$", "@dollar"),
)

# unescape() walks the table backwards; '@at' is restored last
_UNESCAPE_PATTERNS: tuple[tuple[re.Pattern[str], str], ...] = tuple(
    (re.compile(re.escape(token), re.IGNORECASE), symbol)
    for symbol, token in reversed(ESCAPE_SEQUENCES)
)


def escape(text: str) -> str:
    """Replace reserved symbols with their ``@word`` tokens.

    Not idempotent: escaping twice escapes the ``@`` of every token.
    """
    for symbol, token in ESCAPE_SEQUENCES:
        text = text.replace(symbol, token)
    return text


def unescape(text: str) -> str:
    """Restore reserved symbols from their tokens, ignoring token case."""
    for pattern, symbol in _UNESCAPE_PATTERNS:
        # Callable replacement keeps symbols like '$' out of re's template syntax
        text = pattern.sub(lambda _match, symbol=symbol: symbol, text)
    return text
