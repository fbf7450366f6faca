"""Structural equality for decoded values."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

logger = logging.getLogger(__name__)


def deep_equal(left: Any, right: Any) -> bool:
    """Compare two values by shape and contents.

    Mappings are equal when they hold the same keys with equal values;
    lists and tuples when they hold equal elements in the same order.
    Booleans only equal booleans; ints and floats compare numerically.

    Raises:
        RecursionError: On self-referencing containers.
    """
    if isinstance(left, Mapping) or isinstance(right, Mapping):
        if not (isinstance(left, Mapping) and isinstance(right, Mapping)):
            return False
        if left.keys() != right.keys():
            return False
        return all(deep_equal(left[key], right[key]) for key in left)

    if isinstance(left, (list, tuple)) or isinstance(right, (list, tuple)):
        if not (isinstance(left, (list, tuple)) and isinstance(right, (list, tuple))):
            return False
        if len(left) != len(right):
            return False
        return all(deep_equal(a, b) for a, b in zip(left, right))

    if isinstance(left, bool) or isinstance(right, bool):
        return type(left) is type(right) and left == right

    if isinstance(left, (int, float)) and isinstance(right, (int, float)):
        return left == right

    return type(left) is type(right) and left == right


def safe_deep_equal(left: Any, right: Any) -> bool:
    """deep_equal() that reports any comparison failure as "not equal"."""
    try:
        return deep_equal(left, right)
    except (RecursionError, TypeError, ValueError) as e:
        logger.debug("Structural comparison failed: %s", e)
        return False
