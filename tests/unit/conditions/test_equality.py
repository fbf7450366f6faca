"""Tests for structural equality."""

import pytest

from condlang.conditions.equality import deep_equal, safe_deep_equal
from condlang.values import UNDEFINED


class TestDeepEqual:
    @pytest.mark.parametrize(
        "left,right",
        [
            (1, 1),
            (1, 1.0),
            ("a", "a"),
            (None, None),
            (UNDEFINED, UNDEFINED),
            (True, True),
            ([1, [2, 3]], [1, [2, 3]]),
            ([1, 2], (1, 2)),
            ({"a": 1, "b": [1]}, {"b": [1], "a": 1}),
            ({"x": {"y": None}}, {"x": {"y": None}}),
        ],
    )
    def test_equal(self, left, right):
        assert deep_equal(left, right) is True

    @pytest.mark.parametrize(
        "left,right",
        [
            (1, 2),
            ("1", 1),
            (True, 1),
            (False, 0),
            (None, UNDEFINED),
            (None, False),
            ([1, 2], [2, 1]),
            ([1], [1, 1]),
            ({"a": 1}, {"a": 1, "b": 2}),
            ({"a": 1}, {"a": "1"}),
            ({"a": 1}, [("a", 1)]),
            ([], {}),
        ],
    )
    def test_not_equal(self, left, right):
        assert deep_equal(left, right) is False


class TestSafeDeepEqual:
    def test_matches_deep_equal(self):
        assert safe_deep_equal({"a": [1]}, {"a": [1]}) is True
        assert safe_deep_equal({"a": [1]}, {"a": [2]}) is False

    def test_self_referencing_structure_is_not_equal(self):
        left: list = []
        left.append(left)
        right: list = []
        right.append(right)
        assert safe_deep_equal(left, right) is False
