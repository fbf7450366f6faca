"""Tests for reversible symbol escaping."""

import pytest

from condlang.escaping import ESCAPE_SEQUENCES, escape, unescape


class TestEscape:
    def test_brackets(self):
        assert escape("a[0]") == "a@left0@right"

    def test_at_sign(self):
        assert escape("a@b") == "a@atb"

    def test_colon_and_semicolon(self):
        assert escape("k: v; w") == "k@colon v@semi w"

    def test_operators(self):
        assert escape("x >= 1 && y <= 2 || $z") == (
            "x @higher@equal 1 @and y @lower@equal 2 @or @dollarz"
        )

    def test_equality(self):
        assert escape("a == b") == "a @equal@equal b"

    def test_single_pipe_and_ampersand_untouched(self):
        assert escape("a | b & c") == "a | b & c"

    def test_plain_text_untouched(self):
        assert escape("hello (world), 42!") == "hello (world), 42!"

    def test_every_reserved_symbol_has_a_token(self):
        symbols = [symbol for symbol, _ in ESCAPE_SEQUENCES]
        assert symbols == ["@", "]", "[", ";", ":", "=", "||", "&&", ">", "<", "$"]


class TestUnescape:
    def test_restores_symbols(self):
        assert unescape("a@left0@right") == "a[0]"

    def test_case_insensitive(self):
        assert unescape("@LEFT0@Right @AND @Or") == "[0] && ||"

    def test_dollar_is_literal(self):
        assert unescape("@dollar1") == "$1"

    def test_unknown_tokens_untouched(self):
        assert unescape("@unknown @ta") == "@unknown @ta"


class TestRoundTrip:
    @pytest.mark.parametrize(
        "text",
        [
            "",
            "@",
            "[]",
            "a[0].b == 1 && c[1] != 2",
            "x >= 1 || y <= 2",
            "key: value; other: $var",
            "{ \"a\": [1, 2] } == { \"a\": [1, 2] }",
            "@@[[]]::;;==||&&>><<$$",
            "mail@example.com",
        ],
    )
    def test_unescape_reverses_escape(self, text):
        assert unescape(escape(text)) == text

    def test_escaped_text_has_no_reserved_symbols(self):
        escaped = escape("a[0] == b; c: d || e && f > g < h $")
        for symbol in ("]", "[", ";", ":", "=", "||", "&&", ">", "<", "$"):
            assert symbol not in escaped

    def test_literal_token_in_input(self):
        """'@' is restored last, so a literal token survives the round trip."""
        assert escape("@right") == "@atright"
        assert unescape(escape("@right")) == "@right"


class TestNotIdempotent:
    def test_double_escape_escapes_tokens(self):
        assert escape(escape("[")) == "@atleft"

    def test_single_unescape_undoes_one_level(self):
        assert unescape(escape(escape("["))) == "@left"
