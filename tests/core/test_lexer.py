"""Tests for the SGF lexer."""

import pytest

from kifu.core.enums import TokenKind
from kifu.core.errors import LexError
from kifu.core.notation import tokenize


def _kinds(text: str) -> list[TokenKind]:
    return [token.kind for token in tokenize(text)]


def _values(text: str) -> list[str]:
    return [token.text for token in tokenize(text) if token.kind == TokenKind.PROP_VALUE]


class TestTokenKinds:
    def test_punctuation(self) -> None:
        assert _kinds("(;)") == [
            TokenKind.TREE_OPEN,
            TokenKind.NODE_START,
            TokenKind.TREE_CLOSE,
        ]

    def test_property(self) -> None:
        tokens = list(tokenize("(;SZ[19])"))
        assert tokens[2].kind == TokenKind.PROP_IDENT
        assert tokens[2].text == "SZ"
        assert tokens[3].kind == TokenKind.PROP_VALUE
        assert tokens[3].text == "19"

    def test_offsets(self) -> None:
        tokens = list(tokenize("(;B[aa])"))
        assert [token.offset for token in tokens] == [0, 1, 2, 3, 7]

    def test_whitespace_outside_values_skipped(self) -> None:
        assert _kinds("  (\n ;\tB [aa]\r\n)  ") == _kinds("(;B[aa])")

    def test_multiple_values(self) -> None:
        assert _values("(;AB[aa][bb][cc])") == ["aa", "bb", "cc"]

    def test_lowercase_inside_identifier_tolerated(self) -> None:
        tokens = list(tokenize("(;AddBlack[aa])"))
        assert tokens[2].text == "AddBlack"

    def test_lowercase_identifier_start(self) -> None:
        tokens = list(tokenize("(;b[aa])"))
        assert tokens[2].kind == TokenKind.PROP_IDENT
        assert tokens[2].text == "b"
        assert tokens[3].text == "aa"

    def test_lazy(self) -> None:
        stream = tokenize("(;B[aa]")
        assert next(stream).kind == TokenKind.TREE_OPEN


class TestValueEscapes:
    def test_escaped_bracket(self) -> None:
        assert _values(r"(;C[a\]b])") == ["a]b"]

    def test_escaped_backslash(self) -> None:
        assert _values(r"(;C[a\\b])") == ["a\\b"]

    def test_other_escape_passes_char(self) -> None:
        assert _values(r"(;C[a\:b])") == ["a:b"]

    def test_newline_kept(self) -> None:
        assert _values("(;C[line1\nline2])") == ["line1\nline2"]

    def test_soft_line_break_removed(self) -> None:
        assert _values("(;C[line1\\\nline2])") == ["line1line2"]

    def test_structural_chars_inside_value(self) -> None:
        assert _values("(;C[(;)])") == ["(;)"]

    def test_empty_value(self) -> None:
        assert _values("(;B[])") == [""]


class TestLexErrors:
    def test_unterminated_value(self) -> None:
        with pytest.raises(LexError, match="Unterminated") as excinfo:
            list(tokenize("(;C[never closed"))
        assert excinfo.value.offset == 3

    def test_unterminated_after_escape(self) -> None:
        with pytest.raises(LexError):
            list(tokenize("(;C[abc\\"))

    def test_punctuation_outside_value(self) -> None:
        with pytest.raises(LexError, match="Unexpected character") as excinfo:
            list(tokenize("(;B[aa]?)"))
        assert excinfo.value.offset == 7

    def test_digit_outside_value(self) -> None:
        with pytest.raises(LexError):
            list(tokenize("(;B1[aa])"))
