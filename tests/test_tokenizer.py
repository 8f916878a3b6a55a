"""Unit tests for the WKT tokenizer.

The tokenizer only splits text, it knows nothing about geometries: keywords,
punctuation and numbers come out as plain lexemes with their offsets.
"""
from __future__ import annotations

import io

import pytest

from wktgeom.core.errors import ParseErrorKind, WKTParseError
from wktgeom.parsers.tokenizer import Lexeme, Tokenizer, tokenize

pytestmark = pytest.mark.unit


def _texts(source) -> list[str]:
    return [lexeme.text for lexeme in Tokenizer(source)]


class TestTokenBoundaries:
    """Whitespace and punctuation delimit tokens."""

    def test_point_literal(self) -> None:
        assert _texts("POINT (30 20)") == ["POINT", "(", "30", "20", ")"]

    def test_punctuation_without_spaces(self) -> None:
        assert _texts("LINESTRING(1 2,3 4)") == ["LINESTRING", "(", "1", "2", ",", "3", "4", ")"]

    def test_dimension_marker_is_a_word(self) -> None:
        assert _texts("POINT ZM (1 2 3 4)")[:3] == ["POINT", "ZM", "("]

    def test_newlines_and_tabs_are_whitespace(self) -> None:
        assert _texts("POINT\n\t(\r\n1   2 )") == ["POINT", "(", "1", "2", ")"]

    def test_empty_input_yields_nothing(self) -> None:
        assert _texts("") == []
        assert _texts("   \n ") == []


class TestNumbers:
    """Numeric literals never absorb their sign."""

    def test_minus_is_separate(self) -> None:
        assert _texts("-12.5") == ["-", "12.5"]

    def test_decimal_forms(self) -> None:
        assert _texts("1 1.5 .5 2.") == ["1", "1.5", ".5", "2."]

    def test_exponent_is_part_of_number(self) -> None:
        assert _texts("1e10 2.5E-3") == ["1e10", "2.5E-3"]

    def test_unknown_symbol_is_single_token(self) -> None:
        assert _texts("+1") == ["+", "1"]


class TestOffsets:
    """Each lexeme records where it starts in the input."""

    def test_offsets(self) -> None:
        lexemes = list(tokenize("POINT (30 20)"))
        assert lexemes[0] == Lexeme("POINT", 0)
        assert lexemes[1] == Lexeme("(", 6)
        assert lexemes[2] == Lexeme("30", 7)
        assert lexemes[4] == Lexeme(")", 12)


class TestSources:
    """Strings, bytes and streams are all accepted."""

    def test_text_stream(self) -> None:
        assert _texts(io.StringIO("POINT EMPTY")) == ["POINT", "EMPTY"]

    def test_bytes(self) -> None:
        assert _texts(b"POINT EMPTY") == ["POINT", "EMPTY"]

    def test_binary_stream(self) -> None:
        assert _texts(io.BytesIO(b"POINT (1 2)")) == ["POINT", "(", "1", "2", ")"]

    def test_invalid_utf8_is_parse_error(self) -> None:
        with pytest.raises(WKTParseError) as exc_info:
            Tokenizer("POINT (é ".encode("utf-8") + b"\xc3)")
        assert exc_info.value.kind == ParseErrorKind.UNEXPECTED_TOKEN
        assert exc_info.value.offset == 9

    def test_tokenize_is_lazy(self) -> None:
        lexemes = tokenize("POINT (1 2)")
        assert next(lexemes) == Lexeme("POINT", 0)
