"""Tests for absolute byte offsets of highlight spans.

Spans must index the full buffer, not the extracted line. These tests
cover skipped blank lines, CRLF terminators, leading indentation and
multi-byte characters.
"""

from arroba import byte_to_index, tokenize_first_line
from arroba.lexer import Lexer
from arroba.tokens import TokenKind


def _layout(source: str) -> list[tuple[str, int, int, str]]:
    return [(s.kind.value, s.start, s.end, s.text) for s in Lexer(source).tokenize()]


class TestSingleLine:
    """Offsets on a buffer whose first line is the header."""

    def test_simple_directive(self) -> None:
        assert _layout("@option x=1") == [
            ("At", 0, 1, "@"),
            ("Ident", 1, 7, "option"),
            ("Ws", 7, 8, " "),
            ("Ident", 8, 9, "x"),
            ("Equals", 9, 10, "="),
            ("Value", 10, 11, "1"),
        ]

    def test_leading_indentation_is_a_span(self) -> None:
        assert _layout("  @x") == [
            ("Ws", 0, 2, "  "),
            ("At", 2, 3, "@"),
            ("Ident", 3, 4, "x"),
        ]

    def test_trailing_whitespace_is_a_span(self) -> None:
        spans = tokenize_first_line("@x \t")
        assert spans[-1].kind == TokenKind.WHITESPACE
        assert spans[-1].text == " \t"
        assert spans[-1].end == 4

    def test_later_lines_do_not_contribute(self) -> None:
        spans = tokenize_first_line("@x\n@y z=1\n")
        assert [s.text for s in spans] == ["@", "x"]


class TestSkippedLines:
    """Offsets after blank lines."""

    def test_two_blank_lines(self) -> None:
        spans = tokenize_first_line("\n\n@option x=1\n")
        assert spans[0].start == 2
        assert spans[-1].end == 2 + len("@option x=1")

    def test_whitespace_only_lines(self) -> None:
        spans = tokenize_first_line("   \n\t\n@x")
        assert spans[0].start == len("   \n\t\n")

    def test_crlf_terminators_are_counted(self) -> None:
        source = "\r\n\r\n@x\r\n"
        spans = tokenize_first_line(source)
        assert spans[0].start == 4
        assert source[spans[0].start] == "@"

    def test_trailing_carriage_return_is_not_a_span(self) -> None:
        spans = tokenize_first_line("@x\r\nrest")
        assert [s.text for s in spans] == ["@", "x"]
        assert spans[-1].end == 2

    def test_multibyte_blank_line(self) -> None:
        # U+3000 IDEOGRAPHIC SPACE is whitespace and three bytes long
        spans = tokenize_first_line("\u3000\n@x")
        assert spans[0].start == 4


class TestMultibyteContent:
    """Offsets are UTF-8 byte offsets."""

    def test_non_ascii_value(self) -> None:
        spans = tokenize_first_line("@o k=café z=1")
        value = spans[5]
        assert value.kind == TokenKind.VALUE
        assert value.text == "café"
        assert (value.start, value.end) == (5, 10)
        assert spans[6].start == 10

    def test_byte_offsets_map_back_to_str_indices(self) -> None:
        source = "\u3000\n@o k=café z=1"
        for span in tokenize_first_line(source):
            start = byte_to_index(source, span.start)
            end = byte_to_index(source, span.end)
            assert source[start:end] == span.text
