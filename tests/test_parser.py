"""Tests for the directive grammar: accepted forms and error details."""

import pytest

from arroba import Directive, parse_first_line
from arroba.errors import MalformedDirectiveError, MissingMarkerError, ParseErrorKind
from arroba.parser import Parser


def _malformed(source: str) -> MalformedDirectiveError:
    with pytest.raises(MalformedDirectiveError) as exc_info:
        parse_first_line(source)
    return exc_info.value


class TestAcceptedForms:
    """Lines the grammar accepts."""

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("@a", Directive("a")),
            ("@_private", Directive("_private")),
            ("@opt2", Directive("opt2")),
            ("@opt k=v", Directive("opt", (("k", "v"),))),
            ("@opt k = v", Directive("opt", (("k", "v"),))),
            ("@opt k\t=\tv", Directive("opt", (("k", "v"),))),
            ("@opt   k=v   j=w", Directive("opt", (("k", "v"), ("j", "w")))),
            ("   @opt k=v   ", Directive("opt", (("k", "v"),))),
            ("@opt k=v\r\n", Directive("opt", (("k", "v"),))),
            ("@opt k=a=b", Directive("opt", (("k", "a=b"),))),
            ("@opt k=@home", Directive("opt", (("k", "@home"),))),
            ('@opt k="quoted"', Directive("opt", (("k", '"quoted"'),))),
            ("@opt k=café", Directive("opt", (("k", "café"),))),
        ],
    )
    def test_accepts(self, source: str, expected: Directive) -> None:
        assert parse_first_line(source) == expected

    def test_duplicate_keys_are_all_kept(self) -> None:
        result = parse_first_line("@opt k=1 j=2 k=3")
        assert isinstance(result, Directive)
        assert result.pairs == (("k", "1"), ("j", "2"), ("k", "3"))
        assert result.keys == ("k", "j", "k")
        assert result.values("k") == ("1", "3")
        assert result.values("missing") == ()

    def test_pattern_matching(self) -> None:
        match parse_first_line("@layout cols=2"):
            case Directive(name=name, pairs=pairs):
                assert name == "layout"
                assert pairs == (("cols", "2"),)
            case _:
                pytest.fail("expected a Directive")


class TestMalformed:
    """Lines with a marker that violate the grammar."""

    def test_empty_value_reports_end_of_line(self) -> None:
        err = _malformed("@option key=")
        assert err.found == "end of line"
        assert err.expected == "value"
        assert err.col_offset == 13
        assert err.kind is ParseErrorKind.MALFORMED
        assert err.message.startswith("DSL parse error: ")

    def test_missing_equals(self) -> None:
        err = _malformed("@option key value")
        assert err.expected == "'='"
        assert err.found == "'value'"
        assert err.col_offset == 13

    def test_dangling_key(self) -> None:
        err = _malformed("@option key")
        assert err.expected == "'='"
        assert err.found == "end of line"

    def test_marker_only(self) -> None:
        err = _malformed("@")
        assert err.expected == "directive name"
        assert err.col_offset == 2

    def test_name_must_be_identifier(self) -> None:
        err = _malformed("@1option")
        assert err.expected == "directive name"
        assert err.found == "'1option'"

    def test_key_must_be_identifier(self) -> None:
        err = _malformed("@option 9=x")
        assert err.expected == "key"
        assert err.col_offset == 9

    def test_trailing_garbage_after_name(self) -> None:
        err = _malformed("@option=x")
        assert err.expected == "whitespace or end of line"
        assert err.found == "'=x'"

    def test_stray_token_after_pair(self) -> None:
        err = _malformed("@option a=1 -- b=2")
        assert err.expected == "key"
        assert err.found == "'--'"

    def test_column_counts_leading_whitespace(self) -> None:
        err = _malformed("  @option key=")
        assert err.col_offset == 15

    def test_location_points_into_buffer(self) -> None:
        err = _malformed("\n\n@option key=")
        assert err.lineno == 3
        assert err.offset == 2 + len("@option key=")
        assert str(err).startswith("3:13 ")

    def test_long_token_is_truncated(self) -> None:
        err = _malformed("@option " + "-" * 50)
        assert len(err.found) <= 22
        assert err.found.endswith("...'")


class TestMissingMarker:
    """Candidate lines without the marker."""

    def test_location(self) -> None:
        with pytest.raises(MissingMarkerError) as exc_info:
            parse_first_line("\n  option key=value")
        err = exc_info.value
        assert err.kind is ParseErrorKind.MISSING_MARKER
        assert err.lineno == 2
        assert err.col_offset == 3
        assert err.offset == 3

    def test_marker_later_in_line_does_not_count(self) -> None:
        with pytest.raises(MissingMarkerError):
            parse_first_line("x @option")

    def test_later_lines_are_ignored(self) -> None:
        with pytest.raises(MissingMarkerError):
            parse_first_line("text\n@option")


class TestParserInstances:
    """Parser objects are single-use but repeatable."""

    def test_parse_twice_same_instance(self) -> None:
        parser = Parser("@opt k=v")
        assert parser.parse() == parser.parse()

    def test_separate_instances_independent(self) -> None:
        assert Parser("@a").parse() == Directive("a")
        assert Parser("@b x=1").parse() == Directive("b", (("x", "1"),))
