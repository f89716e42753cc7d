"""Recursive descent parser for the directive header line.

Grammar (applied to the stripped candidate line):

    directive := '@' ident (ws+ pair)* ws* EOF
    pair      := ident ws* '=' ws* value
    ident     := [A-Za-z_][A-Za-z0-9_]*
    value     := (any char except space, tab, newline)+
    ws        := ' ' | '\\t'

The whole line must be consumed; there is no partial result. Every input
either yields EMPTY, a complete Directive, or raises a ParseError subclass.

Thread Safety:
Parser instances are single-use. Create one per buffer. All state is
instance-local; configuration is read from ContextVar (thread-local).

"""

from __future__ import annotations

from arroba.charsets import (
    EQUALS,
    IDENT_CONTINUE,
    IDENT_START,
    INLINE_WS,
    MARKER,
    VALUE_STOP,
)
from arroba.config import get_header_config
from arroba.errors import LineTooLongError, MalformedDirectiveError, MissingMarkerError
from arroba.nodes import EMPTY, Directive, ParsedLine
from arroba.offsets import CandidateLine, find_candidate_line
from arroba.utils.logger import get_logger

logger = get_logger(__name__)

# Longest token text quoted in an error message
_MAX_FOUND_LEN = 20


class Parser:
    """Recursive descent parser for the header line.

    Usage:
        >>> Parser("@option key=value count=10").parse()
        Directive(name='option', pairs=(('key', 'value'), ('count', '10')))

    Thread Safety:
        Parser instances are single-use and not thread-safe. Create one per
        parse operation. The result is immutable and thread-safe.

    """

    __slots__ = (
        "_source",
        "_line",
        "_text",
        "_text_len",  # Cached len(text)
        "_pos",
    )

    def __init__(self, source: str) -> None:
        """Initialize parser with the full buffer.

        Args:
            source: Full buffer text (only the first non-blank line is parsed)
        """
        self._source = source
        self._line: CandidateLine | None = None
        self._text = ""
        self._text_len = 0
        self._pos = 0

    def parse(self) -> ParsedLine:
        """Parse the first non-blank line.

        Returns:
            EMPTY when the buffer is blank, otherwise a Directive

        Raises:
            MissingMarkerError: The candidate line does not start with ``@``
            MalformedDirectiveError: The line violates the grammar
            LineTooLongError: The line is longer than the configured cap
        """
        line = find_candidate_line(self._source)
        if line is None:
            return EMPTY

        config = get_header_config()
        if config.exceeds_limit(len(line.raw)):
            logger.debug("Rejecting header line %d: %d chars", line.lineno, len(line.raw))
            raise LineTooLongError(len(line.raw), config.max_line_length, lineno=line.lineno)

        self._line = line
        self._text = line.text
        self._text_len = len(line.text)
        self._pos = 0

        if not self._text.startswith(MARKER):
            logger.debug("Header line %d has no marker", line.lineno)
            raise MissingMarkerError(
                lineno=line.lineno,
                col_offset=line.text_column(0),
                offset=line.text_offset(0),
            )
        self._pos = 1

        name = self._parse_ident("directive name")
        pairs: list[tuple[str, str]] = []
        while True:
            had_ws = self._skip_ws()
            if self._at_end():
                break
            if not had_ws:
                raise self._error("whitespace or end of line")
            pairs.append(self._parse_pair())

        return Directive(name=name, pairs=tuple(pairs))

    # =========================================================================
    # Grammar rules
    # =========================================================================

    def _parse_pair(self) -> tuple[str, str]:
        """pair := ident ws* '=' ws* value"""
        key = self._parse_ident("key")
        self._skip_ws()
        if self._peek() != EQUALS:
            raise self._error("'='")
        self._pos += 1
        self._skip_ws()
        return key, self._parse_value()

    def _parse_ident(self, what: str) -> str:
        """ident := [A-Za-z_][A-Za-z0-9_]*"""
        start = self._pos
        if self._peek() not in IDENT_START:
            raise self._error(what)
        pos = start + 1
        text = self._text
        text_len = self._text_len
        while pos < text_len and text[pos] in IDENT_CONTINUE:
            pos += 1
        self._pos = pos
        return text[start:pos]

    def _parse_value(self) -> str:
        """value := (any char except space, tab, newline)+"""
        start = self._pos
        pos = start
        text = self._text
        text_len = self._text_len
        while pos < text_len and text[pos] not in VALUE_STOP:
            pos += 1
        if pos == start:
            raise self._error("value")
        self._pos = pos
        return text[start:pos]

    # =========================================================================
    # Navigation helpers
    # =========================================================================

    def _peek(self) -> str:
        """Current character, or empty string at end of line."""
        if self._pos >= self._text_len:
            return ""
        return self._text[self._pos]

    def _at_end(self) -> bool:
        return self._pos >= self._text_len

    def _skip_ws(self) -> bool:
        """Skip spaces and tabs. Returns True if any were skipped."""
        start = self._pos
        while self._pos < self._text_len and self._text[self._pos] in INLINE_WS:
            self._pos += 1
        return self._pos > start

    def _error(self, expected: str) -> MalformedDirectiveError:
        """Build an error describing the token at the current position."""
        line = self._line
        assert line is not None
        if self._at_end():
            found = "end of line"
        else:
            end = self._pos
            while end < self._text_len and self._text[end] not in VALUE_STOP:
                end += 1
            token = self._text[self._pos : max(end, self._pos + 1)]
            if len(token) > _MAX_FOUND_LEN:
                token = token[: _MAX_FOUND_LEN - 3] + "..."
            found = repr(token)
        logger.debug("Header line %d rejected: %s, expected %s", line.lineno, found, expected)
        return MalformedDirectiveError(
            found,
            expected,
            lineno=line.lineno,
            col_offset=line.text_column(self._pos),
            offset=line.text_offset(self._pos),
        )


def parse_first_line(source: str) -> ParsedLine:
    """Parse the first non-blank line of ``source`` as a directive header.

    Args:
        source: Full buffer text

    Returns:
        EMPTY when the buffer is blank, otherwise a Directive

    Raises:
        ParseError: MissingMarkerError, MalformedDirectiveError or
            LineTooLongError describing why the line was rejected

    Example:
        >>> parse_first_line("@option key=value count=10")
        Directive(name='option', pairs=(('key', 'value'), ('count', '10')))
        >>> parse_first_line("\\n  \\n")
        Empty()
    """
    return Parser(source).parse()


__all__ = ["Parser", "parse_first_line"]
