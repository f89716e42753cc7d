"""Longest-match scanner producing offset-tagged spans.

Token classes, tried at each position:
- At:     ``@``
- Equals: ``=``
- Ws:     run of space/tab
- Ident:  ``[A-Za-z_][A-Za-z0-9_]*``
- Value:  run of anything but space, tab, newline, ``@``, ``=``

Ident characters are a subset of Value characters, so at an identifier
start both classes match; the longer run wins and Ident wins a tie.
``v1.2`` is one Value, ``json`` is one Ident.

No regex in the hot path; every step consumes at least one character.

Thread Safety:
Lexer instances are single-use. Create one per buffer.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from arroba.charsets import (
    EQUALS,
    IDENT_CONTINUE,
    IDENT_START,
    INLINE_WS,
    MARKER,
    TOKEN_VALUE_STOP,
)
from arroba.config import get_header_config
from arroba.offsets import CandidateLine, byte_len, find_candidate_line
from arroba.tokens import TokenKind, TokenSpan
from arroba.utils.logger import get_logger

logger = get_logger(__name__)


class Lexer:
    """Scanner for the candidate line of a buffer.

    Spans carry absolute byte offsets into the full buffer: the byte length
    of every skipped line (newlines included) is added to each local offset.

    Usage:
        >>> [s.kind.value for s in Lexer("@option key=value").tokenize()]
        ['At', 'Ident', 'Ws', 'Ident', 'Equals', 'Ident']

    """

    __slots__ = (
        "_source",
        "_raw",
        "_raw_len",  # Cached len(raw)
        "_pos",
        "_byte_pos",  # Absolute byte offset of _pos
    )

    def __init__(self, source: str) -> None:
        """Initialize lexer with the full buffer.

        Args:
            source: Full buffer text (only the first non-blank line is lexed)
        """
        self._source = source
        self._raw = ""
        self._raw_len = 0
        self._pos = 0
        self._byte_pos = 0

    def tokenize(self) -> tuple[TokenSpan, ...]:
        """Tokenize the candidate line.

        Returns:
            Contiguous spans covering the whole line, or an empty tuple when
            the buffer is blank, the line is over the length cap, or some
            character cannot be classified.

        Complexity: O(n) where n = length of the candidate line
        """
        line = find_candidate_line(self._source)
        if line is None:
            return ()
        if get_header_config().exceeds_limit(len(line.raw)):
            logger.debug("Skipping highlight of line %d: %d chars", line.lineno, len(line.raw))
            return ()
        return self._scan_line(line)

    def _scan_line(self, line: CandidateLine) -> tuple[TokenSpan, ...]:
        self._raw = line.raw
        self._raw_len = len(line.raw)
        self._pos = 0
        self._byte_pos = line.byte_base

        spans: list[TokenSpan] = []
        while self._pos < self._raw_len:
            span = self._scan_token()
            if span is None:
                logger.debug(
                    "Unclassifiable %r at line %d col %d; no highlight",
                    self._raw[self._pos],
                    line.lineno,
                    self._pos + 1,
                )
                return ()
            spans.append(span)
        return tuple(spans)

    def _scan_token(self) -> TokenSpan | None:
        """Classify and consume one token at the current position."""
        pos = self._pos
        char = self._raw[pos]

        if char == MARKER:
            return self._commit(TokenKind.AT, pos + 1)
        if char == EQUALS:
            return self._commit(TokenKind.EQUALS, pos + 1)
        if char in INLINE_WS:
            return self._commit(TokenKind.WHITESPACE, self._run_end(pos, INLINE_WS))

        value_end = self._value_end(pos)
        if value_end == pos:
            return None
        if char in IDENT_START and self._run_end(pos, IDENT_CONTINUE) == value_end:
            return self._commit(TokenKind.IDENT, value_end)
        return self._commit(TokenKind.VALUE, value_end)

    def _run_end(self, pos: int, charset: frozenset[str]) -> int:
        """End of the run of ``charset`` characters starting at ``pos``."""
        raw = self._raw
        raw_len = self._raw_len
        while pos < raw_len and raw[pos] in charset:
            pos += 1
        return pos

    def _value_end(self, pos: int) -> int:
        raw = self._raw
        raw_len = self._raw_len
        while pos < raw_len and raw[pos] not in TOKEN_VALUE_STOP:
            pos += 1
        return pos

    def _commit(self, kind: TokenKind, end: int) -> TokenSpan:
        """Emit a span from the current position to ``end`` and advance."""
        text = self._raw[self._pos : end]
        start = self._byte_pos
        self._byte_pos = start + byte_len(text)
        self._pos = end
        return TokenSpan(kind=kind, start=start, end=self._byte_pos, text=text)


def tokenize_first_line(source: str) -> tuple[TokenSpan, ...]:
    """Produce highlighting spans for the first non-blank line of ``source``.

    Never raises; returns an empty tuple when there is nothing to highlight.

    Example:
        >>> spans = tokenize_first_line("\\n\\n@option x=1\\n")
        >>> spans[0].kind, spans[0].start, spans[0].text
        (<TokenKind.AT: 'At'>, 2, '@')
    """
    return Lexer(source).tokenize()


__all__ = ["Lexer", "tokenize_first_line"]
