"""Exception classes for Arroba.

The directive parser raises these; the lexer never does. Every parse
failure carries a ParseErrorKind so callers can branch without matching
message text, while the message itself stays human-readable.
"""

from __future__ import annotations

from enum import Enum


class ParseErrorKind(Enum):
    """Why the first non-blank line could not be parsed."""

    MISSING_MARKER = "missing_marker"
    MALFORMED = "malformed"
    TOO_LONG = "too_long"


class ArrobaError(Exception):
    """Base exception for all Arroba errors.

    Subclass this for specific error categories.
    """

    pass


class ParseError(ArrobaError):
    """Error while parsing the directive header line.

    Raised when the candidate line is not a valid directive.
    """

    kind: ParseErrorKind = ParseErrorKind.MALFORMED

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        offset: int | None = None,
    ) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            lineno: Line number of the candidate line in the buffer (1-indexed)
            col_offset: Column within the candidate line (1-indexed)
            offset: Absolute UTF-8 byte offset into the buffer
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.offset = offset

        location = ""
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class MissingMarkerError(ParseError):
    """The candidate line does not start with the ``@`` marker."""

    kind = ParseErrorKind.MISSING_MARKER

    def __init__(
        self,
        lineno: int | None = None,
        col_offset: int | None = None,
        offset: int | None = None,
    ) -> None:
        super().__init__(
            "First non-empty line must start with @",
            lineno=lineno,
            col_offset=col_offset,
            offset=offset,
        )


class MalformedDirectiveError(ParseError):
    """The marker is present but the line violates the directive grammar.

    Attributes:
        found: The offending text, or "end of line"
        expected: Description of what the grammar wanted at that column
    """

    kind = ParseErrorKind.MALFORMED

    def __init__(
        self,
        found: str,
        expected: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        offset: int | None = None,
    ) -> None:
        self.found = found
        self.expected = expected
        where = f" at column {col_offset}" if col_offset is not None else ""
        super().__init__(
            f"DSL parse error: unexpected {found}{where}, expected {expected}",
            lineno=lineno,
            col_offset=col_offset,
            offset=offset,
        )


class LineTooLongError(ParseError):
    """The candidate line exceeds the configured length cap."""

    kind = ParseErrorKind.TOO_LONG

    def __init__(self, length: int, limit: int, lineno: int | None = None) -> None:
        self.length = length
        self.limit = limit
        super().__init__(
            f"Header line is {length} characters long (limit {limit})",
            lineno=lineno,
        )
