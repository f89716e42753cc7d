"""Candidate-line discovery and byte-offset accounting.

Both the parser and the lexer only ever look at the first non-blank line of a
buffer (the candidate line). This module finds that line and records where it
sits in the original buffer, so positions computed on the extracted line can
be mapped back to absolute positions.

Offsets are UTF-8 byte offsets. Lines are delimited by ``\\n`` only; a trailing
``\\r`` belongs to the line it ends and is counted when the line is skipped.

Thread Safety:
All functions are pure. CandidateLine is frozen and safe to share.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CandidateLine:
    """The first non-blank line of a buffer.

    Attributes:
        raw: Line content with trailing ``\\r`` removed (lexer input)
        text: ``raw`` with surrounding whitespace stripped (parser input)
        lineno: Line number in the buffer (1-indexed)
        index: ``str`` index of the line start in the buffer
        byte_base: UTF-8 byte length of every skipped line, terminators included

    """

    raw: str
    text: str
    lineno: int
    index: int
    byte_base: int

    @property
    def leading(self) -> str:
        """Whitespace stripped from the front of ``raw`` to produce ``text``."""
        return self.raw[: len(self.raw) - len(self.raw.lstrip())]

    def text_column(self, pos: int) -> int:
        """1-indexed column in ``raw`` of position ``pos`` within ``text``."""
        return len(self.leading) + pos + 1

    def text_offset(self, pos: int) -> int:
        """Absolute byte offset of position ``pos`` within ``text``."""
        return self.byte_base + byte_len(self.leading) + byte_len(self.text[:pos])


def byte_len(text: str) -> int:
    """UTF-8 length of ``text`` in bytes."""
    if text.isascii():
        return len(text)
    return len(text.encode("utf-8"))


def find_candidate_line(source: str) -> CandidateLine | None:
    """Find the first line whose stripped content is non-empty.

    Args:
        source: Full buffer text

    Returns:
        CandidateLine, or None when the buffer holds only blank lines

    Example:
        >>> line = find_candidate_line("\\n\\n@option x=1\\n")
        >>> line.raw, line.lineno, line.byte_base
        ('@option x=1', 3, 2)
    """
    byte_base = 0
    index = 0
    for lineno, line in enumerate(source.split("\n"), start=1):
        if line.strip():
            raw = line.rstrip("\r")
            return CandidateLine(
                raw=raw,
                text=raw.strip(),
                lineno=lineno,
                index=index,
                byte_base=byte_base,
            )
        byte_base += byte_len(line) + 1
        index += len(line) + 1
    return None


def to_absolute(candidate: CandidateLine, local_offset: int) -> int:
    """Map a byte offset within ``candidate.raw`` to the full buffer."""
    return candidate.byte_base + local_offset


def byte_to_index(source: str, byte_offset: int) -> int:
    """Map a UTF-8 byte offset in ``source`` to a ``str`` index.

    Raises:
        ValueError: If the offset is out of range or splits a character
    """
    if byte_offset < 0:
        msg = f"Negative byte offset: {byte_offset}"
        raise ValueError(msg)
    if source.isascii():
        if byte_offset > len(source):
            msg = f"Byte offset {byte_offset} past end of buffer"
            raise ValueError(msg)
        return byte_offset
    encoded = source.encode("utf-8")
    if byte_offset > len(encoded):
        msg = f"Byte offset {byte_offset} past end of buffer"
        raise ValueError(msg)
    try:
        return len(encoded[:byte_offset].decode("utf-8"))
    except UnicodeDecodeError:
        msg = f"Byte offset {byte_offset} is inside a multi-byte character"
        raise ValueError(msg) from None


__all__ = [
    "CandidateLine",
    "byte_len",
    "byte_to_index",
    "find_candidate_line",
    "to_absolute",
]
