"""TokenKind and TokenSpan definitions for the header lexer.

The lexer produces a sequence of TokenSpan objects used purely for
presentation. Each span has a kind, the exact matched text, and absolute
UTF-8 byte offsets into the full buffer (not into the extracted line).

Thread Safety:
TokenSpan is frozen (immutable) and safe to share across threads.
TokenKind is an enum (inherently immutable).

"""

from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    """Token kinds produced by the lexer.

    Values are the stable wire tags consumed by the rendering layer.

    """

    AT = "At"  # @
    IDENT = "Ident"  # [A-Za-z_][A-Za-z0-9_]*
    EQUALS = "Equals"  # =
    WHITESPACE = "Ws"  # run of space/tab
    VALUE = "Value"  # run of anything but space, tab, newline, @, =


@dataclass(frozen=True, slots=True)
class TokenSpan:
    """A classified, offset-tagged substring of the candidate line.

    Attributes:
        kind: The token kind
        start: Absolute start byte offset in the buffer
        end: Absolute end byte offset in the buffer (exclusive)
        text: The exact matched text; its UTF-8 length is ``end - start``

    """

    kind: TokenKind
    start: int
    end: int
    text: str

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.text
        if len(val) > 20:
            val = val[:17] + "..."
        return f"TokenSpan({self.kind.value}, {val!r}, {self.start}:{self.end})"

    def __len__(self) -> int:
        """Length of the span in bytes."""
        return self.end - self.start
