"""Typed results of parsing the header line.

ParsedLine is a tagged union of two frozen dataclasses:

ParsedLine
├── Empty       (no non-blank line yet; not an error)
└── Directive   (``@name key=value ...``)

Pattern matching works naturally:

    match parse_first_line(buffer):
        case Empty():
            ...
        case Directive(name=name, pairs=pairs):
            ...

Thread Safety:
All results are frozen (immutable) and safe to share across threads.

"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Empty:
    """The buffer has no non-blank line, so no directive is configured yet."""


@dataclass(frozen=True, slots=True)
class Directive:
    """A successfully parsed header line.

    Pairs keep their source order. Duplicate keys are all retained; use
    ``values(key)`` to see every occurrence and pick a precedence.

    Attributes:
        name: Directive name (identifier after ``@``)
        pairs: Ordered ``(key, value)`` pairs

    Example:
        >>> d = Directive("option", (("key", "value"), ("count", "10")))
        >>> d.keys
        ('key', 'count')
        >>> d.values("count")
        ('10',)

    """

    name: str
    pairs: tuple[tuple[str, str], ...] = ()

    @property
    def keys(self) -> tuple[str, ...]:
        """Keys in source order, duplicates included."""
        return tuple(key for key, _ in self.pairs)

    def values(self, key: str) -> tuple[str, ...]:
        """All values given for ``key``, in source order."""
        return tuple(value for k, value in self.pairs if k == key)


ParsedLine = Empty | Directive

# Shared instance returned for blank buffers
EMPTY = Empty()

__all__ = ["EMPTY", "Directive", "Empty", "ParsedLine"]
