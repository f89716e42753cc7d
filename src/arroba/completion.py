"""Directive-name completion for the header line.

While the user types ``@opt`` the editor offers the known directive names
that start with ``opt``. This module holds the name registry and computes
the completion state; showing the overlay is the editor's job.

Thread Safety:
DirectiveNameRegistry and Completion are immutable. Safe to share.
Use DirectiveNameRegistryBuilder for mutable construction.

Example:
    >>> completion = complete_header("@mul")
    >>> completion.matches
    ('multi_option',)
    >>> completion.accept()
    '@multi_option'
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Literal

from arroba.charsets import IDENT_CONTINUE, IDENT_START, INLINE_WS, MARKER
from arroba.config import get_header_config
from arroba.offsets import find_candidate_line
from arroba.utils.logger import get_logger

logger = get_logger(__name__)

# Directive names the editor ships with
DEFAULT_DIRECTIVE_NAMES = ("option", "multi_option", "matching_pair")

CompletionStatus = Literal["exact", "partial", "unknown"]


class DirectiveNameRegistry:
    """Immutable, ordered set of known directive names.

    Thread Safety:
        Immutable after creation. Safe to share across threads.
    """

    __slots__ = ("_names", "_folded")

    def __init__(self, names: tuple[str, ...]) -> None:
        """Initialize registry with pre-validated names.

        Use DirectiveNameRegistryBuilder to create instances.
        """
        self._names = names
        self._folded = tuple(name.lower() for name in names)

    def starting_with(self, prefix: str) -> tuple[str, ...]:
        """Names starting with ``prefix``, case-insensitively, in registration order."""
        folded = prefix.lower()
        return tuple(
            name
            for name, lowered in zip(self._names, self._folded, strict=True)
            if lowered.startswith(folded)
        )

    def has(self, name: str) -> bool:
        """Check if ``name`` is registered (case-insensitive)."""
        return name.lower() in self._folded

    @property
    def names(self) -> tuple[str, ...]:
        """All registered names in registration order."""
        return self._names

    def __contains__(self, name: str) -> bool:
        """Support 'name in registry' syntax."""
        return self.has(name)

    def __len__(self) -> int:
        return len(self._names)


class DirectiveNameRegistryBuilder:
    """Mutable builder for DirectiveNameRegistry.

    Example:
        >>> builder = DirectiveNameRegistryBuilder()
        >>> registry = builder.register("option").register("layout").build()
        >>> registry.names
        ('option', 'layout')
    """

    __slots__ = ("_names",)

    def __init__(self) -> None:
        self._names: list[str] = []

    def register(self, name: str) -> DirectiveNameRegistryBuilder:
        """Register a directive name.

        Raises:
            ValueError: If the name is not an identifier or is already
                registered (case-insensitive)

        Returns:
            Self for method chaining
        """
        if not _is_ident(name):
            msg = f"Directive name {name!r} is not an identifier"
            raise ValueError(msg)
        if any(existing.lower() == name.lower() for existing in self._names):
            msg = f"Directive name {name!r} already registered"
            raise ValueError(msg)
        self._names.append(name)
        return self

    def register_all(self, names: tuple[str, ...] | list[str]) -> DirectiveNameRegistryBuilder:
        """Register several names in order."""
        for name in names:
            self.register(name)
        return self

    def build(self) -> DirectiveNameRegistry:
        """Build immutable registry from registered names."""
        return DirectiveNameRegistry(tuple(self._names))


def create_default_registry() -> DirectiveNameRegistry:
    """Registry holding DEFAULT_DIRECTIVE_NAMES."""
    return DirectiveNameRegistryBuilder().register_all(DEFAULT_DIRECTIVE_NAMES).build()


@dataclass(frozen=True, slots=True)
class Completion:
    """Completion state for the directive name being typed.

    Attributes:
        prefix: Text typed after ``@`` (up to the first space/tab)
        matches: Registered names starting with ``prefix``
        exact: True when a registered name equals ``prefix`` (case-insensitive)
        active: Index of the selected match

    """

    prefix: str
    matches: tuple[str, ...]
    exact: bool
    active: int = 0

    @property
    def status(self) -> CompletionStatus:
        """``exact``, ``partial``, or ``unknown`` when nothing matches."""
        if not self.matches:
            return "unknown"
        return "exact" if self.exact else "partial"

    @property
    def selected(self) -> str | None:
        """The currently selected name, if any."""
        if not self.matches:
            return None
        return self.matches[self.active]

    def cycle(self, forward: bool = True) -> Completion:
        """Move the selection one step, wrapping at either end."""
        if not self.matches:
            return self
        step = 1 if forward else -1
        return replace(self, active=(self.active + step) % len(self.matches))

    def accept(self) -> str | None:
        """Header text replacing the typed name, e.g. ``@option``."""
        selected = self.selected
        if selected is None:
            return None
        return f"{MARKER}{selected}"


def complete_line(line: str, registry: DirectiveNameRegistry | None = None) -> Completion | None:
    """Compute completion for a single header line.

    Args:
        line: Header line text; leading/trailing whitespace is ignored
        registry: Known names (config registry, then defaults, if None)

    Returns:
        Completion, or None when the line does not start with ``@``
    """
    text = line.strip()
    if not text.startswith(MARKER):
        return None
    if registry is None:
        registry = get_header_config().directive_names
    if registry is None:
        registry = _DEFAULT_REGISTRY

    rest = text[1:]
    end = 0
    while end < len(rest) and rest[end] not in INLINE_WS:
        end += 1
    prefix = rest[:end]

    matches = registry.starting_with(prefix)
    exact = registry.has(prefix)
    if not matches:
        logger.debug("No directive names match %r", prefix)
    return Completion(prefix=prefix, matches=matches, exact=exact)


def complete_header(
    source: str, registry: DirectiveNameRegistry | None = None
) -> Completion | None:
    """Compute completion for the first non-blank line of ``source``.

    Returns None when the buffer is blank or its first line has no marker.
    """
    candidate = find_candidate_line(source)
    if candidate is None:
        return None
    return complete_line(candidate.text, registry)


def _is_ident(name: str) -> bool:
    return (
        bool(name)
        and name[0] in IDENT_START
        and all(char in IDENT_CONTINUE for char in name[1:])
    )


_DEFAULT_REGISTRY = create_default_registry()

__all__ = [
    "DEFAULT_DIRECTIVE_NAMES",
    "Completion",
    "CompletionStatus",
    "DirectiveNameRegistry",
    "DirectiveNameRegistryBuilder",
    "complete_header",
    "complete_line",
    "create_default_registry",
]
