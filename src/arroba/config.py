"""ContextVar-based configuration for Arroba.

Provides thread-local configuration using Python's ContextVars (PEP 567).
The parser, lexer and completion helpers read the active config on each call.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from arroba.config import HeaderConfig, header_config_context
    from arroba import parse_first_line

    with header_config_context(HeaderConfig(max_line_length=256)):
        parsed = parse_first_line(buffer)

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from arroba.completion import DirectiveNameRegistry

# Default cap on the candidate line, in characters
DEFAULT_MAX_LINE_LENGTH = 4096


@dataclass(frozen=True, slots=True)
class HeaderConfig:
    """Immutable header configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        max_line_length: Longest candidate line (in characters) the parser and
            lexer will scan. Longer lines are rejected by the parser and lex
            to no spans. None disables the cap.
        directive_names: Registry of known directive names used for
            completion when no registry is passed explicitly.

    """

    max_line_length: int | None = DEFAULT_MAX_LINE_LENGTH
    directive_names: "DirectiveNameRegistry | None" = None

    @classmethod
    def from_dict(cls, config_dict: dict) -> "HeaderConfig":
        """Create HeaderConfig from dictionary.

        Only includes keys that are valid HeaderConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = HeaderConfig.from_dict({
            ...     "max_line_length": 512,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.max_line_length
            512

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)

    def exceeds_limit(self, length: int) -> bool:
        """Check whether a line of ``length`` characters is over the cap."""
        return self.max_line_length is not None and length > self.max_line_length


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: HeaderConfig = HeaderConfig()

_header_config: ContextVar[HeaderConfig] = ContextVar(
    "header_config",
    default=_DEFAULT_CONFIG,
)


def get_header_config() -> HeaderConfig:
    """Get current header configuration (thread-local)."""
    return _header_config.get()


def set_header_config(config: HeaderConfig) -> None:
    """Set header configuration for current context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _header_config.set(config)


def reset_header_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.
    """
    _header_config.set(_DEFAULT_CONFIG)


@contextmanager
def header_config_context(config: HeaderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> from arroba import tokenize_first_line
        >>> with header_config_context(HeaderConfig(max_line_length=8)):
        ...     tokenize_first_line("@option key=value")
        ()

    """
    previous = _header_config.get()
    _header_config.set(config)
    try:
        yield
    finally:
        _header_config.set(previous)


__all__ = [
    "DEFAULT_MAX_LINE_LENGTH",
    "HeaderConfig",
    "get_header_config",
    "set_header_config",
    "reset_header_config",
    "header_config_context",
]
