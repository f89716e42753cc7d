"""Run the parser and the lexer over one buffer.

The two components are deliberately independent: a parse error never
suppresses highlight spans, and an empty highlight never hides the parse
error. HeaderAnalysis bundles both outcomes for an editor that wants them
together.

Thread Safety:
HeaderAnalysis is frozen. analyze() is pure unless a cache is supplied, in
which case the cache's own thread-safety applies.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from arroba.cache import hash_config, hash_content
from arroba.config import get_header_config
from arroba.errors import ParseError
from arroba.lexer import tokenize_first_line
from arroba.nodes import ParsedLine
from arroba.parser import parse_first_line

if TYPE_CHECKING:
    from arroba.cache import AnalysisCache
    from arroba.tokens import TokenSpan


@dataclass(frozen=True, slots=True)
class HeaderAnalysis:
    """Parse result and highlight spans for one buffer.

    Exactly one of ``parsed`` and ``error`` is set.

    Attributes:
        parsed: EMPTY or a Directive when parsing succeeded
        error: The ParseError raised by the parser, if any
        spans: Highlight spans (possibly empty)

    """

    parsed: ParsedLine | None
    error: ParseError | None
    spans: tuple[TokenSpan, ...]

    @property
    def ok(self) -> bool:
        """True when the header parsed (including the EMPTY case)."""
        return self.error is None


def analyze(source: str, *, cache: AnalysisCache | None = None) -> HeaderAnalysis:
    """Parse and tokenize the first non-blank line of ``source``.

    Args:
        source: Full buffer text
        cache: Optional cache keyed by buffer and active config. On hit the
            stored analysis is returned; on miss the new analysis is stored.

    Returns:
        HeaderAnalysis

    Example:
        >>> result = analyze("@option key=")
        >>> result.ok, result.error.kind, len(result.spans)
        (False, <ParseErrorKind.MALFORMED: 'malformed'>, 5)
    """
    content_hash = config_hash = ""
    if cache is not None:
        content_hash = hash_content(source)
        config_hash = hash_config(get_header_config())
        cached = cache.get(content_hash, config_hash)
        if cached is not None:
            return cached

    parsed: ParsedLine | None = None
    error: ParseError | None = None
    try:
        parsed = parse_first_line(source)
    except ParseError as exc:
        error = exc

    result = HeaderAnalysis(parsed=parsed, error=error, spans=tokenize_first_line(source))

    if cache is not None:
        cache.put(content_hash, config_hash, result)
    return result


__all__ = ["HeaderAnalysis", "analyze"]
