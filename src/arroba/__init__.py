"""
Arroba — Directive header parser and line lexer

The first non-blank line of an editor buffer may carry a directive header
such as ``@option key=value count=10``. Arroba validates that line into a
typed result and, independently, tokenizes it into byte-offset spans for
syntax highlighting.

Quick Start:
    >>> from arroba import parse_first_line, tokenize_first_line
    >>> parse_first_line("@option key=value count=10")
    Directive(name='option', pairs=(('key', 'value'), ('count', '10')))
    >>> tokenize_first_line("\\n\\n@option x=1\\n")[0]
    TokenSpan(At, '@', 2:3)

    >>> # Both at once, with the parse error captured instead of raised
    >>> from arroba import analyze
    >>> result = analyze("option key=value")
    >>> result.error.kind
    <ParseErrorKind.MISSING_MARKER: 'missing_marker'>

Wire format for the rendering layer:
    >>> from arroba import highlight_first_line_json
    >>> highlight_first_line_json("@x")
    '[{"kind":"At","start":0,"end":1,"text":"@"},{"kind":"Ident","start":1,"end":2,"text":"x"}]'

Installation:
    pip install arroba              # Zero runtime dependencies
"""

from arroba.analysis import HeaderAnalysis, analyze
from arroba.cache import AnalysisCache, DictAnalysisCache, hash_config, hash_content
from arroba.completion import (
    Completion,
    DirectiveNameRegistry,
    DirectiveNameRegistryBuilder,
    complete_header,
    complete_line,
    create_default_registry,
)
from arroba.config import (
    HeaderConfig,
    get_header_config,
    header_config_context,
    reset_header_config,
    set_header_config,
)
from arroba.errors import (
    ArrobaError,
    LineTooLongError,
    MalformedDirectiveError,
    MissingMarkerError,
    ParseError,
    ParseErrorKind,
)
from arroba.lexer import Lexer, tokenize_first_line
from arroba.nodes import EMPTY, Directive, Empty, ParsedLine
from arroba.offsets import CandidateLine, byte_to_index, find_candidate_line
from arroba.parser import Parser, parse_first_line
from arroba.serialization import (
    analysis_to_json,
    highlight_first_line_json,
    spans_from_json,
    spans_to_json,
)
from arroba.tokens import TokenKind, TokenSpan

__version__ = "0.1.0"


# Grouped by category
__all__ = [  # noqa: RUF022
    # Version
    "__version__",
    # Core API
    "parse_first_line",
    "tokenize_first_line",
    "analyze",
    "highlight_first_line_json",
    # Results
    "EMPTY",
    "Directive",
    "Empty",
    "ParsedLine",
    "HeaderAnalysis",
    # Tokens
    "TokenKind",
    "TokenSpan",
    # Components
    "Lexer",
    "Parser",
    # Offsets
    "CandidateLine",
    "byte_to_index",
    "find_candidate_line",
    # Errors
    "ArrobaError",
    "ParseError",
    "ParseErrorKind",
    "MissingMarkerError",
    "MalformedDirectiveError",
    "LineTooLongError",
    # Serialization
    "analysis_to_json",
    "spans_from_json",
    "spans_to_json",
    # Cache
    "AnalysisCache",
    "DictAnalysisCache",
    "hash_config",
    "hash_content",
    # Completion
    "Completion",
    "DirectiveNameRegistry",
    "DirectiveNameRegistryBuilder",
    "complete_header",
    "complete_line",
    "create_default_registry",
    # Configuration (ContextVar-based)
    "HeaderConfig",
    "get_header_config",
    "set_header_config",
    "reset_header_config",
    "header_config_context",
]
