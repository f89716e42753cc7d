"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing (vs O(n) for strings)
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Identifiers are ASCII-only: ``[A-Za-z_][A-Za-z0-9_]*``.

Usage:
    from arroba.charsets import IDENT_START

    if char in IDENT_START:  # O(1) lookup
        ...
"""

from string import ascii_letters, digits

# Header marker that must open the first non-blank line
MARKER = "@"

# Pair separator
EQUALS = "="

# Identifier characters
IDENT_START: frozenset[str] = frozenset(ascii_letters + "_")
IDENT_CONTINUE: frozenset[str] = IDENT_START | frozenset(digits)

# Inline whitespace separating header tokens (newline is never inside a line)
INLINE_WS: frozenset[str] = frozenset(" \t")

# Characters that terminate a pair value in the directive grammar
VALUE_STOP: frozenset[str] = frozenset(" \t\n")

# Characters that terminate a Value token in the highlighting lexer
TOKEN_VALUE_STOP: frozenset[str] = VALUE_STOP | frozenset((MARKER, EQUALS))
