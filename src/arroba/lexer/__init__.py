"""Highlighting lexer for the directive header line.

The lexer re-tokenizes the first non-blank line independently of the parser.
It is permissive (a superset of the directive grammar) and never raises:
anything it cannot classify yields an empty result rather than partial spans.

Usage:
    >>> from arroba.lexer import Lexer
    >>> for span in Lexer("\\n@option x=1").tokenize():
    ...     print(span)
    TokenSpan(At, '@', 1:2)
    TokenSpan(Ident, 'option', 2:8)
    TokenSpan(Ws, ' ', 8:9)
    TokenSpan(Ident, 'x', 9:10)
    TokenSpan(Equals, '=', 10:11)
    TokenSpan(Value, '1', 11:12)

"""

from arroba.lexer.core import Lexer, tokenize_first_line

__all__ = ["Lexer", "tokenize_first_line"]
