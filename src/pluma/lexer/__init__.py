"""Primitive inline lexer for Pluma.

Usage:
    >>> from pluma.lexer import tokenize
    >>> for token, start, stop in tokenize("**hi**"):
    ...     print(token, start, stop)
    DelimiterToken(kind=<Delimiter.BOLD: '**'>) 0 2
    TextToken(content='hi') 2 4
    DelimiterToken(kind=<Delimiter.BOLD: '**'>) 4 6

"""

from pluma.lexer.core import TEXT_STOP_CHARS, next_token, tokenize

__all__ = ["TEXT_STOP_CHARS", "next_token", "tokenize"]
