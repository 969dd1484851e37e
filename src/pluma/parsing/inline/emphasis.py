"""Emphasis resolution for Pluma parser.

Resolves ambiguous run-length delimiters (*, **, ***, ~) without global
lookahead. An attempt declares a strength, checks the opener, then scans
forward token by token until the first compatible closer on the same line.

Compatibility (the same sets apply to openers and closers):
- ITALIC: *, ** or *** (any star run)
- BOLD: ** or ***
- BOLD_ITALIC: *** only
- STRIKETHROUGH: ~ only

Folding:
Every token from opener to closer, both included, is rendered through a
per-strength table saying how many characters of the run remain literal.
ITALIC consumes one star from a run, BOLD consumes two, BOLD_ITALIC and
STRIKETHROUGH consume their own run whole and leave other runs untouched.
Accumulated tokens are folded only on success; on failure the attempt's
token list is dropped and nothing is consumed.

Thread Safety:
All functions are pure. Each attempt owns its token list.

"""

from __future__ import annotations

from pluma.errors import NoMatch, Unterminated
from pluma.location import SourceLocation
from pluma.lexer import next_token, tokenize
from pluma.tokens import Delimiter, DelimiterToken, FinishToken, PrimitiveToken

_COMPATIBLE: dict[Delimiter, frozenset[Delimiter]] = {
    Delimiter.ITALIC: frozenset(
        {Delimiter.ITALIC, Delimiter.BOLD, Delimiter.BOLD_ITALIC}
    ),
    Delimiter.BOLD: frozenset({Delimiter.BOLD, Delimiter.BOLD_ITALIC}),
    Delimiter.BOLD_ITALIC: frozenset({Delimiter.BOLD_ITALIC}),
    Delimiter.STRIKETHROUGH: frozenset({Delimiter.STRIKETHROUGH}),
}

# strength -> delimiter kind -> literal leftover
_FOLD: dict[Delimiter, dict[Delimiter, str]] = {
    Delimiter.ITALIC: {
        Delimiter.ITALIC: "",
        Delimiter.BOLD: "*",
        Delimiter.BOLD_ITALIC: "**",
        Delimiter.STRIKETHROUGH: "~",
    },
    Delimiter.BOLD: {
        Delimiter.ITALIC: "*",
        Delimiter.BOLD: "",
        Delimiter.BOLD_ITALIC: "*",
        Delimiter.STRIKETHROUGH: "~",
    },
    Delimiter.BOLD_ITALIC: {
        Delimiter.ITALIC: "*",
        Delimiter.BOLD: "**",
        Delimiter.BOLD_ITALIC: "",
        Delimiter.STRIKETHROUGH: "~",
    },
    Delimiter.STRIKETHROUGH: {
        Delimiter.ITALIC: "*",
        Delimiter.BOLD: "**",
        Delimiter.BOLD_ITALIC: "***",
        Delimiter.STRIKETHROUGH: "",
    },
}


def can_open(token: PrimitiveToken, strength: Delimiter) -> bool:
    """Whether token may open (or close) a span of the given strength."""
    return isinstance(token, DelimiterToken) and token.kind in _COMPATIBLE[strength]


def fold(tokens: list[PrimitiveToken], strength: Delimiter) -> str:
    """Fold accumulated tokens into literal content for a strength.

    Args:
        tokens: Tokens from opener to closer, both included
        strength: Declared strength of the resolved span

    Returns:
        Concatenated literal text in encounter order.

    """
    table = _FOLD[strength]
    parts: list[str] = []
    for token in tokens:
        if isinstance(token, DelimiterToken):
            parts.append(table[token.kind])
        else:
            parts.append(token.literal)
    return "".join(parts)


def resolve_emphasis(
    text: str,
    pos: int,
    strength: Delimiter,
    end: int | None = None,
    *,
    location: SourceLocation | None = None,
) -> tuple[str, int]:
    """Resolve a span of the declared strength opening at pos.

    Args:
        text: Source text
        pos: Position of the opening delimiter run
        strength: Declared strength to close
        end: End of the slice (defaults to len(text))
        location: Location of the line being scanned, recorded on failures

    Returns:
        (content, next_pos) where content is the folded literal text and
        next_pos is just past the closing delimiter.

    Raises:
        NoMatch: If text at pos does not open the declared strength.
        Unterminated: If the line (or slice) ends before a compatible closer.

    Example:
        >>> resolve_emphasis("***hi*", 0, Delimiter.ITALIC)
        ('**hi', 6)

    """
    if end is None:
        end = len(text)

    opener, start = next_token(text, pos, end)
    if not can_open(opener, strength):
        raise NoMatch(f"no {strength.name.lower()} opener", pos, location)

    tokens: list[PrimitiveToken] = [opener]
    for token, _, stop in tokenize(text, start, end):
        if isinstance(token, FinishToken):
            break
        tokens.append(token)
        if can_open(token, strength):
            return fold(tokens, strength), stop

    raise Unterminated(f"unterminated {strength.name.lower()} span", pos, location)
