"""Span assembly for Pluma parser.

Turns one line of inline content into an ordered tuple of spans using
priority-ordered backtracking. At each position the alternatives are tried
in a fixed order and the first success wins:

    Link > Strikethrough > BoldItalic > Bold > Italic > Text

A failed alternative raises NoMatch and consumes nothing, so the next one
starts from the same position. Text is the total fallback: it always
consumes at least one token, which guarantees forward progress and keeps
every unmatched delimiter character as literal text.

Thread Safety:
All functions are pure apart from reading the ContextVar config.
Safe to call concurrently from multiple threads.

"""

from __future__ import annotations

from pluma.config import ParseConfig, get_parse_config
from pluma.errors import EmptyMatch, NoMatch
from pluma.lexer import tokenize
from pluma.location import SourceLocation
from pluma.nodes import (
    Bold,
    BoldItalic,
    Inline,
    Italic,
    Link,
    Strikethrough,
    Text,
)
from pluma.parsing.inline.emphasis import resolve_emphasis
from pluma.parsing.inline.links import parse_link
from pluma.tokens import Delimiter, FinishToken

# Emphasis alternatives in priority order
_EMPHASIS_SPANS: tuple[tuple[Delimiter, type[Strikethrough | BoldItalic | Bold | Italic]], ...] = (
    (Delimiter.STRIKETHROUGH, Strikethrough),
    (Delimiter.BOLD_ITALIC, BoldItalic),
    (Delimiter.BOLD, Bold),
    (Delimiter.ITALIC, Italic),
)


def _try_markup(
    text: str,
    pos: int,
    end: int,
    config: ParseConfig,
    location: SourceLocation,
) -> tuple[Inline, int] | None:
    """Try every alternative except Text at pos.

    Returns:
        (span, next_pos) for the first alternative that matches, else None.

    """
    char = text[pos]

    if char == "[" and config.links_enabled:
        try:
            (label, destination, title), stop = parse_link(text, pos, end, location=location)
        except NoMatch:
            pass
        else:
            return Link(
                location=location.shifted(pos, stop),
                label=label,
                destination=destination,
                title=title,
            ), stop

    if char != "*" and char != "~":
        return None

    for strength, span_type in _EMPHASIS_SPANS:
        if strength is Delimiter.STRIKETHROUGH and not config.strikethrough_enabled:
            continue
        try:
            content, stop = resolve_emphasis(text, pos, strength, end, location=location)
        except NoMatch:
            continue
        return span_type(location=location.shifted(pos, stop), content=content), stop

    return None


def parse_text(
    text: str,
    pos: int,
    end: int,
    config: ParseConfig,
    location: SourceLocation,
) -> tuple[str, int]:
    """Consume plain text starting at pos.

    Takes whole tokens at their full original characters until the line
    ends or another alternative would match at a token boundary. A text
    token is never split, so a ``[`` inside one stays literal. The first
    token is always taken, so an unmatched delimiter run at pos becomes
    literal text.

    Returns:
        (content, next_pos)

    Raises:
        EmptyMatch: If pos is already at the end of the line.

    """
    start = pos
    stop = pos
    for token, tok_start, tok_stop in tokenize(text, pos, end):
        if isinstance(token, FinishToken):
            break
        if tok_start > start and _try_markup(text, tok_start, end, config, location):
            return text[start:tok_start], tok_start
        stop = tok_stop

    if stop == start:
        raise EmptyMatch("empty text run", start, location)
    return text[start:stop], stop


def assemble_spans(
    text: str,
    pos: int = 0,
    end: int | None = None,
    *,
    location: SourceLocation | None = None,
) -> tuple[Inline, ...]:
    """Assemble the spans of one line.

    Never fails: any slice, however malformed, yields spans covering it.
    Scanning stops at the end of the slice or at the first newline.

    Args:
        text: Source text
        pos: Start of the slice
        end: End of the slice (defaults to len(text))
        location: Location of text[location.offset] on its line; span
            locations are derived from it. Defaults to line 1, column 1
            at offset 0.

    Returns:
        Tuple of inline spans in source order (empty for empty input).

    Example:
        >>> assemble_spans("**hello**")
        (Bold(location=..., content='hello'),)

    """
    if end is None:
        end = len(text)
    if location is None:
        location = SourceLocation(lineno=1, col_offset=1)

    config = get_parse_config()
    spans: list[Inline] = []
    while pos < end and text[pos] != "\n":
        matched = _try_markup(text, pos, end, config, location)
        if matched is None:
            content, stop = parse_text(text, pos, end, config, location)
            matched = Text(location=location.shifted(pos, stop), content=content), stop
        span, pos = matched
        spans.append(span)
    return tuple(spans)
