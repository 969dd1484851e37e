"""Link parsing for Pluma parser.

Handles inline links ``[label](destination)`` and
``[label](destination title)``. The bracket/parenthesis helpers are shared
with image lines in the block driver.

Syntax:
- Label: one or more characters, excluding ``]`` and newline
- Destination: one or more characters, excluding whitespace and ``)``
- Title: after exactly one space, one or more characters excluding ``)``
  and newline
"""

from __future__ import annotations

from pluma.errors import EmptyMatch, MalformedLinkSyntax
from pluma.location import SourceLocation

_DESTINATION_STOP = frozenset(" \t\n\r\f\v)")


def parse_label(
    text: str, pos: int, end: int, location: SourceLocation | None = None
) -> tuple[str, int]:
    """Parse a bracketed label starting at the ``[`` at pos.

    Returns:
        (label, position after ``]``)

    """
    if pos >= end or text[pos] != "[":
        raise MalformedLinkSyntax("expected '['", pos, location)
    start = pos + 1
    stop = start
    while stop < end and text[stop] not in "]\n":
        stop += 1
    if stop == start:
        raise EmptyMatch("empty link label", pos, location)
    if stop >= end or text[stop] != "]":
        raise MalformedLinkSyntax("unclosed link label", pos, location)
    return text[start:stop], stop + 1


def parse_destination(
    text: str, pos: int, end: int, location: SourceLocation | None = None
) -> tuple[tuple[str, str | None], int]:
    """Parse ``(destination)`` or ``(destination title)`` at pos.

    Returns:
        ((destination, title or None), position after ``)``)

    """
    if pos >= end or text[pos] != "(":
        raise MalformedLinkSyntax("expected '('", pos, location)

    start = pos + 1
    stop = start
    while stop < end and text[stop] not in _DESTINATION_STOP:
        stop += 1
    if stop == start:
        raise EmptyMatch("empty link destination", pos, location)
    destination = text[start:stop]

    if stop < end and text[stop] == ")":
        return (destination, None), stop + 1
    if stop >= end or text[stop] != " ":
        raise MalformedLinkSyntax("malformed link destination", pos, location)

    title_start = stop + 1
    title_stop = title_start
    while title_stop < end and text[title_stop] not in ")\n":
        title_stop += 1
    if title_stop == title_start:
        raise EmptyMatch("empty link title", pos, location)
    if title_stop >= end or text[title_stop] != ")":
        raise MalformedLinkSyntax("unclosed link destination", pos, location)
    return (destination, text[title_start:title_stop]), title_stop + 1


def parse_link(
    text: str,
    pos: int,
    end: int | None = None,
    *,
    location: SourceLocation | None = None,
) -> tuple[tuple[str, str, str | None], int]:
    """Parse a full inline link starting at pos.

    Args:
        text: Source text
        pos: Position of the opening ``[``
        end: End of the slice (defaults to len(text))
        location: Location of the line being scanned, recorded on failures

    Returns:
        ((label, destination, title), next_pos)

    Raises:
        EmptyMatch: If label, destination or title is empty.
        MalformedLinkSyntax: If brackets or parentheses are not well-formed.

    Example:
        >>> parse_link("[go](http://example.com go-title)", 0)
        (('go', 'http://example.com', 'go-title'), 33)

    """
    if end is None:
        end = len(text)
    label, pos = parse_label(text, pos, end, location)
    (destination, title), pos = parse_destination(text, pos, end, location)
    return (label, destination, title), pos
