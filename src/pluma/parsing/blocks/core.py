"""Block parsing for Pluma parser.

Recognizes the block kind of each line and hands the remaining content to
the span assembler. Kinds are tried in order, first success wins:

1. Image: the whole line is ``![alt](destination title)``
2. Header: ``#`` run, one space, non-empty span content
3. Horizontal rule: a line holding only the line terminator
4. Quote: a run of ``> `` prefixed lines, parsed recursively
5. Paragraph: span content of the whole line

The block driver makes no inline decisions; it only delimits slices.

Thread Safety:
All methods use instance-local state only. Safe for concurrent use
when each parser instance is used by one thread.

"""

from __future__ import annotations

from typing import NamedTuple

from pluma.errors import NoMatch
from pluma.location import SourceLocation
from pluma.nodes import Block, Header, HorizontalRule, Image, Paragraph, Quote
from pluma.parsing.inline import assemble_spans, parse_destination, parse_label
from pluma.utils.logger import get_logger

logger = get_logger(__name__)

QUOTE_PREFIX = "> "


class Line(NamedTuple):
    """Content slice of one source line.

    Attributes:
        start: Offset of the first content character
        end: Offset of the line terminator, or len(source) on the last line
        lineno: 1-indexed line number
        col: 1-indexed column of start

    """

    start: int
    end: int
    lineno: int
    col: int


class BlockParsingMixin:
    """Mixin for block recognition.

    Required Host Attributes:
        - _source: str
        - _source_file: str | None
        - _config: ParseConfig

    """

    # Required host attributes (documented, not declared, to avoid override conflicts)
    # _source: str
    # _source_file: str | None
    # _config: ParseConfig

    def _split_lines(self) -> list[Line]:
        """Split the source into lines; terminators are not part of content."""
        source = self._source
        lines: list[Line] = []
        start = 0
        lineno = 1
        while True:
            newline = source.find("\n", start)
            if newline == -1:
                lines.append(Line(start, len(source), lineno, 1))
                return lines
            lines.append(Line(start, newline, lineno, 1))
            start = newline + 1
            lineno += 1

    def _is_terminated(self, line: Line) -> bool:
        return line.end < len(self._source)

    def _line_location(self, line: Line) -> SourceLocation:
        return SourceLocation(
            lineno=line.lineno,
            col_offset=line.col,
            offset=line.start,
            end_offset=line.end,
            source_file=self._source_file,
        )

    def _parse_blocks(self, lines: list[Line], depth: int = 0) -> list[Block]:
        """Parse a sequence of lines into blocks.

        Args:
            lines: Lines to parse, in source order
            depth: Quote nesting depth of these lines

        Returns:
            Blocks in source order.

        """
        blocks: list[Block] = []
        i = 0
        count = len(lines)
        while i < count:
            line = lines[i]

            # Trailing empty segment after the final terminator
            if line.start == line.end and not self._is_terminated(line):
                i += 1
                continue

            block = (
                self._try_image(line)
                or self._try_header(line)
                or self._try_horizontal_rule(line)
            )
            if block is None:
                quoted = self._collect_quote(lines, i, depth)
                if quoted:
                    blocks.append(self._build_quote(quoted, depth))
                    i += len(quoted)
                    continue
                block = self._parse_paragraph(line)

            blocks.append(block)
            i += 1
        return blocks

    def _try_image(self, line: Line) -> Image | None:
        """Parse an image line, or return None."""
        if not self._config.images_enabled:
            return None
        source = self._source
        if not source.startswith("![", line.start, line.end):
            return None
        location = self._line_location(line)
        try:
            alt, pos = parse_label(source, line.start + 1, line.end, location)
            (destination, title), pos = parse_destination(source, pos, line.end, location)
        except NoMatch:
            return None
        if pos != line.end:
            return None
        return Image(
            location=location,
            alt=alt,
            destination=destination,
            title=title,
        )

    def _try_header(self, line: Line) -> Header | None:
        """Parse a header line, or return None."""
        source = self._source
        pos = line.start
        while pos < line.end and source[pos] == "#":
            pos += 1
        level = pos - line.start
        if level == 0 or pos >= line.end or source[pos] != " ":
            return None
        children = assemble_spans(
            source, pos + 1, line.end, location=self._line_location(line)
        )
        if not children:
            return None
        return Header(location=self._line_location(line), level=level, children=children)

    def _try_horizontal_rule(self, line: Line) -> HorizontalRule | None:
        if line.start == line.end and self._is_terminated(line):
            return HorizontalRule(location=self._line_location(line))
        return None

    def _collect_quote(self, lines: list[Line], i: int, depth: int) -> list[Line]:
        """Collect the run of quote lines starting at lines[i].

        Returns:
            The run with the quote prefix stripped, or [] if lines[i] does
            not open a quote.

        """
        config = self._config
        if not config.quotes_enabled:
            return []

        source = self._source
        width = len(QUOTE_PREFIX)
        quoted: list[Line] = []
        for line in lines[i:]:
            if not source.startswith(QUOTE_PREFIX, line.start, line.end):
                break
            quoted.append(Line(line.start + width, line.end, line.lineno, line.col + width))

        if quoted and depth >= config.max_quote_depth:
            logger.debug(
                "Quote nesting limit %d reached at line %d; parsing as paragraph",
                config.max_quote_depth,
                lines[i].lineno,
            )
            return []
        return quoted

    def _build_quote(self, quoted: list[Line], depth: int) -> Quote:
        first, last = quoted[0], quoted[-1]
        width = len(QUOTE_PREFIX)
        location = SourceLocation(
            lineno=first.lineno,
            col_offset=first.col - width,
            offset=first.start - width,
            end_offset=last.end,
            source_file=self._source_file,
        )
        children = self._parse_blocks(quoted, depth + 1)
        return Quote(location=location, children=tuple(children))

    def _parse_paragraph(self, line: Line) -> Paragraph:
        children = assemble_spans(
            self._source, line.start, line.end, location=self._line_location(line)
        )
        return Paragraph(location=self._line_location(line), children=children)
