"""Exception classes for Pluma.

Provides standardized exceptions for error handling throughout Pluma.

Inline matching failures (``NoMatch`` and its subclasses) are local: the span
assembler catches them and tries the next alternative, so they never escape
``parse()`` or ``assemble_spans()``. They are raised to direct callers of the
lexer and the emphasis resolver.
"""

from __future__ import annotations

from pluma.location import SourceLocation


class PlumaError(Exception):
    """Base exception for all Pluma errors.

    Subclass this for specific error categories.
    """

    pass


class ParseError(PlumaError):
    """Error during markup parsing.

    Raised when the parser encounters invalid or unexpected input.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class NoMatch(ParseError):
    """An inline alternative did not match at a position.

    When the caller knows where the scanned line sits in its source, pass
    that line's location and the error reports line and column too.

    Attributes:
        offset: Absolute offset in the parsed text where matching started.
    """

    def __init__(
        self,
        message: str,
        offset: int,
        location: SourceLocation | None = None,
    ) -> None:
        self.offset = offset
        if location is None:
            super().__init__(f"{message} (at offset {offset})")
            return
        at = location.shifted(offset, offset)
        super().__init__(
            f"{message} (at offset {offset})",
            lineno=at.lineno,
            col_offset=at.col_offset,
            source_file=at.source_file,
        )


class Unterminated(NoMatch):
    """Emphasis or strikethrough opened but no closer before line end."""


class EmptyMatch(NoMatch):
    """A required non-empty capture matched zero characters.

    Covers link labels, destinations and titles, and lexing an empty slice.
    """


class MalformedLinkSyntax(NoMatch):
    """Brackets or parentheses present but not forming a link."""


class RenderError(PlumaError):
    """Error during markup rendering.

    Raised when the renderer encounters an unknown AST node.
    """

    pass
