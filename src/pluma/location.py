"""Source location tracking for error messages and debugging.

Provides SourceLocation dataclass for tracking positions in source text.
Every Pluma AST node carries one.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Source location for error messages and debugging.

    lineno and col_offset are 1-indexed. offset and end_offset are absolute
    0-indexed positions in the newline-normalized source buffer.

    Attributes:
        lineno: Starting line number (1-indexed)
        col_offset: Starting column offset (1-indexed)
        offset: Absolute start offset in source buffer
        end_offset: Absolute end offset in source buffer (exclusive)
        source_file: Source file path (optional)

    Examples:
            >>> loc = SourceLocation(lineno=1, col_offset=1)
            >>> str(loc)
            '1:1'

            >>> loc = SourceLocation(3, 5, source_file="notes.txt")
            >>> str(loc)
            'notes.txt:3:5'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "file.txt:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    def shifted(self, start: int, stop: int) -> SourceLocation:
        """Location of the same-line slice [start, stop) of the source.

        Columns are derived from this location's offset, so this location
        must lie on the same line as ``start``.
        """
        return SourceLocation(
            lineno=self.lineno,
            col_offset=self.col_offset + (start - self.offset),
            offset=start,
            end_offset=stop,
            source_file=self.source_file,
        )

    @classmethod
    def unknown(cls) -> SourceLocation:
        """Create an unknown/placeholder location.

        Use for AST nodes created synthetically or when location is unavailable.
        """
        return cls(lineno=0, col_offset=0)
