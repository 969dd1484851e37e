"""Line-driven parser producing a typed AST.

Splits the source into lines and runs the block driver over them.
Produces immutable (frozen) dataclass nodes for thread-safety.

Architecture:
- `BlockParsingMixin`: block kinds, quote recursion, paragraph fallback
- `pluma.parsing.inline`: span assembly for the content of each block

Thread Safety:
- Parser produces immutable AST (frozen dataclasses)
- Configuration is read from ContextVar (thread-local)
- Safe to share AST across threads

"""

from __future__ import annotations

from pluma.config import ParseConfig, get_parse_config
from pluma.nodes import Block
from pluma.parsing import BlockParsingMixin
from pluma.utils.logger import get_logger

logger = get_logger(__name__)


def normalize_newlines(source: str) -> str:
    """Convert \\r\\n and lone \\r line endings to \\n."""
    if "\r" not in source:
        return source
    return source.replace("\r\n", "\n").replace("\r", "\n")


class Parser(BlockParsingMixin):
    """Parser for line-oriented markup.

    Usage:
        >>> parser = Parser("# Hello\\n**World**")
        >>> blocks = parser.parse()
        >>> blocks[0]
        Header(location=..., level=1, children=(Text(location=..., content='Hello'),))

    Thread Safety:
        Parser instances are single-use and not thread-safe. Create one per
        parse operation. Configuration is read from ContextVar (thread-local).
        The resulting AST is immutable and thread-safe.

    """

    __slots__ = (
        "_source",
        "_source_file",
    )

    def __init__(
        self,
        source: str,
        source_file: str | None = None,
    ) -> None:
        """Initialize parser with source text.

        Configuration is read from ContextVar, not passed as parameters.
        Use set_parse_config() or parse_config_context() before creating
        a Parser if you need non-default configuration.

        Args:
            source: Markup source text (line endings are normalized to \\n)
            source_file: Optional source file path for locations

        """
        self._source = normalize_newlines(source)
        self._source_file = source_file

    @property
    def source(self) -> str:
        """Newline-normalized source that node offsets refer to."""
        return self._source

    @property
    def _config(self) -> ParseConfig:
        """Get current parse configuration (thread-local)."""
        return get_parse_config()

    def parse(self) -> list[Block]:
        """Parse the source into top-level blocks.

        Returns:
            Blocks in source order.

        """
        lines = self._split_lines()
        blocks = self._parse_blocks(lines)
        logger.debug(
            "Parsed %d blocks from %d lines%s",
            len(blocks),
            len(lines),
            f" of {self._source_file}" if self._source_file else "",
        )
        return blocks
