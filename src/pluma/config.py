"""ContextVar-based parse configuration for Pluma.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is set once per parse call, read by the block driver and the span
assembler in the same context.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    # Through the Markup class
    md = Markup(ParseConfig(strikethrough_enabled=False))
    doc = md.parse("~not struck~")  # Sets config internally via ContextVar

    # Direct parser usage (advanced)
    from pluma.config import set_parse_config, reset_parse_config, ParseConfig

    set_parse_config(ParseConfig(links_enabled=False))
    try:
        parser = Parser(source)
        result = parser.parse()
    finally:
        reset_parse_config()

    # Or use the context manager
    with parse_config_context(ParseConfig(links_enabled=False)):
        parser = Parser(source)
        result = parser.parse()

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    source_file is per-call state and stays on the Parser instance.

    Attributes:
        strikethrough_enabled: Recognize ~struck~ spans
        links_enabled: Recognize [label](destination title) spans
        images_enabled: Recognize ![alt](destination title) lines
        quotes_enabled: Recognize "> " quote blocks
        max_quote_depth: Deepest quote nesting parsed as Quote blocks;
            deeper lines are parsed as paragraphs

    """

    strikethrough_enabled: bool = True
    links_enabled: bool = True
    images_enabled: bool = True
    quotes_enabled: bool = True
    max_quote_depth: int = 16

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ParseConfig":
        """Create ParseConfig from dictionary.

        Only includes keys that are valid ParseConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                ParseConfig attribute names.

        Returns:
            New ParseConfig instance with values from dict.

        Example:
            >>> config = ParseConfig.from_dict({
            ...     "links_enabled": False,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.links_enabled
            False

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

# Thread-local configuration via ContextVar
_parse_config: ContextVar[ParseConfig] = ContextVar(
    "parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current parse configuration (thread-local).

    Returns:
        The active ParseConfig for this thread/context.

    """
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for current context.

    Args:
        config: ParseConfig instance to use for this context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.

    """
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Useful for tests and isolated parsing operations.

    Args:
        config: ParseConfig to use within the context.

    Yields:
        None

    Example:
        >>> with parse_config_context(ParseConfig(links_enabled=False)):
        ...     spans = parse_inline("[a](b)")
        ...     # spans is a single Text here
        >>> # Automatically reset to previous config

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
]
