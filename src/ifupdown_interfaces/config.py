"""ContextVar-based parse configuration for ifupdown-interfaces.

Provides context-local configuration using Python's ContextVars (PEP 567).
Each Interfaces document holds its own config and publishes it for the
duration of a parse; the lexer reads it from the context.

Usage:
    # In Interfaces
    doc = Interfaces(config=ParseConfig(indent="\t"))
    doc.parse(text)  # Sets config internally via ContextVar

    # Direct lexer usage (advanced)
    from ifupdown_interfaces.config import ParseConfig, parse_config_context

    with parse_config_context(ParseConfig(directive_keys=frozenset({"auto"}))):
        lines = list(Lexer(source).tokenize())

"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields
from typing import Any

DEFAULT_DIRECTIVE_KEYS: frozenset[str] = frozenset({"auto", "source", "allow-hotplug"})


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse and write configuration.

    Attributes:
        directive_keys: Keywords recognised as top-level single-line directives
        indent: Prefix for each setting line when an interface is regenerated
        encoding: Text encoding used to read and write interfaces files

    """

    directive_keys: frozenset[str] = DEFAULT_DIRECTIVE_KEYS
    indent: str = "    "
    encoding: str = "utf-8"

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> "ParseConfig":
        """Create ParseConfig from dictionary.

        Only includes keys that are valid ParseConfig fields; unknown keys
        are silently ignored. A list or tuple of ``directive_keys`` is
        converted to a frozenset.

        Example:
            >>> config = ParseConfig.from_dict({
            ...     "directive_keys": ["auto", "allow-auto"],
            ...     "unknown_key": "ignored",
            ... })
            >>> sorted(config.directive_keys)
            ['allow-auto', 'auto']

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        if "directive_keys" in filtered:
            filtered["directive_keys"] = frozenset(filtered["directive_keys"])
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current parse configuration (context-local)."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for current context.

    Args:
        config: ParseConfig instance to use for this context.

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

    Restores the previous config even if an exception is raised.

    Example:
        >>> with parse_config_context(ParseConfig(indent="  ")):
        ...     get_parse_config().indent
        '  '

    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "DEFAULT_DIRECTIVE_KEYS",
    "ParseConfig",
    "get_parse_config",
    "parse_config_context",
    "reset_parse_config",
    "set_parse_config",
]
