"""ContextVar-based render configuration for chatmark.

The grammar has no options; configuration only affects how a Document is
drawn. Config is held in a ContextVar (PEP 567) so concurrent threads can
render with different settings without locks.

Usage:
    from chatmark.config import RenderConfig, render_config_context

    with render_config_context(RenderConfig(highlight=True)):
        html = render(doc)

"""

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields
from typing import Any


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Attributes:
        highlight: Pass code blocks with a language through the highlighter
        code_label: Caption shown above code blocks
        pad_table_rows: Render tables normalized to the header width
        text_transformer: Optional callback applied to plain text spans

    """

    highlight: bool = False
    code_label: str = "Code"
    pad_table_rows: bool = False
    text_transformer: Callable[[str], str] | None = None

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "RenderConfig":
        """Create RenderConfig from a dictionary, ignoring unknown keys.

        Example:
            >>> RenderConfig.from_dict({"highlight": True, "theme": "dark"}).highlight
            True

        """
        valid_fields = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in config_dict.items() if k in valid_fields})


_DEFAULT_CONFIG: RenderConfig = RenderConfig()

_render_config: ContextVar[RenderConfig] = ContextVar(
    "render_config",
    default=_DEFAULT_CONFIG,
)


def get_render_config() -> RenderConfig:
    """Get the active render configuration for this context."""
    return _render_config.get()


def set_render_config(config: RenderConfig) -> None:
    """Set render configuration for the current context only."""
    _render_config.set(config)


def reset_render_config() -> None:
    """Reset to the module-level default configuration."""
    _render_config.set(_DEFAULT_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[RenderConfig]:
    """Context manager for temporary config changes.

    Restores the previous config on exit, even if an exception is raised.

    Example:
        >>> with render_config_context(RenderConfig(code_label="Snippet")):
        ...     get_render_config().code_label
        'Snippet'

    """
    token = _render_config.set(config)
    try:
        yield config
    finally:
        _render_config.reset(token)


__all__ = [
    "RenderConfig",
    "get_render_config",
    "render_config_context",
    "reset_render_config",
    "set_render_config",
]
