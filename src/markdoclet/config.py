"""ContextVar-based render configuration for markdoclet.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Renderers read the active config once, when they are constructed.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from markdoclet.config import RenderConfig, render_config_context

    with render_config_context(RenderConfig(hard_wrap=True)):
        markup = MarkdownRenderer()   # picks up hard_wrap=True

"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Attributes:
        line_separator: Line terminator printed after an unknown-node marker
            and between the lines of a wrapped comment
        markdown_plugins: mistune plugins enabled by MarkdownRenderer
        escape_html: Escape raw HTML in comment text instead of passing it
            through
        hard_wrap: Turn every newline inside a paragraph into a line break
        clean_input: Run clean_doc_input over text before markup rendering

    """

    line_separator: str = "\n"
    markdown_plugins: tuple[str, ...] = ("strikethrough", "table", "url")
    escape_html: bool = False
    hard_wrap: bool = False
    clean_input: bool = True

    @classmethod
    def from_dict(cls, config_dict: dict) -> "RenderConfig":
        """Create RenderConfig from dictionary.

        Only includes keys that are valid RenderConfig fields; unknown keys
        are silently ignored. List values for ``markdown_plugins`` are
        converted to tuples.

        Args:
            config_dict: Dictionary with config values.

        Returns:
            New RenderConfig instance with values from dict.

        Example:
            >>> config = RenderConfig.from_dict({
            ...     "hard_wrap": True,
            ...     "markdown_plugins": ["table"],
            ...     "unknown_key": "ignored",
            ... })
            >>> config.markdown_plugins
            ('table',)

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        if "markdown_plugins" in filtered:
            filtered["markdown_plugins"] = tuple(filtered["markdown_plugins"])
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: RenderConfig = RenderConfig()

_render_config: ContextVar[RenderConfig] = ContextVar(
    "render_config",
    default=_DEFAULT_CONFIG,
)


def get_render_config() -> RenderConfig:
    """Get current render configuration (thread-local)."""
    return _render_config.get()


def set_render_config(config: RenderConfig) -> None:
    """Set render configuration for current context.

    Args:
        config: RenderConfig instance to use for this context.

    """
    _render_config.set(config)


def reset_render_config() -> None:
    """Reset to the module-level default configuration."""
    _render_config.set(_DEFAULT_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: RenderConfig to use within the context.

    Yields:
        None

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _render_config.get()
    _render_config.set(config)
    try:
        yield
    finally:
        _render_config.set(previous)


__all__ = [
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
]
