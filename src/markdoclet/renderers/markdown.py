"""Markdown markup engine backed by mistune.

Default implementation of the MarkupRenderer protocol. Comment text is cleaned
of javadoc artifacts and rendered to HTML. BLOCK mode runs the full mistune
pipeline. INLINE mode runs only the inline parser, so list markers, heading
hashes and numbered lines in a tag description stay plain text.

Thread Safety:
The mistune Markdown instance is built once per MarkdownRenderer. Every call
parses with a fresh mistune state, so one renderer can serve concurrent
comment renders.

"""

from __future__ import annotations

import mistune

from markdoclet.config import RenderConfig, get_render_config
from markdoclet.renderers.protocol import MarkupMode
from markdoclet.utils.logger import get_logger
from markdoclet.utils.text import clean_doc_input

logger = get_logger(__name__)


class MarkdownRenderer:
    """Render comment text as Markdown.

    Usage:
        >>> markup = MarkdownRenderer()
        >>> markup("Some *text*", MarkupMode.BLOCK)
        '<p>Some <em>text</em></p>'
        >>> markup("Some *text*", MarkupMode.INLINE)
        'Some <em>text</em>'

    Args:
        config: Render configuration; defaults to the active context config

    """

    __slots__ = ("_markdown", "_clean_input")

    def __init__(self, config: RenderConfig | None = None) -> None:
        config = config or get_render_config()
        self._clean_input = config.clean_input
        self._markdown = mistune.create_markdown(
            escape=config.escape_html,
            hard_wrap=config.hard_wrap,
            plugins=list(config.markdown_plugins),
        )

    def __call__(self, text: str, mode: MarkupMode) -> str:
        """Render ``text`` to HTML.

        Args:
            text: Comment text, may still carry javadoc artifacts
            mode: BLOCK or INLINE

        Returns:
            HTML without a trailing newline; empty for blank input.
        """
        text = text.strip()
        if not text:
            return ""
        if self._clean_input:
            text = clean_doc_input(text)
        if mode is MarkupMode.INLINE:
            html = self._render_inline(text)
        else:
            html = self._markdown(text)
        if not isinstance(html, str):
            msg = f"mistune returned {type(html).__name__}, expected HTML text"
            raise TypeError(msg)
        return html.rstrip("\n")

    def _render_inline(self, text: str) -> str:
        """Render inline syntax only: emphasis, code spans, links, raw HTML."""
        state = mistune.BlockState()
        tokens = self._markdown.inline(text, state.env)
        return self._markdown.renderer(tokens, state)
