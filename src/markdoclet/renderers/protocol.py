"""MarkupRenderer protocol: stable interface to the markup engine.

The comment renderer never parses markup itself. It hands buffered spans of
comment text to any callable matching ``(text, mode) -> str``. The built-in
``MarkdownRenderer`` is the reference implementation; a plain function works
just as well:

    from markdoclet.renderers.protocol import MarkupMode

    def shout(text: str, mode: MarkupMode) -> str:
        return text.upper()

"""

from enum import Enum
from typing import Protocol


class MarkupMode(Enum):
    """Rendering context passed to the markup engine.

    BLOCK is used for the main comment body, which may hold block-level
    constructs such as tables and lists. INLINE is used for every tag
    description, which must stay on one logical line.

    """

    BLOCK = "block"
    INLINE = "inline"


class MarkupRenderer(Protocol):
    """Protocol for markup engines.

    Implementations are called synchronously and only with non-empty text.
    Any exception they raise propagates out of the comment render unchanged.

    """

    def __call__(self, text: str, mode: MarkupMode) -> str:
        """Render a span of markup.

        Args:
            text: Non-empty markup source.
            mode: BLOCK or INLINE context.

        Returns:
            Rendered output.

        """
        ...
