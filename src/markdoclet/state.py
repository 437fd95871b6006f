"""Buffering state machine for comment rendering.

Two accumulators exist for the whole of a render:

- ``output``: finished text, either passed straight through or already
  rendered by the markup engine.
- ``pending``: raw comment text collected during a buffering span, waiting
  to be handed to the markup engine.

``start_buffering`` and ``flush`` are the only operations that move between
them. Spans never nest: a tag that alternates raw and rendered output closes
one span with a flush before it opens the next.

Thread Safety:
RenderState is created fresh for each render() call.
No shared mutable state.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from markdoclet.errors import BufferStateError
from markdoclet.utils.logger import get_logger
from markdoclet.utils.text import escape_unicode

if TYPE_CHECKING:
    from markdoclet.renderers.protocol import MarkupMode, MarkupRenderer

logger = get_logger(__name__)


class OutputBuffer:
    """List-of-parts string accumulator.

    Appends to a list and joins once at the end, avoiding the quadratic cost
    of repeated string concatenation.

    Usage:
        >>> buf = OutputBuffer()
        >>> _ = buf.append("@param").append(" ").append("x")
        >>> buf.build()
        '@param x'
    """

    __slots__ = ("_parts", "_length")

    def __init__(self) -> None:
        self._parts: list[str] = []
        self._length = 0

    def append(self, s: str) -> OutputBuffer:
        """Append a string (empty strings are skipped)."""
        if s:
            self._parts.append(s)
            self._length += len(s)
        return self

    def build(self) -> str:
        """Join all parts into the final string."""
        return "".join(self._parts)

    def clear(self) -> OutputBuffer:
        """Drop all accumulated parts."""
        self._parts.clear()
        self._length = 0
        return self

    def __len__(self) -> int:
        return self._length

    def __bool__(self) -> bool:
        return self._length > 0


@dataclass(slots=True)
class RenderState:
    """Per-render mutable state.

    Attributes:
        markup: Markup engine that flushed spans are handed to
        buffering: True while emissions go to ``pending``
        pending: Raw text of the open buffering span
        output: Finished output

    """

    markup: MarkupRenderer
    buffering: bool = False
    pending: OutputBuffer = field(default_factory=OutputBuffer)
    output: OutputBuffer = field(default_factory=OutputBuffer)

    def emit(self, text: str) -> None:
        """Escape ``text`` and append it to the selected accumulator."""
        target = self.pending if self.buffering else self.output
        target.append(escape_unicode(text))

    def start_buffering(self) -> None:
        """Divert subsequent emissions to the pending buffer.

        Raises:
            BufferStateError: If a buffering span is already open.
        """
        if self.buffering:
            raise BufferStateError("Buffering span opened while another is still open")
        self.buffering = True

    def flush(self, mode: MarkupMode) -> None:
        """Close the buffering span, rendering pending text if there is any.

        The markup engine is never called with empty text. Whatever it raises
        propagates unchanged.

        Args:
            mode: Context to render pending text in
        """
        if self.pending:
            source = self.pending.build()
            logger.debug("Flushing %d chars of pending text in %s mode", len(source), mode.value)
            self.output.append(self.markup(source, mode))
        self.pending.clear()
        self.buffering = False

    def finish(self) -> str:
        """Return the finished output after checking no span was left open.

        Raises:
            BufferStateError: If pending text was never flushed.
        """
        if self.buffering or self.pending:
            raise BufferStateError(
                f"Render finished with an open buffering span ({len(self.pending)} chars pending)"
            )
        return self.output.build()
