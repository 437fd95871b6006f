"""Property-based tests for escaping and buffering invariants."""

from __future__ import annotations

import re

from hypothesis import given, settings
from hypothesis import strategies as st

from markdoclet.nodes import (
    DocComment,
    Identifier,
    Param,
    Return,
    Since,
    Text,
)
from markdoclet.renderers.comment import DocCommentRenderer
from markdoclet.renderers.protocol import MarkupMode
from markdoclet.utils.text import escape_unicode

_ESCAPE = re.compile(r"\\u([0-9a-f]{4})")


def _identity(text: str, mode: MarkupMode) -> str:
    return text


def _unescape(text: str) -> str:
    """Undo escape_unicode for text whose original had no backslashes."""
    decoded = _ESCAPE.sub(lambda m: chr(int(m.group(1), 16)), text)
    return decoded.encode("utf-16", "surrogatepass").decode("utf-16")


_no_backslash = st.text().filter(lambda s: "\\" not in s)

_description = st.lists(st.text(min_size=1).map(Text), max_size=3).map(tuple)

_tags = st.lists(
    st.one_of(
        _description.map(Return),
        _description.map(Since),
        st.builds(Param, st.text(min_size=1).map(Identifier), _description),
    ),
    max_size=4,
).map(tuple)


class TestEscapeProperties:
    @given(st.text())
    @settings(max_examples=200)
    def test_output_is_latin1(self, text: str) -> None:
        assert all(ord(ch) <= 0xFF for ch in escape_unicode(text))

    @given(st.text(alphabet=st.characters(max_codepoint=0xFF)))
    def test_latin1_is_identity(self, text: str) -> None:
        assert escape_unicode(text) == text

    @given(_no_backslash)
    @settings(max_examples=200)
    def test_escape_is_reversible(self, text: str) -> None:
        assert _unescape(escape_unicode(text)) == text


class TestRenderProperties:
    @given(st.lists(st.text(min_size=1).map(Text), min_size=1, max_size=5).map(tuple), _tags)
    @settings(max_examples=100)
    def test_every_span_is_flushed(self, body: tuple[Text, ...], tags: tuple) -> None:  # type: ignore[type-arg]
        """Rendering never leaves a span open, whatever the tree shape."""
        calls: list[tuple[str, MarkupMode]] = []

        def markup(text: str, mode: MarkupMode) -> str:
            calls.append((text, mode))
            return text

        DocCommentRenderer(DocComment(full_body=body, block_tags=tags), markup=markup).render()

        assert calls[0][1] is MarkupMode.BLOCK
        assert all(mode is MarkupMode.INLINE for _, mode in calls[1:])
        assert all(text for text, _ in calls)

    @given(st.lists(_no_backslash.filter(bool).map(Text), min_size=1, max_size=5).map(tuple))
    def test_plain_body_round_trips(self, body: tuple[Text, ...]) -> None:
        rendered = DocCommentRenderer(DocComment(full_body=body), markup=_identity).render()

        assert _unescape(rendered) == "".join(node.body for node in body)
