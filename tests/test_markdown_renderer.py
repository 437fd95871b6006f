"""Tests for the mistune-backed MarkdownRenderer."""

from __future__ import annotations

import pytest

from markdoclet.config import RenderConfig, render_config_context
from markdoclet.nodes import DocComment, Identifier, Literal, Param, Return, Since, Text
from markdoclet.renderers.comment import DocCommentRenderer
from markdoclet.renderers.markdown import MarkdownRenderer
from markdoclet.renderers.protocol import MarkupMode


class TestModes:
    """BLOCK runs the full parser, INLINE only inline syntax."""

    def test_block(self) -> None:
        assert MarkdownRenderer()("Some *text*", MarkupMode.BLOCK) == "<p>Some <em>text</em></p>"

    def test_inline(self) -> None:
        assert MarkdownRenderer()("Some *text*", MarkupMode.INLINE) == "Some <em>text</em>"

    def test_code_span(self) -> None:
        assert MarkdownRenderer()("the `raw` line", MarkupMode.INLINE) == "the <code>raw</code> line"

    def test_block_keeps_block_syntax(self) -> None:
        html = MarkdownRenderer()("- one\n- two", MarkupMode.BLOCK)

        assert html == "<ul>\n<li>one</li>\n<li>two</li>\n</ul>"

    @pytest.mark.parametrize(
        "text",
        ["- number of items", "2.", "# of items", "> quoted", "1. first"],
    )
    def test_inline_ignores_block_syntax(self, text: str) -> None:
        """Tag descriptions never turn into lists, headings or quotes."""
        html = MarkdownRenderer()(text, MarkupMode.INLINE)

        assert "<" not in html
        assert "\n" not in html

    @pytest.mark.parametrize("text", ["", "   ", "\n\n"])
    def test_blank_input(self, text: str) -> None:
        assert MarkdownRenderer()(text, MarkupMode.BLOCK) == ""
        assert MarkdownRenderer()(text, MarkupMode.INLINE) == ""


class TestConfiguration:
    """RenderConfig options reach mistune."""

    def test_raw_html_passes_through(self) -> None:
        assert MarkdownRenderer()("<b>x</b>", MarkupMode.INLINE) == "<b>x</b>"

    def test_escape_html(self) -> None:
        html = MarkdownRenderer(RenderConfig(escape_html=True))("<b>x</b>", MarkupMode.INLINE)

        assert html == "&lt;b&gt;x&lt;/b&gt;"

    def test_strikethrough_plugin(self) -> None:
        assert MarkdownRenderer()("~~gone~~", MarkupMode.INLINE) == "<del>gone</del>"

    def test_hard_wrap(self) -> None:
        html = MarkdownRenderer(RenderConfig(hard_wrap=True))("a\nb", MarkupMode.BLOCK)

        assert "<br />" in html

    def test_cleanup_applied(self) -> None:
        assert MarkdownRenderer()("{@literal @}Override", MarkupMode.INLINE) == "@Override"

    def test_cleanup_disabled(self) -> None:
        html = MarkdownRenderer(RenderConfig(clean_input=False))("{@literal x}", MarkupMode.INLINE)

        assert html == "{@literal x}"

    def test_context_config_is_read_at_construction(self) -> None:
        with render_config_context(RenderConfig(escape_html=True)):
            markup = MarkdownRenderer()

        assert markup("<i>x</i>", MarkupMode.INLINE) == "&lt;i&gt;x&lt;/i&gt;"

    def test_non_string_result_is_rejected(self) -> None:
        markup = MarkdownRenderer()
        markup._markdown = lambda text: ["not", "html"]  # type: ignore[assignment]

        with pytest.raises(TypeError, match="expected HTML text"):
            markup("x", MarkupMode.BLOCK)


class TestWithCommentRenderer:
    """End to end through DocCommentRenderer."""

    def test_full_comment(self) -> None:
        comment = DocComment(
            full_body=(Text("Adds *two* numbers."),),
            block_tags=(
                Param(Identifier("a"), (Text("the `first`"),)),
                Return((Text("the sum"),)),
            ),
        )

        rendered = DocCommentRenderer(comment, markup=MarkdownRenderer()).render()

        assert rendered == (
            "<p>Adds <em>two</em> numbers.</p>\n"
            "@param a the <code>first</code>\n"
            "@return the sum"
        )

    def test_escaped_characters_survive_markdown(self) -> None:
        comment = DocComment(full_body=(Text("Ā"),))

        assert DocCommentRenderer(comment, markup=MarkdownRenderer()).render() == "<p>\\u0100</p>"

    @pytest.mark.parametrize(
        ("tag", "expected"),
        [
            (Param(Identifier("count"), (Text("- number of items"),)), "@param count - number of items"),
            (Since((Text("2."),)), "@since 2."),
            (Return((Text("# of items"),)), "@return # of items"),
        ],
    )
    def test_tag_description_stays_on_one_line(self, tag, expected: str) -> None:
        rendered = DocCommentRenderer(DocComment(block_tags=(tag,)), markup=MarkdownRenderer()).render()

        assert rendered == expected

    def test_literal_generic_type_is_escaped(self) -> None:
        comment = DocComment(full_body=(Text("Returns a "), Literal(Text("List<T>")), Text(".")))

        rendered = DocCommentRenderer(comment, markup=MarkdownRenderer()).render()

        assert rendered == "<p>Returns a List&lt;T&gt;.</p>"

    def test_literal_in_tag_description_is_escaped(self) -> None:
        comment = DocComment(block_tags=(Return((Literal(Text("Map<K, V>")),)),))

        rendered = DocCommentRenderer(comment, markup=MarkdownRenderer()).render()

        assert rendered == "@return Map&lt;K, V&gt;"
