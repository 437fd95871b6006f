"""Documentation-comment renderer.

Walks a DocComment and reproduces its source form, except that runs of
comment text are collected and handed to a markup engine. Tag markers,
HTML-like elements, entities and references pass through untouched, so the
result can be written back into a ``/** ... */`` comment for a downstream
documentation tool.

Buffering rules:
- The main body is one buffering span, rendered in BLOCK mode.
- Every block tag description is its own span, rendered in INLINE mode.
- ``@see`` alternates raw and rendered output within one tag (see
  ``_render_see``).

Thread Safety:
All per-render state is encapsulated in RenderState, created fresh for each
render() call. The renderer itself only holds the tree, the resolver and the
markup engine, none of which it mutates.

"""

from __future__ import annotations

from collections.abc import Iterable

from markdoclet.config import RenderConfig, get_render_config
from markdoclet.errors import MalformedNodeError
from markdoclet.nodes import (
    Attribute,
    Author,
    Comment,
    Deprecated,
    DocComment,
    DocNode,
    DocRoot,
    EndElement,
    Entity,
    Erroneous,
    Hidden,
    Identifier,
    Index,
    InheritDoc,
    Link,
    Literal,
    Other,
    Param,
    Provides,
    Reference,
    Return,
    See,
    Serial,
    SerialData,
    SerialField,
    Since,
    StartElement,
    Text,
    Throws,
    UnknownBlockTag,
    UnknownInlineTag,
    Uses,
    Value,
    ValueKind,
    Version,
)
from markdoclet.references import Resolver, member_name, unresolved
from markdoclet.renderers.protocol import MarkupMode, MarkupRenderer
from markdoclet.state import RenderState
from markdoclet.utils.logger import get_logger

logger = get_logger(__name__)

_QUOTES: dict[ValueKind, str | None] = {
    ValueKind.EMPTY: None,
    ValueKind.UNQUOTED: "",
    ValueKind.SINGLE: "'",
    ValueKind.DOUBLE: '"',
}


class DocCommentRenderer:
    """Render a comment tree, sending its text through a markup engine.

    Usage:
        >>> from markdoclet.nodes import DocComment, Text, Return
        >>> from markdoclet.renderers.markdown import MarkdownRenderer
        >>> comment = DocComment(
        ...     full_body=(Text("Adds *two* numbers."),),
        ...     block_tags=(Return((Text("the sum"),)),),
        ... )
        >>> DocCommentRenderer(comment, markup=MarkdownRenderer()).render()
        '<p>Adds <em>two</em> numbers.</p>\\n@return the sum'

    Args:
        comment: Root of the comment tree
        markup: Markup engine, called as ``markup(text, mode)``
        resolver: Reference resolver; defaults to resolving nothing
        config: Render configuration; defaults to the active context config

    """

    __slots__ = ("_comment", "_markup", "_resolver", "_line_separator")

    def __init__(
        self,
        comment: DocComment,
        *,
        markup: MarkupRenderer,
        resolver: Resolver | None = None,
        config: RenderConfig | None = None,
    ) -> None:
        self._comment = comment
        self._markup = markup
        self._resolver = resolver or unresolved
        self._line_separator = (config or get_render_config()).line_separator

    def render(self) -> str:
        """Render the comment body.

        Returns:
            The rendered comment without ``/**`` and ``*/`` delimiters.

        Raises:
            BufferStateError: On an internal buffering defect.
            MalformedNodeError: If a node carries an impossible field value.

        Thread Safety:
            Creates an independent RenderState per call.
        """
        st = RenderState(markup=self._markup)
        body = self._comment.full_body
        tags = self._comment.block_tags
        logger.debug("Rendering comment: %d body nodes, %d block tags", len(body), len(tags))

        if body:
            st.start_buffering()
            self._render_all(body, st)
            st.flush(MarkupMode.BLOCK)
        if body and tags:
            st.emit("\n")
        for i, tag in enumerate(tags):
            if i:
                st.emit("\n")
            self._render(tag, st)

        result = st.finish()
        logger.debug("Rendered comment: %d chars", len(result))
        return result

    # =========================================================================
    # Dispatch
    # =========================================================================

    def _render_all(self, nodes: Iterable[DocNode], st: RenderState) -> None:
        for node in nodes:
            self._render(node, st)

    def _render(self, node: DocNode, st: RenderState) -> None:
        """Render one node by kind."""
        match node:
            case Text(body=body) | Comment(body=body) | Erroneous(body=body):
                st.emit(body)
            case Identifier(name=name):
                st.emit(name)
            case Entity(name=name):
                st.emit(f"&{name};")
            case Reference():
                self._render_reference(node, st)
            case Attribute():
                self._render_attribute(node, st)
            case StartElement():
                self._render_start_element(node, st)
            case EndElement(name=name):
                st.emit(f"</{name}>")
            case DocRoot() | InheritDoc():
                st.emit(f"{{@{node.tag_name}}}")
            case Index():
                self._render_index(node, st)
            case Link():
                self._render_link(node, st)
            case Literal():
                self._render_literal(node, st)
            case Value():
                self._render_value(node, st)
            case UnknownInlineTag(tag_name=tag_name, content=content):
                st.emit(f"{{@{tag_name} ")
                self._render_all(content, st)
                st.emit("}")
            case Author(name=description) | Deprecated(body=description) | Hidden(body=description):
                self._render_simple_tag(node.tag_name, description, st)
            case Return(description=description) | Serial(description=description) | SerialData(
                description=description
            ):
                self._render_simple_tag(node.tag_name, description, st)
            case Since(body=description) | Version(body=description):
                self._render_simple_tag(node.tag_name, description, st)
            case UnknownBlockTag(tag_name=tag_name, content=content):
                self._render_simple_tag(tag_name, content, st)
            case Param():
                self._render_param(node, st)
            case Throws(exception_name=target, description=description) | Uses(
                service_type=target, description=description
            ) | Provides(service_type=target, description=description):
                self._print_tag_name(node.tag_name, st)
                st.emit(" ")
                self._render(target, st)
                self._render_description(description, st)
            case SerialField():
                self._render_serial_field(node, st)
            case See():
                self._render_see(node, st)
            case Other(raw=raw):
                self._render_unknown(raw, st)
            case _:
                logger.warning("No rendering rule for %s, emitting UNKNOWN marker", type(node).__name__)
                self._render_unknown(repr(node), st)

    # =========================================================================
    # Helpers
    # =========================================================================

    def _print_tag_name(self, tag_name: str, st: RenderState) -> None:
        st.emit(f"@{tag_name}")

    def _render_description(self, description: tuple[DocNode, ...], st: RenderState) -> None:
        """Emit a space and the description as one INLINE span, if there is one."""
        if not description:
            return
        st.emit(" ")
        st.start_buffering()
        self._render_all(description, st)
        st.flush(MarkupMode.INLINE)

    def _render_simple_tag(self, tag_name: str, description: tuple[DocNode, ...], st: RenderState) -> None:
        self._print_tag_name(tag_name, st)
        self._render_description(description, st)

    def _render_unknown(self, raw: str, st: RenderState) -> None:
        st.emit(f"(UNKNOWN: {raw})")
        st.emit(self._line_separator)

    # =========================================================================
    # Text-level and inline rules
    # =========================================================================

    def _render_reference(self, node: Reference, st: RenderState) -> None:
        # Imports are lost after pre-processing, so print fully qualified.
        target = self._resolver(node)
        if target is None:
            logger.debug("Unresolved reference %r", node.signature)
            st.emit(node.signature)
            return
        st.emit(target.owner_type)
        member = member_name(node.signature)
        if member is not None:
            st.emit(f"#{member}")

    def _render_attribute(self, node: Attribute, st: RenderState) -> None:
        st.emit(node.name)
        try:
            quote = _QUOTES[node.value_kind]
        except KeyError:
            raise MalformedNodeError(
                "Attribute", f"unhandled value kind {node.value_kind!r}"
            ) from None
        if quote is None:
            return
        st.emit(f"={quote}")
        self._render_all(node.value, st)
        st.emit(quote)

    def _render_start_element(self, node: StartElement, st: RenderState) -> None:
        st.emit(f"<{node.name}")
        attrs = node.attributes
        for attr in attrs:
            st.emit(" ")
            self._render(attr, st)
        if node.self_closing:
            # <br a=b /> rather than <br a=b/>, which would read as value "b/"
            if attrs and attrs[-1].value_kind is ValueKind.UNQUOTED:
                st.emit(" ")
            st.emit("/")
        st.emit(">")

    def _render_index(self, node: Index, st: RenderState) -> None:
        st.emit(f"{{@{node.tag_name} ")
        self._render(node.search_term, st)
        if node.description:
            st.emit(" ")
            self._render_all(node.description, st)
        st.emit("}")

    def _render_link(self, node: Link, st: RenderState) -> None:
        st.emit(f"{{@{node.tag_name} ")
        self._render(node.reference, st)
        if node.label:
            st.emit(" ")
            self._render_all(node.label, st)
        st.emit("}")

    def _render_literal(self, node: Literal, st: RenderState) -> None:
        st.emit(f"{{@{node.tag_name}")
        body = node.body.body
        if body and not body[0].isspace():
            st.emit(" ")
        self._render(node.body, st)
        st.emit("}")

    def _render_value(self, node: Value, st: RenderState) -> None:
        st.emit(f"{{@{node.tag_name}")
        if node.reference is not None:
            st.emit(" ")
            self._render(node.reference, st)
        st.emit("}")

    # =========================================================================
    # Block tag rules
    # =========================================================================

    def _render_param(self, node: Param, st: RenderState) -> None:
        self._print_tag_name(node.tag_name, st)
        st.emit(" ")
        if node.is_type_parameter:
            st.emit("<")
        self._render(node.name, st)
        if node.is_type_parameter:
            st.emit(">")
        self._render_description(node.description, st)

    def _render_serial_field(self, node: SerialField, st: RenderState) -> None:
        self._print_tag_name(node.tag_name, st)
        st.emit(" ")
        self._render(node.name, st)
        st.emit(" ")
        self._render(node.type, st)
        self._render_description(node.description, st)

    def _render_see(self, node: See, st: RenderState) -> None:
        """Render ``@see`` in whichever of its three forms it takes.

        - ``@see pkg.Type#member label``: the reference is printed raw.
        - ``@see <a href="...">label</a>``: the start and end tags are printed
          raw, the label between them is rendered INLINE. An unterminated link
          still has its label rendered.
        - ``@see "text"`` and anything trailing the first two forms: rendered
          INLINE as one span.
        """
        self._print_tag_name(node.tag_name, st)
        children = node.reference
        if not children:
            return

        rest = 0
        first = children[0]
        if isinstance(first, Reference):
            st.emit(" ")
            self._render(first, st)
            rest = 1
        elif isinstance(first, StartElement):
            st.emit(" ")
            self._render(first, st)
            rest = 1
            if not first.self_closing:
                st.start_buffering()
                while rest < len(children):
                    child = children[rest]
                    rest += 1
                    if isinstance(child, EndElement):
                        st.flush(MarkupMode.INLINE)
                        self._render(child, st)
                        break
                    self._render(child, st)
                if st.buffering:
                    # unclosed link, render what text we have
                    st.flush(MarkupMode.INLINE)

        self._render_description(children[rest:], st)


def wrap_comment(body: str, line_separator: str = "\n") -> str:
    """Wrap a rendered comment body in ``/**`` and ``*/`` lines.

    Examples:
        >>> wrap_comment("<p>Hello</p>")
        '/**\\n<p>Hello</p>\\n*/\\n'
    """
    return f"/**{line_separator}{body}{line_separator}*/{line_separator}"
