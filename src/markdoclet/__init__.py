"""
markdoclet: Markdown rendering for documentation comments

Renders the text of parsed documentation comments through a markup engine
while leaving tag markers, HTML elements, entities and cross-references
exactly as written, ready to be re-emitted into source skeletons for a
downstream documentation generator.

Quick Start:
    >>> from markdoclet import render_comment
    >>> from markdoclet.nodes import DocComment, Param, Identifier, Text
    >>> comment = DocComment(
    ...     full_body=(Text("Parses *one* line."),),
    ...     block_tags=(Param(Identifier("line"), (Text("the `raw` line"),)),),
    ... )
    >>> print(render_comment(comment))
    <p>Parses <em>one</em> line.</p>
    @param line the <code>raw</code> line

    >>> # Resolve references against known declarations
    >>> from markdoclet import SymbolTable
    >>> html = render_comment(comment, resolver=SymbolTable(elements))

Installation:
    pip install markdoclet
"""

from markdoclet.config import (
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from markdoclet.elements import Element, ElementKind
from markdoclet.errors import (
    BufferStateError,
    DeclarationError,
    MalformedNodeError,
    MarkdocletError,
    RenderError,
)
from markdoclet.nodes import DocComment, DocNode, Node
from markdoclet.references import (
    ResolvedTarget,
    Resolver,
    SymbolTable,
    member_name,
    unresolved,
)
from markdoclet.renderers.comment import DocCommentRenderer, wrap_comment
from markdoclet.renderers.markdown import MarkdownRenderer
from markdoclet.renderers.protocol import MarkupMode, MarkupRenderer
from markdoclet.serialization import from_dict, from_json, to_dict, to_json
from markdoclet.signature import (
    Parameter,
    format_constant,
    format_interfaces,
    format_modifiers,
    format_parameters,
    format_throws,
    format_type_parameters,
    ordered_modifiers,
)

__version__ = "0.1.0"


def render_comment(
    comment: DocComment,
    *,
    resolver: Resolver | None = None,
    markup: MarkupRenderer | None = None,
    config: RenderConfig | None = None,
) -> str:
    """Render a comment tree to its comment body.

    Args:
        comment: Comment tree to render
        resolver: Reference resolver (references print raw if None)
        markup: Markup engine (a MarkdownRenderer if None)
        config: Render configuration (the active context config if None)

    Returns:
        Rendered body without ``/**`` and ``*/``

    Example:
        >>> from markdoclet.nodes import DocComment, Text
        >>> render_comment(DocComment(full_body=(Text("hello"),)))
        '<p>hello</p>'
    """
    config = config or get_render_config()
    markup = markup or MarkdownRenderer(config)
    return DocCommentRenderer(comment, markup=markup, resolver=resolver, config=config).render()


def render_doc(
    comment: DocComment | None,
    *,
    resolver: Resolver | None = None,
    markup: MarkupRenderer | None = None,
    config: RenderConfig | None = None,
) -> str:
    """Render a comment tree wrapped in ``/**`` and ``*/`` lines.

    A declaration without a comment (``None``) renders as the empty string.

    Example:
        >>> from markdoclet.nodes import DocComment, Text
        >>> render_doc(DocComment(full_body=(Text("hello"),)))
        '/**\\n<p>hello</p>\\n*/\\n'
    """
    if comment is None:
        return ""
    config = config or get_render_config()
    body = render_comment(comment, resolver=resolver, markup=markup, config=config)
    return wrap_comment(body, config.line_separator)


__all__ = [
    # Main API
    "render_comment",
    "render_doc",
    "wrap_comment",
    "DocCommentRenderer",
    "MarkdownRenderer",
    "MarkupMode",
    "MarkupRenderer",
    # Nodes
    "DocComment",
    "DocNode",
    "Node",
    # References
    "Element",
    "ElementKind",
    "ResolvedTarget",
    "Resolver",
    "SymbolTable",
    "member_name",
    "unresolved",
    # Configuration
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
    # Errors
    "MarkdocletError",
    "RenderError",
    "BufferStateError",
    "MalformedNodeError",
    "DeclarationError",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Signatures
    "Parameter",
    "format_constant",
    "ordered_modifiers",
    "format_modifiers",
    "format_type_parameters",
    "format_parameters",
    "format_throws",
    "format_interfaces",
]
