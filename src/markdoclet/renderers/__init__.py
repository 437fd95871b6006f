"""markdoclet renderers.

Available Renderers:
- DocCommentRenderer: Renders a comment tree, passing text spans to a markup
  engine and everything else through untouched
- MarkdownRenderer: Markup engine rendering Markdown to HTML via mistune

Thread Safety:
DocCommentRenderer keeps its buffers in a RenderState local to each render()
call. MarkdownRenderer holds no per-call state.

"""

from markdoclet.renderers.comment import DocCommentRenderer, wrap_comment
from markdoclet.renderers.markdown import MarkdownRenderer
from markdoclet.renderers.protocol import MarkupMode, MarkupRenderer

__all__ = [
    "DocCommentRenderer",
    "MarkdownRenderer",
    "MarkupMode",
    "MarkupRenderer",
    "wrap_comment",
]
