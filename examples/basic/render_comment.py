"""Render a documentation comment through Markdown and print it back as /** ... */."""

from markdoclet import Element, ElementKind, SymbolTable, render_doc
from markdoclet.nodes import DocComment, Identifier, Link, Param, Reference, Return, Text

pkg = Element(ElementKind.PACKAGE, "com.example")
table = SymbolTable([pkg, Element(ElementKind.CLASS, "Parser", pkg)])

comment = DocComment(
    full_body=(Text("Parses *one* line. See "), Link(Reference("Parser")), Text(".")),
    block_tags=(
        Param(Identifier("line"), (Text("the `raw` line"),)),
        Return((Text("**true** if it parsed"),)),
    ),
)

print(render_doc(comment, resolver=table), end="")
