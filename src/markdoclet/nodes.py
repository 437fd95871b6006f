"""Typed comment-tree nodes for markdoclet.

A parsed documentation comment is a DocComment root holding two ordered node
sequences: the main description and the block tags. Every node is a frozen
dataclass with slots, so a tree handed to the renderer can never be mutated
by it and can be shared freely between threads.

Node Hierarchy:
Node (base)
├── Content (appear in descriptions)
│   ├── Text, Entity, Identifier, Reference
│   ├── StartElement, EndElement, Attribute, Comment
│   ├── Erroneous, Other
│   └── Inline tags: DocRoot, InheritDoc, Index, Link, Literal, Value,
│       UnknownInlineTag
└── Block tags
    ├── Author, Deprecated, Hidden, Return, Serial, SerialData, Since, Version
    ├── Param, Throws, Uses, Provides, SerialField, See
    └── UnknownBlockTag

The node set is closed: the renderer dispatches over it with ``match`` and any
object outside it degrades to an ``(UNKNOWN: ...)`` marker.

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

# =============================================================================
# Base Node
# =============================================================================


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all comment-tree nodes."""


# =============================================================================
# Text-level nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Text(Node):
    """A literal run of comment text."""

    body: str


@dataclass(frozen=True, slots=True)
class Entity(Node):
    """HTML character entity.

    Source: ``&lt;`` (name is ``lt``)

    """

    name: str


@dataclass(frozen=True, slots=True)
class Identifier(Node):
    """A bare identifier, e.g. the parameter name of ``@param``."""

    name: str


@dataclass(frozen=True, slots=True)
class Reference(Node):
    """Symbolic cross-reference, e.g. ``com.foo.Bar#baz(int)``.

    Only the signature text is kept; mapping it to a declaration is the job
    of a Resolver (see markdoclet.references).

    """

    signature: str


@dataclass(frozen=True, slots=True)
class Comment(Node):
    """HTML comment, body includes the ``<!--`` and ``-->`` delimiters."""

    body: str


@dataclass(frozen=True, slots=True)
class Erroneous(Node):
    """Text the upstream parser could not make sense of, kept verbatim."""

    body: str


@dataclass(frozen=True, slots=True)
class Other(Node):
    """Catch-all for constructs the upstream model has no kind for."""

    raw: str


# =============================================================================
# HTML-like markup
# =============================================================================


class ValueKind(Enum):
    """How an attribute value was written in the source."""

    EMPTY = "empty"  # <td nowrap>
    UNQUOTED = "unquoted"  # <td width=10>
    SINGLE = "single"  # <td width='10'>
    DOUBLE = "double"  # <td width="10">


@dataclass(frozen=True, slots=True)
class Attribute(Node):
    """Attribute of an HTML start element."""

    name: str
    value_kind: ValueKind = ValueKind.EMPTY
    value: tuple[DocNode, ...] = ()


@dataclass(frozen=True, slots=True)
class StartElement(Node):
    """HTML start tag, e.g. ``<a href="...">`` or ``<br/>``."""

    name: str
    attributes: tuple[Attribute, ...] = ()
    self_closing: bool = False


@dataclass(frozen=True, slots=True)
class EndElement(Node):
    """HTML end tag, e.g. ``</a>``."""

    name: str


# =============================================================================
# Inline tags
# =============================================================================


@dataclass(frozen=True, slots=True)
class DocRoot(Node):
    """``{@docRoot}``"""

    tag_name: ClassVar[str] = "docRoot"


@dataclass(frozen=True, slots=True)
class InheritDoc(Node):
    """``{@inheritDoc}``"""

    tag_name: ClassVar[str] = "inheritDoc"


@dataclass(frozen=True, slots=True)
class Index(Node):
    """``{@index term description}``"""

    search_term: DocNode
    description: tuple[DocNode, ...] = ()

    tag_name: ClassVar[str] = "index"


@dataclass(frozen=True, slots=True)
class Link(Node):
    """``{@link ref label}`` or, when ``is_plain``, ``{@linkplain ref label}``."""

    reference: Reference
    label: tuple[DocNode, ...] = ()
    is_plain: bool = False

    @property
    def tag_name(self) -> str:
        return "linkplain" if self.is_plain else "link"


@dataclass(frozen=True, slots=True)
class Literal(Node):
    """``{@literal text}`` or, when ``is_code``, ``{@code text}``."""

    body: Text
    is_code: bool = False

    @property
    def tag_name(self) -> str:
        return "code" if self.is_code else "literal"


@dataclass(frozen=True, slots=True)
class Value(Node):
    """``{@value}`` or ``{@value ref}``."""

    reference: Reference | None = None

    tag_name: ClassVar[str] = "value"


@dataclass(frozen=True, slots=True)
class UnknownInlineTag(Node):
    """An inline tag the upstream parser does not know, e.g. ``{@custom x}``."""

    tag_name: str
    content: tuple[DocNode, ...] = ()


# =============================================================================
# Block tags
# =============================================================================


@dataclass(frozen=True, slots=True)
class Author(Node):
    """``@author name``"""

    name: tuple[DocNode, ...] = ()

    tag_name: ClassVar[str] = "author"


@dataclass(frozen=True, slots=True)
class Deprecated(Node):
    """``@deprecated text``"""

    body: tuple[DocNode, ...] = ()

    tag_name: ClassVar[str] = "deprecated"


@dataclass(frozen=True, slots=True)
class Hidden(Node):
    """``@hidden text``"""

    body: tuple[DocNode, ...] = ()

    tag_name: ClassVar[str] = "hidden"


@dataclass(frozen=True, slots=True)
class Param(Node):
    """``@param name description`` or ``@param <T> description``."""

    name: Identifier
    description: tuple[DocNode, ...] = ()
    is_type_parameter: bool = False

    tag_name: ClassVar[str] = "param"


@dataclass(frozen=True, slots=True)
class Provides(Node):
    """``@provides service.Type description``"""

    service_type: Reference
    description: tuple[DocNode, ...] = ()

    tag_name: ClassVar[str] = "provides"


@dataclass(frozen=True, slots=True)
class Uses(Node):
    """``@uses service.Type description``"""

    service_type: Reference
    description: tuple[DocNode, ...] = ()

    tag_name: ClassVar[str] = "uses"


@dataclass(frozen=True, slots=True)
class Return(Node):
    """``@return description``"""

    description: tuple[DocNode, ...] = ()

    tag_name: ClassVar[str] = "return"


@dataclass(frozen=True, slots=True)
class See(Node):
    """``@see`` in any of its three forms.

    - ``@see "string"``: reference is plain content
    - ``@see <a href="...">label</a>``: reference starts with a StartElement
    - ``@see pkg.Type#member label``: reference starts with a Reference

    """

    reference: tuple[DocNode, ...] = ()

    tag_name: ClassVar[str] = "see"


@dataclass(frozen=True, slots=True)
class Serial(Node):
    """``@serial description``"""

    description: tuple[DocNode, ...] = ()

    tag_name: ClassVar[str] = "serial"


@dataclass(frozen=True, slots=True)
class SerialData(Node):
    """``@serialData description``"""

    description: tuple[DocNode, ...] = ()

    tag_name: ClassVar[str] = "serialData"


@dataclass(frozen=True, slots=True)
class SerialField(Node):
    """``@serialField name type description``"""

    name: Identifier
    type: Reference
    description: tuple[DocNode, ...] = ()

    tag_name: ClassVar[str] = "serialField"


@dataclass(frozen=True, slots=True)
class Since(Node):
    """``@since version``"""

    body: tuple[DocNode, ...] = ()

    tag_name: ClassVar[str] = "since"


@dataclass(frozen=True, slots=True)
class Version(Node):
    """``@version text``"""

    body: tuple[DocNode, ...] = ()

    tag_name: ClassVar[str] = "version"


@dataclass(frozen=True, slots=True)
class Throws(Node):
    """``@throws Type description`` (``tag_name`` may also be ``exception``)."""

    exception_name: Reference
    description: tuple[DocNode, ...] = ()
    tag_name: str = "throws"


@dataclass(frozen=True, slots=True)
class UnknownBlockTag(Node):
    """A block tag the upstream parser does not know, e.g. ``@apiNote``."""

    tag_name: str
    content: tuple[DocNode, ...] = ()


# =============================================================================
# Root
# =============================================================================


@dataclass(frozen=True, slots=True)
class DocComment(Node):
    """Root of a parsed documentation comment.

    ``full_body`` is the main description (first sentence included);
    ``block_tags`` are the trailing ``@tag`` sections in source order.

    """

    full_body: tuple[DocNode, ...] = ()
    block_tags: tuple[DocNode, ...] = ()


# PEP 695 type alias for the closed node set
type DocNode = (
    Text
    | Entity
    | Identifier
    | Reference
    | Comment
    | Erroneous
    | Other
    | Attribute
    | StartElement
    | EndElement
    | DocRoot
    | InheritDoc
    | Index
    | Link
    | Literal
    | Value
    | UnknownInlineTag
    | Author
    | Deprecated
    | Hidden
    | Param
    | Provides
    | Uses
    | Return
    | See
    | Serial
    | SerialData
    | SerialField
    | Since
    | Version
    | Throws
    | UnknownBlockTag
)
