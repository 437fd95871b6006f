"""Declaration model shared by reference resolution and signature printing.

An Element is a named declaration (package, type or member) linked to the
element that encloses it. Only the information needed to resolve a
cross-reference and to pretty-print a signature is kept.

Thread Safety:
Elements are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ElementKind(Enum):
    """Kind of a declaration."""

    MODULE = "module"
    PACKAGE = "package"
    CLASS = "class"
    INTERFACE = "interface"
    ENUM = "enum"
    ANNOTATION_TYPE = "annotation_type"
    RECORD = "record"
    CONSTRUCTOR = "constructor"
    METHOD = "method"
    FIELD = "field"
    ENUM_CONSTANT = "enum_constant"
    PARAMETER = "parameter"
    TYPE_PARAMETER = "type_parameter"

    @property
    def is_class(self) -> bool:
        return self in (ElementKind.CLASS, ElementKind.ENUM, ElementKind.RECORD)

    @property
    def is_interface(self) -> bool:
        return self in (ElementKind.INTERFACE, ElementKind.ANNOTATION_TYPE)

    @property
    def is_type(self) -> bool:
        return self.is_class or self.is_interface


@dataclass(frozen=True, slots=True)
class Element:
    """A named declaration.

    Attributes:
        kind: What sort of declaration this is
        name: Simple name (dotted for packages, e.g. ``com.foo``)
        enclosing: Enclosing element, None for packages and modules

    Examples:
        >>> pkg = Element(ElementKind.PACKAGE, "com.foo")
        >>> cls = Element(ElementKind.CLASS, "Bar", pkg)
        >>> cls.qualified_name
        'com.foo.Bar'

    """

    kind: ElementKind
    name: str
    enclosing: Element | None = None

    @property
    def qualified_name(self) -> str:
        """Dotted name through all enclosing packages and types.

        Members are qualified by their type (``com.foo.Bar.baz``); the
        unnamed package contributes nothing.
        """
        parts = [self.name]
        scope = self.enclosing
        while scope is not None:
            if scope.name:
                parts.append(scope.name)
            scope = scope.enclosing
        return ".".join(reversed(parts))

    @property
    def package(self) -> Element | None:
        """Nearest enclosing package (the element itself for a package)."""
        scope: Element | None = self
        while scope is not None and scope.kind is not ElementKind.PACKAGE:
            scope = scope.enclosing
        return scope
