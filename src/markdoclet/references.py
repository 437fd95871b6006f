"""Cross-reference resolution for markdoclet.

Comment trees are rendered after the source has been pre-processed, when the
import context of the original file is gone. Every reference is therefore
printed fully qualified, and mapping a reference to its declaration is
delegated to a Resolver:

    resolver(Reference("Bar#baz")) -> ResolvedTarget("com.foo.Bar", "baz")

A Resolver returns None when it cannot map the reference; the renderer then
prints the signature exactly as written.

Two resolvers are provided: ``unresolved`` (resolves nothing) and
``SymbolTable`` (resolves against registered Elements).

Thread Safety:
SymbolTable is only read during resolution. Populate it before rendering and
it can be shared between threads.

"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from markdoclet.elements import Element, ElementKind
from markdoclet.nodes import Reference


@dataclass(frozen=True, slots=True)
class ResolvedTarget:
    """Where a reference points.

    Attributes:
        owner_type: Fully qualified name of the type (or package) that owns
            the referenced declaration
        member_name: Member part of the reference, if any

    """

    owner_type: str
    member_name: str | None = None


class Resolver(Protocol):
    """Protocol for reference resolvers."""

    def __call__(self, reference: Reference) -> ResolvedTarget | None:
        """Resolve a reference, or return None when it cannot be resolved."""
        ...


def member_name(signature: str) -> str | None:
    """Return the part of a reference signature after the first ``#``.

    Examples:
        >>> member_name("com.foo.Bar#baz(int)")
        'baz(int)'
        >>> member_name("com.foo.Bar") is None
        True
    """
    _, sep, member = signature.partition("#")
    return member if sep else None


def unresolved(reference: Reference) -> ResolvedTarget | None:
    """Resolver that resolves nothing, so every reference prints raw."""
    return None


def enclosing_type(element: Element) -> Element | None:
    """Walk outwards from ``element`` to the nearest type.

    A type is its own owner. A package owns only itself. A member owns
    nothing if no type encloses it.
    """
    if element.kind is ElementKind.PACKAGE:
        return element
    scope: Element | None = element
    while scope is not None:
        if scope.kind.is_type:
            return scope
        if scope.kind is ElementKind.PACKAGE:
            return None
        scope = scope.enclosing
    return None


class SymbolTable:
    """Resolver backed by a table of known declarations.

    Usage:
        >>> pkg = Element(ElementKind.PACKAGE, "com.foo")
        >>> bar = Element(ElementKind.CLASS, "Bar", pkg)
        >>> table = SymbolTable([pkg, bar, Element(ElementKind.METHOD, "baz", bar)])
        >>> table(Reference("Bar#baz()"))
        ResolvedTarget(owner_type='com.foo.Bar', member_name='baz()')

    Args:
        elements: Declarations to register
        context: Element whose comment is being rendered; used for
            package-relative names and for ``#member`` references

    """

    __slots__ = ("_by_qualified_name", "_by_simple_name", "_members", "_context")

    def __init__(self, elements: Iterable[Element] = (), *, context: Element | None = None) -> None:
        self._by_qualified_name: dict[str, Element] = {}
        self._by_simple_name: dict[str, list[Element]] = {}
        self._members: dict[Element, dict[str, Element]] = {}
        self._context = context
        for element in elements:
            self.add(element)

    def add(self, element: Element) -> None:
        """Register a declaration."""
        if element.kind.is_type or element.kind is ElementKind.PACKAGE:
            self._by_qualified_name[element.qualified_name] = element
            self._by_simple_name.setdefault(element.name, []).append(element)
        if element.enclosing is not None and element.enclosing.kind.is_type:
            self._members.setdefault(element.enclosing, {}).setdefault(element.name, element)

    def with_context(self, context: Element | None) -> SymbolTable:
        """Return a table sharing these declarations but resolving from ``context``."""
        table = SymbolTable(context=context)
        table._by_qualified_name = self._by_qualified_name
        table._by_simple_name = self._by_simple_name
        table._members = self._members
        return table

    def __call__(self, reference: Reference) -> ResolvedTarget | None:
        element = self.lookup(reference.signature)
        owner = enclosing_type(element) if element is not None else None
        if owner is None:
            return None
        return ResolvedTarget(owner.qualified_name, member_name(reference.signature))

    def lookup(self, signature: str) -> Element | None:
        """Find the declaration a signature names, or None."""
        owner_part, sep, member_part = signature.strip().partition("#")
        if owner_part:
            owner = self._lookup_owner(owner_part)
        elif self._context is not None:
            owner = enclosing_type(self._context)
        else:
            owner = None
        if owner is None or not sep:
            return owner
        name = member_part.split("(", 1)[0].strip()
        return self._members.get(owner, {}).get(name)

    def _lookup_owner(self, name: str) -> Element | None:
        found = self._by_qualified_name.get(name)
        if found is not None:
            return found
        if self._context is not None:
            package = self._context.package
            if package is not None and package.name:
                found = self._by_qualified_name.get(f"{package.name}.{name}")
                if found is not None:
                    return found
        candidates = self._by_simple_name.get(name, [])
        if len(candidates) == 1:
            return candidates[0]
        return None
