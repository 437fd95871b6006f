"""Tests for declarations and reference resolution."""

from __future__ import annotations

import logging

import pytest

from markdoclet.elements import Element, ElementKind
from markdoclet.nodes import DocComment, Link, Reference
from markdoclet.references import (
    ResolvedTarget,
    SymbolTable,
    enclosing_type,
    member_name,
    unresolved,
)
from markdoclet.renderers.comment import DocCommentRenderer

PKG = Element(ElementKind.PACKAGE, "com.foo")
OTHER_PKG = Element(ElementKind.PACKAGE, "org.other")
BAR = Element(ElementKind.CLASS, "Bar", PKG)
INNER = Element(ElementKind.INTERFACE, "Inner", BAR)
BAZ = Element(ElementKind.METHOD, "baz", BAR)
COUNT = Element(ElementKind.FIELD, "count", BAR)
CODEC = Element(ElementKind.INTERFACE, "Codec", OTHER_PKG)
DUP_A = Element(ElementKind.CLASS, "Dup", PKG)
DUP_B = Element(ElementKind.CLASS, "Dup", OTHER_PKG)


@pytest.fixture
def table() -> SymbolTable:
    return SymbolTable([PKG, OTHER_PKG, BAR, INNER, BAZ, COUNT, CODEC, DUP_A, DUP_B])


# =============================================================================
# Elements
# =============================================================================


class TestElement:
    """Qualified names and kind predicates."""

    def test_qualified_names(self) -> None:
        assert BAR.qualified_name == "com.foo.Bar"
        assert INNER.qualified_name == "com.foo.Bar.Inner"
        assert BAZ.qualified_name == "com.foo.Bar.baz"
        assert PKG.qualified_name == "com.foo"

    def test_unnamed_package_is_skipped(self) -> None:
        default = Element(ElementKind.PACKAGE, "")
        assert Element(ElementKind.CLASS, "Top", default).qualified_name == "Top"

    def test_package(self) -> None:
        assert BAZ.package is PKG
        assert PKG.package is PKG
        assert Element(ElementKind.CLASS, "Loose").package is None

    @pytest.mark.parametrize(
        ("kind", "is_class", "is_interface"),
        [
            (ElementKind.CLASS, True, False),
            (ElementKind.ENUM, True, False),
            (ElementKind.RECORD, True, False),
            (ElementKind.INTERFACE, False, True),
            (ElementKind.ANNOTATION_TYPE, False, True),
            (ElementKind.METHOD, False, False),
            (ElementKind.PACKAGE, False, False),
        ],
    )
    def test_kind_predicates(self, kind: ElementKind, is_class: bool, is_interface: bool) -> None:
        assert kind.is_class is is_class
        assert kind.is_interface is is_interface
        assert kind.is_type is (is_class or is_interface)


# =============================================================================
# Helpers
# =============================================================================


class TestHelpers:
    def test_member_name(self) -> None:
        assert member_name("com.foo.Bar#baz(int, String)") == "baz(int, String)"
        assert member_name("#count") == "count"
        assert member_name("com.foo.Bar") is None

    def test_unresolved(self) -> None:
        assert unresolved(Reference("Anything")) is None

    def test_enclosing_type(self) -> None:
        assert enclosing_type(BAR) is BAR
        assert enclosing_type(BAZ) is BAR
        assert enclosing_type(PKG) is PKG
        assert enclosing_type(Element(ElementKind.METHOD, "orphan", PKG)) is None


# =============================================================================
# SymbolTable
# =============================================================================


class TestSymbolTable:
    """Resolution against registered declarations."""

    def test_qualified_type(self, table: SymbolTable) -> None:
        assert table(Reference("com.foo.Bar")) == ResolvedTarget("com.foo.Bar")

    def test_unique_simple_name(self, table: SymbolTable) -> None:
        assert table(Reference("Codec")) == ResolvedTarget("org.other.Codec")

    def test_ambiguous_simple_name(self, table: SymbolTable) -> None:
        assert table(Reference("Dup")) is None

    def test_context_package_breaks_ambiguity(self, table: SymbolTable) -> None:
        scoped = table.with_context(BAR)

        assert scoped(Reference("Dup")) == ResolvedTarget("com.foo.Dup")

    def test_member_of_type(self, table: SymbolTable) -> None:
        assert table(Reference("Bar#baz(int)")) == ResolvedTarget("com.foo.Bar", "baz(int)")

    def test_unknown_member(self, table: SymbolTable) -> None:
        assert table(Reference("Bar#nope()")) is None

    def test_member_of_context(self, table: SymbolTable) -> None:
        scoped = table.with_context(BAZ)

        assert scoped(Reference("#count")) == ResolvedTarget("com.foo.Bar", "count")

    def test_member_without_context(self, table: SymbolTable) -> None:
        assert table(Reference("#count")) is None

    def test_nested_type(self, table: SymbolTable) -> None:
        assert table(Reference("com.foo.Bar.Inner")) == ResolvedTarget("com.foo.Bar.Inner")

    def test_package_reference(self, table: SymbolTable) -> None:
        assert table(Reference("org.other")) == ResolvedTarget("org.other")

    def test_with_context_shares_declarations(self, table: SymbolTable) -> None:
        scoped = table.with_context(BAR)
        extra = Element(ElementKind.CLASS, "Late", PKG)
        table.add(extra)

        assert scoped(Reference("com.foo.Late")) == ResolvedTarget("com.foo.Late")


class TestRenderingWithSymbolTable:
    """SymbolTable plugged into the comment renderer."""

    def test_link_prints_fully_qualified(self, identity, table: SymbolTable) -> None:
        comment = DocComment(full_body=(Link(Reference("Bar#baz(int)")),))
        rendered = DocCommentRenderer(comment, markup=identity, resolver=table).render()

        assert rendered == "{@link com.foo.Bar#baz(int)}"

    def test_package_reference_prints_package_name(self, identity, table: SymbolTable) -> None:
        comment = DocComment(full_body=(Link(Reference("org.other")),))
        rendered = DocCommentRenderer(comment, markup=identity, resolver=table).render()

        assert rendered == "{@link org.other}"

    def test_unresolvable_prints_raw(self, identity, table: SymbolTable, caplog: pytest.LogCaptureFixture) -> None:
        comment = DocComment(full_body=(Link(Reference("Nowhere#x")),))
        with caplog.at_level(logging.DEBUG, logger="markdoclet"):
            rendered = DocCommentRenderer(comment, markup=identity, resolver=table).render()

        assert rendered == "{@link Nowhere#x}"
        assert "Unresolved reference 'Nowhere#x'" in caplog.text
