"""Stateless signature formatting.

Pretty-printing helpers for the declaration skeletons that rendered comments
are embedded in: constant values, modifiers, type parameters, parameter
lists, throws and implements/extends clauses. None of them touch rendering
state; each takes plain values and returns a string.

Example:
    >>> ordered_modifiers({"static", "public", "final"}, ElementKind.FIELD)
    ['public', 'static', 'final']
    >>> format_constant("hi")
    '"hi"'

"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from markdoclet.elements import ElementKind
from markdoclet.errors import DeclarationError

# Canonical modifier order (JLS 8.1.1, 8.3.1, 8.4.3)
MODIFIER_ORDER: tuple[str, ...] = (
    "public",
    "protected",
    "private",
    "abstract",
    "default",
    "static",
    "sealed",
    "non-sealed",
    "final",
    "transient",
    "volatile",
    "synchronized",
    "native",
    "strictfp",
)

_MODIFIER_RANK = {name: rank for rank, name in enumerate(MODIFIER_ORDER)}


@dataclass(frozen=True, slots=True)
class Parameter:
    """A formal parameter of a method or constructor.

    Attributes:
        type: Parameter type as written, e.g. ``java.lang.String[]``
        name: Parameter name
        annotations: Annotations, printed inline before the type
        modifiers: Modifiers such as ``final``

    """

    type: str
    name: str
    annotations: tuple[str, ...] = ()
    modifiers: tuple[str, ...] = ()


def format_constant(value: object) -> str:
    """Format a constant field value as it would appear in source.

    Strings are double-quoted as-is, booleans are lowercase and None prints
    as ``null``; anything else uses ``str()``.
    """
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    return str(value)


def ordered_modifiers(
    modifiers: Iterable[str],
    kind: ElementKind,
    enclosing_kind: ElementKind | None = None,
) -> list[str]:
    """Sort modifiers canonically and drop the ones implied by context.

    Args:
        modifiers: Modifiers of the declaration, in any order
        kind: Kind of the declaration
        enclosing_kind: Kind of the enclosing declaration, for members

    Returns:
        Modifiers to print, in canonical order.
    """
    if kind is ElementKind.ENUM_CONSTANT:
        return []
    implied: set[str] = set()
    if kind in (ElementKind.INTERFACE, ElementKind.ANNOTATION_TYPE):
        implied = {"abstract"}
    elif kind is ElementKind.ENUM:
        implied = {"final", "abstract"}
    elif kind in (ElementKind.METHOD, ElementKind.FIELD):
        if enclosing_kind is not None and enclosing_kind.is_interface:
            implied = {"public", "abstract", "static", "final"}
    kept = {m for m in modifiers if m not in implied}
    return sorted(kept, key=lambda m: (_MODIFIER_RANK.get(m, len(MODIFIER_ORDER)), m))


def format_modifiers(
    modifiers: Iterable[str],
    kind: ElementKind,
    *,
    annotations: Sequence[str] = (),
    enclosing_kind: ElementKind | None = None,
) -> str:
    """Format annotations and modifiers preceding a declaration.

    Annotations go one per line, except on parameters where they are inline.
    Every modifier is followed by a single space.

    Examples:
        >>> format_modifiers(["static", "public"], ElementKind.METHOD, annotations=["@Override"])
        '@Override\\npublic static '
    """
    if kind is ElementKind.PARAMETER:
        prefix = "".join(f"{a} " for a in annotations)
    else:
        prefix = "".join(f"{a}\n" for a in annotations)
    return prefix + "".join(f"{m} " for m in ordered_modifiers(modifiers, kind, enclosing_kind))


def format_type_parameters(type_parameters: Sequence[str], pad: bool = False) -> str:
    """Format ``<A, B>``, with a trailing space when ``pad`` is set."""
    if not type_parameters:
        return ""
    text = f"<{', '.join(type_parameters)}>"
    return f"{text} " if pad else text


def format_parameters(parameters: Sequence[Parameter], varargs: bool = False, *, declaration: str = "") -> str:
    """Format a parameter list (without the parentheses).

    Args:
        parameters: Formal parameters in order
        varargs: Whether the last parameter is variable-arity
        declaration: Name of the method, for error messages

    Raises:
        DeclarationError: If the varargs parameter does not have an array type.
    """
    parts = []
    last = len(parameters) - 1
    for i, param in enumerate(parameters):
        text = format_modifiers(param.modifiers, ElementKind.PARAMETER, annotations=param.annotations)
        if varargs and i == last:
            if not param.type.endswith("[]"):
                raise DeclarationError(declaration, f"var-args parameter is not an array type: {param.type}")
            text += f"{param.type[:-2]}..."
        else:
            text += param.type
        parts.append(f"{text} {param.name}")
    return ", ".join(parts)


def format_throws(thrown_types: Sequence[str]) -> str:
    """Format `` throws A, B``; empty when nothing is thrown."""
    if not thrown_types:
        return ""
    return f" throws {', '.join(thrown_types)}"


def format_interfaces(kind: ElementKind, interfaces: Sequence[str]) -> str:
    """Format the implemented or extended interfaces of a type.

    Classes ``implement``, interfaces ``extend``, annotation types print
    nothing.
    """
    if kind is ElementKind.ANNOTATION_TYPE or not interfaces:
        return ""
    keyword = "implements" if kind.is_class else "extends"
    return f" {keyword} {', '.join(interfaces)}"
