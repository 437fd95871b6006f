"""Comment-tree serialization: JSON round-trip for markdoclet nodes.

Converts comment trees to/from JSON-compatible dicts so an upstream
extractor can hand trees to the renderer across a process boundary, and for
debugging and inspection.

All output is deterministic (sorted keys).

Example:
    from markdoclet.serialization import to_json, from_json

    json_str = to_json(comment)
    restored = from_json(json_str)
    assert comment == restored

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from dataclasses import fields
from typing import Any

from markdoclet.nodes import (
    Attribute,
    Author,
    Comment,
    Deprecated,
    DocComment,
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
    Node,
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

# Registry of node type names to classes for deserialization
_NODE_TYPES: dict[str, type[Node]] = {
    cls.__name__: cls
    for cls in (
        DocComment,
        Text,
        Entity,
        Identifier,
        Reference,
        Comment,
        Erroneous,
        Other,
        Attribute,
        StartElement,
        EndElement,
        DocRoot,
        InheritDoc,
        Index,
        Link,
        Literal,
        Value,
        UnknownInlineTag,
        Author,
        Deprecated,
        Hidden,
        Param,
        Provides,
        Uses,
        Return,
        See,
        Serial,
        SerialData,
        SerialField,
        Since,
        Version,
        Throws,
        UnknownBlockTag,
    )
}


def to_dict(node: Node) -> dict[str, Any]:
    """Convert a comment-tree node to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.

    Args:
        node: Any markdoclet node, typically a DocComment.

    Returns:
        Dict with ``_type`` and all node fields.

    """
    result: dict[str, Any] = {"_type": type(node).__name__}
    for f in fields(node):
        result[f.name] = _serialize_value(getattr(node, f.name))
    return result


def _serialize_value(value: Any) -> Any:
    if isinstance(value, Node):
        return to_dict(value)
    if isinstance(value, ValueKind):
        return {"_type": "ValueKind", "value": value.value}
    if isinstance(value, tuple):
        return [_serialize_value(item) for item in value]
    # Primitives: str, bool, None
    return value


def from_dict(data: dict[str, Any]) -> Node:
    """Reconstruct a typed node from a dict.

    Args:
        data: Dict with ``_type`` and node fields (as produced by to_dict).

    Returns:
        Typed node (frozen dataclass).

    Raises:
        ValueError: If ``_type`` is missing or unknown.

    """
    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized node"
        raise ValueError(msg)

    node_cls = _NODE_TYPES.get(type_name)
    if node_cls is None:
        msg = f"Unknown node type: {type_name!r}"
        raise ValueError(msg)

    kwargs: dict[str, Any] = {}
    for f in fields(node_cls):
        if f.name in data:
            kwargs[f.name] = _deserialize_value(data[f.name])
    return node_cls(**kwargs)


def _deserialize_value(value: Any) -> Any:
    if isinstance(value, dict):
        if value.get("_type") == "ValueKind":
            return ValueKind(value["value"])
        return from_dict(value)
    if isinstance(value, list):
        return tuple(_deserialize_value(item) for item in value)
    return value


def to_json(node: Node, *, indent: int | None = None) -> str:
    """Serialize a node to a JSON string (sorted keys)."""
    return json.dumps(to_dict(node), sort_keys=True, indent=indent)


def from_json(text: str) -> Node:
    """Deserialize a node from a JSON string produced by to_json."""
    return from_dict(json.loads(text))
