"""JSON form of the Pluma AST.

Every node becomes a dict tagged with its class name under ``_type``;
locations are tagged ``SourceLocation``; child tuples become lists. Keys are
sorted on output so equal documents always produce equal JSON.

Example:
    >>> from pluma import parse
    >>> doc = parse("> *quoted*")
    >>> from_json(to_json(doc)) == doc
    True

"""

import json
from dataclasses import fields
from typing import Any

from pluma.location import SourceLocation
from pluma.nodes import (
    Bold,
    BoldItalic,
    Document,
    Header,
    HorizontalRule,
    Image,
    Italic,
    Link,
    Node,
    Paragraph,
    Quote,
    Strikethrough,
    Text,
)

_LOCATION_TAG = "SourceLocation"

_NODE_TYPES: dict[str, type[Node]] = {
    cls.__name__: cls
    for cls in (
        Document,
        Header,
        Paragraph,
        HorizontalRule,
        Image,
        Quote,
        Text,
        Italic,
        Bold,
        BoldItalic,
        Strikethrough,
        Link,
    )
}


def _encode(value: Any) -> Any:
    match value:
        case Node():
            return to_dict(value)
        case SourceLocation():
            data = {f.name: getattr(value, f.name) for f in fields(value)}
            data["_type"] = _LOCATION_TAG
            return data
        case tuple():
            return [_encode(item) for item in value]
        case _:
            return value


def _decode(value: Any) -> Any:
    match value:
        case {"_type": "SourceLocation", **rest}:
            return SourceLocation(**rest)
        case {"_type": str()}:
            return from_dict(value)
        case list():
            return tuple(_decode(item) for item in value)
        case _:
            return value


def to_dict(node: Node) -> dict[str, Any]:
    """Convert a node and its descendants to plain dicts and lists."""
    data: dict[str, Any] = {f.name: _encode(getattr(node, f.name)) for f in fields(node)}
    data["_type"] = type(node).__name__
    return data


def from_dict(data: dict[str, Any]) -> Node:
    """Rebuild a node from the output of to_dict.

    Raises:
        ValueError: If ``_type`` is missing or names no Pluma node.

    """
    if "_type" not in data:
        raise ValueError("Missing '_type' field in serialized node")
    type_name = data["_type"]
    node_cls = _NODE_TYPES.get(type_name)
    if node_cls is None:
        raise ValueError(f"Unknown node type: {type_name!r}")
    return node_cls(**{f.name: _decode(data[f.name]) for f in fields(node_cls) if f.name in data})


def to_json(doc: Document, *, indent: int | None = None) -> str:
    """Serialize a document to JSON text with sorted keys."""
    return json.dumps(to_dict(doc), sort_keys=True, indent=indent)


def from_json(data: str) -> Document:
    """Deserialize a document from JSON text.

    Raises:
        ValueError: If the payload is malformed or its root is not a Document.

    """
    node = from_dict(json.loads(data))
    if not isinstance(node, Document):
        raise ValueError(f"Expected Document, got {type(node).__name__}")
    return node
