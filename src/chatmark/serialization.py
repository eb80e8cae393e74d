"""Document serialization: JSON round-trip for chatmark nodes.

Converts nodes to JSON-compatible dicts with a ``_type`` discriminator and
back. This is the shape handed to a browser-side renderer or stored next
to a chat transcript.

Output is deterministic (sorted keys).

Example:
    from chatmark import parse
    from chatmark.serialization import to_json, from_json

    doc = parse("**Totals**\\n\\nA | B\\n--|--\\n1 | 2")
    assert from_json(to_json(doc)) == doc

Thread Safety:
    All functions are pure.

"""

import json
from dataclasses import fields, is_dataclass
from typing import Any

from chatmark.errors import SerializationError
from chatmark.location import SourceLocation
from chatmark.nodes import (
    Bold,
    BulletList,
    Code,
    Document,
    InlineCode,
    Italic,
    NumberedList,
    Paragraph,
    PlainText,
    Table,
)

_NODE_TYPES: dict[str, type] = {
    cls.__name__: cls
    for cls in (
        Document,
        Table,
        Code,
        BulletList,
        NumberedList,
        Paragraph,
        PlainText,
        Bold,
        Italic,
        InlineCode,
        SourceLocation,
    )
}


def to_dict(node: Any) -> dict[str, Any]:
    """Convert a node (block, span or location) to a JSON-compatible dict.

    Args:
        node: Any chatmark node.

    Returns:
        Dict with ``_type`` and every dataclass field, metadata included.

    """
    result: dict[str, Any] = {"_type": type(node).__name__}
    for f in fields(node):
        result[f.name] = _serialize_value(getattr(node, f.name))
    return result


def _serialize_value(value: Any) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        return to_dict(value)
    if isinstance(value, tuple):
        return [_serialize_value(item) for item in value]
    # Primitives: str, int, bool, None
    return value


def from_dict(data: dict[str, Any]) -> Any:
    """Rebuild a node from a dict produced by ``to_dict``.

    Raises:
        SerializationError: If ``_type`` is missing or unknown.

    """
    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized node"
        raise SerializationError(msg)

    node_cls = _NODE_TYPES.get(type_name)
    if node_cls is None:
        msg = f"Unknown node type: {type_name!r}"
        raise SerializationError(msg)

    kwargs = {f.name: _deserialize_value(data[f.name]) for f in fields(node_cls) if f.name in data}
    try:
        return node_cls(**kwargs)
    except TypeError as e:
        msg = f"Invalid fields for {type_name}: {e}"
        raise SerializationError(msg) from e


def _deserialize_value(value: Any) -> Any:
    if isinstance(value, dict):
        return from_dict(value)
    if isinstance(value, list):
        # Lists only ever come from tuples (children, items, rows, cells)
        return tuple(_deserialize_value(item) for item in value)
    return value


def to_json(doc: Document, *, indent: int | None = None) -> str:
    """Serialize a Document to a JSON string.

    Args:
        doc: Document to serialize.
        indent: JSON indentation level (None for compact).

    """
    return json.dumps(to_dict(doc), sort_keys=True, indent=indent, ensure_ascii=False)


def from_json(data: str) -> Document:
    """Deserialize a Document from a JSON string.

    Raises:
        SerializationError: If the payload is not a serialized Document.

    """
    try:
        raw = json.loads(data)
    except json.JSONDecodeError as e:
        msg = f"Invalid JSON: {e}"
        raise SerializationError(msg) from e
    if not isinstance(raw, dict):
        msg = f"Expected a JSON object, got {type(raw).__name__}"
        raise SerializationError(msg)
    node = from_dict(raw)
    if not isinstance(node, Document):
        msg = f"Expected Document, got {type(node).__name__}"
        raise SerializationError(msg)
    return node
