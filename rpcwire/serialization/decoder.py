"""Convert XML-RPC wire trees to Python values."""

import logging
import math
import re
from datetime import datetime
from typing import Any, Callable

from pydantic import BaseModel

from rpcwire.config import CodecOptions, resolve_options
from rpcwire.exceptions import MalformedWireError, UnsupportedError
from rpcwire.serialization.binary import decode_bytes
from rpcwire.serialization.dates import parse_datetime
from rpcwire.types import Node

logger = logging.getLogger(__name__)

_INT_PATTERN = re.compile(r"^[+-]?[0-9]+$")


def deserialise(node: Node, options: CodecOptions | None = None) -> Any:
    """Convert a wire node to a Python value.

    Args:
        node: A "value" node, or any typed node (int, struct, ...)
        options: Codec options; defaults to ``CodecOptions()``. String
                 content is returned as-is whatever the escaping policy

    Returns:
        int, float, str, bool, aware datetime, bytes, dict or list

    Raises:
        MalformedWireError: If a known node has the wrong shape
        MalformedDateError: If a dateTime.iso8601 node holds invalid text
        UnsupportedError: If a node tag has no decoding rule

    Example:
        >>> deserialise(Node("value", [Node("int", ["42"])]))
        42
    """
    options = resolve_options(options)
    return _node_to_value(node, options)


def deserialise_model(node: Node, model_class: type[BaseModel], options: CodecOptions | None = None) -> BaseModel:
    """Decode a struct and validate it against a pydantic model.

    Args:
        node: A "value" or "struct" node
        model_class: Pydantic model class to validate against
        options: Codec options; defaults to ``CodecOptions()``

    Returns:
        Instance of model_class with data from the struct

    Raises:
        TypeError: If model_class is not a pydantic model
        MalformedWireError: If the node does not decode to a struct
        ValidationError: If the struct doesn't match the model schema
    """
    if not (isinstance(model_class, type) and issubclass(model_class, BaseModel)):
        raise TypeError(f"Expected Pydantic BaseModel class, got {model_class}")

    data = deserialise(node, options)
    if not isinstance(data, dict):
        raise MalformedWireError(f"Expected a struct, got {type(data).__name__}", node=node)

    return model_class(**data)


def _node_to_value(node: Node, options: CodecOptions) -> Any:
    if not isinstance(node, Node):
        raise UnsupportedError(f"Expected a Node, got {type(node).__name__}", subject=node)

    handler = _HANDLERS.get(node.tag)
    if handler is None:
        logger.debug("No decoding rule for <%s>", node.tag)
        raise UnsupportedError(f"Cannot deserialise <{node.tag}> node", subject=node)
    return handler(node, options)


def _significant(children: list) -> list:
    """Drop whitespace-only text tokens."""
    return [child for child in children if not (isinstance(child, str) and not child.strip())]


def _leaf_text(node: Node) -> str:
    """Return the text of a leaf node, rejecting nested elements."""
    if node.nodes():
        raise MalformedWireError(f"<{node.tag}> must contain only text", node=node)
    return node.text


def _decode_value(node: Node, options: CodecOptions) -> Any:
    children = _significant(node.children)

    if not children:
        # Untyped empty value defaults to string
        return ""

    if len(children) > 1:
        raise MalformedWireError("<value> must wrap a single element or text", node=node)

    child = children[0]
    if isinstance(child, str):
        return child
    return _node_to_value(child, options)


def _decode_int(node: Node, options: CodecOptions) -> int:
    text = _leaf_text(node)
    if not _INT_PATTERN.match(text.strip()):
        raise MalformedWireError(f"Invalid <{node.tag}> content: {text!r}", node=node)
    return int(text.strip())


def _decode_double(node: Node, options: CodecOptions) -> float:
    text = _leaf_text(node)
    try:
        value = float(text.strip())
    except ValueError as e:
        raise MalformedWireError(f"Invalid <double> content: {text!r}", node=node) from e
    if not math.isfinite(value):
        raise MalformedWireError(f"Non-finite <double> content: {text!r}", node=node)
    return value


def _decode_string(node: Node, options: CodecOptions) -> str:
    return _leaf_text(node)


def _decode_boolean(node: Node, options: CodecOptions) -> bool:
    return _leaf_text(node).strip() == "1"


def _decode_datetime(node: Node, options: CodecOptions) -> datetime:
    return parse_datetime(_leaf_text(node))


def _decode_base64(node: Node, options: CodecOptions) -> bytes:
    text = _leaf_text(node)
    if not text.strip():
        # Some servers send <base64/> for an empty payload
        return b""
    return decode_bytes(text)


def _decode_struct(node: Node, options: CodecOptions) -> dict:
    result = {}
    for member in _significant(node.children):
        if not isinstance(member, Node) or member.tag != "member":
            raise MalformedWireError("<struct> may only contain <member> elements", node=node)
        name, value = _split_member(member)
        # Duplicate names: last one wins
        result[name] = _decode_value(value, options)
    return result


def _split_member(member: Node) -> tuple[str, Node]:
    """Return the name text and value node of a ``member``."""
    parts = _significant(member.children)
    if (
        len(parts) != 2
        or not isinstance(parts[0], Node)
        or parts[0].tag != "name"
        or not isinstance(parts[1], Node)
        or parts[1].tag != "value"
    ):
        raise MalformedWireError("<member> must contain a <name> followed by a <value>", node=member)

    name_node, value_node = parts
    if name_node.nodes():
        raise MalformedWireError("<name> must contain only text", node=member)
    if not name_node.text:
        raise MalformedWireError("<name> must not be empty", node=member)
    return name_node.text, value_node


def _decode_array(node: Node, options: CodecOptions) -> list:
    children = _significant(node.children)
    if len(children) != 1 or not isinstance(children[0], Node) or children[0].tag != "data":
        raise MalformedWireError("<array> must contain exactly one <data> element", node=node)

    items = []
    for child in _significant(children[0].children):
        if not isinstance(child, Node):
            raise MalformedWireError("<data> may only contain elements", node=children[0])
        items.append(_node_to_value(child, options))
    return items


_HANDLERS: dict[str, Callable[[Node, CodecOptions], Any]] = {
    "value": _decode_value,
    "int": _decode_int,
    "i4": _decode_int,
    "double": _decode_double,
    "string": _decode_string,
    "boolean": _decode_boolean,
    "dateTime.iso8601": _decode_datetime,
    "base64": _decode_base64,
    "struct": _decode_struct,
    "array": _decode_array,
}
