"""Convert Python values to XML-RPC wire trees."""

import logging
import math
from collections.abc import Mapping
from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel

from rpcwire.config import CodecOptions, resolve_options
from rpcwire.exceptions import NotRepresentableError, OutOfRangeError, UnsupportedError
from rpcwire.serialization.binary import encode_bytes
from rpcwire.serialization.dates import format_datetime
from rpcwire.serialization.escaping import escape
from rpcwire.types import Label, Node

logger = logging.getLogger(__name__)

# Upper bound is inclusive: 2**31 is accepted although the signed 32-bit
# maximum is 2**31 - 1. Kept for compatibility with existing peers.
INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31


def serialise(value: Any, options: CodecOptions | None = None) -> Node:
    """Convert a Python value to a ``value`` wire node.

    Args:
        value: int, float, str, Label, Enum member, bool, datetime, bytes,
               mapping, pydantic model, list or tuple (nested freely)
        options: Codec options; defaults to ``CodecOptions()``

    Returns:
        A Node tagged "value" wrapping the typed node

    Raises:
        OutOfRangeError: If an int is outside [-2**31, 2**31]
        NotRepresentableError: If a float is NaN or infinite
        UnsupportedError: If a value (or struct key) has no XML-RPC form

    Example:
        >>> serialise(42)
        Node(tag='value', children=[Node(tag='int', children=['42'])])
    """
    options = resolve_options(options)
    return Node("value", [_value_to_node(value, options)])


def _value_to_node(value: Any, options: CodecOptions) -> Node:
    """Convert a value to its typed node (without the ``value`` wrapper)."""
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return Node("boolean", ["1" if value else "0"])

    elif isinstance(value, (Label, Enum)):
        return _string_node(escape(_label_text(value), options.escape))

    elif isinstance(value, int):
        if not INT_MIN <= value <= INT_MAX:
            logger.debug("Rejecting out-of-range int %d", value)
            raise OutOfRangeError(f"Integer {value} outside XML-RPC range", value=value)
        return Node("int", [str(value)])

    elif isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            logger.debug("Rejecting non-finite float %r", value)
            raise NotRepresentableError(f"Float {value!r} cannot be represented in XML-RPC", value=value)
        return Node("double", [repr(value)])

    elif isinstance(value, str):
        return _string_node(value)

    elif isinstance(value, datetime):
        return Node("dateTime.iso8601", [format_datetime(value)])

    elif isinstance(value, (bytes, bytearray, memoryview)):
        encoded = encode_bytes(value)
        return Node("base64", [encoded] if encoded else [])

    elif isinstance(value, BaseModel):
        # Nested pydantic model: fields in declaration order, None skipped
        fields = {
            name: getattr(value, name)
            for name in type(value).model_fields
            if getattr(value, name) is not None
        }
        return _struct_node(fields, options)

    elif isinstance(value, Mapping):
        return _struct_node(value, options)

    elif isinstance(value, (list, tuple)):
        data = Node("data", [serialise(item, options) for item in value])
        return Node("array", [data])

    logger.debug("No encoding rule for %s", type(value).__name__)
    raise UnsupportedError(f"Cannot serialise value of type {type(value).__name__}", subject=value)


def _string_node(text: str) -> Node:
    return Node("string", [text] if text else [])


def _label_text(label: Label | Enum) -> str:
    if isinstance(label, Label):
        return label.name
    return str(label.value)


def _struct_node(members: Mapping, options: CodecOptions) -> Node:
    """Build a ``struct`` node; member names are emitted unescaped."""
    struct = Node("struct")
    for key, val in members.items():
        if isinstance(key, Label):
            key = key.name
        elif not isinstance(key, str):
            raise UnsupportedError(f"Struct member name must be a string, got {type(key).__name__}", subject=key)
        if not key:
            raise UnsupportedError("Struct member name must not be empty", subject=key)
        struct.children.append(Node("member", [Node("name", [key]), serialise(val, options)]))
    return struct
