"""rpcwire - XML-RPC value codec.

rpcwire converts Python values to and from the XML-RPC ``<value>`` grammar,
expressed as a generic tree of tagged nodes that an XML layer can parse and
print.
"""

from rpcwire._version import __version__
from rpcwire.types import Node, Label
from rpcwire.config import CodecOptions, EscapePolicy
from rpcwire.exceptions import (
    RpcWireError,
    NotRepresentableError,
    OutOfRangeError,
    UnsupportedError,
    MalformedWireError,
    MalformedDateError,
)
from rpcwire.serialization import serialise, deserialise, deserialise_model
from rpcwire.etree import from_element, to_element

__all__ = [
    "__version__",
    "Node",
    "Label",
    "CodecOptions",
    "EscapePolicy",
    "RpcWireError",
    "NotRepresentableError",
    "OutOfRangeError",
    "UnsupportedError",
    "MalformedWireError",
    "MalformedDateError",
    "serialise",
    "deserialise",
    "deserialise_model",
    "from_element",
    "to_element",
]
