"""XML-RPC value serialization."""

from rpcwire.serialization.encoder import serialise
from rpcwire.serialization.decoder import deserialise, deserialise_model
from rpcwire.serialization.escaping import escape, unescape
from rpcwire.serialization.binary import encode_bytes, decode_bytes
from rpcwire.serialization.dates import format_datetime, parse_datetime

__all__ = [
    "serialise",
    "deserialise",
    "deserialise_model",
    "escape",
    "unescape",
    "encode_bytes",
    "decode_bytes",
    "format_datetime",
    "parse_datetime",
]
