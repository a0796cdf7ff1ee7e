"""Base64 payloads for the ``base64`` node."""

import base64
import binascii

from rpcwire.exceptions import MalformedWireError


def encode_bytes(data: bytes | bytearray | memoryview) -> str:
    """Encode raw bytes as a single line of base64 text."""
    return base64.b64encode(bytes(data)).decode("ascii")


def decode_bytes(text: str) -> bytes:
    """Decode base64 text into raw bytes.

    Whitespace inside the payload is ignored, since other implementations
    wrap long payloads across lines.

    Raises:
        MalformedWireError: If the alphabet or padding is invalid
    """
    compact = "".join(text.split())
    try:
        return base64.b64decode(compact, validate=True)
    except (binascii.Error, ValueError) as e:
        raise MalformedWireError(f"Invalid base64 payload: {e}") from e
