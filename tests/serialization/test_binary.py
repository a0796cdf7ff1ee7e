"""Tests for base64 payloads."""

import pytest

from rpcwire.exceptions import MalformedWireError
from rpcwire.serialization import encode_bytes, decode_bytes


def test_encode_bytes():
    """Test encoding to base64 text."""
    assert encode_bytes(b"\x00\x01\xff") == "AAH/"


def test_encode_has_no_line_breaks():
    """Test long payloads stay on one line."""
    text = encode_bytes(b"x" * 200)
    assert "\n" not in text
    assert not text.endswith("\n")


def test_encode_bytearray():
    """Test encoding a bytearray."""
    assert encode_bytes(bytearray(b"hi")) == "aGk="


def test_decode_bytes():
    """Test decoding base64 text."""
    assert decode_bytes("AAH/") == b"\x00\x01\xff"


def test_decode_ignores_line_wrapping():
    """Test payloads wrapped across lines still decode."""
    assert decode_bytes("aGVs\nbG8=\n") == b"hello"


def test_decode_invalid_alphabet():
    """Test characters outside the base64 alphabet are rejected."""
    with pytest.raises(MalformedWireError):
        decode_bytes("a$b=")


def test_decode_invalid_padding():
    """Test bad padding is rejected."""
    with pytest.raises(MalformedWireError):
        decode_bytes("aGk")
