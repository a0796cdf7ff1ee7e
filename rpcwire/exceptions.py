"""Exception classes for rpcwire."""

from typing import Any


class RpcWireError(Exception):
    """Base exception for all rpcwire errors."""


class NotRepresentableError(RpcWireError):
    """Raised when a float has no XML-RPC representation (NaN or infinity).

    Attributes:
        value: The rejected float
    """

    def __init__(self, message: str, value: float | None = None):
        super().__init__(message)
        self.value = value


class OutOfRangeError(RpcWireError):
    """Raised when an integer falls outside the accepted XML-RPC range.

    Attributes:
        value: The rejected integer
    """

    def __init__(self, message: str, value: int | None = None):
        super().__init__(message)
        self.value = value


class UnsupportedError(RpcWireError):
    """Raised when a value or wire node has no codec rule.

    Attributes:
        subject: The Python value (on encode) or Node (on decode) that
                 could not be handled
    """

    def __init__(self, message: str, subject: Any = None):
        super().__init__(message)
        self.subject = subject


class MalformedWireError(RpcWireError):
    """Raised when a wire tree does not match the XML-RPC value grammar.

    Covers struct, member, array and leaf shapes as well as invalid
    base64 payloads.

    Attributes:
        node: The offending node (optional)
    """

    def __init__(self, message: str, node: Any = None):
        super().__init__(message)
        self.node = node


class MalformedDateError(RpcWireError):
    """Raised when dateTime.iso8601 text does not match YYYYMMDDTHH:MM:SS.

    Attributes:
        text: The rejected text
    """

    def __init__(self, message: str, text: str | None = None):
        super().__init__(message)
        self.text = text
