"""Codec options for rpcwire."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class EscapePolicy(str, Enum):
    """How label text is escaped on its way to the wire."""

    SUBSTITUTE = "substitute"
    IDENTITY = "identity"


class CodecOptions(BaseModel):
    """Immutable options threaded through every encode/decode call.

    Example:
        >>> options = CodecOptions(escape="identity")
        >>> options.escape
        <EscapePolicy.IDENTITY: 'identity'>
    """

    model_config = ConfigDict(frozen=True)

    escape: EscapePolicy = Field(
        default=EscapePolicy.SUBSTITUTE,
        description=(
            "'substitute' replaces & and < with entity references; "
            "'identity' leaves label text untouched for callers whose XML layer escapes on its own"
        ),
    )


DEFAULT_OPTIONS = CodecOptions()


def resolve_options(options: CodecOptions | None) -> CodecOptions:
    """Return ``options`` or the defaults when None."""
    if options is None:
        return DEFAULT_OPTIONS
    if not isinstance(options, CodecOptions):
        raise TypeError(f"Expected CodecOptions, got {type(options)}")
    return options
