"""Tests for codec options."""

import pytest
from pydantic import ValidationError

from rpcwire.config import CodecOptions, EscapePolicy, resolve_options


def test_default_policy_is_substitute():
    """Test default escaping policy."""
    assert CodecOptions().escape is EscapePolicy.SUBSTITUTE


def test_policy_from_string():
    """Test that policy names are coerced to EscapePolicy."""
    options = CodecOptions(escape="identity")
    assert options.escape is EscapePolicy.IDENTITY


def test_invalid_policy_rejected():
    """Test that unknown policies fail validation."""
    with pytest.raises(ValidationError):
        CodecOptions(escape="html")


def test_options_are_frozen():
    """Test that options cannot be mutated after construction."""
    options = CodecOptions()
    with pytest.raises(ValidationError):
        options.escape = EscapePolicy.IDENTITY


def test_resolve_options_none_uses_defaults():
    """Test None resolves to default options."""
    assert resolve_options(None) == CodecOptions()


def test_resolve_options_passthrough():
    """Test explicit options are returned as-is."""
    options = CodecOptions(escape=EscapePolicy.IDENTITY)
    assert resolve_options(options) is options


def test_resolve_options_rejects_other_types():
    """Test that a non-CodecOptions argument raises TypeError."""
    with pytest.raises(TypeError, match="Expected CodecOptions"):
        resolve_options({"escape": "identity"})
