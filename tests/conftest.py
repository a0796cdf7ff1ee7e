"""Shared test configuration and fixtures."""

import xml.etree.ElementTree as ET

import pytest

from rpcwire import CodecOptions, EscapePolicy, from_element


@pytest.fixture
def identity_options():
    """Options for text that an outer XML layer escapes on its own."""
    return CodecOptions(escape=EscapePolicy.IDENTITY)


@pytest.fixture
def substitute_options():
    """Options that substitute & and < with entity references."""
    return CodecOptions(escape=EscapePolicy.SUBSTITUTE)


@pytest.fixture
def parse_wire():
    """Parse an XML snippet into a wire tree via ElementTree."""
    def _parse(xml_string: str):
        return from_element(ET.fromstring(xml_string))
    return _parse
