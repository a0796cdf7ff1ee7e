"""Tests for dateTime.iso8601 text."""

from datetime import datetime, timedelta, timezone

import pytest

from rpcwire.exceptions import MalformedDateError
from rpcwire.serialization import format_datetime, parse_datetime


def test_format_datetime():
    """Test zero-padded fixed-width output."""
    assert format_datetime(datetime(2009, 7, 4, 9, 5, 3)) == "20090704T09:05:03"


def test_format_pads_year():
    """Test years below 1000 are padded to four digits."""
    assert format_datetime(datetime(987, 1, 2, 3, 4, 5)) == "09870102T03:04:05"


def test_format_ignores_timezone():
    """Test that no offset is emitted."""
    value = datetime(2020, 1, 1, 12, 0, 0, tzinfo=timezone(timedelta(hours=5)))
    assert format_datetime(value) == "20200101T12:00:00"


def test_format_drops_microseconds():
    """Test second precision."""
    assert format_datetime(datetime(2020, 1, 1, 0, 0, 0, 999999)) == "20200101T00:00:00"


def test_parse_datetime_fields():
    """Test literal fields are kept."""
    value = parse_datetime("20090704T09:05:03")
    assert (value.year, value.month, value.day) == (2009, 7, 4)
    assert (value.hour, value.minute, value.second) == (9, 5, 3)


def test_parse_attaches_local_offset():
    """Test the decoding host's current offset is attached."""
    value = parse_datetime("20090704T09:05:03")
    assert value.tzinfo is not None
    assert value.utcoffset() == datetime.now().astimezone().utcoffset()


def test_parse_tolerates_surrounding_whitespace():
    """Test whitespace around the text is ignored."""
    assert parse_datetime("  20090704T09:05:03\n").day == 4


@pytest.mark.parametrize("text", [
    "2009-07-04T09:05:03",
    "20090704T090503",
    "20090704 09:05:03",
    "20090704T09:05:03Z",
    "",
])
def test_parse_rejects_malformed_text(text):
    """Test texts not matching the fixed pattern."""
    with pytest.raises(MalformedDateError) as exc_info:
        parse_datetime(text)
    assert exc_info.value.text == text


def test_parse_rejects_impossible_date():
    """Test out-of-calendar values."""
    with pytest.raises(MalformedDateError):
        parse_datetime("20091304T09:05:03")
