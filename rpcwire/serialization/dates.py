"""Conversion between datetimes and dateTime.iso8601 text."""

import re
from datetime import datetime

from rpcwire.exceptions import MalformedDateError


_ISO8601_PATTERN = re.compile(r"^(\d{4})(\d{2})(\d{2})T(\d{2}):(\d{2}):(\d{2})$")


def format_datetime(value: datetime) -> str:
    """Format a datetime as ``YYYYMMDDTHH:MM:SS``.

    Any tzinfo on ``value`` is ignored; XML-RPC dates carry no offset.

    Example:
        >>> format_datetime(datetime(2009, 7, 4, 9, 5, 0))
        '20090704T09:05:00'
    """
    return (
        f"{value.year:04d}{value.month:02d}{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    )


def parse_datetime(text: str) -> datetime:
    """Parse ``YYYYMMDDTHH:MM:SS`` text into an aware datetime.

    The wire carries no offset, so the result is stamped with the decoding
    host's current local UTC offset. That offset says nothing about the
    sender.

    Args:
        text: Date text; surrounding whitespace is tolerated

    Returns:
        A datetime with a fixed-offset tzinfo

    Raises:
        MalformedDateError: If the text does not match the pattern or names
                            an impossible calendar point
    """
    match = _ISO8601_PATTERN.match(text.strip())
    if match is None:
        raise MalformedDateError(f"Invalid dateTime.iso8601 value: {text!r}", text=text)

    year, month, day, hour, minute, second = (int(group) for group in match.groups())
    local_tz = datetime.now().astimezone().tzinfo
    try:
        return datetime(year, month, day, hour, minute, second, tzinfo=local_tz)
    except ValueError as e:
        raise MalformedDateError(f"Invalid dateTime.iso8601 value {text!r}: {e}", text=text) from e
