"""ISO 8601 datetime/date conversion utilities.

This module centralizes all transformations between Python datetime/date objects
and the two wire formats used by payloads:

- Round-trip timestamps: ``2024-03-10T14:30:00.0000000+02:00`` (seven
  fractional digits, explicit offset, ``Z`` for UTC)
- Calendar dates: ``2024-03-10``

All date/time string handling should go through these functions.
"""

import re
from datetime import datetime, date, timedelta

ROUNDTRIP_FRACTION_DIGITS = 7
_DATESTRING_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")


def to_roundtrip(dt: datetime) -> str:
    """Convert an aware datetime to a round-trip timestamp string."""
    if dt.tzinfo is None:
        raise ValueError("Cannot format a naive datetime as a round-trip timestamp")

    wall = dt.replace(tzinfo=None).isoformat(timespec="seconds")
    fraction = f"{dt.microsecond:06d}".ljust(ROUNDTRIP_FRACTION_DIGITS, "0")
    return f"{wall}.{fraction}{_offset_designator(dt)}"


def from_roundtrip(timestamp: str) -> datetime:
    """Parse an ISO 8601 timestamp string.

    Accepts the round-trip format as well as shorter ISO 8601 forms (no
    fraction, no offset, ``Z`` suffix, date only). The result is aware when
    the text carried an offset and naive otherwise.

    Raises:
        ValueError: If the text is not an ISO 8601 timestamp
    """
    return datetime.fromisoformat(timestamp.strip())


def to_datestring(d: date) -> str:
    """Convert date to ISO 8601 date string (YYYY-MM-DD)."""
    return d.isoformat()


def from_datestring(datestring: str) -> date:
    """Convert ISO 8601 date string (YYYY-MM-DD) to date.

    Raises:
        ValueError: If the text is not a YYYY-MM-DD date
    """
    text = datestring.strip()
    if not _DATESTRING_PATTERN.fullmatch(text):
        raise ValueError(f"Expected a YYYY-MM-DD date, got {datestring!r}")
    return date.fromisoformat(text)


def _offset_designator(dt: datetime) -> str:
    offset = dt.utcoffset()
    if offset == timedelta(0) and dt.tzname() == "UTC":
        return "Z"

    total_seconds = int(offset.total_seconds())
    sign = "+" if total_seconds >= 0 else "-"
    hours, remainder = divmod(abs(total_seconds), 3600)
    minutes, seconds = divmod(remainder, 60)
    # Local mean time offsets carry seconds
    if seconds:
        return f"{sign}{hours:02d}:{minutes:02d}:{seconds:02d}"
    return f"{sign}{hours:02d}:{minutes:02d}"
