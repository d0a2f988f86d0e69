"""Payload date codec.

Decodes date-time and calendar-date tokens from request payloads and encodes
them back for responses. Date-time values are shifted between the client's
wall clock and UTC; calendar dates are zone-free and pass through unshifted.

Date-time wire format: round-trip ISO 8601 with explicit offset, e.g.
``2024-06-15T09:00:00.0000000+02:00``. Calendar-date wire format:
``2024-06-15``.
"""

from datetime import date, datetime, tzinfo

from ..exceptions import DateDecodeError
from ..timezones import converter
from ..utils import isodatetime


def decode_instant(token, zone: tzinfo) -> datetime | None:
    """Decode a date-time token into a UTC instant.

    The text is parsed as ISO 8601. Any offset or ``Z`` it carries is
    stripped and the remaining wall-clock value is read in ``zone``; the
    stripped offset only picks between the two readings of a repeated
    wall-clock time.

    Args:
        token: Raw payload value; must be a string
        zone: Client zone the wall-clock value was observed in

    Returns:
        Aware UTC datetime, or None for an empty/whitespace string

    Raises:
        DateDecodeError: If token is not a string, not an ISO 8601 timestamp,
            or names a wall-clock time with no UTC instant in range
    """
    if not isinstance(token, str):
        raise DateDecodeError(
            f"Expected a date-time string, got {type(token).__name__}", value=token
        )
    if not token.strip():
        return None

    try:
        parsed = isodatetime.from_roundtrip(token)
    except ValueError:
        raise DateDecodeError(f"Invalid date-time format: {token!r}", value=token)

    local = parsed.replace(tzinfo=None)
    fold = converter.fold_for_offset(local, zone, parsed.utcoffset())
    try:
        return converter.local_datetime_to_utc_instant(local, zone, fold=fold)
    except ValueError:
        raise DateDecodeError(f"Date-time out of range for {zone}: {token!r}", value=token)


def encode_instant(value: datetime | None, zone: tzinfo) -> str | None:
    """Encode a UTC instant as a round-trip timestamp in ``zone``.

    None encodes as None (JSON null).
    """
    if value is None:
        return None
    return isodatetime.to_roundtrip(converter.utc_instant_to_zoned_datetime(value, zone))


def decode_calendar_date(token) -> date | None:
    """Decode a calendar-date token (YYYY-MM-DD). No zone is involved.

    Raises:
        DateDecodeError: If token is not a string or not a YYYY-MM-DD date
    """
    if not isinstance(token, str):
        raise DateDecodeError(
            f"Expected a date string, got {type(token).__name__}", value=token
        )
    if not token.strip():
        return None

    try:
        return isodatetime.from_datestring(token)
    except ValueError:
        raise DateDecodeError(f"Invalid date format: {token!r}", value=token)


def encode_calendar_date(value: date | None) -> str | None:
    """Encode a calendar date as YYYY-MM-DD; None encodes as None."""
    if value is None:
        return None
    return isodatetime.to_datestring(value)
