"""Conversions between naive local time, UTC instants and calendar dates.

All functions are pure and take the zone as an explicit argument. The
registry is only a convenient source of zones for callers; nothing here
reads ambient state or the host's local time zone.

Vocabulary:
- Instant: aware datetime in UTC
- Naive local datetime: datetime with tzinfo=None, meaningful only together
  with a zone
- Calendar date: date with no time-of-day and no zone

Ambiguous and nonexistent wall-clock times at DST transitions are resolved
by zoneinfo's PEP 495 rules (fold=0 unless stated otherwise).
"""

from datetime import date, datetime, time, timedelta, tzinfo, UTC


def ensure_utc_instant(value: datetime) -> datetime:
    """Normalize an aware datetime to UTC.

    Raises:
        ValueError: If value is naive (it names no instant) or cannot be
            represented in UTC
    """
    if value.tzinfo is None or value.utcoffset() is None:
        raise ValueError("Naive datetime is not an instant; convert it through a zone first")
    return _shift(value, UTC)


def local_datetime_to_utc_instant(local: datetime, zone: tzinfo, fold: int = 0) -> datetime:
    """Resolve a naive wall-clock datetime in ``zone`` to a UTC instant.

    Args:
        local: Naive datetime (tzinfo must be None)
        zone: Zone the wall-clock value was observed in
        fold: PEP 495 fold used when the wall-clock time occurs twice

    Raises:
        ValueError: If local already carries a tzinfo, or the instant falls
            outside the datetime range
    """
    if local.tzinfo is not None:
        raise ValueError("Expected a naive datetime; strip its zone explicitly before converting")
    return _shift(local.replace(tzinfo=zone, fold=fold), UTC)


def local_date_to_utc_instant(d: date, zone: tzinfo) -> datetime:
    """Convert a calendar date to the UTC instant of its midnight in ``zone``.

    Example: 2024-03-10 in Africa/Johannesburg (UTC+2) is 2024-03-09T22:00:00Z.
    """
    midnight = datetime.combine(d, time.min)
    return local_datetime_to_utc_instant(midnight, zone)


def utc_instant_to_zoned_datetime(instant: datetime, zone: tzinfo) -> datetime:
    """Convert an instant to an aware wall-clock datetime in ``zone``.

    Raises:
        ValueError: If instant is naive, or its wall clock in ``zone`` falls
            outside the datetime range
    """
    return _shift(ensure_utc_instant(instant), zone)


def utc_instant_to_local_datetime(instant: datetime, zone: tzinfo) -> datetime:
    """Convert an instant to a naive wall-clock datetime in ``zone``."""
    return utc_instant_to_zoned_datetime(instant, zone).replace(tzinfo=None)


def utc_instant_to_local_date(instant: datetime, zone: tzinfo) -> date:
    """Take the calendar date an instant falls on in ``zone``."""
    return utc_instant_to_zoned_datetime(instant, zone).date()


def fold_for_offset(local: datetime, zone: tzinfo, offset: timedelta | None) -> int:
    """Pick the fold whose UTC offset in ``zone`` equals ``offset``.

    Repeated wall-clock times (DST fall-back) have two offsets. When a
    timestamp arrived with one of them, the matching fold reproduces the
    instant it was encoded from. Returns 0 when there is nothing to match.
    """
    if offset is None:
        return 0

    first = local.replace(tzinfo=zone, fold=0).utcoffset()
    second = local.replace(tzinfo=zone, fold=1).utcoffset()
    if first != offset and second == offset:
        return 1
    return 0


def _shift(value: datetime, zone: tzinfo) -> datetime:
    # Wall clocks near datetime.min/max can land outside the supported range
    try:
        return value.astimezone(zone)
    except OverflowError:
        raise ValueError(f"{value.isoformat()} cannot be represented in {zone}")
