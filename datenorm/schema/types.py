"""Payload field types for date and date-time values.

Date-time and calendar-date are distinct tagged types, each bound to its own
codec, so a model says by annotation which fields are zone-shifted:

    class Event(BaseModel):
        starts_at: Instant                  # client wall clock <-> UTC
        ends_at: OptionalInstant = None
        day: CalendarDate                   # passed through, no zone

The zone for a validate/dump call comes from the pydantic context key
``time_zone`` when the caller supplies one, otherwise from the registry's
current client zone:

    Event.model_validate(body, context={"time_zone": zone})
    event.model_dump(mode="json", context={"time_zone": zone})

Values that are already typed (aware datetimes built in Python) skip parsing
and are normalized to UTC; naive datetimes are rejected.
"""

from datetime import date, datetime, tzinfo
from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer, SerializationInfo, ValidationInfo

from ..timezones import converter, registry
from . import codec

TIME_ZONE_CONTEXT_KEY = "time_zone"


def _zone_from(info: ValidationInfo | SerializationInfo) -> tzinfo:
    context = info.context or {}
    zone = context.get(TIME_ZONE_CONTEXT_KEY)
    return zone if zone is not None else registry.current_client_zone()


def _validate_instant(value: Any, info: ValidationInfo) -> Any:
    if value is None:
        return None
    if isinstance(value, datetime):
        return converter.ensure_utc_instant(value)
    return codec.decode_instant(value, _zone_from(info))


def _serialize_instant(value: datetime | None, info: SerializationInfo) -> str | None:
    return codec.encode_instant(value, _zone_from(info))


def _validate_calendar_date(value: Any) -> Any:
    if value is None:
        return None
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    return codec.decode_calendar_date(value)


def _serialize_calendar_date(value: date | None) -> str | None:
    return codec.encode_calendar_date(value)


Instant = Annotated[
    datetime,
    BeforeValidator(_validate_instant),
    PlainSerializer(_serialize_instant, return_type=str, when_used="json"),
]
"""UTC instant; wire form is the client's wall clock with offset."""

OptionalInstant = Annotated[
    datetime | None,
    BeforeValidator(_validate_instant),
    PlainSerializer(_serialize_instant, return_type=str | None, when_used="json"),
]
"""Instant that may be absent; empty strings decode to None."""

CalendarDate = Annotated[
    date,
    BeforeValidator(_validate_calendar_date),
    PlainSerializer(_serialize_calendar_date, return_type=str, when_used="json"),
]
"""Calendar date; wire form is YYYY-MM-DD, never zone-shifted."""

OptionalCalendarDate = Annotated[
    date | None,
    BeforeValidator(_validate_calendar_date),
    PlainSerializer(_serialize_calendar_date, return_type=str | None, when_used="json"),
]
"""Calendar date that may be absent; empty strings decode to None."""
