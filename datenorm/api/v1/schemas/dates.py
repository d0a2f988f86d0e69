"""Pydantic schemas for the date normalization endpoints."""

from pydantic import BaseModel, Field

from ....schema.types import Instant, OptionalCalendarDate, OptionalInstant


class DateNormalizeRequest(BaseModel):
    """Payload carrying one date-time and one calendar date from the client."""

    event_time: OptionalInstant = Field(
        default=None,
        description="Client wall-clock date-time; stored as a UTC instant"
    )
    event_date: OptionalCalendarDate = Field(
        default=None,
        description="Calendar date (YYYY-MM-DD); not zone-shifted"
    )


class DateNormalizeResponse(BaseModel):
    """How the request's values were interpreted."""

    client_time_zone: str
    received_date_time_raw: str | None = Field(
        default=None,
        description="Decoded event_time as a UTC round-trip timestamp"
    )
    received_date_only_raw: str | None = Field(
        default=None,
        description="Decoded event_date as YYYY-MM-DD"
    )
    event_time: OptionalInstant = None
    event_date: OptionalCalendarDate = None
    converted_date_only: OptionalCalendarDate = Field(
        default=None,
        description="UTC calendar date of event_date's midnight in the client zone"
    )
    converted_safe_date_only: OptionalCalendarDate = Field(
        default=None,
        description="event_date's midnight instant mapped back to the client's calendar"
    )


class ServerTimeResponse(BaseModel):
    """Current time as seen by the server and by the client."""

    server_time_zone: str
    client_time_zone: str
    server_local_time: str = Field(
        description="Server wall-clock time without offset (display only)"
    )
    client_time: Instant
