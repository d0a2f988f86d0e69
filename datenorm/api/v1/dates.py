"""Date normalization endpoints for datenorm API.

This module implements endpoints that show how payload dates are interpreted
for the requesting client's time zone:
- POST /api/v1/dates/normalize  - Decode and echo a date-time and a calendar date
- GET  /api/v1/dates/now        - Current time in the server and client zones

Architecture Notes:
- The client zone is bound per request by api.time_zone before the body is decoded
- Date-time fields are stored as UTC instants, calendar dates as plain dates
- Responses are dumped in the client zone via api.serialization.dump_payload
"""

from datetime import datetime, UTC

from flask import Blueprint, jsonify

from ...exceptions import ValidationError
from ...timezones import converter, registry
from ...utils import isodatetime
from ..serialization import dump_payload
from ..validation import validate_request
from .schemas.dates import DateNormalizeRequest, DateNormalizeResponse, ServerTimeResponse


dates_bp = Blueprint("dates", __name__, url_prefix="/dates")


@dates_bp.post("/normalize")
@validate_request
def normalize_dates(data: DateNormalizeRequest):
    """
    Echo how the submitted dates were normalized.

    Request Body (DateNormalizeRequest):
        - event_time: date-time string in the client's wall clock (optional)
        - event_date: YYYY-MM-DD (optional)

    Returns:
        200: DateNormalizeResponse
        400: Validation error (malformed or out-of-range date or date-time)
    """
    zone = registry.current_client_zone()

    received_date_time_raw = None
    if data.event_time is not None:
        received_date_time_raw = isodatetime.to_roundtrip(data.event_time)

    received_date_only_raw = None
    converted_date_only = None
    converted_safe_date_only = None
    if data.event_date is not None:
        received_date_only_raw = isodatetime.to_datestring(data.event_date)
        try:
            midnight = converter.local_date_to_utc_instant(data.event_date, zone)
        except ValueError as e:
            raise ValidationError(
                f"event_date has no midnight instant in {zone.key}",
                {"field": "event_date", "value": received_date_only_raw, "reason": str(e)}
            )
        converted_date_only = midnight.date()
        converted_safe_date_only = converter.utc_instant_to_local_date(midnight, zone)

    result = DateNormalizeResponse(
        client_time_zone=zone.key,
        received_date_time_raw=received_date_time_raw,
        received_date_only_raw=received_date_only_raw,
        event_time=data.event_time,
        event_date=data.event_date,
        converted_date_only=converted_date_only,
        converted_safe_date_only=converted_safe_date_only,
    )
    return jsonify(dump_payload(result))


@dates_bp.get("/now")
def server_time():
    """
    Current time in the server zone and in the client zone.

    Returns:
        200: ServerTimeResponse
    """
    result = ServerTimeResponse(
        server_time_zone=registry.current_server_zone().key,
        client_time_zone=registry.current_client_zone().key,
        server_local_time=registry.now_in_server_zone().isoformat(),
        client_time=datetime.now(UTC),
    )
    return jsonify(dump_payload(result))
