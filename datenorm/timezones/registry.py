"""Time zone resolution and the server/client zone slots.

The server zone is process-wide and written once at startup. The client zone
is request-scoped: it lives in a ContextVar, so every thread, task or request
context sees only the zone it set itself.

Resolution never raises. Setters return a ZoneResolution, which is truthy on
success and carries the rejected id and reason on failure; the slot keeps its
previous value when resolution fails.
"""

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from datetime import datetime, UTC
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..config import settings
from . import converter

logger = logging.getLogger(__name__)

UTC_ZONE = ZoneInfo("UTC")

# Windows display ids accepted alongside IANA keys (CLDR "001" territory)
WINDOWS_ZONE_ALIASES = {
    "UTC": "UTC",
    "GMT Standard Time": "Europe/London",
    "W. Europe Standard Time": "Europe/Berlin",
    "Central Europe Standard Time": "Europe/Budapest",
    "Central European Standard Time": "Europe/Warsaw",
    "Romance Standard Time": "Europe/Paris",
    "South Africa Standard Time": "Africa/Johannesburg",
    "Eastern Standard Time": "America/New_York",
    "Central Standard Time": "America/Chicago",
    "Mountain Standard Time": "America/Denver",
    "Pacific Standard Time": "America/Los_Angeles",
    "India Standard Time": "Asia/Kolkata",
    "China Standard Time": "Asia/Shanghai",
    "Singapore Standard Time": "Asia/Singapore",
    "Tokyo Standard Time": "Asia/Tokyo",
    "AUS Eastern Standard Time": "Australia/Sydney",
}

_server_zone: ZoneInfo = UTC_ZONE
_client_zone: ContextVar[ZoneInfo | None] = ContextVar("_client_zone", default=None)


@dataclass(frozen=True)
class ZoneResolution:
    """Outcome of resolving a time zone id.

    Attributes:
        zone_id: The id as requested (after default substitution)
        zone: Resolved zone, or None when resolution failed
        error: Reason for failure, or None on success
    """

    zone_id: str | None
    zone: ZoneInfo | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.zone is not None

    def __bool__(self) -> bool:
        return self.ok


def resolve_zone(zone_id: str | None) -> ZoneResolution:
    """Look up a time zone id in the host time zone database.

    Accepts IANA keys and the Windows ids in WINDOWS_ZONE_ALIASES.
    """
    if zone_id is None or not zone_id.strip():
        return ZoneResolution(zone_id, error="Time zone id is empty")

    key = WINDOWS_ZONE_ALIASES.get(zone_id.strip(), zone_id.strip())
    try:
        zone = ZoneInfo(key)
    except ZoneInfoNotFoundError:
        return ZoneResolution(zone_id, error=f"Unknown time zone: {zone_id}")
    except (ValueError, OSError) as e:
        return ZoneResolution(zone_id, error=f"Invalid time zone id {zone_id!r}: {e}")

    return ZoneResolution(zone_id, zone=zone)


def set_server_zone(zone_id: str) -> ZoneResolution:
    """Resolve and assign the process-wide server zone.

    Intended to run once at startup. On failure the previous server zone
    stays in place.
    """
    global _server_zone

    resolution = resolve_zone(zone_id)
    if resolution:
        _server_zone = resolution.zone
    else:
        logger.warning(f"Server time zone not changed: {resolution.error}")
    return resolution


def set_client_zone(zone_id: str | None) -> ZoneResolution:
    """Resolve and assign the client zone for the current context.

    None or a blank id substitutes settings.default_time_zone. On failure
    the current context keeps whatever client zone it already had.
    """
    if zone_id is None or not zone_id.strip():
        zone_id = settings.default_time_zone

    resolution = resolve_zone(zone_id)
    if resolution:
        _client_zone.set(resolution.zone)
    else:
        logger.warning(f"Client time zone not changed: {resolution.error}")
    return resolution


def clear_client_zone() -> None:
    """Forget the client zone of the current context."""
    _client_zone.set(None)


@contextmanager
def client_zone(zone_id: str | None):
    """Apply a client zone for the duration of a block.

    The previous client zone of the context is restored on exit, whether or
    not resolution succeeded.

        with registry.client_zone("Africa/Johannesburg") as resolution:
            ...
    """
    token = _client_zone.set(_client_zone.get())
    try:
        yield set_client_zone(zone_id)
    finally:
        _client_zone.reset(token)


def current_server_zone() -> ZoneInfo:
    """Server zone; UTC until set_server_zone succeeds."""
    return _server_zone


def current_client_zone() -> ZoneInfo:
    """Client zone of the current context; UTC when none was set."""
    zone = _client_zone.get()
    return zone if zone is not None else UTC_ZONE


def now_in_server_zone() -> datetime:
    """Current wall-clock time in the server zone, as a naive datetime.

    For display only; store instants, not this value.
    """
    return converter.utc_instant_to_local_datetime(datetime.now(UTC), current_server_zone())
