"""Client time zone selection for incoming requests.

Every request may declare the client's time zone in a header (default
``X-Timezone``, e.g. ``X-Timezone: Africa/Johannesburg``). The zone is bound
to the request's context before the body is decoded and released when the
request ends, so concurrent or pooled requests never see each other's zone.
"""

import logging

from flask import g, request

from ..config import settings
from ..exceptions import TimeZoneError
from ..timezones import registry

logger = logging.getLogger(__name__)


def apply_client_time_zone():
    """
    Bind the request's declared time zone as the client zone.

    A missing or blank header selects settings.default_time_zone. An unknown
    zone is rejected when settings.reject_unknown_time_zone is set; otherwise
    it is logged and the default zone applies.

    Stores the applied zone key in flask.g.client_time_zone.

    Raises:
        TimeZoneError: If the header names an unknown zone and unknown zones
            are rejected
    """
    # Pooled worker threads may still hold the previous request's zone
    registry.clear_client_zone()

    declared = request.headers.get(settings.time_zone_header)
    resolution = registry.set_client_zone(declared)

    if not resolution:
        if settings.reject_unknown_time_zone:
            raise TimeZoneError(
                resolution.error,
                {"header": settings.time_zone_header, "time_zone": declared}
            )

        fallback = registry.set_client_zone(None)
        if not fallback:
            logger.error(
                f"Default time zone {settings.default_time_zone!r} is invalid; using UTC"
            )

    g.client_time_zone = registry.current_client_zone().key
    logger.debug(f"Client time zone for {request.path}: {g.client_time_zone}")


def release_client_time_zone(exc=None):
    """Drop the request's client zone (teardown_request handler)."""
    registry.clear_client_zone()
