"""Time zone handling for datenorm.

- registry: resolves zone ids, holds the server zone and the request-scoped
  client zone
- converter: pure conversions between naive local time, UTC instants and
  calendar dates

    from datenorm.timezones import converter, registry
    instant = converter.local_date_to_utc_instant(d, registry.current_client_zone())
"""

from . import converter, registry

__all__ = ["converter", "registry"]
