"""Shared test fixtures for datenorm."""

from zoneinfo import ZoneInfo

import pytest

from datenorm.main import app
from datenorm.timezones import registry


@pytest.fixture(autouse=True)
def restore_time_zones():
    """Give every test a clean server/client zone and restore it afterwards."""
    original_server_zone = registry.current_server_zone()
    registry.clear_client_zone()

    yield

    registry.set_server_zone(original_server_zone.key)
    registry.clear_client_zone()


@pytest.fixture
def client():
    """Create test client for API testing."""
    app.config['TESTING'] = True
    with app.test_client() as client:
        yield client


@pytest.fixture
def johannesburg():
    """UTC+2 all year round (no DST)."""
    return ZoneInfo("Africa/Johannesburg")


@pytest.fixture
def new_york():
    """UTC-5 / UTC-4 with DST transitions."""
    return ZoneInfo("America/New_York")


@pytest.fixture
def tz_headers():
    """Build request headers declaring a client time zone.

    Usage: client.post(url, json=..., headers=tz_headers("Africa/Johannesburg"))
    """
    def _headers(zone_id: str) -> dict:
        return {"X-Timezone": zone_id}
    return _headers
