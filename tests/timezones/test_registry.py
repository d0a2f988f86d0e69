"""Tests for the time zone registry."""

import threading
from datetime import datetime, timedelta, UTC

import pytest

from datenorm.config import settings
from datenorm.timezones import registry


class TestResolveZone:
    """Tests for resolve_zone."""

    @pytest.mark.parametrize("zone_id", [
        "UTC",
        "Africa/Johannesburg",
        "America/New_York",
        "Europe/London",
        "Asia/Kolkata",
    ])
    def test_resolves_iana_ids(self, zone_id):
        """Valid IANA keys should resolve to a zone with the same key."""
        resolution = registry.resolve_zone(zone_id)
        assert resolution
        assert resolution.ok is True
        assert resolution.zone.key == zone_id
        assert resolution.error is None

    @pytest.mark.parametrize("zone_id,expected", [
        ("South Africa Standard Time", "Africa/Johannesburg"),
        ("Eastern Standard Time", "America/New_York"),
        ("GMT Standard Time", "Europe/London"),
    ])
    def test_resolves_windows_ids(self, zone_id, expected):
        """Windows display ids should map to their IANA zone."""
        resolution = registry.resolve_zone(zone_id)
        assert resolution.zone.key == expected
        assert resolution.zone_id == zone_id

    @pytest.mark.parametrize("zone_id", [
        "Mars/Olympus_Mons",
        "Not a zone",
        "../etc/passwd",
        "/usr/share/zoneinfo/UTC",
        "",
        "   ",
        None,
    ])
    def test_reports_invalid_ids_without_raising(self, zone_id):
        """Unknown or malformed ids should produce a failed resolution."""
        resolution = registry.resolve_zone(zone_id)
        assert not resolution
        assert resolution.zone is None
        assert resolution.error
        assert resolution.zone_id == zone_id

    def test_failed_resolution_names_rejected_id(self):
        """The error should mention the rejected id for diagnostics."""
        resolution = registry.resolve_zone("Mars/Olympus_Mons")
        assert "Mars/Olympus_Mons" in resolution.error


class TestServerZone:
    """Tests for the process-wide server zone."""

    def test_defaults_to_utc(self):
        """With the default configuration the server zone is UTC."""
        assert registry.current_server_zone().key == "UTC"

    def test_set_server_zone(self):
        """A valid id should replace the server zone."""
        assert registry.set_server_zone("Africa/Johannesburg")
        assert registry.current_server_zone().key == "Africa/Johannesburg"

    def test_invalid_id_keeps_previous_zone(self):
        """An invalid id should leave the previous server zone in place."""
        registry.set_server_zone("Europe/London")

        resolution = registry.set_server_zone("Nowhere/Special")

        assert not resolution
        assert registry.current_server_zone().key == "Europe/London"

    def test_invalid_id_is_logged(self, caplog):
        """Configuration faults should be logged, not raised."""
        with caplog.at_level("WARNING", logger="datenorm.timezones.registry"):
            registry.set_server_zone("Nowhere/Special")
        assert "Nowhere/Special" in caplog.text

    def test_now_in_server_zone_is_naive_wall_clock(self):
        """now_in_server_zone returns the server's wall clock without zone."""
        registry.set_server_zone("Africa/Johannesburg")

        before = datetime.now(UTC).replace(tzinfo=None) + timedelta(hours=2)
        result = registry.now_in_server_zone()
        after = datetime.now(UTC).replace(tzinfo=None) + timedelta(hours=2)

        assert result.tzinfo is None
        assert before <= result <= after


class TestClientZone:
    """Tests for the request-scoped client zone."""

    def test_defaults_to_utc(self):
        """Without any setting the client zone is UTC."""
        assert registry.current_client_zone().key == "UTC"

    @pytest.mark.parametrize("zone_id", ["Africa/Johannesburg", "America/New_York", "Asia/Tokyo"])
    def test_set_client_zone(self, zone_id):
        """A valid id should become the current client zone."""
        assert registry.set_client_zone(zone_id)
        assert registry.current_client_zone().key == zone_id

    @pytest.mark.parametrize("zone_id", ["Mars/Olympus_Mons", "Not a zone", "../etc"])
    def test_invalid_id_keeps_previous_zone(self, zone_id):
        """An invalid id should report failure and change nothing."""
        registry.set_client_zone("Asia/Tokyo")

        resolution = registry.set_client_zone(zone_id)

        assert not resolution
        assert registry.current_client_zone().key == "Asia/Tokyo"

    def test_none_uses_configured_default(self, monkeypatch):
        """A missing id should fall back to settings.default_time_zone."""
        monkeypatch.setattr(settings, "default_time_zone", "Europe/London")

        resolution = registry.set_client_zone(None)

        assert resolution
        assert resolution.zone_id == "Europe/London"
        assert registry.current_client_zone().key == "Europe/London"

    def test_blank_uses_configured_default(self, monkeypatch):
        """A blank id counts as missing."""
        monkeypatch.setattr(settings, "default_time_zone", "Asia/Kolkata")

        assert registry.set_client_zone("  ")
        assert registry.current_client_zone().key == "Asia/Kolkata"

    def test_clear_client_zone(self):
        """Clearing should return the context to UTC."""
        registry.set_client_zone("Asia/Tokyo")
        registry.clear_client_zone()
        assert registry.current_client_zone().key == "UTC"

    def test_client_zone_does_not_touch_server_zone(self):
        """The two slots are independent."""
        registry.set_client_zone("Asia/Tokyo")
        assert registry.current_server_zone().key == "UTC"


class TestClientZoneScope:
    """Tests for the client_zone context manager."""

    def test_applies_zone_inside_block(self):
        """The zone should be active inside the block."""
        with registry.client_zone("Africa/Johannesburg") as resolution:
            assert resolution
            assert registry.current_client_zone().key == "Africa/Johannesburg"

    def test_restores_previous_zone(self):
        """The previous zone should be restored on exit."""
        registry.set_client_zone("Asia/Tokyo")

        with registry.client_zone("Africa/Johannesburg"):
            pass

        assert registry.current_client_zone().key == "Asia/Tokyo"

    def test_restores_previous_zone_after_error(self):
        """The previous zone should be restored when the block raises."""
        with pytest.raises(RuntimeError):
            with registry.client_zone("Africa/Johannesburg"):
                raise RuntimeError("boom")

        assert registry.current_client_zone().key == "UTC"

    def test_invalid_zone_inside_block_keeps_outer_zone(self):
        """A failed resolution inside the block keeps the outer zone."""
        registry.set_client_zone("Asia/Tokyo")

        with registry.client_zone("Nowhere/Special") as resolution:
            assert not resolution
            assert registry.current_client_zone().key == "Asia/Tokyo"


class TestClientZoneIsolation:
    """Concurrent contexts must never see each other's client zone."""

    def test_threads_keep_their_own_zone(self):
        zone_ids = ["Africa/Johannesburg", "America/New_York", "Asia/Tokyo", "Europe/London"]
        barrier = threading.Barrier(len(zone_ids))
        seen = {}

        def worker(zone_id):
            registry.set_client_zone(zone_id)
            barrier.wait()  # every thread has set its zone before anyone reads
            seen[zone_id] = registry.current_client_zone().key

        threads = [threading.Thread(target=worker, args=(z,)) for z in zone_ids]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert seen == {z: z for z in zone_ids}
        assert registry.current_client_zone().key == "UTC"
