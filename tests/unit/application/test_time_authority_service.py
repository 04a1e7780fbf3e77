"""Unit tests for TimeAuthorityService and the TimeAuthorityProtocol contract."""

from datetime import date, datetime, timedelta, timezone
from unittest.mock import patch
from zoneinfo import ZoneInfo

from shareholder_voting.application.ports.time_authority import TimeAuthorityProtocol
from shareholder_voting.application.services.time_authority_service import (
    TimeAuthorityService,
)
from tests.helpers.fake_time_authority import FakeTimeAuthority


class TestTimeAuthorityService:
    """Tests for the wall-clock time authority."""

    def test_implements_protocol(self) -> None:
        assert isinstance(TimeAuthorityService(), TimeAuthorityProtocol)

    def test_default_zone_is_host_local(self) -> None:
        service = TimeAuthorityService()

        assert service.zone is None
        assert service.now().tzinfo is not None

    def test_now_uses_configured_zone(self) -> None:
        zone = ZoneInfo("Asia/Tokyo")
        service = TimeAuthorityService(zone=zone)

        assert service.now().tzinfo == zone

    def test_utcnow_is_utc(self) -> None:
        assert TimeAuthorityService().utcnow().utcoffset() == timedelta(0)

    def test_monotonic_never_decreases(self) -> None:
        service = TimeAuthorityService()

        first = service.monotonic()
        second = service.monotonic()

        assert second >= first

    def test_today_is_calendar_date_in_zone(self) -> None:
        """Near midnight UTC the date depends on the configured zone."""
        instant = datetime(2026, 3, 10, 23, 30, tzinfo=timezone.utc)
        tokyo = TimeAuthorityService(zone=ZoneInfo("Asia/Tokyo"))
        utc = TimeAuthorityService(zone=timezone.utc)

        with patch.object(TimeAuthorityService, "now", lambda self: instant.astimezone(self.zone)):
            assert utc.today() == date(2026, 3, 10)
            assert tokyo.today() == date(2026, 3, 11)


class TestFakeTimeAuthority:
    """Tests for the FakeTimeAuthority test helper."""

    def test_frozen(self) -> None:
        fake = FakeTimeAuthority(frozen_at=datetime(2026, 1, 15, 10, tzinfo=timezone.utc))

        assert fake.now() == fake.now()
        assert fake.today() == date(2026, 1, 15)

    def test_naive_time_is_utc(self) -> None:
        fake = FakeTimeAuthority(frozen_at=datetime(2026, 1, 15, 10))

        assert fake.now().tzinfo == timezone.utc

    def test_advance_moves_wall_and_monotonic_clock(self) -> None:
        fake = FakeTimeAuthority()

        fake.advance(delta=timedelta(days=1))

        assert fake.today() == date(2026, 1, 2)
        assert fake.monotonic() == 86400.0

    def test_set_date_keeps_time_of_day(self) -> None:
        fake = FakeTimeAuthority(frozen_at=datetime(2026, 1, 15, 10, 30, tzinfo=timezone.utc))

        fake.set_date(date(2026, 6, 30))

        assert fake.now() == datetime(2026, 6, 30, 10, 30, tzinfo=timezone.utc)
