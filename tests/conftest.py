"""
Pytest configuration and shared fixtures for shareholder voting tests.

Testing Standards:
- Unit tests go in tests/unit/<layer>/
- Time-dependent tests use FakeTimeAuthority, never the wall clock
"""

from datetime import date, datetime, timezone

import pytest

from tests.helpers.fake_time_authority import FakeTimeAuthority


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from shareholder_voting import __version__

    return __version__


@pytest.fixture
def today() -> date:
    """The calendar date the fake clock is frozen on."""
    return date(2026, 3, 10)


@pytest.fixture
def fake_time_authority(today: date) -> FakeTimeAuthority:
    """Provide a time authority frozen at noon UTC on `today`."""
    return FakeTimeAuthority(
        frozen_at=datetime(today.year, today.month, today.day, 12, 0, 0, tzinfo=timezone.utc)
    )
