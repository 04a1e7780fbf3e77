"""Time Authority Protocol - interface for the current time and date.

All services that need the current time MUST inject a TimeAuthorityProtocol
implementation instead of reading the wall clock directly.
The record-date cutoff depends on "today", so tests pin it with
FakeTimeAuthority from tests/helpers/fake_time_authority.py.
"""

from abc import ABC, abstractmethod
from datetime import date, datetime


class TimeAuthorityProtocol(ABC):
    """Abstract interface for time authority.

    Example usage:
        class MyService:
            def __init__(self, time_authority: TimeAuthorityProtocol) -> None:
                self._time = time_authority

            def process(self) -> None:
                today = self._time.today()  # never the wall clock
                ...

    For production:
        Use TimeAuthorityService from shareholder_voting/application/services/

    For testing:
        Use FakeTimeAuthority from tests/helpers/fake_time_authority.py
    """

    @abstractmethod
    def now(self) -> datetime:
        """Return the current time in the authority's zone.

        Returns:
            Current timezone-aware datetime.
        """
        ...

    @abstractmethod
    def utcnow(self) -> datetime:
        """Return current UTC time.

        Returns:
            Current timezone-aware datetime in UTC.
        """
        ...

    @abstractmethod
    def monotonic(self) -> float:
        """Return monotonic clock value for measuring elapsed time.

        Returns:
            Monotonically increasing float value (in seconds).
        """
        ...

    def today(self) -> date:
        """Return the current calendar date in the authority's zone.

        Returns:
            The date component of now().
        """
        return self.now().date()
