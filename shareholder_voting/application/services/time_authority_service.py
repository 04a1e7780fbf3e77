"""Time Authority Service - the production source of the current time.

This is the only module allowed to read the wall clock directly
(see scripts/check_no_datetime_now.py). Everything else receives a
TimeAuthorityProtocol.

The voting calendar zone matters: "today" decides whether a vote change
is still allowed. Without an explicit zone the host's local zone is used.
"""

from __future__ import annotations

import time
from datetime import datetime, timezone, tzinfo

from shareholder_voting.application.ports.time_authority import TimeAuthorityProtocol


class TimeAuthorityService(TimeAuthorityProtocol):
    """Wall-clock implementation of TimeAuthorityProtocol.

    Attributes:
        _zone: Zone used for now() and today(); None means host local zone.

    Example:
        >>> from zoneinfo import ZoneInfo
        >>> service = TimeAuthorityService(zone=ZoneInfo("Europe/Athens"))
        >>> service.today()  # calendar date in Athens
    """

    def __init__(self, zone: tzinfo | None = None) -> None:
        """Initialize the time authority.

        Args:
            zone: Zone for the voting calendar. Defaults to the host local zone.
        """
        self._zone = zone

    @property
    def zone(self) -> tzinfo | None:
        """Zone of the voting calendar, or None for the host local zone."""
        return self._zone

    def now(self) -> datetime:
        """Return the current time in the configured zone.

        Returns:
            Timezone-aware datetime.
        """
        if self._zone is None:
            return datetime.now().astimezone()
        return datetime.now(self._zone)

    def utcnow(self) -> datetime:
        """Return current UTC time.

        Returns:
            Timezone-aware datetime in UTC.
        """
        return datetime.now(timezone.utc)

    def monotonic(self) -> float:
        """Return monotonic clock value.

        Returns:
            Seconds from an arbitrary reference point.
        """
        return time.monotonic()
