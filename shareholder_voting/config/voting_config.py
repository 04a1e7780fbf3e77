"""Vote decision configuration.

The decision core recognizes no options of its own. What is configurable
is its surroundings: which calendar "today" is read in, and how logs are
rendered.

Environment Variables:
- VOTING_TIMEZONE: IANA zone for the voting calendar, e.g. "Europe/Athens"
  (default: unset, the host's local zone)
- VOTING_ENVIRONMENT: "production" for JSON logs or "development" for
  console logs (default: production)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

VALID_ENVIRONMENTS = frozenset({"production", "development"})


@dataclass(frozen=True)
class VotingConfig:
    """Configuration for the vote decision runtime.

    Attributes:
        timezone_name: IANA zone name for the voting calendar, or None for
            the host local zone.
        environment: Logging environment, 'production' or 'development'.
    """

    timezone_name: str | None = None
    environment: str = "production"

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.environment not in VALID_ENVIRONMENTS:
            raise ValueError(
                f"environment must be one of {sorted(VALID_ENVIRONMENTS)}, "
                f"got {self.environment!r}"
            )
        if self.timezone_name is not None:
            try:
                ZoneInfo(self.timezone_name)
            except (ZoneInfoNotFoundError, ValueError) as exc:
                raise ValueError(
                    f"timezone_name is not a known IANA zone: {self.timezone_name!r}"
                ) from exc

    def tzinfo(self) -> ZoneInfo | None:
        """Resolve the voting calendar zone.

        Returns:
            The configured ZoneInfo, or None for the host local zone.
        """
        if self.timezone_name is None:
            return None
        return ZoneInfo(self.timezone_name)

    @classmethod
    def from_environment(cls) -> VotingConfig:
        """Create config from environment variables with defaults.

        Empty values are treated as unset.

        Returns:
            VotingConfig with values from environment or defaults.

        Raises:
            ValueError: If a variable holds an invalid value.
        """
        timezone_name = os.environ.get("VOTING_TIMEZONE") or None
        environment = os.environ.get("VOTING_ENVIRONMENT") or "production"
        return cls(timezone_name=timezone_name, environment=environment.lower())


DEFAULT_VOTING_CONFIG = VotingConfig()
