"""Bootstrap wiring for logging configuration.

The log renderer follows VOTING_ENVIRONMENT unless the caller names an
environment explicitly.
"""

from __future__ import annotations

from shareholder_voting.bootstrap.vote_decision import get_voting_config
from shareholder_voting.infrastructure.observability import (
    configure_structlog as _configure_structlog,
)


def configure_structlog(environment: str | None = None) -> str:
    """Configure structlog for the given or configured environment.

    Args:
        environment: 'production' or 'development'. Defaults to the
            environment of the loaded VotingConfig.

    Returns:
        The environment logging was configured for.
    """
    if environment is None:
        environment = get_voting_config().environment
    _configure_structlog(environment=environment)
    return environment


__all__ = ["configure_structlog"]
