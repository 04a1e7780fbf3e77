"""Bootstrap wiring for vote decision dependencies.

The caller that owns meeting storage registers its proposals lookup with
set_meeting_proposals(); until then an empty in-memory repository is used,
so every meeting is unknown.
"""

from __future__ import annotations

from shareholder_voting.application.ports.meeting_proposals import (
    MeetingProposalsRepositoryProtocol,
)
from shareholder_voting.application.ports.time_authority import TimeAuthorityProtocol
from shareholder_voting.application.services.time_authority_service import (
    TimeAuthorityService,
)
from shareholder_voting.application.services.vote_decision_service import (
    VoteDecisionService,
)
from shareholder_voting.config.voting_config import VotingConfig
from shareholder_voting.infrastructure.adapters.in_memory_meeting_proposals import (
    InMemoryMeetingProposalsRepository,
)

_config: VotingConfig | None = None
_time_authority: TimeAuthorityProtocol | None = None
_meeting_proposals: MeetingProposalsRepositoryProtocol | None = None
_vote_decision_service: VoteDecisionService | None = None


def get_voting_config() -> VotingConfig:
    """Get voting configuration, loaded from the environment once."""
    global _config
    if _config is None:
        _config = VotingConfig.from_environment()
    return _config


def get_time_authority() -> TimeAuthorityProtocol:
    """Get time authority instance for the configured voting calendar."""
    global _time_authority
    if _time_authority is None:
        _time_authority = TimeAuthorityService(zone=get_voting_config().tzinfo())
    return _time_authority


def get_meeting_proposals() -> MeetingProposalsRepositoryProtocol:
    """Get meeting proposals repository instance."""
    global _meeting_proposals
    if _meeting_proposals is None:
        _meeting_proposals = InMemoryMeetingProposalsRepository({})
    return _meeting_proposals


def get_vote_decision_service() -> VoteDecisionService:
    """Get vote decision service instance."""
    global _vote_decision_service
    if _vote_decision_service is None:
        _vote_decision_service = VoteDecisionService(
            meeting_proposals=get_meeting_proposals(),
            time_authority=get_time_authority(),
        )
    return _vote_decision_service


def set_meeting_proposals(repository: MeetingProposalsRepositoryProtocol) -> None:
    """Set meeting proposals repository (for production wiring or testing)."""
    global _meeting_proposals, _vote_decision_service
    if repository is None:
        raise TypeError("repository must not be None")
    _meeting_proposals = repository
    _vote_decision_service = None


def set_time_authority(time_authority: TimeAuthorityProtocol) -> None:
    """Set time authority (for testing)."""
    global _time_authority, _vote_decision_service
    if time_authority is None:
        raise TypeError("time_authority must not be None")
    _time_authority = time_authority
    _vote_decision_service = None


def reset_vote_decision_dependencies() -> None:
    """Reset all singletons (for testing)."""
    global _config, _time_authority, _meeting_proposals, _vote_decision_service
    _config = None
    _time_authority = None
    _meeting_proposals = None
    _vote_decision_service = None
