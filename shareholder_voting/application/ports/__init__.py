"""Application ports - Abstract interfaces for infrastructure adapters.

Available ports:
- MeetingProposalsRepositoryProtocol: valid proposals per meeting
- TimeAuthorityProtocol: the single source of the current time and date
"""

from shareholder_voting.application.ports.meeting_proposals import (
    MeetingProposalsRepositoryProtocol,
)
from shareholder_voting.application.ports.time_authority import TimeAuthorityProtocol

__all__: list[str] = ["MeetingProposalsRepositoryProtocol", "TimeAuthorityProtocol"]
