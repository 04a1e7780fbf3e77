"""Application services for shareholder voting."""

from shareholder_voting.application.services.time_authority_service import (
    TimeAuthorityService,
)
from shareholder_voting.application.services.vote_decision_service import (
    VoteDecisionService,
)

__all__: list[str] = ["TimeAuthorityService", "VoteDecisionService"]
