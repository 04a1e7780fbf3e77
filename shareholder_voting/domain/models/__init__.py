"""Domain models for shareholder voting."""

from shareholder_voting.domain.models.vote import (
    DecisionOutcome,
    InvalidProposal,
    Vote,
    VoteAccepted,
    VoteChangeRejected,
    VoteDecision,
)

__all__: list[str] = [
    "DecisionOutcome",
    "InvalidProposal",
    "Vote",
    "VoteAccepted",
    "VoteChangeRejected",
    "VoteDecision",
]
