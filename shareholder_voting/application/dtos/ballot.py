"""Ballot DTOs for callers that own meeting and voter storage.

A web handler, batch job or CLI receives untrusted ballot payloads.
BallotSubmission validates such a payload with Pydantic and turns it into
the inputs of VoteDecisionService. DecisionResponse flattens the decision
result for serialization.

Developer Golden Rules:
1. VALIDATE EARLY - Pydantic handles schema validation
2. DOMAIN STAYS PURE - the domain Vote never sees raw payloads
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from shareholder_voting.domain.models.vote import (
    InvalidProposal,
    Vote,
    VoteChangeRejected,
    VoteDecision,
)


class BallotSubmission(BaseModel):
    """A ballot as submitted by a caller.

    Attributes:
        shareholder_id: Shareholder casting the vote.
        meeting_id: Meeting the vote is cast in.
        proposal_id: Proposal being voted on.
        record_date: Meeting record date (ISO 8601 date).
        existing_voters: Shareholders who already voted in the meeting.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    shareholder_id: str = Field(..., min_length=1, description="Shareholder casting the vote")
    meeting_id: str = Field(..., min_length=1, description="Meeting the vote is cast in")
    proposal_id: str = Field(..., min_length=1, description="Proposal being voted on")
    record_date: date = Field(..., description="Record date; changes close on this date")
    existing_voters: list[str] = Field(
        default_factory=list,
        description="Shareholders who already voted in the meeting",
    )

    def to_vote(self) -> Vote:
        """Build the domain Vote for this ballot."""
        return Vote(
            shareholder_id=self.shareholder_id,
            meeting_id=self.meeting_id,
            proposal_id=self.proposal_id,
        )

    def voter_set(self) -> frozenset[str]:
        """Return existing voters as an immutable set."""
        return frozenset(self.existing_voters)


@dataclass(frozen=True)
class DecisionResponse:
    """Flat, serializable view of a vote decision.

    Attributes:
        accepted: Whether the vote was accepted.
        outcome: DecisionOutcome value.
        shareholder_id: Shareholder who cast the vote.
        meeting_id: Meeting of the vote.
        proposal_id: Proposal of the vote.
        record_date: Record date, for rejected changes only.
        decided_on: Decision date, for rejected changes only.
        problem: RFC 7807 problem details, for invalid proposals only.
    """

    accepted: bool
    outcome: str
    shareholder_id: str
    meeting_id: str
    proposal_id: str
    record_date: date | None = None
    decided_on: date | None = None
    problem: dict[str, Any] | None = None

    @classmethod
    def from_decision(cls, decision: VoteDecision) -> DecisionResponse:
        """Build a response from any decision variant.

        Args:
            decision: Result returned by VoteDecisionService.evaluate().

        Returns:
            The flattened response.
        """
        vote = decision.vote
        record_date = None
        decided_on = None
        problem = None
        if isinstance(decision, VoteChangeRejected):
            record_date = decision.record_date
            decided_on = decision.decided_on
        elif isinstance(decision, InvalidProposal):
            problem = decision.to_error().to_rfc7807_dict()

        return cls(
            accepted=decision.accepted,
            outcome=decision.outcome.value,
            shareholder_id=vote.shareholder_id,
            meeting_id=vote.meeting_id,
            proposal_id=vote.proposal_id,
            record_date=record_date,
            decided_on=decided_on,
            problem=problem,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dictionary, omitting empty fields."""
        result: dict[str, Any] = {
            "accepted": self.accepted,
            "outcome": self.outcome,
            "shareholder_id": self.shareholder_id,
            "meeting_id": self.meeting_id,
            "proposal_id": self.proposal_id,
        }
        if self.record_date is not None:
            result["record_date"] = self.record_date.isoformat()
        if self.decided_on is not None:
            result["decided_on"] = self.decided_on.isoformat()
        if self.problem is not None:
            result["problem"] = self.problem
        return result
