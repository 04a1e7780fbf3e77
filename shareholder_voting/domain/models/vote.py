"""Vote value object and vote decision results.

A Vote is created by the caller for a single casting attempt and discarded
once decided; nothing here is persisted. The decision is modelled as a
closed set of result variants so callers handle an invalid proposal
explicitly instead of catching an exception:

- VoteAccepted: first vote, or a change made before the record date
- VoteChangeRejected: a change attempted on or after the record date
- InvalidProposal: the proposal is not valid for the meeting
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Literal

from shareholder_voting.domain.errors.vote import InvalidProposalError


@dataclass(frozen=True)
class Vote:
    """A single vote cast by a shareholder for a proposal in a meeting.

    Immutable and identified by the (shareholder_id, meeting_id, proposal_id)
    triple. All identifiers are opaque strings.

    Attributes:
        shareholder_id: Identifier of the shareholder casting the vote.
        meeting_id: Identifier of the shareholder meeting.
        proposal_id: Identifier of the proposal being voted on.
    """

    shareholder_id: str
    meeting_id: str
    proposal_id: str

    def __post_init__(self) -> None:
        """Reject non-string identifiers."""
        for name in ("shareholder_id", "meeting_id", "proposal_id"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise TypeError(
                    f"{name} must be a str, got {type(value).__name__}"
                )


class DecisionOutcome(Enum):
    """Outcome of deciding a single vote."""

    ACCEPTED_NEW = "accepted_new"
    ACCEPTED_CHANGE = "accepted_change"
    REJECTED_CHANGE = "rejected_change"
    INVALID_PROPOSAL = "invalid_proposal"


@dataclass(frozen=True)
class VoteAccepted:
    """The vote is accepted, either as a first vote or as a timely change.

    Attributes:
        vote: The vote that was decided.
        outcome: ACCEPTED_NEW or ACCEPTED_CHANGE.
    """

    vote: Vote
    outcome: Literal[DecisionOutcome.ACCEPTED_NEW, DecisionOutcome.ACCEPTED_CHANGE]

    def __post_init__(self) -> None:
        """Only the two accepting outcomes are allowed."""
        if self.outcome not in (
            DecisionOutcome.ACCEPTED_NEW,
            DecisionOutcome.ACCEPTED_CHANGE,
        ):
            raise ValueError(f"VoteAccepted cannot carry outcome {self.outcome}")

    @property
    def accepted(self) -> bool:
        return True

    @property
    def is_change(self) -> bool:
        """True when the accepted vote replaces an earlier one."""
        return self.outcome is DecisionOutcome.ACCEPTED_CHANGE


@dataclass(frozen=True)
class VoteChangeRejected:
    """A change to an existing vote attempted on or after the record date.

    This is a normal business result, not an error.

    Attributes:
        vote: The vote that was decided.
        record_date: The meeting's record date (exclusive cutoff).
        decided_on: The calendar date the decision was made.
    """

    vote: Vote
    record_date: date
    decided_on: date

    @property
    def accepted(self) -> bool:
        return False

    @property
    def outcome(self) -> DecisionOutcome:
        return DecisionOutcome.REJECTED_CHANGE


@dataclass(frozen=True)
class InvalidProposal:
    """The vote references a proposal that is not valid for its meeting.

    Attributes:
        vote: The vote that was decided.
    """

    vote: Vote

    @property
    def accepted(self) -> bool:
        return False

    @property
    def outcome(self) -> DecisionOutcome:
        return DecisionOutcome.INVALID_PROPOSAL

    @property
    def proposal_id(self) -> str:
        return self.vote.proposal_id

    @property
    def meeting_id(self) -> str:
        return self.vote.meeting_id

    def to_error(self) -> InvalidProposalError:
        """Build the exception form of this result.

        Returns:
            InvalidProposalError carrying the proposal and meeting identifiers.
        """
        return InvalidProposalError(
            proposal_id=self.proposal_id,
            meeting_id=self.meeting_id,
        )


VoteDecision = VoteAccepted | VoteChangeRejected | InvalidProposal
