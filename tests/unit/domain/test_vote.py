"""Unit tests for the Vote value object and decision result variants."""

from dataclasses import FrozenInstanceError
from datetime import date

import pytest

from shareholder_voting.domain.errors.vote import InvalidProposalError
from shareholder_voting.domain.models.vote import (
    DecisionOutcome,
    InvalidProposal,
    Vote,
    VoteAccepted,
    VoteChangeRejected,
)


class TestVote:
    """Tests for Vote."""

    def test_fields(self) -> None:
        vote = Vote("S1", "M1", "P1")

        assert vote.shareholder_id == "S1"
        assert vote.meeting_id == "M1"
        assert vote.proposal_id == "P1"

    def test_is_immutable(self) -> None:
        vote = Vote("S1", "M1", "P1")

        with pytest.raises(FrozenInstanceError):
            vote.proposal_id = "P2"  # type: ignore[misc]

    def test_identified_by_triple(self) -> None:
        """Votes with the same identifiers are equal and hash alike."""
        assert Vote("S1", "M1", "P1") == Vote("S1", "M1", "P1")
        assert Vote("S1", "M1", "P1") != Vote("S1", "M1", "P2")
        assert len({Vote("S1", "M1", "P1"), Vote("S1", "M1", "P1")}) == 1

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"shareholder_id": None, "meeting_id": "M1", "proposal_id": "P1"},
            {"shareholder_id": "S1", "meeting_id": 1, "proposal_id": "P1"},
            {"shareholder_id": "S1", "meeting_id": "M1", "proposal_id": b"P1"},
        ],
    )
    def test_rejects_non_string_identifiers(self, kwargs: dict[str, object]) -> None:
        with pytest.raises(TypeError, match="must be a str"):
            Vote(**kwargs)  # type: ignore[arg-type]


class TestVoteAccepted:
    """Tests for VoteAccepted."""

    def test_new_vote(self) -> None:
        decision = VoteAccepted(Vote("S1", "M1", "P1"), DecisionOutcome.ACCEPTED_NEW)

        assert decision.accepted is True
        assert decision.is_change is False

    def test_changed_vote(self) -> None:
        decision = VoteAccepted(Vote("S1", "M1", "P1"), DecisionOutcome.ACCEPTED_CHANGE)

        assert decision.accepted is True
        assert decision.is_change is True

    @pytest.mark.parametrize(
        "outcome", [DecisionOutcome.REJECTED_CHANGE, DecisionOutcome.INVALID_PROPOSAL]
    )
    def test_rejects_non_accepting_outcomes(self, outcome: DecisionOutcome) -> None:
        with pytest.raises(ValueError, match="cannot carry outcome"):
            VoteAccepted(Vote("S1", "M1", "P1"), outcome)  # type: ignore[arg-type]


class TestVoteChangeRejected:
    """Tests for VoteChangeRejected."""

    def test_not_accepted(self) -> None:
        decision = VoteChangeRejected(
            Vote("S1", "M1", "P1"),
            record_date=date(2026, 3, 1),
            decided_on=date(2026, 3, 1),
        )

        assert decision.accepted is False
        assert decision.outcome is DecisionOutcome.REJECTED_CHANGE


class TestInvalidProposal:
    """Tests for InvalidProposal."""

    def test_exposes_identifiers(self) -> None:
        decision = InvalidProposal(Vote("S1", "M1", "BAD"))

        assert decision.accepted is False
        assert decision.outcome is DecisionOutcome.INVALID_PROPOSAL
        assert decision.proposal_id == "BAD"
        assert decision.meeting_id == "M1"

    def test_to_error(self) -> None:
        error = InvalidProposal(Vote("S1", "M1", "BAD")).to_error()

        assert isinstance(error, InvalidProposalError)
        assert error.proposal_id == "BAD"
        assert error.meeting_id == "M1"
