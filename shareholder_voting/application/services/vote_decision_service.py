"""Vote Decision Service - accepts or rejects a single shareholder vote.

Business rules, applied in order:
1. The proposal must be valid for the meeting, whatever the voter's
   history. An unknown meeting and a proposal missing from the meeting's
   valid set are both invalid.
2. A shareholder who has not voted yet is always accepted. No date check.
3. A shareholder who has already voted may change the vote only while
   today is strictly before the record date. On the record date itself
   and afterwards the change is rejected.

The service is stateless: it never mutates its inputs, records nothing
about the decision and does not add the shareholder to the voter set.
Persisting the effect of an accepted vote is the caller's job. It is safe
to share across threads as long as the injected repository is.

Usage:
    service = VoteDecisionService(
        meeting_proposals=repository,
        time_authority=TimeAuthorityService(),
    )

    decision = service.evaluate(vote, existing_voters, record_date)
    match decision:
        case InvalidProposal():
            ...  # tell the shareholder the ballot is wrong
        case VoteChangeRejected():
            ...  # changes are frozen
        case VoteAccepted():
            ...  # persist the vote

    # Or, with an exception for invalid proposals:
    accepted = service.decide(vote, existing_voters, record_date)
"""

from __future__ import annotations

from collections.abc import Container
from datetime import date, datetime

from shareholder_voting.application.ports.meeting_proposals import (
    MeetingProposalsRepositoryProtocol,
)
from shareholder_voting.application.ports.time_authority import TimeAuthorityProtocol
from shareholder_voting.application.services.base import LoggingMixin
from shareholder_voting.domain.models.vote import (
    DecisionOutcome,
    InvalidProposal,
    Vote,
    VoteAccepted,
    VoteChangeRejected,
    VoteDecision,
)


class VoteDecisionService(LoggingMixin):
    """Decides whether a vote is accepted.

    Attributes:
        _meeting_proposals: Lookup of valid proposals per meeting.
        _time: Source of today's date.
    """

    def __init__(
        self,
        meeting_proposals: MeetingProposalsRepositoryProtocol,
        time_authority: TimeAuthorityProtocol,
    ) -> None:
        """Initialize the vote decision service.

        Args:
            meeting_proposals: Lookup used to validate the vote's proposal.
            time_authority: Source of the current date for the cutoff rule.

        Raises:
            TypeError: If either collaborator is None.
        """
        if meeting_proposals is None:
            raise TypeError("meeting_proposals must be provided")
        if time_authority is None:
            raise TypeError("time_authority must be provided")
        self._meeting_proposals = meeting_proposals
        self._time = time_authority
        self._init_logger()

    def evaluate(
        self,
        vote: Vote,
        existing_voters: Container[str],
        record_date: date,
    ) -> VoteDecision:
        """Decide a vote and return the result variant.

        Args:
            vote: The vote being cast.
            existing_voters: Shareholders who already voted in this meeting.
                Only membership is checked; it is never modified.
            record_date: The meeting's record date; changes are allowed
                strictly before it.

        Returns:
            InvalidProposal, VoteAccepted or VoteChangeRejected.

        Raises:
            TypeError: If an argument is absent or of the wrong type.
        """
        _require_inputs(vote, existing_voters, record_date)

        log = self._log_operation(
            "evaluate",
            shareholder_id=vote.shareholder_id,
            meeting_id=vote.meeting_id,
            proposal_id=vote.proposal_id,
        )

        proposals = self._meeting_proposals.get_proposals_for_meeting(vote.meeting_id)
        if proposals is None or vote.proposal_id not in proposals:
            log.warning(
                "vote_rejected_invalid_proposal",
                meeting_known=proposals is not None,
                outcome=DecisionOutcome.INVALID_PROPOSAL.value,
            )
            return InvalidProposal(vote=vote)

        if vote.shareholder_id not in existing_voters:
            log.info("vote_accepted", outcome=DecisionOutcome.ACCEPTED_NEW.value)
            return VoteAccepted(vote=vote, outcome=DecisionOutcome.ACCEPTED_NEW)

        today = self._time.today()
        if today < record_date:
            log.info(
                "vote_accepted",
                outcome=DecisionOutcome.ACCEPTED_CHANGE.value,
                record_date=record_date.isoformat(),
                decided_on=today.isoformat(),
            )
            return VoteAccepted(vote=vote, outcome=DecisionOutcome.ACCEPTED_CHANGE)

        log.info(
            "vote_change_rejected",
            outcome=DecisionOutcome.REJECTED_CHANGE.value,
            record_date=record_date.isoformat(),
            decided_on=today.isoformat(),
        )
        return VoteChangeRejected(vote=vote, record_date=record_date, decided_on=today)

    def decide(
        self,
        vote: Vote,
        existing_voters: Container[str],
        record_date: date,
    ) -> bool:
        """Decide a vote, raising for an invalid proposal.

        Args:
            vote: The vote being cast.
            existing_voters: Shareholders who already voted in this meeting.
            record_date: The meeting's record date.

        Returns:
            True if the vote is accepted (new vote or timely change),
            False if a change was attempted on or after the record date.

        Raises:
            InvalidProposalError: If the proposal is not valid for the meeting.
            TypeError: If an argument is absent or of the wrong type.
        """
        decision = self.evaluate(vote, existing_voters, record_date)
        if isinstance(decision, InvalidProposal):
            raise decision.to_error()
        return decision.accepted


def _require_inputs(
    vote: object, existing_voters: object, record_date: object
) -> None:
    """Fail fast on caller misuse."""
    if vote is None:
        raise TypeError("vote must not be None")
    if not isinstance(vote, Vote):
        raise TypeError(f"vote must be a Vote, got {type(vote).__name__}")
    if existing_voters is None:
        raise TypeError("existing_voters must not be None")
    if isinstance(existing_voters, str):
        raise TypeError("existing_voters must be a collection of ids, not a str")
    if record_date is None:
        raise TypeError("record_date must not be None")
    # datetime is a date subclass but carries a time component
    if isinstance(record_date, datetime) or not isinstance(record_date, date):
        raise TypeError(
            f"record_date must be a date, got {type(record_date).__name__}"
        )
