"""Vote validation errors.

These errors are expected business outcomes a caller should branch on,
as opposed to programming faults (absent inputs), which surface as
TypeError.
"""

from __future__ import annotations

from shareholder_voting.domain.exceptions import VotingError


class VoteValidationError(VotingError):
    """Base error for votes that fail business validation."""

    pass


class InvalidProposalError(VoteValidationError):
    """Raised when a vote references a proposal that is not valid for its meeting.

    Covers both an unknown meeting and a known meeting whose valid
    proposals do not include the referenced one.

    HTTP Status: 422 Unprocessable Entity

    Attributes:
        proposal_id: The proposal the vote referenced.
        meeting_id: The meeting the vote was cast in.
    """

    MESSAGE_TEMPLATE = (
        "The proposal with proposal Id {proposal_id} "
        "for the meeting with meeting id {meeting_id} is invalid"
    )

    def __init__(self, proposal_id: str, meeting_id: str) -> None:
        """Initialize the error.

        Args:
            proposal_id: The proposal the vote referenced.
            meeting_id: The meeting the vote was cast in.
        """
        self.proposal_id = proposal_id
        self.meeting_id = meeting_id
        super().__init__(
            self.MESSAGE_TEMPLATE.format(proposal_id=proposal_id, meeting_id=meeting_id)
        )

    def to_rfc7807_dict(self) -> dict[str, object]:
        """Serialize to RFC 7807 problem details format.

        Returns:
            Dictionary conforming to RFC 7807 problem details.
        """
        return {
            "type": "urn:shareholder-voting:vote:invalid-proposal",
            "title": "Invalid Proposal",
            "status": 422,
            "detail": (
                f"Your ballot references proposal {self.proposal_id}, "
                f"which does not exist for meeting {self.meeting_id}"
            ),
            "proposal_id": self.proposal_id,
            "meeting_id": self.meeting_id,
        }
