"""Meeting Proposals Port - which proposals are valid for a meeting.

This port answers one question: "is proposal P valid for meeting M?".
Adapters may be backed by a fixed mapping, a database or a remote
service; the decision service only relies on this contract.

Contract:
- None means the meeting is unknown
- An empty frozenset means the meeting is known but has no valid proposals
- Lookups are pure reads and must be safe to call concurrently
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class MeetingProposalsRepositoryProtocol(Protocol):
    """Protocol for resolving the valid proposals of a meeting.

    Usage:
        proposals = repository.get_proposals_for_meeting(vote.meeting_id)
        if proposals is None or vote.proposal_id not in proposals:
            ...  # invalid proposal
    """

    def get_proposals_for_meeting(self, meeting_id: str) -> frozenset[str] | None:
        """Return the valid proposal identifiers for a meeting.

        Args:
            meeting_id: Identifier of the meeting.

        Returns:
            The proposal identifiers valid for the meeting (possibly empty),
            or None if the meeting is unknown.
        """
        ...
