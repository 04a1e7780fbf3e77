"""Meeting Proposals Stub for testing.

This module provides a configurable stub implementation of
MeetingProposalsRepositoryProtocol for use in unit and integration tests.
Unlike the in-memory adapter it can be changed after construction and
records every lookup it serves.
"""

from __future__ import annotations

from collections.abc import Iterable


class MeetingProposalsRepositoryStub:
    """Stub implementation of MeetingProposalsRepositoryProtocol for testing.

    Attributes:
        _proposals: Per-meeting valid proposals.
        _lookups: Meeting ids requested, in call order.
    """

    def __init__(self) -> None:
        """Initialize an empty stub (every meeting unknown)."""
        self._proposals: dict[str, frozenset[str]] = {}
        self._lookups: list[str] = []

    def get_proposals_for_meeting(self, meeting_id: str) -> frozenset[str] | None:
        """Return the configured proposals for a meeting and record the lookup.

        Args:
            meeting_id: Identifier of the meeting.

        Returns:
            The configured proposals, or None for an unconfigured meeting.
        """
        self._lookups.append(meeting_id)
        return self._proposals.get(meeting_id)

    # Test helper methods

    def set_proposals(self, meeting_id: str, proposals: Iterable[str]) -> None:
        """Set the valid proposals for a meeting (test helper).

        Args:
            meeting_id: Identifier of the meeting.
            proposals: Proposal identifiers, possibly empty.
        """
        self._proposals[meeting_id] = frozenset(proposals)

    def remove_meeting(self, meeting_id: str) -> None:
        """Make a meeting unknown again (test helper).

        Args:
            meeting_id: Identifier of the meeting.
        """
        self._proposals.pop(meeting_id, None)

    @property
    def lookups(self) -> list[str]:
        """Meeting ids looked up so far, in order (test helper)."""
        return list(self._lookups)

    def reset(self) -> None:
        """Clear all meetings and recorded lookups (test helper)."""
        self._proposals.clear()
        self._lookups.clear()

    @classmethod
    def with_meeting(cls, meeting_id: str, *proposals: str) -> MeetingProposalsRepositoryStub:
        """Factory for stub knowing a single meeting.

        Args:
            meeting_id: Identifier of the meeting.
            *proposals: Valid proposals for the meeting.

        Returns:
            MeetingProposalsRepositoryStub configured with the meeting.
        """
        stub = cls()
        stub.set_proposals(meeting_id, proposals)
        return stub

    @classmethod
    def empty(cls) -> MeetingProposalsRepositoryStub:
        """Factory for stub where every meeting is unknown."""
        return cls()
