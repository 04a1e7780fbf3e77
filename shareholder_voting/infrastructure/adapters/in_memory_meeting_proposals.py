"""In-memory Meeting Proposals adapter backed by a fixed mapping.

Implements MeetingProposalsRepositoryProtocol. The mapping is copied at
construction into frozensets, so mutating the source mapping or its sets
afterwards never changes what lookups return. Being read-only after
construction, the adapter is safe for concurrent lookups.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from structlog import get_logger

logger = get_logger(__name__)


class InMemoryMeetingProposalsRepository:
    """Meeting proposals held in an immutable in-process mapping.

    Attributes:
        _meeting_proposals: Copy of the meeting -> proposals mapping.
    """

    def __init__(self, meeting_proposals: Mapping[str, Iterable[str]]) -> None:
        """Initialize from a meeting -> proposal identifiers mapping.

        Args:
            meeting_proposals: Each key is a meeting identifier and each value
                the proposal identifiers valid for that meeting.

        Raises:
            TypeError: If meeting_proposals is None, or a value is a bare str.
        """
        if meeting_proposals is None:
            raise TypeError("meeting_proposals must not be None")

        copied: dict[str, frozenset[str]] = {}
        for meeting_id, proposals in meeting_proposals.items():
            if isinstance(proposals, str):
                raise TypeError(
                    f"proposals for meeting {meeting_id} must be a collection "
                    "of ids, not a str"
                )
            copied[meeting_id] = frozenset(proposals)
        self._meeting_proposals = copied

        logger.debug(
            "meeting_proposals_loaded",
            meeting_count=len(copied),
            proposal_count=sum(len(p) for p in copied.values()),
        )

    def get_proposals_for_meeting(self, meeting_id: str) -> frozenset[str] | None:
        """Return the valid proposals for a meeting.

        Args:
            meeting_id: Identifier of the meeting.

        Returns:
            The proposals for the meeting, or None if the meeting is unknown.
        """
        return self._meeting_proposals.get(meeting_id)

    def meeting_ids(self) -> frozenset[str]:
        """Return the identifiers of all known meetings."""
        return frozenset(self._meeting_proposals)

    def __contains__(self, meeting_id: object) -> bool:
        return meeting_id in self._meeting_proposals

    def __len__(self) -> int:
        return len(self._meeting_proposals)

    def __iter__(self) -> Iterator[str]:
        return iter(self._meeting_proposals)
