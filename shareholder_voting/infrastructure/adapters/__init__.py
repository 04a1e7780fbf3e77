"""Production adapters implementing application ports."""

from shareholder_voting.infrastructure.adapters.in_memory_meeting_proposals import (
    InMemoryMeetingProposalsRepository,
)

__all__: list[str] = ["InMemoryMeetingProposalsRepository"]
