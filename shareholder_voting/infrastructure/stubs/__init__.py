"""Infrastructure stubs for development and testing.

Available stubs:
- MeetingProposalsRepositoryStub: Mutable meeting proposals with lookup recording

WARNING: These stubs are NOT for production use.
Production implementations are in shareholder_voting/infrastructure/adapters/.
"""

from shareholder_voting.infrastructure.stubs.meeting_proposals_stub import (
    MeetingProposalsRepositoryStub,
)

__all__: list[str] = ["MeetingProposalsRepositoryStub"]
