"""
Domain layer - Pure business logic for shareholder voting.

This layer contains:
- The Vote value object
- Vote decision result variants
- Domain exceptions

CRITICAL: This layer must NOT import from application, infrastructure, or bootstrap.
Only stdlib and typing imports are allowed.
"""

from shareholder_voting.domain.errors import InvalidProposalError, VoteValidationError
from shareholder_voting.domain.exceptions import VotingError
from shareholder_voting.domain.models import Vote

__all__: list[str] = [
    "InvalidProposalError",
    "Vote",
    "VoteValidationError",
    "VotingError",
]
