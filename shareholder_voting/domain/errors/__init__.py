"""Domain errors for shareholder voting.

All exceptions inherit from VotingError.
"""

from shareholder_voting.domain.errors.vote import (
    InvalidProposalError,
    VoteValidationError,
)

__all__: list[str] = ["InvalidProposalError", "VoteValidationError"]
