"""Configuration for shareholder voting."""

from shareholder_voting.config.voting_config import (
    DEFAULT_VOTING_CONFIG,
    VotingConfig,
)

__all__: list[str] = ["DEFAULT_VOTING_CONFIG", "VotingConfig"]
