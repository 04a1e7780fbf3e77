"""Application DTOs for callers of the vote decision."""

from shareholder_voting.application.dtos.ballot import BallotSubmission, DecisionResponse

__all__: list[str] = ["BallotSubmission", "DecisionResponse"]
