"""Base exception classes for the shareholder voting domain layer."""


class VotingError(Exception):
    """Base exception for all domain errors.

    All domain-specific exceptions MUST inherit from this class.
    Caller misuse (absent inputs, wrong types) is NOT a domain error and
    is raised as TypeError instead.
    """

    def __init__(self, message: str = "") -> None:
        """Initialize the exception with an optional message.

        Args:
            message: Human-readable error description.
        """
        super().__init__(message)
