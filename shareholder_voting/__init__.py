"""
Shareholder Voting - per-vote acceptance decisions for shareholder meetings.

Decides the fate of a single vote cast against a proposal:
- The proposal must be valid for the meeting
- A shareholder's first vote is always accepted
- A changed vote is accepted only strictly before the record date
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
