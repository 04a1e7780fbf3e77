"""
Application layer - Use cases and orchestration for shareholder voting.

This layer contains:
- Port definitions (abstract interfaces for infrastructure)
- Application services (the vote decision)
- DTOs for callers that parse or serialize votes

IMPORT RULES:
- May import from domain/
- Must NOT import from infrastructure/ or bootstrap/
"""
