"""
Infrastructure layer - Adapters and cross-cutting concerns.

This layer contains:
- Adapters implementing application ports
- Stubs for development and testing
- Observability (structured logging, correlation IDs)

IMPORT RULES:
- May import from domain/ and application/
"""
