"""Bootstrap wiring for shareholder voting dependencies."""
