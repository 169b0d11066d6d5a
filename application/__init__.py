"""Application layer: CQRS commands and queries."""
