"""Unit test configuration.

Unit tests use in-memory adapters or mocks only; no external services.
"""
