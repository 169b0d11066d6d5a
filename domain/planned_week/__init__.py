"""Planned week domain."""
