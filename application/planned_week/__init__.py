"""Planned week application services."""
