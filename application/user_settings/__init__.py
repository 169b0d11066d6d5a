"""User settings application services."""
