"""User settings domain."""
