"""Shared kernel: errors and calendar value objects."""
