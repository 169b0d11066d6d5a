"""Domain layer for the weekly meal planner.

Business rules for planned weeks, meals and tenant settings, decoupled
from persistence and presentation.
"""
