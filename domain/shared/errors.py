"""
Domain exceptions.

Typed exceptions shared by every bounded context of the planner.
All of them describe caller input problems: they are raised before any
state is mutated, are never retried and are safe to report verbatim.
"""

from __future__ import annotations


# ═══════════════════════════════════════════════════════════
# BASE EXCEPTION
# ═══════════════════════════════════════════════════════════


class DomainError(Exception):
    """
    Base exception for all domain errors.

    Allows catching all domain errors with single except clause.
    """

    pass


# ═══════════════════════════════════════════════════════════
# VALIDATION EXCEPTIONS
# ═══════════════════════════════════════════════════════════


class ValidationError(DomainError):
    """
    Domain validation failed.

    Raised when:
    - Quality flags violate creamy/acidic exclusivity
    - Daily preferences are not exactly one entry per weekday
    - Required identifiers or names are empty

    Example:
        >>> raise ValidationError("is_creamy and is_acidic cannot both be true")
    """

    pass


class InvalidInputError(ValidationError):
    """
    Malformed caller input.

    Raised when:
    - A date string cannot be parsed as a calendar date
    - Pagination parameters are out of range

    Example:
        >>> raise InvalidInputError("invalid date supplied")
    """

    pass


class AlignmentError(DomainError):
    """
    Planned week start date does not fall on the configured week start day.

    Example:
        >>> raise AlignmentError(
        ...     "starting date must align with configured week start day"
        ... )
    """

    pass


# ═══════════════════════════════════════════════════════════
# LOOKUP / STORE EXCEPTIONS
# ═══════════════════════════════════════════════════════════


class NotFoundError(DomainError):
    """
    Resource not found.

    Raised when:
    - Planned week does not exist for the tenant
    - Date is outside the planned week
    - Tenant has no user settings

    Example:
        >>> raise NotFoundError("planned week not found")
    """

    pass


class ConflictError(DomainError):
    """
    Resource conflict detected.

    Raised when a planned week already exists for the same tenant and
    starting date.

    Example:
        >>> raise ConflictError(
        ...     "planned week already exists for this start date"
        ... )
    """

    pass
