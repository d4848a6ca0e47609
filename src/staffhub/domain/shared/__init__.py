"""Shared domain components.

This module exports the Result/Option outcome types, the exception
hierarchy and small utilities used across domain boundaries.
"""

from staffhub.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    InfrastructureError,
    UnauthorizedError,
    UnwrapError,
    ValidationError,
)
from staffhub.domain.shared.option import Absent, Option, Present, option_of
from staffhub.domain.shared.result import Failure, Result, Success
from staffhub.domain.shared.time import utc_now

__all__ = [
    # Error codes
    "ErrorCode",
    # Base exception
    "DomainException",
    # Exception categories
    "ConflictError",
    "EntityNotFoundError",
    "InfrastructureError",
    "UnauthorizedError",
    "UnwrapError",
    "ValidationError",
    # Outcome types
    "Absent",
    "Failure",
    "Option",
    "Present",
    "Result",
    "Success",
    "option_of",
    # Utilities
    "utc_now",
]
