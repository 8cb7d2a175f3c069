"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.

Every class carries an ``ErrorKind`` tag.  The set of kinds is closed; the
boundary layer decides how each kind is presented (exit code, status code).
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    NOT_FOUND = "NOT_FOUND"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    INSUFFICIENT_STOCK = "INSUFFICIENT_STOCK"
    INVALID_TRANSITION = "INVALID_TRANSITION"
    ALREADY_CANCELED = "ALREADY_CANCELED"
    CONFLICT = "CONFLICT"
    UNEXPECTED = "UNEXPECTED"


class DomainException(Exception):
    """Base class for all domain errors."""

    kind = ErrorKind.UNEXPECTED


class ValidationError(DomainException):
    """A business rule or invariant was violated."""

    kind = ErrorKind.INVALID_ARGUMENT


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

    kind = ErrorKind.NOT_FOUND


class UserNotFoundError(EntityNotFoundError):
    pass


class ProductNotFoundError(EntityNotFoundError):
    pass


class OrderNotFoundError(EntityNotFoundError):
    pass


class ItemNotFoundError(EntityNotFoundError):
    pass


class DiscountNotFoundError(EntityNotFoundError):
    pass


class InsufficientStockError(DomainException):
    """Requested quantity exceeds what the product has on hand."""

    kind = ErrorKind.INSUFFICIENT_STOCK


class InvalidTransitionError(DomainException):
    """An order status change is not allowed."""

    kind = ErrorKind.INVALID_TRANSITION


class AlreadyCanceledError(InvalidTransitionError):
    kind = ErrorKind.ALREADY_CANCELED


class ConcurrentUpdateError(DomainException):
    """Another transaction changed the same row first; nothing was written."""

    kind = ErrorKind.CONFLICT


class UnexpectedError(DomainException):
    """Wraps failures raised below the domain (database, driver)."""

    kind = ErrorKind.UNEXPECTED
