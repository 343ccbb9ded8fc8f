"""Project-wide custom exceptions.

This module centralizes domain-specific exception types so that routers and
services can raise / catch them without importing deep infrastructure errors
like ``asyncpg`` or raw SQLAlchemy exceptions.

Two families live here:

* store errors, raised by the repository layer and carrying a
  :class:`StoreErrorKind` (not found, constraint, unavailable, unknown);
* the outward service error, :class:`InternalServiceError`, which is the only
  failure the content service surfaces to callers.

:func:`collapse_store_error` is the single place where the first family is
mapped onto the second. The richer kind is kept on the store error for logs
only and never reaches a response payload.
"""
from __future__ import annotations

import enum


class ForumServerError(Exception):
    """Base class for all custom project exceptions.

    Subclass this rather than ``Exception`` directly for new domain errors.
    """


class StoreErrorKind(str, enum.Enum):
    NOT_FOUND = "not_found"
    CONSTRAINT = "constraint"
    UNAVAILABLE = "unavailable"
    UNKNOWN = "unknown"


class ServiceErrorKind(str, enum.Enum):
    INTERNAL = "internal"


class StoreError(ForumServerError):
    """Raised by repositories when the database reports a failure."""

    kind: StoreErrorKind = StoreErrorKind.UNKNOWN

    def __init__(self, detail: str = "store failure"):
        self.detail = detail
        super().__init__(detail)


class RecordNotFoundError(StoreError):
    kind = StoreErrorKind.NOT_FOUND

    def __init__(self, entity: str, id: int):
        self.entity = entity
        self.id = id
        super().__init__(f"{entity} {id} not found")


class ConstraintViolationError(StoreError):
    kind = StoreErrorKind.CONSTRAINT


class StoreUnavailableError(StoreError):
    kind = StoreErrorKind.UNAVAILABLE


class InternalServiceError(ForumServerError):
    """The one error kind the content service surfaces to its callers."""

    kind = ServiceErrorKind.INTERNAL

    def __init__(self):
        super().__init__("internal service error")


class InvalidPageError(ForumServerError):
    """Raised when a page request has ``end`` before ``start``."""

    def __init__(self, start: int, end: int):
        self.start = start
        self.end = end
        super().__init__(f"invalid page bounds (start={start}, end={end})")


def collapse_store_error(exc: StoreError) -> InternalServiceError:
    """Map any store error onto the single outward-facing error kind."""
    err = InternalServiceError()
    err.__cause__ = exc
    return err


__all__ = [
    "ForumServerError",
    "StoreErrorKind",
    "ServiceErrorKind",
    "StoreError",
    "RecordNotFoundError",
    "ConstraintViolationError",
    "StoreUnavailableError",
    "InternalServiceError",
    "InvalidPageError",
    "collapse_store_error",
]
