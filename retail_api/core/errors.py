from __future__ import annotations

from fastapi import HTTPException, status


class ServiceError(HTTPException):
    """Base for errors raised by the resource services.

    Subclasses pin the HTTP status so FastAPI renders them as
    ``{"detail": ...}`` without any per-route translation.
    """

    default_status = status.HTTP_400_BAD_REQUEST

    def __init__(self, detail: str):
        super().__init__(status_code=self.default_status, detail=detail)


class NotFoundError(ServiceError):
    default_status = status.HTTP_404_NOT_FOUND


class ConflictError(ServiceError):
    """Duplicate key, missing foreign-key target or a restricted delete."""

    default_status = status.HTTP_409_CONFLICT


class InsufficientQuantityError(ServiceError):
    """A propagation write would push stock or a loan balance below zero."""

    default_status = status.HTTP_400_BAD_REQUEST


__all__ = [
    "ConflictError",
    "InsufficientQuantityError",
    "NotFoundError",
    "ServiceError",
]
