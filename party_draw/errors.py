"""Custom exceptions for centralized error handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class AppError(Exception):
    """Base application error."""

    code: str
    message: str
    status_code: int
    details: Any | None = None

    def __str__(self) -> str:
        return self.message


class NotFoundError(AppError):
    """Resource not found."""

    def __init__(self, message: str = "Not found", details: Any | None = None) -> None:
        super().__init__(code="not_found", message=message, status_code=404, details=details)


class ValidationError(AppError):
    """Input validation error."""

    def __init__(self, message: str = "Validation error", details: Any | None = None) -> None:
        super().__init__(code="validation_error", message=message, status_code=400, details=details)


class AllocationError(AppError):
    """Team / lottery allocation could not be completed. Safe to retry later."""


class CapacityExhaustedError(AllocationError):
    """Every team is at capacity."""

    def __init__(
        self,
        message: str = "All seats are taken. Please try again later or contact the organizer.",
        details: Any | None = None,
    ) -> None:
        super().__init__(code="capacity_exhausted", message=message, status_code=409, details=details)


class NumberSpaceExhaustedError(AllocationError):
    """No unused lottery number is left."""

    def __init__(
        self,
        message: str = "No lottery numbers are left. Please try again later or contact the organizer.",
        details: Any | None = None,
    ) -> None:
        super().__init__(code="number_space_exhausted", message=message, status_code=409, details=details)


class StorageCorruptError(AppError):
    """Persisted participant blob could not be parsed."""

    def __init__(self, message: str = "Stored participant data is corrupt", details: Any | None = None) -> None:
        super().__init__(code="storage_corrupt", message=message, status_code=500, details=details)
