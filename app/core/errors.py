"""Domain errors raised by the seat, order and checkout services.

Each error carries a machine-readable code and the HTTP status the API
boundary answers with. Routers never catch these; the handlers registered in
``app.main`` convert them to ``ErrorResponse`` bodies.
"""

from enum import Enum
from typing import List, Optional


class ErrorCode(str, Enum):
    INVALID_INPUT = "invalid_input"
    INVALID_SEAT = "invalid_seat"
    NOT_FOUND = "not_found"
    SEAT_CONFLICT = "seat_conflict"
    OUT_OF_STOCK = "out_of_stock"
    FOLIO_CONFLICT = "folio_conflict"
    STORAGE_FAILURE = "storage_failure"


class DomainError(Exception):
    code: ErrorCode = ErrorCode.INVALID_INPUT
    status_code: int = 400

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidInputError(DomainError):
    """Missing or malformed required field."""


class InvalidSeatError(DomainError):
    code = ErrorCode.INVALID_SEAT


class NotFoundError(DomainError):
    code = ErrorCode.NOT_FOUND
    status_code = 404


class SeatConflictError(DomainError):
    """One or more seats are not in a state that allows the transition."""

    code = ErrorCode.SEAT_CONFLICT
    status_code = 409

    def __init__(self, message: str, seats: Optional[List[str]] = None):
        super().__init__(message)
        self.seats = seats or []


class OutOfStockError(DomainError):
    code = ErrorCode.OUT_OF_STOCK
    status_code = 409


class FolioConflictError(DomainError):
    """Another order already holds the receipt folio."""

    code = ErrorCode.FOLIO_CONFLICT
    status_code = 409


class StorageError(DomainError):
    code = ErrorCode.STORAGE_FAILURE
    status_code = 500
