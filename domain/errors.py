"""Domain Errors"""
from typing import Dict, Type

from domain.enums import ReservationErrorKind


class ReservationError(Exception):
    """Base exception for every rejected ledger operation."""

    kind: ReservationErrorKind

    def __init__(self, message: str = ""):
        super().__init__(message or self.kind.value)


class DuplicateReservationIDError(ReservationError):
    """Raised when the freshly assigned id is already held by an active reservation."""

    kind = ReservationErrorKind.DUPLICATE_ID


class ClientAlreadyBookedError(ReservationError):
    """Raised when a requested client already holds an active reservation."""

    kind = ReservationErrorKind.CLIENT_ALREADY_BOOKED


class ReservationNotFoundError(ReservationError):
    """Raised when no active reservation matches the given id."""

    kind = ReservationErrorKind.RESERVATION_NOT_FOUND


_ERRORS_BY_KIND: Dict[ReservationErrorKind, Type[ReservationError]] = {
    cls.kind: cls
    for cls in (DuplicateReservationIDError, ClientAlreadyBookedError, ReservationNotFoundError)
}


def error_for(kind: ReservationErrorKind, message: str = "") -> ReservationError:
    """Build the exception matching an error kind"""
    return _ERRORS_BY_KIND[kind](message)
