"""Domain Enums"""
from enum import Enum


class ReservationErrorKind(str, Enum):
    DUPLICATE_ID = "DUPLICATE_ID"
    CLIENT_ALREADY_BOOKED = "CLIENT_ALREADY_BOOKED"
    RESERVATION_NOT_FOUND = "RESERVATION_NOT_FOUND"


class AuditAction(str, Enum):
    RESERVATION_CREATED = "reservation.created"
    RESERVATION_CANCELLED = "reservation.cancelled"
