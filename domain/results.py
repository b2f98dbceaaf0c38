"""Domain Results - explicit success-or-error returns"""
from typing import Optional

from pydantic import BaseModel, model_validator

from domain.entities import Reservation
from domain.enums import ReservationErrorKind
from domain.errors import error_for


class OperationResult(BaseModel):
    """Outcome of a ledger operation: a reservation or one error kind, never both"""
    value: Optional[Reservation] = None
    error: Optional[ReservationErrorKind] = None
    message: str = ""

    class Config:
        frozen = True

    @model_validator(mode="after")
    def exactly_one_outcome(self):
        if self.error is None and self.value is None:
            raise ValueError("Successful result must carry a reservation")
        if self.error is not None and self.value is not None:
            raise ValueError("Failed result cannot carry a reservation")
        return self

    @classmethod
    def success(cls, reservation: Reservation) -> "OperationResult":
        return cls(value=reservation)

    @classmethod
    def failure(cls, kind: ReservationErrorKind, message: str = "") -> "OperationResult":
        return cls(error=kind, message=message)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Reservation:
        """Return the reservation or raise the ReservationError matching the error kind"""
        if self.error is not None:
            raise error_for(self.error, self.message)
        return self.value
