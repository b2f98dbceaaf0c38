"""Domain Repository Interfaces"""
from abc import ABC, abstractmethod
from typing import Optional, List

from domain.entities import Reservation


class ReservationRepository(ABC):
    """Repository interface for the reservation ledger state

    Holds the active reservations in insertion order, the id counter and the
    set of reserved client names.
    """

    @abstractmethod
    def peek_next_id(self) -> int:
        """Next id to issue, without consuming it"""
        pass

    @abstractmethod
    def advance_id(self) -> int:
        """Consume the next id and return the new counter value"""
        pass

    @abstractmethod
    def save(self, reservation: Reservation) -> Reservation:
        """Append reservation to the active collection"""
        pass

    @abstractmethod
    def exists(self, reservation_id: int) -> bool:
        """Check whether an active reservation has this id"""
        pass

    @abstractmethod
    def find_by_id(self, reservation_id: int) -> Optional[Reservation]:
        """Find first active reservation with this id"""
        pass

    @abstractmethod
    def find_all(self) -> List[Reservation]:
        """Snapshot of active reservations in insertion order"""
        pass

    @abstractmethod
    def delete(self, reservation_id: int) -> Optional[Reservation]:
        """Remove reservation, returning it if it was present"""
        pass

    @abstractmethod
    def is_client_reserved(self, name: str) -> bool:
        pass

    @abstractmethod
    def reserve_client(self, name: str) -> None:
        pass

    @abstractmethod
    def release_client(self, name: str) -> None:
        pass

    @abstractmethod
    def reserved_client_names(self) -> frozenset:
        pass
