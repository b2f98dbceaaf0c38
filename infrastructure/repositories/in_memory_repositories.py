"""In-Memory Repository Implementations"""
from typing import Optional, List, Set

from domain.repositories import ReservationRepository
from domain.entities import Reservation


class InMemoryReservationRepository(ReservationRepository):
    """In-memory implementation of ReservationRepository"""

    def __init__(self, next_reservation_id: int = 1):
        self._storage: List[Reservation] = []
        self._next_reservation_id = next_reservation_id
        self._reserved_client_names: Set[str] = set()

    def peek_next_id(self) -> int:
        return self._next_reservation_id

    def advance_id(self) -> int:
        self._next_reservation_id += 1
        return self._next_reservation_id

    def save(self, reservation: Reservation) -> Reservation:
        """Append reservation to memory"""
        self._storage.append(reservation)
        return reservation

    def exists(self, reservation_id: int) -> bool:
        return any(r.id == reservation_id for r in self._storage)

    def find_by_id(self, reservation_id: int) -> Optional[Reservation]:
        """Find reservation by ID"""
        for reservation in self._storage:
            if reservation.id == reservation_id:
                return reservation
        return None

    def find_all(self) -> List[Reservation]:
        """Find all reservations"""
        return list(self._storage)

    def delete(self, reservation_id: int) -> Optional[Reservation]:
        """Delete reservation"""
        for index, reservation in enumerate(self._storage):
            if reservation.id == reservation_id:
                return self._storage.pop(index)
        return None

    def is_client_reserved(self, name: str) -> bool:
        return name in self._reserved_client_names

    def reserve_client(self, name: str) -> None:
        self._reserved_client_names.add(name)

    def release_client(self, name: str) -> None:
        self._reserved_client_names.discard(name)

    def reserved_client_names(self) -> frozenset:
        return frozenset(self._reserved_client_names)
