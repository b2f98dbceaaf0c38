"""Application Services - Business use cases"""
import logging
from threading import Lock
from typing import List, Optional, Sequence

from domain.entities import Reservation
from domain.enums import AuditAction, ReservationErrorKind
from domain.repositories import ReservationRepository
from domain.results import OperationResult
from domain.value_objects import Client
from infrastructure.audit_log import emit_audit_log
from infrastructure.config import Settings, get_settings
from infrastructure.repositories.in_memory_repositories import InMemoryReservationRepository

logger = logging.getLogger(__name__)


class HotelReservationManager:
    """Reservation ledger for a single hotel

    Owns the active reservations, the id counter and the reserved client
    names. Every operation runs under one lock so the three are updated
    together.
    """

    def __init__(self,
                 repository: Optional[ReservationRepository] = None,
                 settings: Optional[Settings] = None):
        self.repository = repository if repository is not None else InMemoryReservationRepository()
        self.settings = settings if settings is not None else get_settings()
        self._lock = Lock()

    @property
    def next_reservation_id(self) -> int:
        return self.repository.peek_next_id()

    def create(
        self,
        clients: Sequence[Client],
        duration: int,
        breakfast_option: bool
    ) -> OperationResult:
        """Book clients for a stay; rejects if the id is taken or any client is already booked"""
        with self._lock:
            reservation = Reservation.create(
                reservation_id=self.repository.peek_next_id(),
                hotel_name=self.settings.hotel_name,
                clients=clients,
                duration=duration,
                breakfast_option=breakfast_option,
                base_price_per_client=self.settings.base_price_per_client,
                breakfast_multiplier=self.settings.breakfast_multiplier
            )

            if self.repository.exists(reservation.id):
                return OperationResult.failure(
                    ReservationErrorKind.DUPLICATE_ID,
                    f"Reservation id {reservation.id} is already in use"
                )

            if self.settings.atomic_client_check:
                conflict = self._find_conflict(reservation.clients)
                if conflict is not None:
                    return self._already_booked(conflict)
                for client in reservation.clients:
                    self.repository.reserve_client(client.name)
            else:
                # Names reserved earlier in this scan stay reserved if a later one conflicts.
                for client in reservation.clients:
                    if self.repository.is_client_reserved(client.name):
                        return self._already_booked(client.name)
                    self.repository.reserve_client(client.name)

            self.repository.save(reservation)
            self.repository.advance_id()

        logger.debug("Created reservation %s for %s", reservation.id, ", ".join(reservation.client_names()))
        self._audit(AuditAction.RESERVATION_CREATED, reservation)
        return OperationResult.success(reservation)

    def cancel(self, reservation_id: int) -> OperationResult:
        """Cancel reservation and free its clients for rebooking"""
        with self._lock:
            reservation = self.repository.find_by_id(reservation_id)
            if reservation is None:
                return OperationResult.failure(
                    ReservationErrorKind.RESERVATION_NOT_FOUND,
                    f"Reservation {reservation_id} not found"
                )

            for client in reservation.clients:
                self.repository.release_client(client.name)
            removed = self.repository.delete(reservation_id)
            assert removed is reservation

        logger.debug("Cancelled reservation %s", reservation_id)
        self._audit(AuditAction.RESERVATION_CANCELLED, reservation)
        return OperationResult.success(reservation)

    def list(self) -> List[Reservation]:
        """Active reservations in booking order"""
        with self._lock:
            return self.repository.find_all()

    def get(self, reservation_id: int) -> Optional[Reservation]:
        with self._lock:
            return self.repository.find_by_id(reservation_id)

    def is_client_booked(self, name: str) -> bool:
        with self._lock:
            return self.repository.is_client_reserved(name)

    def _find_conflict(self, clients: Sequence[Client]) -> Optional[str]:
        seen = set()
        for client in clients:
            if client.name in seen or self.repository.is_client_reserved(client.name):
                return client.name
            seen.add(client.name)
        return None

    @staticmethod
    def _already_booked(name: str) -> OperationResult:
        return OperationResult.failure(
            ReservationErrorKind.CLIENT_ALREADY_BOOKED,
            f"Client {name} already has a reservation"
        )

    def _audit(self, action: AuditAction, reservation: Reservation) -> None:
        if not self.settings.audit_log_enabled:
            return
        # The change is already committed; the caller still gets its result.
        try:
            emit_audit_log(
                action=action,
                reservation_id=reservation.id,
                hotel_name=reservation.hotel_name,
                client_names=reservation.client_names(),
                duration=reservation.duration,
                price=reservation.price,
                breakfast_option=reservation.breakfast_option,
            )
        except RuntimeError:
            logger.exception("Audit log failed for %s of reservation %s", action.value, reservation.id)
