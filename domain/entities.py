"""Domain Entities - Aggregates"""
from typing import Sequence, Tuple

from pydantic import BaseModel

from domain.value_objects import Client


BASE_PRICE_PER_CLIENT = 20.0
BREAKFAST_MULTIPLIER = 1.25


def calculate_price(
    client_count: int,
    duration: int,
    breakfast_option: bool,
    base_price_per_client: float = BASE_PRICE_PER_CLIENT,
    breakfast_multiplier: float = BREAKFAST_MULTIPLIER
) -> float:
    """Price of a stay: per-client base rate times nights, scaled up when breakfast is included"""
    multiplier = breakfast_multiplier if breakfast_option else 1.0
    return float(client_count) * base_price_per_client * float(duration) * multiplier


class Reservation(BaseModel):
    """Reservation Aggregate Root Entity

    Immutable once created; the ledger only ever adds or removes whole
    reservations.
    """

    # Identity
    id: int
    hotel_name: str

    # Guests, in booking order
    clients: Tuple[Client, ...]

    duration: int
    price: float
    breakfast_option: bool

    class Config:
        frozen = True

    # ==================== FACTORY METHOD ====================
    @staticmethod
    def create(
        reservation_id: int,
        hotel_name: str,
        clients: Sequence[Client],
        duration: int,
        breakfast_option: bool,
        base_price_per_client: float = BASE_PRICE_PER_CLIENT,
        breakfast_multiplier: float = BREAKFAST_MULTIPLIER
    ) -> "Reservation":
        """Create new reservation with its computed price"""
        clients = tuple(clients)
        price = calculate_price(
            client_count=len(clients),
            duration=duration,
            breakfast_option=breakfast_option,
            base_price_per_client=base_price_per_client,
            breakfast_multiplier=breakfast_multiplier
        )

        return Reservation(
            id=reservation_id,
            hotel_name=hotel_name,
            clients=clients,
            duration=duration,
            price=price,
            breakfast_option=breakfast_option
        )

    # ==================== QUERY METHODS ====================
    def client_names(self) -> Tuple[str, ...]:
        """Names of the booked clients, in booking order"""
        return tuple(client.name for client in self.clients)

    def includes_client(self, name: str) -> bool:
        return name in self.client_names()
