"""Demo harness - replays the sample bookings against a fresh ledger"""
import logging
from typing import List

from application.services import HotelReservationManager
from domain.enums import ReservationErrorKind
from domain.results import OperationResult
from domain.value_objects import Client
from infrastructure.config import get_settings

logger = logging.getLogger("demo")


def _report(label: str, result: OperationResult) -> None:
    if result.ok:
        logger.info("%s: reservation %s, price %.2f", label, result.value.id, result.value.price)
    else:
        logger.info("%s rejected: %s (%s)", label, result.error.value, result.message)


# ============================================================================
# SCENARIOS
# ============================================================================

def demo_add_reservations(manager: HotelReservationManager) -> List[OperationResult]:
    goku = Client(name="Goku", age=30, height=175)
    vegeta = Client(name="Vegeta", age=35, height=165)

    results = [
        manager.create([goku], duration=2, breakfast_option=True),
        manager.create([vegeta], duration=3, breakfast_option=False),
        manager.create([goku], duration=1, breakfast_option=True),
    ]
    for label, result in zip(("Goku", "Vegeta", "Goku again"), results):
        _report(label, result)
    return results


def demo_cancel_reservations(manager: HotelReservationManager) -> List[OperationResult]:
    results = [manager.cancel(1), manager.cancel(999)]
    for label, result in zip(("Cancel 1", "Cancel 999"), results):
        if result.ok:
            logger.info("%s: done", label)
        else:
            logger.info("%s rejected: %s", label, result.error.value)
    return results


def demo_equal_prices(manager: HotelReservationManager) -> List[OperationResult]:
    piccolo = Client(name="Piccolo", age=40, height=200)
    trunks = Client(name="Trunks", age=20, height=170)

    results = [
        manager.create([piccolo], duration=3, breakfast_option=True),
        manager.create([trunks], duration=3, breakfast_option=True),
    ]
    for label, result in zip(("Piccolo", "Trunks"), results):
        _report(label, result)
    return results


def run_demo(manager: HotelReservationManager) -> List[OperationResult]:
    added = demo_add_reservations(manager)
    assert manager.list(), "There should be at least one reservation"

    cancelled = demo_cancel_reservations(manager)
    assert manager.get(1) is None, "Reservation 1 should have been cancelled"
    assert cancelled[1].error == ReservationErrorKind.RESERVATION_NOT_FOUND

    priced = demo_equal_prices(manager)
    assert priced[0].unwrap().price == priced[1].unwrap().price, "Prices should be equal"

    for reservation in manager.list():
        logger.info("Active: %s", reservation)
    return added + cancelled + priced


def main() -> None:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    run_demo(HotelReservationManager(settings=settings))


if __name__ == "__main__":
    main()
