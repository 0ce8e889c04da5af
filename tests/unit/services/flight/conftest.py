from decimal import Decimal

import pytest

from services.flight.applications import FlightCatalog
from services.flight.domain.entity import Flight
from services.flight.domain.value_object import FlightId
from services.flight.infrastructure import InMemoryFlightRepository
from services.shared.domain import Currency, Money


@pytest.fixture
def create_flight():
    """Flight を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        flight_id: str = "FL001",
        origin: str = "NYC",
        destination: str = "LON",
        date: str = "2025-10-15",
        time: str = "10:00",
        price_amount: Decimal = Decimal("500"),
        seats: int = 150,
        capacity: int | None = None,
    ) -> Flight:
        return Flight(
            id=FlightId(value=flight_id),
            origin=origin,
            destination=destination,
            date=date,
            time=time,
            price=Money(amount=price_amount, currency=Currency.usd()),
            seats=seats,
            capacity=capacity,
        )

    return _factory


@pytest.fixture
def create_catalog(create_flight):
    """指定した便を登録済みの FlightCatalog を生成する"""

    def _factory(*flights: Flight) -> FlightCatalog:
        if not flights:
            flights = (create_flight(),)
        return FlightCatalog(repository=InMemoryFlightRepository(flights))

    return _factory
