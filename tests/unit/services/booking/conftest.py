from dataclasses import dataclass
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from services.booking.applications import BookingLifecycle
from services.booking.domain.entity import Booking
from services.booking.domain.enum import BookingStatus
from services.booking.domain.value_object import BookingId, Passenger, Pnr
from services.booking.infrastructure import (
    FixedSeatAssigner,
    InMemoryBookingRepository,
)
from services.flight.applications import FlightCatalog
from services.flight.domain.entity import Flight
from services.flight.domain.value_object import FlightId
from services.flight.infrastructure import InMemoryFlightRepository
from services.shared.domain import Currency, Money


@pytest.fixture
def passenger():
    return Passenger(name="Alice", email="a@x.com", passport="P1")


@pytest.fixture
def create_booking(passenger):
    """Booking を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        status: BookingStatus = BookingStatus.PENDING_PAYMENT,
        booking_id: str = "test-id",
        pnr: str = "PNR123456",
        flight_id: str = "FL001",
        price_amount: Decimal = Decimal("500"),
        ticket_issued: bool | None = None,
        checked_in: bool = False,
    ) -> Booking:
        if ticket_issued is None:
            ticket_issued = status == BookingStatus.CONFIRMED
        return Booking(
            id=BookingId(value=booking_id),
            pnr=Pnr(value=pnr),
            flight_id=FlightId(value=flight_id),
            passenger=passenger,
            total_price=Money(amount=price_amount, currency=Currency.usd()),
            status=status,
            ticket_issued=ticket_issued,
            checked_in=checked_in,
        )

    return _factory


@dataclass
class LifecycleFixture:
    """BookingLifecycle と、その依存先一式"""

    lifecycle: BookingLifecycle
    catalog: FlightCatalog
    repository: InMemoryBookingRepository
    notifier: MagicMock

    def seats(self, flight_id: str = "FL001") -> int:
        return self.catalog.get(flight_id).seats


@pytest.fixture
def build_lifecycle(id_generator):
    """指定の残席数の便を持つ BookingLifecycle を組み立てる"""

    def _factory(
        seats: dict[str, int] | None = None,
        capacity: int = 150,
        generator=None,
        seat_assigner=None,
    ) -> LifecycleFixture:
        seats = seats if seats is not None else {"FL001": 150}
        flights = [
            Flight(
                id=FlightId(flight_id),
                origin="NYC",
                destination="LON",
                date="2025-10-15",
                time="10:00",
                price=Money.usd(500),
                seats=count,
                capacity=max(capacity, count),
            )
            for flight_id, count in seats.items()
        ]
        catalog = FlightCatalog(repository=InMemoryFlightRepository(flights))
        repository = InMemoryBookingRepository()
        notifier = MagicMock()
        lifecycle = BookingLifecycle(
            repository=repository,
            catalog=catalog,
            id_generator=generator or id_generator,
            notifier=notifier,
            seat_assigner=seat_assigner or FixedSeatAssigner(),
        )
        return LifecycleFixture(
            lifecycle=lifecycle,
            catalog=catalog,
            repository=repository,
            notifier=notifier,
        )

    return _factory
