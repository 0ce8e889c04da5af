import os
from dataclasses import dataclass
from functools import lru_cache

from services.booking.applications import BookingLifecycle
from services.booking.infrastructure import (
    FixedSeatAssigner,
    InMemoryBookingRepository,
    LoggingNotifier,
)
from services.flight.applications import FlightCatalog
from services.flight.domain.factory import FlightFactory
from services.flight.infrastructure import (
    InMemoryFlightRepository,
    load_flight_records,
)
from services.shared.domain import IdGenerator
from services.shared.infrastructure import RandomIdGenerator
from services.support.applications import CreateSupportTicketService
from services.support.infrastructure import InMemorySupportTicketRepository


@dataclass(frozen=True)
class Container:
    """ハンドラーが共有するアプリケーションサービス一式

    状態はすべてプロセス内メモリにあるため、同一プロセスの
    ハンドラーは同じ Container を参照する必要がある。
    """

    flight_catalog: FlightCatalog
    booking_lifecycle: BookingLifecycle
    support_service: CreateSupportTicketService


def build_container(
    seed_path: str | None = None,
    id_generator: IdGenerator | None = None,
) -> Container:
    """環境変数を読み込んで Container を組み立てる"""
    seed_path = seed_path or os.getenv("FLIGHT_SEED_PATH")
    id_generator = id_generator or RandomIdGenerator()

    factory = FlightFactory()
    flights = [factory.create(record) for record in load_flight_records(seed_path)]
    catalog = FlightCatalog(repository=InMemoryFlightRepository(flights))

    seat_assigner = FixedSeatAssigner(
        seat=os.getenv("SEAT_NUMBER", "12A"),
        gate=os.getenv("BOARDING_GATE", "B4"),
    )
    lifecycle = BookingLifecycle(
        repository=InMemoryBookingRepository(),
        catalog=catalog,
        id_generator=id_generator,
        notifier=LoggingNotifier(),
        seat_assigner=seat_assigner,
    )
    support_service = CreateSupportTicketService(
        repository=InMemorySupportTicketRepository(),
        id_generator=id_generator,
    )
    return Container(
        flight_catalog=catalog,
        booking_lifecycle=lifecycle,
        support_service=support_service,
    )


@lru_cache(maxsize=1)
def get_container() -> Container:
    """プロセス内で共有する Container を返す"""
    return build_container()
