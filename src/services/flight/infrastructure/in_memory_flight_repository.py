import copy
import threading
from collections.abc import Iterable

from services.flight.domain.entity import Flight
from services.flight.domain.exception import FlightNotFoundException
from services.flight.domain.repository import FlightRepository
from services.flight.domain.value_object import FlightId
from services.shared.domain.exception import DuplicateResourceException


class InMemoryFlightRepository(FlightRepository):
    """プロセス内メモリを使用した FlightRepository の具象実装

    保存・取得ともにコピーを受け渡すため、呼び出し側が更新途中の
    エンティティを他スレッドから参照することはない。
    """

    def __init__(self, flights: Iterable[Flight] = ()) -> None:
        self._flights: dict[FlightId, Flight] = {}
        self._lock = threading.Lock()
        for flight in flights:
            self.save(flight)

    def save(self, flight: Flight) -> None:
        with self._lock:
            if flight.id in self._flights:
                raise DuplicateResourceException(f"Flight already exists: {flight.id}")
            self._flights[flight.id] = copy.deepcopy(flight)

    def find_by_id(self, flight_id: FlightId) -> Flight | None:
        with self._lock:
            flight = self._flights.get(flight_id)
            return copy.deepcopy(flight) if flight is not None else None

    def find_all(self) -> list[Flight]:
        with self._lock:
            return [copy.deepcopy(flight) for flight in self._flights.values()]

    def update(self, flight: Flight) -> None:
        with self._lock:
            if flight.id not in self._flights:
                raise FlightNotFoundException(f"Flight not found: {flight.id}")
            self._flights[flight.id] = copy.deepcopy(flight)
