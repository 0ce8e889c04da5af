import threading

from services.flight.domain.entity import Flight
from services.flight.domain.exception import FlightNotFoundException
from services.flight.domain.repository import FlightRepository
from services.flight.domain.value_object import FlightId


class FlightCatalog:
    """運航便カタログ

    便の検索と残席数の増減を行う。残席数の増減は1便ずつ直列化する。
    """

    def __init__(self, repository: FlightRepository) -> None:
        self._repository = repository
        self._lock = threading.Lock()

    def find_by_route(self, origin: str, destination: str, date: str) -> list[Flight]:
        """区間と日付で便を検索する（登録順）"""
        return [
            flight
            for flight in self._repository.find_all()
            if flight.serves(origin, destination, date)
        ]

    def get(self, flight_id: str | FlightId) -> Flight:
        """便IDで便を取得する"""
        flight = self._repository.find_by_id(self._to_flight_id(flight_id))
        if flight is None:
            raise FlightNotFoundException(f"Flight not found: {flight_id}")
        return flight

    def decrement_seat(self, flight_id: str | FlightId) -> Flight:
        """残席を1つ減らす"""
        with self._lock:
            flight = self.get(flight_id)
            flight.reserve_seat()
            self._repository.update(flight)
            return flight

    def increment_seat(self, flight_id: str | FlightId) -> Flight:
        """残席を1つ戻す"""
        with self._lock:
            flight = self.get(flight_id)
            flight.release_seat()
            self._repository.update(flight)
            return flight

    @staticmethod
    def _to_flight_id(flight_id: str | FlightId) -> FlightId:
        if isinstance(flight_id, FlightId):
            return flight_id
        try:
            return FlightId(flight_id)
        except ValueError as e:
            # 形式不正の便IDは存在しない便として扱う
            raise FlightNotFoundException(f"Flight not found: {flight_id}") from e
