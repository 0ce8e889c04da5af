from abc import abstractmethod

from services.flight.domain.entity import Flight
from services.flight.domain.value_object import FlightId
from services.shared.domain import Repository


class FlightRepository(Repository[Flight, FlightId]):
    """運航便レポジトリ"""

    @abstractmethod
    def save(self, flight: Flight) -> None:
        """便を登録する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, flight_id: FlightId) -> Flight | None:
        """便IDで検索"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Flight]:
        """登録順に全便を返す"""
        raise NotImplementedError

    @abstractmethod
    def update(self, flight: Flight) -> None:
        """残席数を更新する"""
        raise NotImplementedError
