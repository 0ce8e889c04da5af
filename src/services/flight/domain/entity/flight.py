from datetime import datetime

from services.flight.domain.exception import NoSeatsAvailableException
from services.flight.domain.value_object import FlightId
from services.shared.domain import Entity, Money
from services.shared.domain.exception import BusinessRuleViolationException


class Flight(Entity[FlightId]):
    """運航便

    残席数以外は起動時の値から変化しない。
    """

    def __init__(
        self,
        id: FlightId,
        origin: str,
        destination: str,
        date: str,
        time: str,
        price: Money,
        seats: int,
        capacity: int | None = None,
    ) -> None:
        super().__init__(id)

        self._origin = origin
        self._destination = destination
        self._date = date
        self._time = time
        self._price = price
        self._seats = seats
        self._capacity = seats if capacity is None else capacity

        self._validate()

    def _validate(self) -> None:
        if not self._price.is_positive():
            raise BusinessRuleViolationException("Flight price must be positive")
        if self._seats < 0:
            raise BusinessRuleViolationException("Seat count cannot be negative")
        if self._seats > self._capacity:
            raise BusinessRuleViolationException("Seat count cannot exceed capacity")
        try:
            self.departure_at
        except ValueError as e:
            raise BusinessRuleViolationException(
                f"Invalid departure schedule: {self._date} {self._time}"
            ) from e

    @property
    def origin(self) -> str:
        return self._origin

    @property
    def destination(self) -> str:
        return self._destination

    @property
    def date(self) -> str:
        return self._date

    @property
    def time(self) -> str:
        return self._time

    @property
    def price(self) -> Money:
        return self._price

    @property
    def seats(self) -> int:
        return self._seats

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def departure_at(self) -> datetime:
        """出発日時"""
        return datetime.fromisoformat(f"{self._date}T{self._time}")

    def serves(self, origin: str, destination: str, date: str) -> bool:
        """指定の区間・日付の便かどうか（空港は大文字小文字を区別しない）"""
        return (
            self._origin.casefold() == origin.casefold()
            and self._destination.casefold() == destination.casefold()
            and self._date == date
        )

    def has_available_seat(self) -> bool:
        return self._seats > 0

    def reserve_seat(self) -> None:
        """残席を1つ確保する"""
        if not self.has_available_seat():
            raise NoSeatsAvailableException(f"No seats available on flight {self.id}")
        self._seats -= 1

    def release_seat(self) -> None:
        """確保済みの席を1つ戻す"""
        if self._seats >= self._capacity:
            raise BusinessRuleViolationException(
                f"Seat count of flight {self.id} is already at capacity"
            )
        self._seats += 1
