from decimal import Decimal
from typing import TypedDict

from services.flight.domain.entity import Flight
from services.flight.domain.value_object import FlightId
from services.shared.domain import Currency, Money
from services.shared.utils import to_decimal


class FlightRecord(TypedDict):
    """便の初期データ構造"""

    flight_id: str
    origin: str
    destination: str
    date: str
    time: str
    price: Decimal | int | float | str
    seats: int


class FlightFactory:
    """運航便エンティティのファクトリ

    - プリミティブ型から Value Object への変換
    - 初期残席数をそのまま座席数の上限とする
    """

    def __init__(self, currency: Currency | None = None) -> None:
        self._currency = currency or Currency.usd()

    def create(self, record: FlightRecord) -> Flight:
        """初期データから便エンティティを生成する"""
        seats = int(record["seats"])
        return Flight(
            id=FlightId(record["flight_id"]),
            origin=record["origin"],
            destination=record["destination"],
            date=record["date"],
            time=record["time"],
            price=Money(amount=to_decimal(record["price"]), currency=self._currency),
            seats=seats,
            capacity=seats,
        )
