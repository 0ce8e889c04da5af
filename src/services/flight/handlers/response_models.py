from services.flight.domain.entity import Flight
from services.shared.utils import CamelModel


class FlightData(CamelModel):
    """便データのレスポンスモデル"""

    flight_id: str
    origin: str
    destination: str
    date: str
    time: str
    price: str
    currency: str
    seats: int


def to_flight_response(flight: Flight) -> dict:
    """Flight エンティティをレスポンス辞書に変換する"""
    return FlightData(
        flight_id=str(flight.id),
        origin=flight.origin,
        destination=flight.destination,
        date=flight.date,
        time=flight.time,
        price=str(flight.price.amount),
        currency=str(flight.price.currency),
        seats=flight.seats,
    ).to_payload()
