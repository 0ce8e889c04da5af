from datetime import timedelta

from services.booking.domain.entity import Booking
from services.booking.domain.service import SeatAssigner
from services.booking.domain.value_object import SeatAssignment
from services.flight.domain.entity import Flight


class FixedSeatAssigner(SeatAssigner):
    """全予約に同じ座席・搭乗口を割り当てる SeatAssigner

    座席管理サービスと連携するまでの仮実装。
    搭乗開始時刻は出発時刻の boarding_lead 前とする。
    """

    def __init__(
        self,
        seat: str = "12A",
        gate: str = "B4",
        boarding_lead: timedelta = timedelta(minutes=30),
    ) -> None:
        self._seat = seat
        self._gate = gate
        self._boarding_lead = boarding_lead

    def assign(self, booking: Booking, flight: Flight) -> SeatAssignment:
        boarding_at = flight.departure_at - self._boarding_lead
        return SeatAssignment(
            seat=self._seat,
            gate=self._gate,
            boarding_time=boarding_at.strftime("%H:%M"),
        )
