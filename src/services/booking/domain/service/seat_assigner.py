from abc import ABC, abstractmethod

from services.booking.domain.entity import Booking
from services.booking.domain.value_object import SeatAssignment
from services.flight.domain.entity import Flight


class SeatAssigner(ABC):
    """チェックイン時の座席・搭乗口の割り当てを抽象化する"""

    @abstractmethod
    def assign(self, booking: Booking, flight: Flight) -> SeatAssignment:
        raise NotImplementedError
