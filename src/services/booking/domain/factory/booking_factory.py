from services.booking.domain.entity import Booking
from services.booking.domain.enum import BookingStatus
from services.booking.domain.value_object import BookingId, Passenger, Pnr
from services.flight.domain.entity import Flight
from services.shared.domain import IdGenerator


class BookingFactory:
    """航空券予約エンティティのファクトリ

    - 予約IDの採番
    - 予約時点の運賃のスナップショット
    - 初期状態の設定
    """

    def __init__(self, id_generator: IdGenerator) -> None:
        self._id_generator = id_generator

    def create(self, pnr: Pnr, flight: Flight, passenger: Passenger) -> Booking:
        """新規予約エンティティを生成する

        Args:
            pnr: 採番済みで重複のない PNR
            flight: 予約対象の便
            passenger: 搭乗者情報

        Returns:
            Booking: 生成された予約エンティティ（PENDING_PAYMENT状態）
        """
        return Booking(
            id=BookingId(self._id_generator.booking_id()),
            pnr=pnr,
            flight_id=flight.id,
            passenger=passenger,
            total_price=flight.price,
            status=BookingStatus.PENDING_PAYMENT,
            ticket_issued=False,
            checked_in=False,
        )
