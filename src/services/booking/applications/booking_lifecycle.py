import threading
from dataclasses import dataclass

from services.booking.domain.entity import Booking
from services.booking.domain.enum import BookingStatus
from services.booking.domain.exception import (
    BookingNotFoundException,
    InvalidCardException,
)
from services.booking.domain.factory import BookingFactory
from services.booking.domain.repository import BookingRepository
from services.booking.domain.service import Notifier, SeatAssigner
from services.booking.domain.value_object import (
    BoardingPass,
    CardNumber,
    Passenger,
    Pnr,
)
from services.flight.applications import FlightCatalog
from services.flight.domain.value_object import FlightId
from services.shared.domain import IdGenerator
from services.shared.domain.exception import DuplicateResourceException


@dataclass(frozen=True)
class PaymentResult:
    """決済結果"""

    booking: Booking
    ticket_id: str


class BookingLifecycle:
    """予約のライフサイクル（予約 -> 決済 -> チェックイン / キャンセル）

    更新系の操作はすべて1つのロックで直列化し、残席数と予約の更新を
    1単位として扱う。
    """

    MAX_PNR_ATTEMPTS = 10

    def __init__(
        self,
        repository: BookingRepository,
        catalog: FlightCatalog,
        id_generator: IdGenerator,
        notifier: Notifier,
        seat_assigner: SeatAssigner,
        factory: BookingFactory | None = None,
    ) -> None:
        self._repository = repository
        self._catalog = catalog
        self._id_generator = id_generator
        self._notifier = notifier
        self._seat_assigner = seat_assigner
        self._factory = factory or BookingFactory(id_generator)
        self._lock = threading.RLock()

    def create_booking(self, flight_id: str | FlightId, passenger: Passenger) -> Booking:
        """便を予約する（残席を1つ確保し、支払い待ちの予約を作る）"""
        with self._lock:
            flight = self._catalog.decrement_seat(flight_id)
            try:
                pnr = self._issue_pnr()
                booking = self._factory.create(pnr, flight, passenger)
                self._repository.save(booking)
            except Exception:
                # 予約を作れなかった場合は確保した席を戻す
                self._catalog.increment_seat(flight.id)
                raise
            return booking

    def pay(self, pnr: str, card_number: str) -> PaymentResult:
        """支払いを受け付けて予約を確定し、航空券IDを発行する"""
        with self._lock:
            booking = self._find(pnr)
            try:
                CardNumber(card_number)
            except ValueError as e:
                raise InvalidCardException(str(e)) from e

            expected_status = booking.status
            ticket_id = self._id_generator.ticket_id()
            booking.confirm(ticket_id)
            self._repository.update(booking, expected_status=expected_status)
            self._publish_events(booking)
            return PaymentResult(booking=booking, ticket_id=ticket_id)

    def check_in(self, pnr: str, passport: str) -> BoardingPass:
        """チェックインして搭乗券を発行する"""
        with self._lock:
            booking = self._find(pnr)
            booking.check_in(passport)

            flight = self._catalog.get(booking.flight_id)
            assignment = self._seat_assigner.assign(booking, flight)
            self._repository.update(booking, expected_status=BookingStatus.CONFIRMED)

            return BoardingPass(
                passenger_name=booking.passenger.name,
                flight_id=str(booking.flight_id),
                seat=assignment.seat,
                gate=assignment.gate,
                boarding_time=assignment.boarding_time,
                boarding_token=self._id_generator.boarding_token(),
            )

    def cancel(self, pnr: str) -> Booking:
        """予約をキャンセルし、席を戻して返金を依頼する

        キャンセル済みの予約に対しては何もせずにそのまま返す。
        """
        with self._lock:
            booking = self._find(pnr)
            if booking.status == BookingStatus.CANCELLED:
                return booking

            expected_status = booking.status
            booking.cancel()
            self._repository.update(booking, expected_status=expected_status)
            self._catalog.increment_seat(booking.flight_id)
            self._publish_events(booking)
            return booking

    def get_booking(self, pnr: str) -> Booking:
        """PNR で予約を取得する"""
        return self._find(pnr)

    def _find(self, pnr: str) -> Booking:
        try:
            booking = self._repository.find_by_pnr(Pnr(pnr))
        except ValueError:
            booking = None
        if booking is None:
            raise BookingNotFoundException(f"Booking not found: {pnr}")
        return booking

    def _issue_pnr(self) -> Pnr:
        """未使用の PNR を採番する"""
        for _ in range(self.MAX_PNR_ATTEMPTS):
            pnr = Pnr(self._id_generator.pnr())
            if not self._repository.exists_pnr(pnr):
                return pnr
        raise DuplicateResourceException(
            f"Could not issue a unique PNR after {self.MAX_PNR_ATTEMPTS} attempts"
        )

    def _publish_events(self, booking: Booking) -> None:
        for event in booking.flush_domain_events():
            self._notifier.publish(event)
