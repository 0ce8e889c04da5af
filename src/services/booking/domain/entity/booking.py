from services.booking.domain.enum import BookingStatus
from services.booking.domain.event import BookingCancelled, BookingConfirmed
from services.booking.domain.exception import (
    BookingNotConfirmedException,
    IdentityMismatchException,
    InvalidBookingStateException,
)
from services.booking.domain.value_object import BookingId, Passenger, Pnr
from services.flight.domain.value_object import FlightId
from services.shared.domain import AggregateRoot, Money
from services.shared.domain.exception import BusinessRuleViolationException


class Booking(AggregateRoot[BookingId]):
    """航空券予約

    - ticket_issued は CONFIRMED の間だけ True
    - checked_in は CONFIRMED の間だけ True になりうる
    """

    def __init__(
        self,
        id: BookingId,
        pnr: Pnr,
        flight_id: FlightId,
        passenger: Passenger,
        total_price: Money,
        status: BookingStatus = BookingStatus.PENDING_PAYMENT,
        ticket_issued: bool = False,
        checked_in: bool = False,
    ) -> None:
        super().__init__(id)

        self._pnr = pnr
        self._flight_id = flight_id
        self._passenger = passenger
        self._total_price = total_price
        self._status = status
        self._ticket_issued = ticket_issued
        self._checked_in = checked_in

        self._validate_flags()

    def _validate_flags(self) -> None:
        if self._ticket_issued != (self._status == BookingStatus.CONFIRMED):
            raise BusinessRuleViolationException(
                "Ticket must be issued if and only if the booking is confirmed"
            )
        if self._checked_in and self._status != BookingStatus.CONFIRMED:
            raise BusinessRuleViolationException(
                "Only confirmed bookings can be checked in"
            )

    @property
    def pnr(self) -> Pnr:
        return self._pnr

    @property
    def flight_id(self) -> FlightId:
        return self._flight_id

    @property
    def passenger(self) -> Passenger:
        return self._passenger

    @property
    def total_price(self) -> Money:
        return self._total_price

    @property
    def status(self) -> BookingStatus:
        return self._status

    @property
    def ticket_issued(self) -> bool:
        return self._ticket_issued

    @property
    def checked_in(self) -> bool:
        return self._checked_in

    def confirm(self, ticket_id: str) -> None:
        """決済完了により予約を確定し、航空券を発行する"""
        self._transition_to(BookingStatus.CONFIRMED)
        self._ticket_issued = True
        self.add_domain_event(
            BookingConfirmed(
                booking_id=str(self.id),
                pnr=str(self._pnr),
                email=self._passenger.email,
                ticket_id=ticket_id,
            )
        )

    def check_in(self, passport: str) -> None:
        """チェックインする

        ステータス確認 -> 本人確認の順に検証する。
        """
        if self._status != BookingStatus.CONFIRMED:
            raise BookingNotConfirmedException("Booking not confirmed")
        if not self._passenger.matches_passport(passport):
            raise IdentityMismatchException("Identity mismatch")
        self._checked_in = True

    def cancel(self) -> None:
        """予約をキャンセルする（キャンセル済みなら何もしない）"""
        if self._status == BookingStatus.CANCELLED:
            return
        self._transition_to(BookingStatus.CANCELLED)
        self._ticket_issued = False
        self._checked_in = False
        self.add_domain_event(
            BookingCancelled(
                booking_id=str(self.id),
                pnr=str(self._pnr),
                email=self._passenger.email,
                refund_amount=self._total_price,
            )
        )

    def _transition_to(self, target: BookingStatus) -> None:
        if not self._status.can_transition_to(target):
            raise InvalidBookingStateException(
                f"Cannot change booking {self._pnr} from {self._status.value} "
                f"to {target.value}"
            )
        self._status = target
