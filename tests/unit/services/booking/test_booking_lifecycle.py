from unittest.mock import MagicMock

import pytest

from services.booking.domain.enum import BookingStatus
from services.booking.domain.event import BookingCancelled, BookingConfirmed
from services.booking.domain.exception import (
    BookingNotConfirmedException,
    BookingNotFoundException,
    IdentityMismatchException,
    InvalidBookingStateException,
    InvalidCardException,
)
from services.flight.domain.exception import (
    FlightNotFoundException,
    FlightUnavailableException,
    NoSeatsAvailableException,
)
from services.shared.domain.exception import DuplicateResourceException, ErrorKind

CARD = "4111111111111111"


class TestCreateBooking:
    """BookingLifecycle.create_booking のテスト"""

    def test_creates_pending_booking_and_takes_a_seat(self, build_lifecycle, passenger):
        fx = build_lifecycle(seats={"FL001": 150})

        booking = fx.lifecycle.create_booking("FL001", passenger)

        assert booking.status == BookingStatus.PENDING_PAYMENT
        assert booking.ticket_issued is False
        assert booking.checked_in is False
        assert str(booking.flight_id) == "FL001"
        assert booking.total_price.amount == 500
        assert str(booking.pnr) == "PNR100001"
        assert str(booking.id) == "booking-2"
        assert fx.seats("FL001") == 149
        assert fx.repository.count() == 1

    def test_booking_is_retrievable_by_pnr(self, build_lifecycle, passenger):
        fx = build_lifecycle()

        booking = fx.lifecycle.create_booking("FL001", passenger)

        assert fx.lifecycle.get_booking(str(booking.pnr)) == booking

    def test_unknown_flight(self, build_lifecycle, passenger):
        fx = build_lifecycle()

        with pytest.raises(FlightNotFoundException) as exc_info:
            fx.lifecycle.create_booking("FL999", passenger)

        assert exc_info.value.kind == ErrorKind.UNAVAILABLE
        assert fx.repository.count() == 0

    def test_sold_out_flight(self, build_lifecycle, passenger):
        """残席0の便は Unavailable で失敗し、予約は作られない"""
        fx = build_lifecycle(seats={"FL001": 0})

        with pytest.raises(NoSeatsAvailableException) as exc_info:
            fx.lifecycle.create_booking("FL001", passenger)

        assert exc_info.value.kind == ErrorKind.UNAVAILABLE
        assert fx.repository.count() == 0
        assert fx.seats("FL001") == 0

    def test_not_found_and_sold_out_share_unavailable_base(
        self, build_lifecycle, passenger
    ):
        fx = build_lifecycle(seats={"FL001": 0})

        for flight_id in ("FL001", "FL999"):
            with pytest.raises(FlightUnavailableException):
                fx.lifecycle.create_booking(flight_id, passenger)

    def test_seats_never_go_negative(self, build_lifecycle, passenger):
        fx = build_lifecycle(seats={"FL001": 3})

        created = 0
        for _ in range(10):
            try:
                fx.lifecycle.create_booking("FL001", passenger)
                created += 1
            except NoSeatsAvailableException:
                pass
            assert fx.seats("FL001") >= 0

        assert created == 3
        assert fx.seats("FL001") == 0
        assert fx.repository.count() == 3

    def test_pnrs_are_unique(self, build_lifecycle, passenger):
        fx = build_lifecycle()

        pnrs = {
            str(fx.lifecycle.create_booking("FL001", passenger).pnr) for _ in range(20)
        }

        assert len(pnrs) == 20

    def test_pnr_collision_is_retried(
        self, build_lifecycle, make_id_generator, passenger
    ):
        generator = make_id_generator(
            pnrs=["PNR111111", "PNR111111", "PNR111111", "PNR222222"]
        )
        fx = build_lifecycle(generator=generator)

        first = fx.lifecycle.create_booking("FL001", passenger)
        second = fx.lifecycle.create_booking("FL001", passenger)

        assert str(first.pnr) == "PNR111111"
        assert str(second.pnr) == "PNR222222"

    def test_pnr_exhaustion_releases_the_seat(
        self, build_lifecycle, make_id_generator, passenger
    ):
        generator = make_id_generator(pnrs=["PNR111111"] * 20)
        fx = build_lifecycle(generator=generator)
        fx.lifecycle.create_booking("FL001", passenger)

        with pytest.raises(DuplicateResourceException):
            fx.lifecycle.create_booking("FL001", passenger)

        assert fx.seats("FL001") == 149
        assert fx.repository.count() == 1


class TestPay:
    """BookingLifecycle.pay のテスト"""

    def test_confirms_booking_and_issues_ticket(self, build_lifecycle, passenger):
        fx = build_lifecycle()
        booking = fx.lifecycle.create_booking("FL001", passenger)

        result = fx.lifecycle.pay(str(booking.pnr), CARD)

        assert result.booking.status == BookingStatus.CONFIRMED
        assert result.booking.ticket_issued is True
        assert result.ticket_id.startswith("ticket-")
        stored = fx.lifecycle.get_booking(str(booking.pnr))
        assert stored.status == BookingStatus.CONFIRMED
        assert stored.ticket_issued is True

    def test_notifies_exactly_once(self, build_lifecycle, passenger):
        fx = build_lifecycle()
        booking = fx.lifecycle.create_booking("FL001", passenger)

        result = fx.lifecycle.pay(str(booking.pnr), CARD)

        fx.notifier.publish.assert_called_once()
        event = fx.notifier.publish.call_args[0][0]
        assert isinstance(event, BookingConfirmed)
        assert event.ticket_id == result.ticket_id
        assert event.email == "a@x.com"

    def test_ticket_id_is_fresh_per_payment(self, build_lifecycle, passenger):
        fx = build_lifecycle()
        first = fx.lifecycle.create_booking("FL001", passenger)
        second = fx.lifecycle.create_booking("FL001", passenger)

        first_ticket = fx.lifecycle.pay(str(first.pnr), CARD).ticket_id
        second_ticket = fx.lifecycle.pay(str(second.pnr), CARD).ticket_id

        assert first_ticket != second_ticket

    def test_unknown_pnr(self, build_lifecycle):
        fx = build_lifecycle()

        with pytest.raises(BookingNotFoundException):
            fx.lifecycle.pay("PNR999999", CARD)

    def test_malformed_pnr_is_not_found(self, build_lifecycle):
        fx = build_lifecycle()

        with pytest.raises(BookingNotFoundException):
            fx.lifecycle.pay("garbage", CARD)

    def test_short_card_number(self, build_lifecycle, passenger):
        fx = build_lifecycle()
        booking = fx.lifecycle.create_booking("FL001", passenger)

        with pytest.raises(InvalidCardException) as exc_info:
            fx.lifecycle.pay(str(booking.pnr), "123456789")

        assert exc_info.value.kind == ErrorKind.INVALID_INPUT
        assert (
            fx.lifecycle.get_booking(str(booking.pnr)).status
            == BookingStatus.PENDING_PAYMENT
        )
        fx.notifier.publish.assert_not_called()

    def test_existence_is_checked_before_card(self, build_lifecycle):
        fx = build_lifecycle()

        with pytest.raises(BookingNotFoundException):
            fx.lifecycle.pay("PNR999999", "short")

    def test_repeated_payment_is_rejected(self, build_lifecycle, passenger):
        """確定済みの予約への再決済は InvalidState で拒否され、通知も1回のみ"""
        fx = build_lifecycle()
        booking = fx.lifecycle.create_booking("FL001", passenger)
        fx.lifecycle.pay(str(booking.pnr), CARD)

        with pytest.raises(InvalidBookingStateException) as exc_info:
            fx.lifecycle.pay(str(booking.pnr), CARD)

        assert exc_info.value.kind == ErrorKind.INVALID_STATE
        assert fx.notifier.publish.call_count == 1

    def test_payment_after_cancel_is_rejected(self, build_lifecycle, passenger):
        fx = build_lifecycle()
        booking = fx.lifecycle.create_booking("FL001", passenger)
        fx.lifecycle.cancel(str(booking.pnr))

        with pytest.raises(InvalidBookingStateException):
            fx.lifecycle.pay(str(booking.pnr), CARD)

        stored = fx.lifecycle.get_booking(str(booking.pnr))
        assert stored.status == BookingStatus.CANCELLED
        assert stored.ticket_issued is False


class TestCheckIn:
    """BookingLifecycle.check_in のテスト"""

    @pytest.fixture
    def confirmed(self, build_lifecycle, passenger):
        fx = build_lifecycle()
        booking = fx.lifecycle.create_booking("FL001", passenger)
        fx.lifecycle.pay(str(booking.pnr), CARD)
        return fx, str(booking.pnr)

    def test_issues_boarding_pass(self, confirmed):
        fx, pnr = confirmed

        boarding_pass = fx.lifecycle.check_in(pnr, "P1")

        assert boarding_pass.passenger_name == "Alice"
        assert boarding_pass.flight_id == "FL001"
        assert boarding_pass.seat == "12A"
        assert boarding_pass.gate == "B4"
        assert boarding_pass.boarding_time == "09:30"
        assert boarding_pass.boarding_token.startswith("token-")
        assert fx.lifecycle.get_booking(pnr).checked_in is True

    def test_wrong_passport_is_forbidden(self, confirmed):
        fx, pnr = confirmed

        with pytest.raises(IdentityMismatchException) as exc_info:
            fx.lifecycle.check_in(pnr, "WRONG")

        assert exc_info.value.kind == ErrorKind.FORBIDDEN
        assert fx.lifecycle.get_booking(pnr).checked_in is False

    def test_pending_booking_is_not_confirmed(self, build_lifecycle, passenger):
        fx = build_lifecycle()
        pnr = str(fx.lifecycle.create_booking("FL001", passenger).pnr)

        for passport in ("P1", "WRONG"):
            with pytest.raises(BookingNotConfirmedException):
                fx.lifecycle.check_in(pnr, passport)

        assert fx.lifecycle.get_booking(pnr).checked_in is False

    def test_cancelled_booking_is_not_confirmed(self, confirmed):
        fx, pnr = confirmed
        fx.lifecycle.cancel(pnr)

        with pytest.raises(BookingNotConfirmedException):
            fx.lifecycle.check_in(pnr, "P1")

    def test_unknown_pnr_takes_precedence(self, build_lifecycle):
        fx = build_lifecycle()

        with pytest.raises(BookingNotFoundException):
            fx.lifecycle.check_in("PNR999999", "WRONG")

    def test_repeated_check_in_reissues_boarding_pass(self, confirmed):
        fx, pnr = confirmed

        first = fx.lifecycle.check_in(pnr, "P1")
        second = fx.lifecycle.check_in(pnr, "P1")

        assert first.boarding_token != second.boarding_token
        assert fx.lifecycle.get_booking(pnr).checked_in is True

    def test_uses_injected_seat_assigner(self, build_lifecycle, passenger):
        seat_assigner = MagicMock()
        seat_assigner.assign.return_value.seat = "1C"
        seat_assigner.assign.return_value.gate = "A1"
        seat_assigner.assign.return_value.boarding_time = "09:15"
        fx = build_lifecycle(seat_assigner=seat_assigner)
        pnr = str(fx.lifecycle.create_booking("FL001", passenger).pnr)
        fx.lifecycle.pay(pnr, CARD)

        boarding_pass = fx.lifecycle.check_in(pnr, "P1")

        assert (boarding_pass.seat, boarding_pass.gate) == ("1C", "A1")
        booking, flight = seat_assigner.assign.call_args[0]
        assert str(booking.pnr) == pnr
        assert str(flight.id) == "FL001"


class TestCancel:
    """BookingLifecycle.cancel のテスト"""

    def test_cancel_confirmed_booking(self, build_lifecycle, passenger):
        fx = build_lifecycle()
        pnr = str(fx.lifecycle.create_booking("FL001", passenger).pnr)
        fx.lifecycle.pay(pnr, CARD)
        fx.lifecycle.check_in(pnr, "P1")

        booking = fx.lifecycle.cancel(pnr)

        assert booking.status == BookingStatus.CANCELLED
        assert booking.ticket_issued is False
        assert booking.checked_in is False
        stored = fx.lifecycle.get_booking(pnr)
        assert stored.status == BookingStatus.CANCELLED
        assert stored.checked_in is False

    def test_cancel_returns_the_seat(self, build_lifecycle, passenger):
        fx = build_lifecycle(seats={"FL001": 150})
        pnr = str(fx.lifecycle.create_booking("FL001", passenger).pnr)
        assert fx.seats("FL001") == 149

        fx.lifecycle.cancel(pnr)

        assert fx.seats("FL001") == 150

    def test_cancel_requests_refund_of_total_price(self, build_lifecycle, passenger):
        fx = build_lifecycle()
        pnr = str(fx.lifecycle.create_booking("FL001", passenger).pnr)
        fx.lifecycle.pay(pnr, CARD)
        fx.notifier.reset_mock()

        fx.lifecycle.cancel(pnr)

        fx.notifier.publish.assert_called_once()
        event = fx.notifier.publish.call_args[0][0]
        assert isinstance(event, BookingCancelled)
        assert event.refund_amount.amount == 500

    def test_second_cancel_is_noop(self, build_lifecycle, passenger):
        """キャンセル済みの予約への再キャンセルは返金も残席の戻しもしない"""
        fx = build_lifecycle(seats={"FL001": 10})
        pnr = str(fx.lifecycle.create_booking("FL001", passenger).pnr)
        fx.lifecycle.cancel(pnr)

        booking = fx.lifecycle.cancel(pnr)

        assert booking.status == BookingStatus.CANCELLED
        assert fx.seats("FL001") == 10
        assert fx.notifier.publish.call_count == 1

    def test_unknown_pnr(self, build_lifecycle):
        fx = build_lifecycle()

        with pytest.raises(BookingNotFoundException):
            fx.lifecycle.cancel("PNR999999")

    def test_cancelled_booking_remains_queryable(self, build_lifecycle, passenger):
        fx = build_lifecycle()
        pnr = str(fx.lifecycle.create_booking("FL001", passenger).pnr)

        fx.lifecycle.cancel(pnr)

        assert fx.repository.count() == 1
        assert fx.lifecycle.get_booking(pnr).status == BookingStatus.CANCELLED


class TestGetBooking:
    def test_unknown_pnr(self, build_lifecycle):
        fx = build_lifecycle()

        with pytest.raises(BookingNotFoundException) as exc_info:
            fx.lifecycle.get_booking("PNR999999")

        assert exc_info.value.kind == ErrorKind.NOT_FOUND
