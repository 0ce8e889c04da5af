from __future__ import annotations

from services.booking.applications import PaymentResult
from services.booking.domain.entity import Booking
from services.booking.domain.value_object import BoardingPass
from services.shared.utils import CamelModel


class PassengerData(CamelModel):
    """搭乗者データのレスポンスモデル"""

    passenger_name: str
    email: str
    passport: str


class BookingData(CamelModel):
    """予約データのレスポンスモデル"""

    booking_id: str
    pnr: str
    flight_id: str
    passenger: PassengerData
    status: str
    total_price: str
    currency: str
    ticket_issued: bool
    checked_in: bool


class PaymentResponse(CamelModel):
    """決済レスポンスモデル"""

    message: str = "Payment Successful"
    status: str
    ticket_id: str


class BoardingPassData(CamelModel):
    """搭乗券データのレスポンスモデル"""

    passenger_name: str
    flight_id: str
    seat: str
    gate: str
    boarding_time: str
    boarding_token: str


class CheckInResponse(CamelModel):
    """チェックインレスポンスモデル"""

    message: str = "Check-in Successful"
    boarding_pass: BoardingPassData


class CancelResponse(CamelModel):
    """キャンセルレスポンスモデル"""

    message: str = "Booking Cancelled. Refund Initiated."
    status: str


def to_booking_response(booking: Booking) -> dict:
    """Booking エンティティをレスポンス辞書に変換する"""
    return BookingData(
        booking_id=str(booking.id),
        pnr=str(booking.pnr),
        flight_id=str(booking.flight_id),
        passenger=PassengerData(
            passenger_name=booking.passenger.name,
            email=booking.passenger.email,
            passport=booking.passenger.passport,
        ),
        status=booking.status.value,
        total_price=str(booking.total_price.amount),
        currency=str(booking.total_price.currency),
        ticket_issued=booking.ticket_issued,
        checked_in=booking.checked_in,
    ).to_payload()


def to_payment_response(result: PaymentResult) -> dict:
    return PaymentResponse(
        status=result.booking.status.value,
        ticket_id=result.ticket_id,
    ).to_payload()


def to_check_in_response(boarding_pass: BoardingPass) -> dict:
    return CheckInResponse(
        boarding_pass=BoardingPassData(
            passenger_name=boarding_pass.passenger_name,
            flight_id=boarding_pass.flight_id,
            seat=boarding_pass.seat,
            gate=boarding_pass.gate,
            boarding_time=boarding_pass.boarding_time,
            boarding_token=boarding_pass.boarding_token,
        )
    ).to_payload()


def to_cancel_response(booking: Booking) -> dict:
    return CancelResponse(status=booking.status.value).to_payload()
