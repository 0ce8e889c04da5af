from dataclasses import dataclass

from services.shared.domain import DomainEvent, Money


@dataclass(frozen=True)
class BookingConfirmed(DomainEvent):
    """決済完了により予約が確定した"""

    booking_id: str
    pnr: str
    email: str
    ticket_id: str


@dataclass(frozen=True)
class BookingCancelled(DomainEvent):
    """予約が取り消され、返金が必要になった"""

    booking_id: str
    pnr: str
    email: str
    refund_amount: Money
