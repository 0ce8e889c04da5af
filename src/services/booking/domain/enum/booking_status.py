from enum import Enum


class BookingStatus(str, Enum):
    """予約ステータス

    PENDING_PAYMENT -> CONFIRMED -> CANCELLED
    PENDING_PAYMENT -> CANCELLED
    """

    PENDING_PAYMENT = "PENDING_PAYMENT"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"

    def can_transition_to(self, target: "BookingStatus") -> bool:
        """target への遷移が許可されているか"""
        return target in _TRANSITIONS[self]

    @property
    def is_terminal(self) -> bool:
        return not _TRANSITIONS[self]


_TRANSITIONS: dict[BookingStatus, frozenset[BookingStatus]] = {
    BookingStatus.PENDING_PAYMENT: frozenset(
        {BookingStatus.CONFIRMED, BookingStatus.CANCELLED}
    ),
    BookingStatus.CONFIRMED: frozenset({BookingStatus.CANCELLED}),
    BookingStatus.CANCELLED: frozenset(),
}
