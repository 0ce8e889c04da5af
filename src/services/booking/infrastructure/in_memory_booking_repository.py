import copy
import threading

from services.booking.domain.entity import Booking
from services.booking.domain.enum import BookingStatus
from services.booking.domain.exception import BookingNotFoundException
from services.booking.domain.repository import BookingRepository
from services.booking.domain.value_object import BookingId, Pnr
from services.shared.domain.exception import (
    DuplicateResourceException,
    OptimisticLockException,
)


class InMemoryBookingRepository(BookingRepository):
    """プロセス内メモリを使用した BookingRepository の具象実装

    予約は削除しない（キャンセル済みも参照可能）。
    """

    def __init__(self) -> None:
        self._bookings: dict[BookingId, Booking] = {}
        self._ids_by_pnr: dict[Pnr, BookingId] = {}
        self._lock = threading.Lock()

    def save(self, booking: Booking) -> None:
        with self._lock:
            if booking.id in self._bookings:
                raise DuplicateResourceException(f"Booking already exists: {booking.id}")
            if booking.pnr in self._ids_by_pnr:
                raise DuplicateResourceException(f"PNR already in use: {booking.pnr}")
            self._bookings[booking.id] = self._snapshot(booking)
            self._ids_by_pnr[booking.pnr] = booking.id

    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        with self._lock:
            booking = self._bookings.get(booking_id)
            return self._snapshot(booking) if booking is not None else None

    def find_by_pnr(self, pnr: Pnr) -> Booking | None:
        with self._lock:
            booking_id = self._ids_by_pnr.get(pnr)
            if booking_id is None:
                return None
            return self._snapshot(self._bookings[booking_id])

    def exists_pnr(self, pnr: Pnr) -> bool:
        with self._lock:
            return pnr in self._ids_by_pnr

    def update(
        self, booking: Booking, expected_status: BookingStatus | None = None
    ) -> None:
        with self._lock:
            current = self._bookings.get(booking.id)
            if current is None:
                raise BookingNotFoundException(f"Booking not found: {booking.pnr}")
            if expected_status is not None and current.status != expected_status:
                raise OptimisticLockException(
                    f"Booking status conflict: "
                    f"expected {expected_status.value}, "
                    f"booking_id={booking.id}"
                )
            self._bookings[booking.id] = self._snapshot(booking)

    def count(self) -> int:
        with self._lock:
            return len(self._bookings)

    @staticmethod
    def _snapshot(booking: Booking) -> Booking:
        """保存・返却用のコピー（未配信のドメインイベントは持ち越さない）"""
        snapshot = copy.deepcopy(booking)
        snapshot.flush_domain_events()
        return snapshot
