from abc import abstractmethod

from services.booking.domain.entity import Booking
from services.booking.domain.enum import BookingStatus
from services.booking.domain.value_object import BookingId, Pnr
from services.shared.domain import Repository


class BookingRepository(Repository[Booking, BookingId]):
    """航空券予約レポジトリ"""

    @abstractmethod
    def save(self, booking: Booking) -> None:
        """新規予約を保存する（予約ID・PNR の重複は DuplicateResourceException）"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        """予約IDで検索"""
        raise NotImplementedError

    @abstractmethod
    def find_by_pnr(self, pnr: Pnr) -> Booking | None:
        """PNRで検索"""
        raise NotImplementedError

    @abstractmethod
    def exists_pnr(self, pnr: Pnr) -> bool:
        """PNR が採番済みかどうか"""
        raise NotImplementedError

    @abstractmethod
    def update(
        self, booking: Booking, expected_status: BookingStatus | None = None
    ) -> None:
        """予約の状態を更新する

        expected_status を指定した場合、保存済みのステータスと異なれば
        OptimisticLockException を送出する。
        """
        raise NotImplementedError

    @abstractmethod
    def count(self) -> int:
        """保存済みの予約件数"""
        raise NotImplementedError
