from services.shared.domain.exception import (
    ForbiddenException,
    InvalidInputException,
    InvalidStateException,
    ResourceNotFoundException,
)


class BookingNotFoundException(ResourceNotFoundException):
    """予約が存在しない場合"""


class InvalidCardException(InvalidInputException):
    """カード番号が不正な場合"""


class InvalidBookingStateException(InvalidStateException):
    """現在の予約ステータスでは実行できない操作の場合"""


class BookingNotConfirmedException(InvalidBookingStateException):
    """未確定の予約でチェックインしようとした場合"""


class IdentityMismatchException(ForbiddenException):
    """旅券番号が予約と一致しない場合"""
