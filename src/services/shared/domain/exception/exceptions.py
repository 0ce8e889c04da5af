from enum import Enum
from typing import ClassVar


class ErrorKind(str, Enum):
    """呼び出し側に返すエラー種別"""

    NOT_FOUND = "NOT_FOUND"
    UNAVAILABLE = "UNAVAILABLE"
    INVALID_INPUT = "INVALID_INPUT"
    FORBIDDEN = "FORBIDDEN"
    INVALID_STATE = "INVALID_STATE"


class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    kind: ClassVar[ErrorKind] = ErrorKind.INVALID_INPUT

    @property
    def message(self) -> str:
        return str(self)


class ResourceNotFoundException(DomainException):
    """リソースが見つからない場合"""

    kind = ErrorKind.NOT_FOUND


class ResourceUnavailableException(DomainException):
    """在庫切れなどでリソースを確保できない場合"""

    kind = ErrorKind.UNAVAILABLE


class InvalidInputException(DomainException):
    """入力値が業務上受け付けられない場合"""

    kind = ErrorKind.INVALID_INPUT


class ForbiddenException(DomainException):
    """本人確認に失敗した場合"""

    kind = ErrorKind.FORBIDDEN


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合"""

    kind = ErrorKind.INVALID_STATE


class InvalidStateException(BusinessRuleViolationException):
    """現在のステータスから許可されていない遷移を試みた場合"""


class DuplicateResourceException(DomainException):
    """リソースの重複エラー（一意制約違反）"""

    kind = ErrorKind.INVALID_STATE


class OptimisticLockException(DomainException):
    """楽観ロックの競合エラー（ステータスが期待値と異なる場合）"""

    kind = ErrorKind.INVALID_STATE
