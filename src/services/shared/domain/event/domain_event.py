from dataclasses import dataclass, field
from datetime import datetime, timezone


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class DomainEvent:
    """ドメインイベント基底クラス"""

    occurred_at: datetime = field(default_factory=_utc_now, kw_only=True)

    @property
    def name(self) -> str:
        return type(self).__name__
