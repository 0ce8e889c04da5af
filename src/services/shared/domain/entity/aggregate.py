from typing import TypeVar

from ..event import DomainEvent
from .entity import Entity

ID = TypeVar("ID")


class AggregateRoot(Entity[ID]):
    """AggregateRoot 基底クラス

    - 状態遷移に伴う副作用はドメインイベントとして記録する
    - イベントの配信はアプリケーション層が保存成功後に行う
    """

    def __init__(self, id: ID) -> None:
        super().__init__(id)
        self._domain_events: list[DomainEvent] = []

    def add_domain_event(self, event: DomainEvent) -> None:
        """ドメインイベントを追加する"""
        self._domain_events.append(event)

    def flush_domain_events(self) -> list[DomainEvent]:
        """記録済みのドメインイベントを取り出してクリアする"""
        events = self._domain_events.copy()
        self._domain_events.clear()
        return events
