from abc import ABC, abstractmethod

from services.shared.domain import DomainEvent


class Notifier(ABC):
    """予約確定メール・返金依頼などの通知を抽象化する

    1つのドメインイベントにつき publish は1回だけ呼ばれる。
    """

    @abstractmethod
    def publish(self, event: DomainEvent) -> None:
        raise NotImplementedError
