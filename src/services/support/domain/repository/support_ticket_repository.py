from abc import abstractmethod

from services.shared.domain import Repository
from services.support.domain.entity import SupportTicket
from services.support.domain.value_object import SupportTicketId


class SupportTicketRepository(Repository[SupportTicket, SupportTicketId]):
    """問い合わせチケットレポジトリ（追記のみ）"""

    @abstractmethod
    def save(self, ticket: SupportTicket) -> None:
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, ticket_id: SupportTicketId) -> SupportTicket | None:
        raise NotImplementedError

    @abstractmethod
    def find_by_pnr(self, pnr: str) -> list[SupportTicket]:
        """PNR に紐づくチケットを登録順に返す"""
        raise NotImplementedError
