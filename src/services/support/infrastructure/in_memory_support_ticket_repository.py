import threading

from services.shared.domain.exception import DuplicateResourceException
from services.support.domain.entity import SupportTicket
from services.support.domain.repository import SupportTicketRepository
from services.support.domain.value_object import SupportTicketId


class InMemorySupportTicketRepository(SupportTicketRepository):
    """プロセス内メモリを使用した SupportTicketRepository の具象実装

    チケットは作成後に変更しないため、コピーせずにそのまま保持する。
    """

    def __init__(self) -> None:
        self._tickets: dict[SupportTicketId, SupportTicket] = {}
        self._lock = threading.Lock()

    def save(self, ticket: SupportTicket) -> None:
        with self._lock:
            if ticket.id in self._tickets:
                raise DuplicateResourceException(
                    f"Support ticket already exists: {ticket.id}"
                )
            self._tickets[ticket.id] = ticket

    def find_by_id(self, ticket_id: SupportTicketId) -> SupportTicket | None:
        with self._lock:
            return self._tickets.get(ticket_id)

    def find_by_pnr(self, pnr: str) -> list[SupportTicket]:
        with self._lock:
            return [ticket for ticket in self._tickets.values() if ticket.pnr == pnr]
