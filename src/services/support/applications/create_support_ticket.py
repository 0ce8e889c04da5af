from services.shared.domain import IdGenerator
from services.support.domain.entity import SupportTicket
from services.support.domain.enum import TicketStatus
from services.support.domain.repository import SupportTicketRepository
from services.support.domain.value_object import SupportTicketId


class CreateSupportTicketService:
    """問い合わせ受付のユースケース"""

    def __init__(
        self, repository: SupportTicketRepository, id_generator: IdGenerator
    ) -> None:
        self._repository = repository
        self._id_generator = id_generator

    def create_ticket(self, pnr: str, issue_type: str, details: str) -> SupportTicket:
        """問い合わせチケットを OPEN で登録する"""
        ticket = SupportTicket(
            id=SupportTicketId(self._id_generator.support_ticket_id()),
            pnr=pnr,
            issue_type=issue_type,
            details=details,
            status=TicketStatus.OPEN,
        )
        self._repository.save(ticket)
        return ticket

    def list_tickets(self, pnr: str) -> list[SupportTicket]:
        """PNR に紐づく問い合わせを登録順に返す"""
        return self._repository.find_by_pnr(pnr)
