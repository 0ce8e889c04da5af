from services.shared.utils import CamelModel
from services.support.domain.entity import SupportTicket


class SupportTicketResponse(CamelModel):
    """問い合わせ作成レスポンスモデル"""

    message: str = "Support ticket created"
    ticket_id: str
    status: str


def to_support_ticket_response(ticket: SupportTicket) -> dict:
    return SupportTicketResponse(
        ticket_id=str(ticket.id),
        status=ticket.status.value,
    ).to_payload()
