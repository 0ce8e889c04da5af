from .support_ticket_repository import (
    SupportTicketRepository as SupportTicketRepository,
)
