from .support_ticket_id import SupportTicketId as SupportTicketId
