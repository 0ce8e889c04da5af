from .ticket_status import TicketStatus as TicketStatus
