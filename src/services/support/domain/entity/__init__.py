from .support_ticket import SupportTicket as SupportTicket
