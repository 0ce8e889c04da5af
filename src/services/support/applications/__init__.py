from .create_support_ticket import (
    CreateSupportTicketService as CreateSupportTicketService,
)
