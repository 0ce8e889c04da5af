from .in_memory_support_ticket_repository import (
    InMemorySupportTicketRepository as InMemorySupportTicketRepository,
)
