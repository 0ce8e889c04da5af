from .entity import SupportTicket as SupportTicket
from .enum import TicketStatus as TicketStatus
from .repository import SupportTicketRepository as SupportTicketRepository
from .value_object import SupportTicketId as SupportTicketId
