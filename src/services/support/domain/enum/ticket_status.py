from enum import Enum


class TicketStatus(str, Enum):
    """問い合わせチケットのステータス"""

    OPEN = "OPEN"
