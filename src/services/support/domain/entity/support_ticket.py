from datetime import datetime, timezone

from services.shared.domain import Entity
from services.support.domain.enum import TicketStatus
from services.support.domain.value_object import SupportTicketId


class SupportTicket(Entity[SupportTicketId]):
    """問い合わせチケット

    PNR は予約の存在確認をしない（予約前の問い合わせも受け付ける）。
    """

    def __init__(
        self,
        id: SupportTicketId,
        pnr: str,
        issue_type: str,
        details: str,
        status: TicketStatus = TicketStatus.OPEN,
        created_at: datetime | None = None,
    ) -> None:
        super().__init__(id)
        self._pnr = pnr
        self._issue_type = issue_type
        self._details = details
        self._status = status
        self._created_at = created_at or datetime.now(timezone.utc)

    @property
    def pnr(self) -> str:
        return self._pnr

    @property
    def issue_type(self) -> str:
        return self._issue_type

    @property
    def details(self) -> str:
        return self._details

    @property
    def status(self) -> TicketStatus:
        return self._status

    @property
    def created_at(self) -> datetime:
        return self._created_at
