from aws_lambda_powertools import Logger

from services.booking.domain.event import BookingCancelled, BookingConfirmed
from services.booking.domain.service import Notifier
from services.shared.domain import DomainEvent


class LoggingNotifier(Notifier):
    """通知・返金依頼をログ出力で代替する Notifier

    メール送信サービスや返金サービスと連携するまでの仮実装。
    """

    def __init__(self, logger: Logger | None = None) -> None:
        self._logger = logger or Logger(service="notification-service")

    def publish(self, event: DomainEvent) -> None:
        if isinstance(event, BookingConfirmed):
            self._logger.info(
                "Sending ticket confirmation email",
                extra={
                    "pnr": event.pnr,
                    "email": event.email,
                    "ticket_id": event.ticket_id,
                },
            )
        elif isinstance(event, BookingCancelled):
            self._logger.info(
                "Initiating refund",
                extra={
                    "pnr": event.pnr,
                    "refund_amount": str(event.refund_amount.amount),
                    "refund_currency": str(event.refund_amount.currency),
                },
            )
        else:
            self._logger.warning("Unhandled domain event", extra={"event": event.name})
