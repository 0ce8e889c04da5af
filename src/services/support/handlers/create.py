from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from services.container import get_container
from services.shared.utils import (
    api_response,
    internal_error_response,
    parse_body,
    validation_error_response,
)
from services.support.handlers.request_models import CreateSupportTicketRequest
from services.support.handlers.response_models import to_support_ticket_response

logger = Logger()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """問い合わせ作成 Lambda Handler（POST /api/support）"""

    logger.info("Received support ticket request")

    try:
        request = parse_body(event, CreateSupportTicketRequest)
    except ValidationError as e:
        return validation_error_response(e)

    try:
        ticket = get_container().support_service.create_ticket(
            pnr=request.pnr,
            issue_type=request.issue_type,
            details=request.details,
        )
    except Exception:
        logger.exception("Failed to create support ticket")
        return internal_error_response()

    logger.info(
        "Created support ticket",
        extra={"ticket_id": str(ticket.id), "pnr": ticket.pnr},
    )
    return api_response(200, to_support_ticket_response(ticket))
