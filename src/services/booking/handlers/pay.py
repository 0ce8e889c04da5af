from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from services.booking.handlers.request_models import PaymentRequest
from services.booking.handlers.response_models import to_payment_response
from services.container import get_container
from services.shared.domain import DomainException
from services.shared.utils import (
    api_response,
    error_response,
    internal_error_response,
    parse_body,
    validation_error_response,
)

logger = Logger()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """決済 Lambda Handler（POST /api/payment）"""

    logger.info("Received payment request")

    try:
        request = parse_body(event, PaymentRequest)
    except ValidationError as e:
        return validation_error_response(e)

    lifecycle = get_container().booking_lifecycle
    try:
        result = lifecycle.pay(request.pnr, request.card_number)
    except DomainException as e:
        logger.info(
            "Payment rejected",
            extra={"pnr": request.pnr, "reason": type(e).__name__},
        )
        return error_response(e)
    except Exception:
        logger.exception("Failed to process payment")
        return internal_error_response()

    logger.info(
        "Payment accepted",
        extra={"pnr": request.pnr, "ticket_id": result.ticket_id},
    )
    return api_response(200, to_payment_response(result))
