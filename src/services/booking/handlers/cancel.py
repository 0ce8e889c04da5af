from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from services.booking.handlers.request_models import CancelBookingRequest
from services.booking.handlers.response_models import to_cancel_response
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
    """予約キャンセル Lambda Handler（POST /api/cancel）

    キャンセル済みの予約に対しても成功を返す（返金は初回のみ）。
    """

    logger.info("Received cancel booking request")

    try:
        request = parse_body(event, CancelBookingRequest)
    except ValidationError as e:
        return validation_error_response(e)

    try:
        booking = get_container().booking_lifecycle.cancel(request.pnr)
    except DomainException as e:
        return error_response(e)
    except Exception:
        logger.exception("Failed to cancel booking")
        return internal_error_response()

    logger.info("Booking cancelled", extra={"pnr": str(booking.pnr)})
    return api_response(200, to_cancel_response(booking))
