from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from services.booking.handlers.request_models import CheckInRequest
from services.booking.handlers.response_models import to_check_in_response
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
    """チェックイン Lambda Handler（POST /api/checkin）

    存在確認(404) -> ステータス確認(400) -> 本人確認(403) の順に判定する。
    """

    logger.info("Received check-in request")

    try:
        request = parse_body(event, CheckInRequest)
    except ValidationError as e:
        return validation_error_response(e)

    lifecycle = get_container().booking_lifecycle
    try:
        boarding_pass = lifecycle.check_in(request.pnr, request.passport)
    except DomainException as e:
        logger.info(
            "Check-in rejected",
            extra={"pnr": request.pnr, "reason": type(e).__name__},
        )
        return error_response(e)
    except Exception:
        logger.exception("Failed to check in")
        return internal_error_response()

    logger.info("Check-in successful", extra={"pnr": request.pnr})
    return api_response(200, to_check_in_response(boarding_pass))
