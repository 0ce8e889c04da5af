from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.handlers.response_models import to_booking_response
from services.container import get_container
from services.shared.domain import DomainException
from services.shared.utils import api_response, error_response, internal_error_response

logger = Logger()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """予約詳細取得 Lambda Handler（GET /api/booking/{pnr}）"""

    path_params = event.path_parameters or {}
    pnr = path_params.get("pnr")

    if not pnr:
        return api_response(400, {"message": "pnr is required"})

    logger.info("Fetching booking", extra={"pnr": pnr})

    try:
        booking = get_container().booking_lifecycle.get_booking(pnr)
    except DomainException as e:
        return error_response(e)
    except Exception:
        logger.exception("Failed to fetch booking")
        return internal_error_response()

    return api_response(200, to_booking_response(booking))
