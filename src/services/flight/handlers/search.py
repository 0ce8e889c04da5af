from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from services.container import get_container
from services.flight.handlers.request_models import SearchFlightsRequest
from services.flight.handlers.response_models import to_flight_response
from services.shared.utils import (
    api_response,
    internal_error_response,
    parse_query,
    validation_error_response,
)

logger = Logger()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """便検索 Lambda Handler（GET /api/flights）

    該当便がない場合は空の配列を返す。
    """

    try:
        request = parse_query(event, SearchFlightsRequest)
    except ValidationError as e:
        return validation_error_response(e)

    logger.info(
        "Searching flights",
        extra={
            "origin": request.origin,
            "destination": request.destination,
            "date": request.date,
        },
    )

    try:
        flights = get_container().flight_catalog.find_by_route(
            request.origin, request.destination, request.date
        )
    except Exception:
        logger.exception("Failed to search flights")
        return internal_error_response()

    return api_response(200, [to_flight_response(flight) for flight in flights])
