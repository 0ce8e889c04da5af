from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from services.booking.domain.value_object import Passenger
from services.booking.handlers.request_models import CreateBookingRequest
from services.booking.handlers.response_models import to_booking_response
from services.container import get_container
from services.flight.domain.exception import FlightUnavailableException
from services.shared.domain import DomainException, ErrorKind
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
    """予約作成 Lambda Handler（POST /api/booking）"""

    logger.info("Received create booking request")

    try:
        request = parse_body(event, CreateBookingRequest)
    except ValidationError as e:
        return validation_error_response(e)

    try:
        passenger = Passenger(
            name=request.passenger_name,
            email=request.email,
            passport=request.passport,
        )
    except ValueError as e:
        return api_response(
            400, {"message": str(e), "kind": ErrorKind.INVALID_INPUT.value}
        )

    lifecycle = get_container().booking_lifecycle
    try:
        booking = lifecycle.create_booking(request.flight_id, passenger)
    except FlightUnavailableException as e:
        logger.info(
            "Flight unavailable",
            extra={"flight_id": request.flight_id, "reason": type(e).__name__},
        )
        return error_response(e, message="Flight unavailable")
    except DomainException as e:
        return error_response(e)
    except Exception:
        logger.exception("Failed to create booking")
        return internal_error_response()

    logger.info(
        "Created booking",
        extra={
            "booking_id": str(booking.id),
            "pnr": str(booking.pnr),
            "flight_id": str(booking.flight_id),
        },
    )
    return api_response(200, to_booking_response(booking))
