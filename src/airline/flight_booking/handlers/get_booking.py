from aws_lambda_powertools.utilities.typing import LambdaContext

from airline.flight_booking.domain.value_object import BookingId
from airline.flight_booking.handlers.request_models import GetBookingRequest
from airline.flight_booking.handlers.response_models import to_response
from airline.flight_booking.infrastructure.dynamodb_conditional_expression_repository import (
    DynamoDBConditionalExpressionFlightBookings,
)
from airline.shared.config import Settings, create_dynamodb_resource
from airline.shared.utils.logger import get_logger

logger = get_logger()

settings = Settings.from_env()
repository = DynamoDBConditionalExpressionFlightBookings(
    create_dynamodb_resource(settings), settings
)


@logger.inject_lambda_context
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    """予約参照 Lambda Handler"""
    logger.info("Received get booking request")

    payload = event.get("pathParameters") or event
    request = GetBookingRequest.model_validate(payload)

    booking = repository.find_booking(
        request.customer_email, BookingId(value=request.booking_id)
    )
    if booking is None:
        return {"status": "not_found"}

    return to_response(booking)
