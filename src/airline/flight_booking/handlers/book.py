from aws_lambda_powertools.utilities.typing import LambdaContext

from airline.flight_booking.applications import (
    BookFlightOptimisticLockingService,
    BookFlightUseCase,
    NoLockingBookFlightService,
)
from airline.flight_booking.domain.enum import BookingStrategy
from airline.flight_booking.domain.factory import BookingDetails, BookingFactory
from airline.flight_booking.handlers.request_models import BookFlightRequest
from airline.flight_booking.handlers.response_models import to_response
from airline.flight_booking.infrastructure.dynamodb_conditional_expression_repository import (
    DynamoDBConditionalExpressionFlightBookings,
)
from airline.flight_booking.infrastructure.dynamodb_full_item_versioned_repository import (
    DynamoDBFullItemVersionedFlightBookings,
)
from airline.flight_booking.infrastructure.dynamodb_version_guarded_repository import (
    DynamoDBVersionGuardedFlightBookings,
)
from airline.shared.config import Settings, create_dynamodb_resource
from airline.shared.utils.logger import get_logger

logger = get_logger()

settings = Settings.from_env()
dynamodb = create_dynamodb_resource(settings)
factory = BookingFactory()
services: dict[BookingStrategy, BookFlightUseCase] = {
    BookingStrategy.NO_LOCKING: NoLockingBookFlightService(
        DynamoDBConditionalExpressionFlightBookings(dynamodb, settings)
    ),
    BookingStrategy.OPTIMISTIC_LOCKING: BookFlightOptimisticLockingService(
        DynamoDBVersionGuardedFlightBookings(dynamodb, settings)
    ),
    BookingStrategy.OPTIMISTIC_LOCKING_FULL_ITEM: BookFlightOptimisticLockingService(
        DynamoDBFullItemVersionedFlightBookings(dynamodb, settings)
    ),
}


@logger.inject_lambda_context
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    """フライト予約 Lambda Handler

    予約の可否はレスポンスの status で返す。拒否はエラーとして扱わない。
    """
    logger.info("Received book flight request")

    payload = event.get("Payload", event)
    request = BookFlightRequest.model_validate(payload)

    booking = factory.create(request.customer_email, _to_booking_details(request))
    logger.append_keys(booking_id=str(booking.booking_id), strategy=request.strategy.value)

    booked = services[request.strategy].book_flight(booking)
    return to_response(booking, booked=booked)


def _to_booking_details(request: BookFlightRequest) -> BookingDetails:
    """リクエストボディから BookingDetails を構築する"""

    return {
        "flight_number": request.flight_number,
        "source": request.source,
        "destination": request.destination,
        "departure_date_time": request.departure_date_time,
        "seat_number": request.seat_number,
        "fare_class": request.fare_class,
    }
