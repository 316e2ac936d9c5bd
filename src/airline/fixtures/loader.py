from dataclasses import dataclass

from airline.fixtures import sample_data
from airline.flight_booking.infrastructure import booking_mapper, flight_mapper
from airline.flight_booking.infrastructure.item_models import to_dynamodb_item
from airline.shared.config import Settings
from airline.shared.utils.logger import get_logger

logger = get_logger()


@dataclass(frozen=True)
class LoadSummary:
    """投入件数"""

    passengers: int
    flights: int
    bookings: int


def load_sample_data(dynamodb, settings: Settings) -> LoadSummary:
    """サンプルの乗客・フライト・予約を各テーブルに投入する

    同じキーのアイテムは上書きされるため、何度実行しても同じ状態になる。
    """
    passengers = sample_data.passengers()
    flights = sample_data.flights()
    bookings = sample_data.bookings()

    passenger_table = dynamodb.Table(settings.passenger_table_name)
    flight_table = dynamodb.Table(settings.flight_table_name)
    booking_table = dynamodb.Table(settings.booking_table_name)

    with passenger_table.batch_writer() as batch:
        for passenger in passengers:
            batch.put_item(Item=to_dynamodb_item(passenger))

    with flight_table.batch_writer() as batch:
        for flight in flights:
            batch.put_item(Item=flight_mapper.to_item(flight))
            logger.info(
                "Inserted flight",
                extra={
                    "flight_key": str(flight.primary_key),
                    "flight_number": str(flight.flight_number),
                    "total_seats": flight.total_seats,
                    "available_seats": flight.available_seats,
                    "claimed_seat_map": flight.claimed_seat_map,
                },
            )

    with booking_table.batch_writer() as batch:
        for booking in bookings:
            batch.put_item(Item=booking_mapper.to_item(booking))

    summary = LoadSummary(
        passengers=len(passengers), flights=len(flights), bookings=len(bookings)
    )
    logger.info(
        "Airline sample data inserted",
        extra={
            "passengers": summary.passengers,
            "flights": summary.flights,
            "bookings": summary.bookings,
        },
    )
    return summary
