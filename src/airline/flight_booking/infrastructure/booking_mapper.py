from airline.flight_booking.domain.entity import Booking
from airline.flight_booking.domain.value_object import BookingId, FlightNumber
from airline.flight_booking.infrastructure.item_models import BookingItem, to_dynamodb_item

CUSTOMER_EMAIL = "CustomerEmail"
BOOKING_ID = "BookingID"


def to_key(customer_email: str, booking_id: BookingId) -> dict:
    """bookings テーブルのキー属性"""
    return {CUSTOMER_EMAIL: customer_email, BOOKING_ID: str(booking_id)}


def to_item(booking: Booking) -> dict:
    """Booking エンティティを DynamoDB アイテムに変換する

    座席指定がない場合 SeatNumber 属性は含めない。
    """
    item = BookingItem(
        customer_email=booking.customer_email,
        booking_id=str(booking.booking_id),
        flight_number=str(booking.flight_number),
        source=booking.source,
        destination=booking.destination,
        departure_date_time=booking.departure_date_time,
        seat_number=booking.seat_number,
        fare_class=booking.fare_class,
    )
    return to_dynamodb_item(item)


def to_entity(raw_item: dict) -> Booking:
    """DynamoDB アイテムを Booking エンティティに変換する"""
    item = BookingItem.model_validate(raw_item)
    return Booking(
        customer_email=item.customer_email,
        booking_id=BookingId(value=item.booking_id),
        flight_number=FlightNumber(item.flight_number),
        source=item.source,
        destination=item.destination,
        departure_date_time=item.departure_date_time,
        fare_class=item.fare_class,
        seat_number=item.seat_number,
    )
