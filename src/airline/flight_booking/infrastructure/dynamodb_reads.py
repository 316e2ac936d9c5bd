from airline.flight_booking.domain.entity import Booking, Flight
from airline.flight_booking.domain.value_object import BookingId, FlightPrimaryKey
from airline.flight_booking.infrastructure import booking_mapper, flight_mapper


def get_flight(client, table_name: str, primary_key: FlightPrimaryKey) -> Flight | None:
    """主キーでフライトを取得する（ConsistentRead）"""
    response = client.get_item(
        TableName=table_name,
        Key=flight_mapper.to_key(primary_key),
        ConsistentRead=True,
    )
    item = response.get("Item")
    if not item:
        return None
    return flight_mapper.to_entity(item)


def get_booking(
    client, table_name: str, customer_email: str, booking_id: BookingId
) -> Booking | None:
    """顧客メールアドレスと予約IDで予約を取得する（ConsistentRead）"""
    response = client.get_item(
        TableName=table_name,
        Key=booking_mapper.to_key(customer_email, booking_id),
        ConsistentRead=True,
    )
    item = response.get("Item")
    if not item:
        return None
    return booking_mapper.to_entity(item)
