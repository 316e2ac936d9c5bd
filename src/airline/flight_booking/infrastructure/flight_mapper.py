from airline.flight_booking.domain.entity import Flight
from airline.flight_booking.domain.value_object import FlightNumber, FlightPrimaryKey
from airline.flight_booking.infrastructure.item_models import FlightItem, to_dynamodb_item

ROUTE_BY_DAY = "RouteByDay"
DEPARTURE_TIME = "DepartureTime"


def to_key(primary_key: FlightPrimaryKey) -> dict:
    """flights テーブルのキー属性"""
    return {
        ROUTE_BY_DAY: primary_key.partition_key,
        DEPARTURE_TIME: primary_key.sort_key,
    }


def to_item(flight: Flight) -> dict:
    """Flight エンティティを DynamoDB アイテムに変換する"""
    item = FlightItem(
        route_by_day=flight.primary_key.partition_key,
        departure_time=flight.primary_key.sort_key,
        flight_number=str(flight.flight_number),
        airplane_model=flight.airplane_model,
        total_seats=flight.total_seats,
        available_seats=flight.available_seats,
        held_seats=flight.held_seats,
        version=flight.version,
        claimed_seat_map=flight.claimed_seat_map,
    )
    return to_dynamodb_item(item)


def to_entity(raw_item: dict) -> Flight:
    """DynamoDB アイテムを Flight エンティティに変換する"""
    item = FlightItem.model_validate(raw_item)
    return Flight(
        id=FlightPrimaryKey.from_raw(item.route_by_day, item.departure_time),
        flight_number=FlightNumber(item.flight_number),
        airplane_model=item.airplane_model,
        total_seats=item.total_seats,
        available_seats=item.available_seats,
        held_seats=item.held_seats,
        version=item.version,
        claimed_seat_map=item.claimed_seat_map,
    )
