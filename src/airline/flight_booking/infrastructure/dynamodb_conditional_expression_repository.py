from botocore.exceptions import BotoCoreError, ClientError

from airline.flight_booking.domain.entity import Booking, Flight
from airline.flight_booking.domain.repository import FlightBookings
from airline.flight_booking.domain.value_object import (
    BookingId,
    FlightPrimaryKey,
    TransactSummary,
)
from airline.flight_booking.infrastructure import (
    booking_mapper,
    dynamodb_reads,
    flight_mapper,
)
from airline.flight_booking.infrastructure.transaction_summary_resolver import (
    resolve_transact_summary,
)
from airline.shared.config import Settings, create_dynamodb_resource
from airline.shared.utils.logger import get_logger

logger = get_logger()


class DynamoDBConditionalExpressionFlightBookings(FlightBookings):
    """条件式で整合性を保つ FlightBookings の具象実装

    事前の読み込みを行わず、空席数と座席の未指定をストア側の条件式で検証する。
    flight 引数は使用しない。
    """

    def __init__(self, dynamodb=None, settings: Settings | None = None) -> None:
        self.settings = settings or Settings.from_env()
        self.dynamodb = dynamodb or create_dynamodb_resource(self.settings)
        self.client = self.dynamodb.meta.client

    def find_flight(self, primary_key: FlightPrimaryKey) -> Flight | None:
        """主キーでフライトを検索"""
        return dynamodb_reads.get_flight(
            self.client, self.settings.flight_table_name, primary_key
        )

    def find_booking(self, customer_email: str, booking_id: BookingId) -> Booking | None:
        """予約を検索"""
        return dynamodb_reads.get_booking(
            self.client, self.settings.booking_table_name, customer_email, booking_id
        )

    def transact_book_flight(
        self, booking: Booking, flight: Flight | None = None
    ) -> TransactSummary:
        """空席・座席の条件付きでフライトを更新し、予約を登録する"""
        transact_items = [
            {"Update": self._flight_update(booking)},
            {
                "Put": {
                    "TableName": self.settings.booking_table_name,
                    "Item": booking_mapper.to_item(booking),
                }
            },
        ]

        try:
            self.client.transact_write_items(TransactItems=transact_items)
        except (ClientError, BotoCoreError) as e:
            summary = resolve_transact_summary(e)
            logger.debug(
                "Conditional transaction rejected",
                extra={
                    "booking_id": str(booking.booking_id),
                    "outcome": summary.outcome.value,
                },
            )
            return summary
        return resolve_transact_summary()

    def _flight_update(self, booking: Booking) -> dict:
        """フライト更新のトランザクションアイテムを組み立てる

        座席指定の有無で条件式と更新式の両方が変わる。
        """
        update: dict = {
            "TableName": self.settings.flight_table_name,
            "Key": flight_mapper.to_key(booking.flight_primary_key()),
        }

        if booking.has_seat_number:
            update["ConditionExpression"] = (
                "AvailableSeats > :zero AND attribute_not_exists(ClaimedSeatMap.#seat)"
            )
            update["UpdateExpression"] = (
                "SET AvailableSeats = AvailableSeats - :one, "
                "Version = Version + :one, "
                "ClaimedSeatMap.#seat = :bookingId"
            )
            update["ExpressionAttributeNames"] = {"#seat": booking.seat_number}
            update["ExpressionAttributeValues"] = {
                ":zero": 0,
                ":one": 1,
                ":bookingId": str(booking.booking_id),
            }
        else:
            update["ConditionExpression"] = "AvailableSeats > :zero"
            update["UpdateExpression"] = (
                "SET AvailableSeats = AvailableSeats - :one, "
                "HeldSeats = HeldSeats + :one, "
                "Version = Version + :one"
            )
            update["ExpressionAttributeValues"] = {":zero": 0, ":one": 1}
        return update
