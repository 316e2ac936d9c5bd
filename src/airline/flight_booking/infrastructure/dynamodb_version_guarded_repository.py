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

UPDATE_WITH_SEAT = (
    "SET AvailableSeats = AvailableSeats - :one, "
    "Version = Version + :one, "
    "ClaimedSeatMap.#seat = :bookingId"
)
UPDATE_WITHOUT_SEAT = (
    "SET AvailableSeats = AvailableSeats - :one, "
    "HeldSeats = HeldSeats + :one, "
    "Version = Version + :one"
)
VERSION_CONDITION = "Version = :expectedVersion"


class DynamoDBVersionGuardedFlightBookings(FlightBookings):
    """楽観ロック（Version 属性の一致）で整合性を保つ FlightBookings の具象実装

    呼び出し側は事前に find_flight で読み込んだ Flight を渡す。
    更新は Version が読み込み時の値と一致する場合のみ適用される。
    """

    def __init__(self, dynamodb=None, settings: Settings | None = None) -> None:
        self.settings = settings or Settings.from_env()
        self.dynamodb = dynamodb or create_dynamodb_resource(self.settings)
        # low-level client はスレッドセーフなので並行実行でも共有できる
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
        self, booking: Booking, flight: Flight | None
    ) -> TransactSummary:
        """Version を条件にフライトを更新し、予約を登録する"""
        if flight is None:
            raise ValueError(
                "A flight read beforehand is required for version-guarded booking"
            )

        transact_items = [
            {"Update": self._flight_update(booking, flight)},
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
                "Version-guarded transaction rejected",
                extra={
                    "booking_id": str(booking.booking_id),
                    "expected_version": flight.version,
                    "outcome": summary.outcome.value,
                },
            )
            return summary
        return resolve_transact_summary()

    def _flight_update(self, booking: Booking, flight: Flight) -> dict:
        """フライト更新のトランザクションアイテムを組み立てる"""
        update: dict = {
            "TableName": self.settings.flight_table_name,
            "Key": flight_mapper.to_key(booking.flight_primary_key()),
            "ConditionExpression": VERSION_CONDITION,
        }

        if booking.has_seat_number:
            update["UpdateExpression"] = UPDATE_WITH_SEAT
            update["ExpressionAttributeNames"] = {"#seat": booking.seat_number}
            update["ExpressionAttributeValues"] = {
                ":one": 1,
                ":bookingId": str(booking.booking_id),
                ":expectedVersion": flight.version,
            }
        else:
            update["UpdateExpression"] = UPDATE_WITHOUT_SEAT
            update["ExpressionAttributeValues"] = {
                ":one": 1,
                ":expectedVersion": flight.version,
            }
        return update
