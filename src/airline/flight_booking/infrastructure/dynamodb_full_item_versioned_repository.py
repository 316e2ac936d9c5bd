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

VERSION = "Version"
VERSION_CONDITION = "Version = :expectedVersion"


class DynamoDBFullItemVersionedFlightBookings(FlightBookings):
    """メモリ上の Flight をそのまま書き戻す楽観ロックの具象実装

    空席数・ホールド席数・座席マップはサービスが変更した値をリテラルとして SET する。
    Version は読み込み時の値を条件にし、その値 + 1 を書き込む。
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
        self, booking: Booking, flight: Flight | None
    ) -> TransactSummary:
        """変更済みのフライト全体を Version 条件付きで書き戻し、予約を登録する"""
        if flight is None:
            raise ValueError(
                "A flight read beforehand is required for full-item versioned booking"
            )

        transact_items = [
            {
                "Put": {
                    "TableName": self.settings.booking_table_name,
                    "Item": booking_mapper.to_item(booking),
                }
            },
            {"Update": self._flight_update(flight)},
        ]

        try:
            self.client.transact_write_items(TransactItems=transact_items)
        except (ClientError, BotoCoreError) as e:
            summary = resolve_transact_summary(e)
            logger.debug(
                "Full-item versioned transaction rejected",
                extra={
                    "booking_id": str(booking.booking_id),
                    "expected_version": flight.version,
                    "outcome": summary.outcome.value,
                },
            )
            return summary
        return resolve_transact_summary()

    def _flight_update(self, flight: Flight) -> dict:
        """キー以外の全属性を SET するトランザクションアイテムを組み立てる"""
        key = flight_mapper.to_key(flight.primary_key)
        item = flight_mapper.to_item(flight)
        attributes = [name for name in item if name not in key and name != VERSION]

        names = {f"#{name}": name for name in attributes}
        values = {f":{name}": item[name] for name in attributes}
        values[":expectedVersion"] = flight.version
        values[":newVersion"] = flight.version + 1

        assignments = [f"#{name} = :{name}" for name in attributes]
        assignments.append("Version = :newVersion")

        return {
            "TableName": self.settings.flight_table_name,
            "Key": key,
            "ConditionExpression": VERSION_CONDITION,
            "UpdateExpression": "SET " + ", ".join(assignments),
            "ExpressionAttributeNames": names,
            "ExpressionAttributeValues": values,
            "ReturnValuesOnConditionCheckFailure": "ALL_OLD",
        }
