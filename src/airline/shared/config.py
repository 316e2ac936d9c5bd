from __future__ import annotations

import os
from dataclasses import dataclass

import boto3


@dataclass(frozen=True)
class Settings:
    """環境変数から読み込む実行設定"""

    flight_table_name: str = "flights"
    booking_table_name: str = "bookings"
    passenger_table_name: str = "passengers"
    region_name: str | None = None
    endpoint_url: str | None = None

    @classmethod
    def from_env(cls) -> Settings:
        """環境変数から生成する

        未設定の項目は既定値を使う。
        DYNAMODB_ENDPOINT_URL を指定すると DynamoDB Local などに接続できる。
        """
        return cls(
            flight_table_name=os.getenv("FLIGHT_TABLE_NAME", cls.flight_table_name),
            booking_table_name=os.getenv("BOOKING_TABLE_NAME", cls.booking_table_name),
            passenger_table_name=os.getenv(
                "PASSENGER_TABLE_NAME", cls.passenger_table_name
            ),
            region_name=os.getenv("AWS_REGION") or None,
            endpoint_url=os.getenv("DYNAMODB_ENDPOINT_URL") or None,
        )


def create_dynamodb_resource(settings: Settings | None = None):
    """設定に従って DynamoDB の ServiceResource を生成する"""
    settings = settings or Settings.from_env()
    kwargs: dict = {}
    if settings.region_name is not None:
        kwargs["region_name"] = settings.region_name
    if settings.endpoint_url is not None:
        kwargs["endpoint_url"] = settings.endpoint_url
    return boto3.resource("dynamodb", **kwargs)
