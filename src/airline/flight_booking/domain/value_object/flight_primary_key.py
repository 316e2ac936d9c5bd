from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import ClassVar

from airline.shared.domain.exception import InvalidKeyException

DEPARTURE_DATE_FORMAT = "%Y-%m-%d"
DEPARTURE_TIME_FORMAT = "%H%M"


@dataclass(frozen=True)
class FlightPrimaryKey:
    """flights テーブルの主キー

    - パーティションキー: 出発空港#到着空港#出発日 (例: LHR#CDG#2025-12-15)
    - ソートキー: 出発時刻 HHMM (例: 1000)

    日付・時刻はすべて UTC で扱う。分未満は切り捨てる。
    """

    PARTITION_KEY_PATTERN: ClassVar[re.Pattern[str]] = re.compile(
        r"^[A-Z]{3}#[A-Z]{3}#\d{4}-\d{2}-\d{2}$"
    )
    SORT_KEY_PATTERN: ClassVar[re.Pattern[str]] = re.compile(
        r"^([01][0-9]|2[0-3])[0-5][0-9]$"
    )
    AIRPORT_CODE_PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^[A-Z]{3}$")

    partition_key: str
    sort_key: str
    source_airport_code: str
    destination_airport_code: str
    departure_date_time: datetime

    def __str__(self) -> str:
        return f"{self.partition_key}/{self.sort_key}"

    @classmethod
    def from_components(
        cls,
        source_airport_code: str | None,
        destination_airport_code: str | None,
        departure_date_time: datetime | int | None,
    ) -> FlightPrimaryKey:
        """出発空港・到着空港・出発日時から生成する

        Args:
            source_airport_code: 出発空港コード（大文字3文字）
            destination_airport_code: 到着空港コード（大文字3文字）
            departure_date_time: エポック秒、または datetime（naive は UTC とみなす）

        Raises:
            InvalidKeyException: いずれかが None、または空港コードが不正な場合
        """
        if source_airport_code is None:
            raise InvalidKeyException("source_airport_code cannot be None")
        if destination_airport_code is None:
            raise InvalidKeyException("destination_airport_code cannot be None")
        if departure_date_time is None:
            raise InvalidKeyException("departure_date_time cannot be None")

        for code in (source_airport_code, destination_airport_code):
            if not cls.AIRPORT_CODE_PATTERN.match(code):
                raise InvalidKeyException(
                    f"Invalid airport code: {code}. Expected 3 uppercase letters"
                )

        departure = _to_utc_minute(departure_date_time)
        partition_key = "#".join(
            [
                source_airport_code,
                destination_airport_code,
                departure.strftime(DEPARTURE_DATE_FORMAT),
            ]
        )
        return cls(
            partition_key=partition_key,
            sort_key=departure.strftime(DEPARTURE_TIME_FORMAT),
            source_airport_code=source_airport_code,
            destination_airport_code=destination_airport_code,
            departure_date_time=departure,
        )

    @classmethod
    def from_raw(cls, partition_key: str | None, sort_key: str | None) -> FlightPrimaryKey:
        """パーティションキーとソートキーの文字列から生成する

        Raises:
            InvalidKeyException: いずれかの形式が不正な場合
        """
        if partition_key is None or not cls.PARTITION_KEY_PATTERN.match(partition_key):
            raise InvalidKeyException(
                f"Invalid partition key: {partition_key}. "
                "Expected SRC#DST#YYYY-MM-DD (e.g. KIV#LIS#2030-06-12)"
            )
        if sort_key is None or not cls.SORT_KEY_PATTERN.match(sort_key):
            raise InvalidKeyException(
                f"Invalid sort key: {sort_key}. Expected HHMM (e.g. 0840)"
            )

        source, destination, departure_date = partition_key.split("#")
        try:
            departure = datetime.strptime(
                f"{departure_date}{sort_key}",
                f"{DEPARTURE_DATE_FORMAT}{DEPARTURE_TIME_FORMAT}",
            ).replace(tzinfo=timezone.utc)
        except ValueError as e:
            raise InvalidKeyException(
                f"Invalid departure date in partition key: {partition_key}"
            ) from e

        return cls(
            partition_key=partition_key,
            sort_key=sort_key,
            source_airport_code=source,
            destination_airport_code=destination,
            departure_date_time=departure,
        )


def _to_utc_minute(value: datetime | int) -> datetime:
    if isinstance(value, datetime):
        if value.tzinfo is None:
            dt = value.replace(tzinfo=timezone.utc)
        else:
            dt = value.astimezone(timezone.utc)
    else:
        dt = datetime.fromtimestamp(value, tz=timezone.utc)
    return dt.replace(second=0, microsecond=0)
