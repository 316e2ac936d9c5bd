from __future__ import annotations

from dataclasses import dataclass

from airline.flight_booking.domain.value_object import (
    BookingId,
    FlightNumber,
    FlightPrimaryKey,
)
from airline.shared.domain import Entity


@dataclass(frozen=True)
class BookingKey:
    """bookings テーブルの主キー（顧客メールアドレス + 予約ID）"""

    customer_email: str
    booking_id: BookingId


class Booking(Entity[BookingKey]):
    """フライト予約

    予約トランザクションの中でのみ作成され、以後は変更されない。
    seat_number が None の場合は座席指定なし（ホールド席として扱う）。
    """

    def __init__(
        self,
        customer_email: str,
        booking_id: BookingId,
        flight_number: FlightNumber,
        source: str,
        destination: str,
        departure_date_time: int,
        fare_class: str,
        seat_number: str | None = None,
    ) -> None:
        if not customer_email:
            raise ValueError("customer_email cannot be empty")
        if seat_number is not None and not seat_number.strip():
            raise ValueError("seat_number cannot be blank")

        super().__init__(BookingKey(customer_email=customer_email, booking_id=booking_id))

        self._flight_number = flight_number
        self._source = source
        self._destination = destination
        self._departure_date_time = departure_date_time
        self._fare_class = fare_class
        self._seat_number = seat_number

    @property
    def customer_email(self) -> str:
        return self._id.customer_email

    @property
    def booking_id(self) -> BookingId:
        return self._id.booking_id

    @property
    def flight_number(self) -> FlightNumber:
        return self._flight_number

    @property
    def source(self) -> str:
        return self._source

    @property
    def destination(self) -> str:
        return self._destination

    @property
    def departure_date_time(self) -> int:
        """出発日時（エポック秒）"""
        return self._departure_date_time

    @property
    def fare_class(self) -> str:
        return self._fare_class

    @property
    def seat_number(self) -> str | None:
        return self._seat_number

    @property
    def has_seat_number(self) -> bool:
        return self._seat_number is not None

    def flight_primary_key(self) -> FlightPrimaryKey:
        """予約対象フライトの主キーを UTC で導出する"""
        return FlightPrimaryKey.from_components(
            self._source, self._destination, self._departure_date_time
        )

    def __repr__(self) -> str:
        return (
            f"Booking(customer_email={self.customer_email!r}, booking_id={self.booking_id}, "
            f"flight_number={self._flight_number}, source={self._source!r}, "
            f"destination={self._destination!r}, departure_date_time={self._departure_date_time}, "
            f"seat_number={self._seat_number!r}, fare_class={self._fare_class!r})"
        )
