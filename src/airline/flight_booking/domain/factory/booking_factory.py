from typing import NotRequired, TypedDict

from airline.flight_booking.domain.entity import Booking
from airline.flight_booking.domain.value_object import BookingId, FlightNumber


class BookingDetails(TypedDict):
    """予約の入力データ構造"""

    flight_number: str
    source: str
    destination: str
    departure_date_time: int
    fare_class: str
    seat_number: NotRequired[str | None]


class BookingFactory:
    """フライト予約エンティティのファクトリ

    - 予約IDの採番（UUID4）
    - プリミティブ型から Value Object への変換
    """

    def create(
        self,
        customer_email: str,
        booking_details: BookingDetails,
        booking_id: BookingId | None = None,
    ) -> Booking:
        """新規予約エンティティを生成する

        Args:
            customer_email: 顧客メールアドレス
            booking_details: 予約内容
            booking_id: 冪等に再実行したい場合に指定する。省略時は新規採番する

        Returns:
            Booking: 生成された予約エンティティ
        """
        return Booking(
            customer_email=customer_email,
            booking_id=booking_id or BookingId.generate(),
            flight_number=FlightNumber(booking_details["flight_number"]),
            source=booking_details["source"],
            destination=booking_details["destination"],
            departure_date_time=int(booking_details["departure_date_time"]),
            fare_class=booking_details["fare_class"],
            seat_number=booking_details.get("seat_number"),
        )
