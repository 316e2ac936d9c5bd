from __future__ import annotations

from pydantic import BaseModel

from airline.flight_booking.domain.entity import Booking


class BookingData(BaseModel):
    """予約データのレスポンスモデル"""

    customer_email: str
    booking_id: str
    flight_number: str
    source: str
    destination: str
    departure_date_time: int
    seat_number: str | None = None
    fare_class: str


class BookingResponse(BaseModel):
    """予約レスポンスモデル

    status: 予約できた場合 "success"、座席・空席の条件で拒否された場合 "rejected"
    """

    status: str = "success"
    data: BookingData


def to_booking_data(booking: Booking) -> BookingData:
    """Booking エンティティをレスポンスデータに変換する"""
    return BookingData(
        customer_email=booking.customer_email,
        booking_id=str(booking.booking_id),
        flight_number=str(booking.flight_number),
        source=booking.source,
        destination=booking.destination,
        departure_date_time=booking.departure_date_time,
        seat_number=booking.seat_number,
        fare_class=booking.fare_class,
    )


def to_response(booking: Booking, booked: bool = True) -> dict:
    """Booking エンティティをレスポンス辞書に変換する"""
    return BookingResponse(
        status="success" if booked else "rejected",
        data=to_booking_data(booking),
    ).model_dump()
