from pydantic import BaseModel, Field

from airline.flight_booking.domain.enum import BookingStrategy


class BookFlightRequest(BaseModel):
    """フライト予約リクエストスキーマ"""

    customer_email: str = Field(
        ...,
        min_length=3,
        description="顧客メールアドレス",
        examples=["sherlock.homes@email.com"],
    )

    flight_number: str = Field(
        ...,
        min_length=3,
        max_length=6,
        description="フライト番号",
        examples=["BA123"],
    )

    source: str = Field(
        ..., pattern="^[A-Z]{3}$", description="出発空港コード", examples=["LHR"]
    )

    destination: str = Field(
        ..., pattern="^[A-Z]{3}$", description="到着空港コード", examples=["CDG"]
    )

    departure_date_time: int = Field(
        ...,
        ge=0,
        description="出発日時（UTC エポック秒）",
        examples=[1765792800],
    )

    seat_number: str | None = Field(
        default=None,
        min_length=1,
        max_length=4,
        description="座席番号（省略時は座席指定なし）",
        examples=["2C"],
    )

    fare_class: str = Field(default="Economy", description="運賃クラス")

    strategy: BookingStrategy = Field(
        default=BookingStrategy.NO_LOCKING, description="整合性戦略"
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "customer_email": "sherlock.homes@email.com",
                    "flight_number": "BA123",
                    "source": "LHR",
                    "destination": "CDG",
                    "departure_date_time": 1765792800,
                    "seat_number": "2C",
                    "fare_class": "Economy",
                    "strategy": "no_locking",
                }
            ]
        }
    }


class GetBookingRequest(BaseModel):
    """予約参照リクエストスキーマ"""

    customer_email: str = Field(..., min_length=3)
    booking_id: str = Field(..., min_length=1)
