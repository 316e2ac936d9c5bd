from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _decimal_to_int(v: object) -> object:
    """DynamoDB の数値型（Decimal）を int に変換する"""
    if isinstance(v, Decimal):
        if v != v.to_integral_value():
            raise ValueError(f"Expected an integral number, got {v}")
        return int(v)
    return v


class FlightItem(BaseModel):
    """flights テーブルのアイテム

    AvailableSeats・HeldSeats・Version・ClaimedSeatMap は更新式の対象なので必須とする。
    欠けたアイテムは読み込み時に ValidationError になる。
    """

    model_config = ConfigDict(populate_by_name=True)

    route_by_day: str = Field(..., alias="RouteByDay")
    departure_time: str = Field(..., alias="DepartureTime")
    flight_number: str = Field(..., alias="FlightNumber")
    airplane_model: str = Field(..., alias="AirplaneModel")
    total_seats: int = Field(..., alias="TotalSeats")
    available_seats: int = Field(..., alias="AvailableSeats")
    held_seats: int = Field(..., alias="HeldSeats")
    version: int = Field(..., alias="Version")
    claimed_seat_map: dict[str, str] = Field(..., alias="ClaimedSeatMap")

    @field_validator(
        "total_seats", "available_seats", "held_seats", "version", mode="before"
    )
    @classmethod
    def convert_number(cls, v):
        return _decimal_to_int(v)


class BookingItem(BaseModel):
    """bookings テーブルのアイテム

    SeatNumber は座席指定がある場合のみ保存する。
    """

    model_config = ConfigDict(populate_by_name=True)

    customer_email: str = Field(..., alias="CustomerEmail")
    booking_id: str = Field(..., alias="BookingID")
    flight_number: str = Field(..., alias="FlightNumber")
    source: str = Field(..., alias="Source")
    destination: str = Field(..., alias="Destination")
    departure_date_time: int = Field(..., alias="DepartureDateTime")
    seat_number: str | None = Field(default=None, alias="SeatNumber")
    fare_class: str = Field(..., alias="FareClass")

    @field_validator("departure_date_time", mode="before")
    @classmethod
    def convert_number(cls, v):
        return _decimal_to_int(v)


class PreferencesItem(BaseModel):
    """乗客の嗜好（passengers テーブルの Preferences 属性）"""

    model_config = ConfigDict(populate_by_name=True)

    seat_preference: str | None = Field(default=None, alias="SeatPreference")
    meal_preference: list[str] | None = Field(default=None, alias="MealPreference")
    timezone: str | None = Field(default=None, alias="Timezone")
    language: str | None = Field(default=None, alias="Language")
    accessibility_requirements: list[str] | None = Field(
        default=None, alias="AccessibilityRequirements"
    )


class PassengerItem(BaseModel):
    """passengers テーブルのアイテム（サンプルデータ投入用）"""

    model_config = ConfigDict(populate_by_name=True)

    email_address: str = Field(..., alias="EmailAddress")
    full_name: str = Field(..., alias="FullName")
    birthday: int = Field(..., alias="Birthday")
    frequent_flyer_id: str | None = Field(default=None, alias="FrequentFlyerID")
    preferences: PreferencesItem | None = Field(default=None, alias="Preferences")

    @field_validator("birthday", mode="before")
    @classmethod
    def convert_number(cls, v):
        return _decimal_to_int(v)


def to_dynamodb_item(model: BaseModel) -> dict:
    """永続化用の属性名で dict 化する（None の属性は保存しない）"""
    return model.model_dump(by_alias=True, exclude_none=True)
