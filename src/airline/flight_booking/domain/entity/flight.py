from __future__ import annotations

from airline.flight_booking.domain.value_object import FlightNumber, FlightPrimaryKey
from airline.shared.domain import Entity
from airline.shared.domain.exception import BusinessRuleViolationException

INITIAL_VERSION = 1


class Flight(Entity[FlightPrimaryKey]):
    """フライト（flights テーブルの 1 アイテム）

    座席は必ず「指定済み」「ホールド中」「空席」のいずれかに属する。
    held_seats + len(claimed_seat_map) + available_seats == total_seats

    version はストアから読み込んだ値をそのまま保持する。
    インクリメントはトランザクションの更新式で行うため、ここでは変更しない。
    """

    def __init__(
        self,
        id: FlightPrimaryKey,
        flight_number: FlightNumber,
        airplane_model: str,
        total_seats: int,
        available_seats: int,
        held_seats: int = 0,
        version: int = INITIAL_VERSION,
        claimed_seat_map: dict[str, str] | None = None,
    ) -> None:
        super().__init__(id)

        self._flight_number = flight_number
        self._airplane_model = airplane_model
        self._total_seats = total_seats
        self._available_seats = available_seats
        self._held_seats = held_seats
        self._version = version
        self._claimed_seat_map = dict(claimed_seat_map or {})

        self._validate_seat_counts()

    @classmethod
    def create(
        cls,
        primary_key: FlightPrimaryKey,
        flight_number: FlightNumber,
        airplane_model: str,
        total_seats: int,
    ) -> Flight:
        """全席空席の新規フライトを生成する"""
        if total_seats < 1:
            raise BusinessRuleViolationException("total_seats must be greater than 0")
        return cls(
            id=primary_key,
            flight_number=flight_number,
            airplane_model=airplane_model,
            total_seats=total_seats,
            available_seats=total_seats,
        )

    def _validate_seat_counts(self) -> None:
        if self._total_seats < 1:
            raise BusinessRuleViolationException("total_seats must be greater than 0")
        if not 0 <= self._available_seats <= self._total_seats:
            raise BusinessRuleViolationException(
                f"available_seats must be between 0 and {self._total_seats}, "
                f"got {self._available_seats}"
            )
        if self._held_seats < 0:
            raise BusinessRuleViolationException("held_seats cannot be negative")

    @property
    def primary_key(self) -> FlightPrimaryKey:
        return self._id

    @property
    def flight_number(self) -> FlightNumber:
        return self._flight_number

    @property
    def airplane_model(self) -> str:
        return self._airplane_model

    @property
    def total_seats(self) -> int:
        return self._total_seats

    @property
    def available_seats(self) -> int:
        return self._available_seats

    @property
    def held_seats(self) -> int:
        return self._held_seats

    @property
    def version(self) -> int:
        return self._version

    @property
    def claimed_seat_map(self) -> dict[str, str]:
        return dict(self._claimed_seat_map)

    @property
    def occupied_seats(self) -> int:
        """指定済み + ホールド中の座席数"""
        return self._held_seats + len(self._claimed_seat_map)

    def is_balanced(self) -> bool:
        """座席数の保存則が成り立っているか"""
        return self.occupied_seats + self._available_seats == self._total_seats

    def any_seat_available(self) -> bool:
        """空席が 1 席以上あるか"""
        return self._available_seats > 0

    def decrement_available_seats(self) -> None:
        """空席数を 1 減らす（空席の有無は呼び出し側で確認済み）"""
        self._available_seats -= 1

    def claim_seat(self, seat_number: str, booking_id: str) -> bool:
        """座席を指定する

        既に指定済みの座席なら False を返し、何も変更しない。
        available_seats と version には触れない。
        """
        if seat_number in self._claimed_seat_map:
            return False
        self._claimed_seat_map[seat_number] = booking_id
        return True

    def claimed_by(self, seat_number: str) -> str | None:
        """座席を指定している予約IDを返す"""
        return self._claimed_seat_map.get(seat_number)

    def increment_held_seats(self) -> None:
        """ホールド席数を 1 増やす（座席指定なしの予約）"""
        self._held_seats += 1

    def __repr__(self) -> str:
        return (
            f"Flight(key={self._id}, flight_number={self._flight_number}, "
            f"airplane_model={self._airplane_model!r}, total_seats={self._total_seats}, "
            f"available_seats={self._available_seats}, held_seats={self._held_seats}, "
            f"version={self._version}, claimed_seat_map={self._claimed_seat_map})"
        )
