import copy
import os
import threading
from dataclasses import dataclass
from unittest.mock import MagicMock

import pytest

# ハンドラーはインポート時に boto3 リソースを生成するため、リージョンを先に設定しておく
os.environ.setdefault("AWS_DEFAULT_REGION", "eu-west-1")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "flight-booking-test")

from airline.flight_booking.domain.entity import Booking, Flight  # noqa: E402
from airline.flight_booking.domain.repository import FlightBookings  # noqa: E402
from airline.flight_booking.domain.value_object import (  # noqa: E402
    BookingId,
    FlightNumber,
    FlightPrimaryKey,
    TransactSummary,
)
from airline.flight_booking.infrastructure import (  # noqa: E402
    booking_mapper,
    flight_mapper,
)
from airline.flight_booking.infrastructure.transaction_summary_resolver import (  # noqa: E402
    PRECONDITION_FAILED_REASON,
)

# LHR -> CDG 2025-12-15T10:00Z
LHR_CDG_DEPARTURE = 1765792800


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()


@pytest.fixture
def mock_dynamodb():
    """DynamoDB ServiceResource のモックフィクスチャ"""
    return MagicMock()


@pytest.fixture
def lambda_context():
    """Lambda Context のフィクスチャ"""

    @dataclass
    class LambdaContext:
        function_name: str = "book-flight"
        memory_limit_in_mb: int = 128
        invoked_function_arn: str = (
            "arn:aws:lambda:eu-west-1:123456789012:function:book-flight"
        )
        aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"

    return LambdaContext()


@pytest.fixture
def create_booking():
    """Booking を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        seat_number: str | None = "2C",
        booking_id: str | None = None,
        customer_email: str = "sherlock.homes@email.com",
        flight_number: str = "BA123",
        source: str = "LHR",
        destination: str = "CDG",
        departure_date_time: int = LHR_CDG_DEPARTURE,
        fare_class: str = "Economy",
    ) -> Booking:
        return Booking(
            customer_email=customer_email,
            booking_id=BookingId(booking_id) if booking_id else BookingId.generate(),
            flight_number=FlightNumber(flight_number),
            source=source,
            destination=destination,
            departure_date_time=departure_date_time,
            fare_class=fare_class,
            seat_number=seat_number,
        )

    return _factory


@pytest.fixture
def create_flight():
    """Flight を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        total_seats: int = 180,
        available_seats: int | None = None,
        held_seats: int = 0,
        version: int = 1,
        claimed_seat_map: dict[str, str] | None = None,
        source: str = "LHR",
        destination: str = "CDG",
        departure_date_time: int = LHR_CDG_DEPARTURE,
        flight_number: str = "BA123",
    ) -> Flight:
        claimed = dict(claimed_seat_map or {})
        if available_seats is None:
            available_seats = total_seats - held_seats - len(claimed)
        return Flight(
            id=FlightPrimaryKey.from_components(
                source, destination, departure_date_time
            ),
            flight_number=FlightNumber(flight_number),
            airplane_model="Airbus A320",
            total_seats=total_seats,
            available_seats=available_seats,
            held_seats=held_seats,
            version=version,
            claimed_seat_map=claimed,
        )

    return _factory


class InMemoryFlightBookings(FlightBookings):
    """DynamoDB の条件付きトランザクションを模した FlightBookings のテストダブル

    transact_book_flight はロックで直列化し、条件の評価と更新を不可分に行う。
    - guard="version": Version が読み込み時の値と一致すること
    - guard="condition": 空席があり、指定座席が未指定であること
    - guard="full_item": Version が一致すれば、渡された Flight 全体を Version + 1 で書き戻す

    read_barrier を渡すと、find_flight の読み込み直後に全スレッドが揃うまで待つ。
    """

    def __init__(
        self,
        guard: str,
        flights: list[Flight] | None = None,
        read_barrier: threading.Barrier | None = None,
    ) -> None:
        if guard not in ("version", "condition", "full_item"):
            raise ValueError(f"Unknown guard: {guard}")
        self.guard = guard
        self.read_barrier = read_barrier
        self.outcomes = []
        self.transact_calls = 0
        self._lock = threading.Lock()
        self._flights: dict[str, dict] = {}
        self._bookings: dict[tuple[str, str], dict] = {}
        for flight in flights or []:
            self._flights[str(flight.primary_key)] = flight_mapper.to_item(flight)

    def find_flight(self, primary_key: FlightPrimaryKey) -> Flight | None:
        flight = self.stored_flight(primary_key)
        if self.read_barrier is not None:
            self.read_barrier.wait(timeout=5)
        return flight

    def find_booking(self, customer_email: str, booking_id: BookingId) -> Booking | None:
        with self._lock:
            item = self._bookings.get((customer_email, str(booking_id)))
        return None if item is None else booking_mapper.to_entity(item)

    def transact_book_flight(
        self, booking: Booking, flight: Flight | None = None
    ) -> TransactSummary:
        with self._lock:
            self.transact_calls += 1
            summary = self._apply(booking, flight)
            self.outcomes.append(summary.outcome)
            return summary

    def stored_flight(self, primary_key: FlightPrimaryKey) -> Flight | None:
        """バリアを通さずに現在のフライトを読む"""
        with self._lock:
            item = self._flights.get(str(primary_key))
            if item is None:
                return None
            return flight_mapper.to_entity(copy.deepcopy(item))

    def stored_bookings(self) -> list[Booking]:
        with self._lock:
            items = list(self._bookings.values())
        return [booking_mapper.to_entity(item) for item in items]

    def _apply(self, booking: Booking, flight: Flight | None) -> TransactSummary:
        item = self._flights.get(str(booking.flight_primary_key()))
        if item is None or not self._condition_holds(item, booking, flight):
            return TransactSummary.precondition_failure(PRECONDITION_FAILED_REASON)

        if self.guard == "full_item":
            item.update(flight_mapper.to_item(flight))
            item["Version"] = flight.version + 1
        else:
            item["AvailableSeats"] -= 1
            item["Version"] += 1
            if booking.has_seat_number:
                item["ClaimedSeatMap"][booking.seat_number] = str(booking.booking_id)
            else:
                item["HeldSeats"] += 1
        self._bookings[(booking.customer_email, str(booking.booking_id))] = (
            booking_mapper.to_item(booking)
        )
        return TransactSummary.succeeded()

    def _condition_holds(
        self, item: dict, booking: Booking, flight: Flight | None
    ) -> bool:
        if self.guard in ("version", "full_item"):
            return flight is not None and item["Version"] == flight.version
        if item["AvailableSeats"] <= 0:
            return False
        return not (
            booking.has_seat_number and booking.seat_number in item["ClaimedSeatMap"]
        )


@pytest.fixture
def in_memory_flight_bookings():
    """InMemoryFlightBookings を生成する Factory fixture"""

    def _factory(
        guard: str,
        flights: list[Flight] | None = None,
        read_barrier: threading.Barrier | None = None,
    ) -> InMemoryFlightBookings:
        return InMemoryFlightBookings(guard, flights, read_barrier)

    return _factory
