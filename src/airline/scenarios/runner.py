import sys
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import TextIO

from airline.flight_booking.applications import BookFlightUseCase
from airline.flight_booking.domain.entity import Booking
from airline.flight_booking.domain.repository import FlightBookings
from airline.flight_booking.domain.value_object import FlightPrimaryKey


@dataclass(frozen=True)
class BookingAttempt:
    """1 件の予約試行とその結果"""

    booking: Booking
    success: bool


def run_concurrent_bookings(
    service: BookFlightUseCase,
    bookings: list[Booking],
    max_workers: int | None = None,
) -> list[BookingAttempt]:
    """予約をスレッドプールで並行実行する

    結果は Future から回収するため、ワーカースレッドが共有リストへ追記することはない。
    """
    if not bookings:
        return []

    with ThreadPoolExecutor(max_workers=max_workers or len(bookings)) as executor:
        futures = [executor.submit(service.book_flight, booking) for booking in bookings]
        return [
            BookingAttempt(booking=booking, success=future.result())
            for booking, future in zip(bookings, futures)
        ]


def print_report(
    flight_bookings: FlightBookings,
    primary_key: FlightPrimaryKey,
    attempts: list[BookingAttempt],
    out: TextIO | None = None,
) -> None:
    """試行ごとの結果と、実行後のフライト・予約の状態を出力する（既定は標準出力）"""
    if out is None:
        out = sys.stdout
    for attempt in attempts:
        print(
            f"{attempt.booking.booking_id} seat={attempt.booking.seat_number or '-'} "
            f"- Booking success: {attempt.success}",
            file=out,
        )

    print("Database stats:", file=out)
    flight = flight_bookings.find_flight(primary_key)
    print(flight if flight is not None else f"Flight {primary_key} not found", file=out)

    for attempt in attempts:
        stored = flight_bookings.find_booking(
            attempt.booking.customer_email, attempt.booking.booking_id
        )
        if stored is not None:
            print(stored, file=out)
