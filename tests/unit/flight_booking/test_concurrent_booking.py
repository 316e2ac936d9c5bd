import threading

import pytest

from airline.fixtures import sample_data
from airline.flight_booking.applications import (
    BookFlightOptimisticLockingService,
    NoLockingBookFlightService,
)
from airline.flight_booking.domain.enum import TransactOutcome
from airline.scenarios.runner import run_concurrent_bookings


def _sample_flight(source: str):
    return next(
        flight
        for flight in sample_data.flights()
        if flight.primary_key.source_airport_code == source
    )


def _assert_store_consistent(flight_bookings, flight, initial_version, attempts):
    """保存則・Version・座席マップと予約の対応を検証する"""
    stored = flight_bookings.stored_flight(flight.primary_key)
    successes = [attempt.booking for attempt in attempts if attempt.success]
    bookings = {
        str(booking.booking_id): booking for booking in flight_bookings.stored_bookings()
    }

    assert stored.is_balanced()
    assert stored.version == initial_version + len(successes)
    assert len(bookings) == len(successes)
    for booking in successes:
        assert str(booking.booking_id) in bookings
    for seat, booking_id in stored.claimed_seat_map.items():
        if booking_id not in bookings:
            # 初期データとして投入済みの座席
            assert flight.claimed_by(seat) == booking_id
            continue
        booked = bookings[booking_id]
        assert booked.seat_number == seat
        assert booked.flight_primary_key() == stored.primary_key
    return stored


class TestNoLockingConcurrency:
    """条件式による並行予約のテスト"""

    def test_two_users_race_for_the_same_seat(
        self, in_memory_flight_bookings, create_booking
    ):
        """同じ座席を同時に予約すると、ちょうど1件だけ成功する"""

        # Arrange
        flight = _sample_flight("LHR")
        flight_bookings = in_memory_flight_bookings("condition", [flight])
        service = NoLockingBookFlightService(flight_bookings)
        bookings = [create_booking(seat_number="2C") for _ in range(2)]

        # Act
        attempts = run_concurrent_bookings(service, bookings)

        # Assert
        winners = [attempt.booking for attempt in attempts if attempt.success]
        assert len(winners) == 1
        assert sorted(flight_bookings.outcomes) == sorted(
            [TransactOutcome.SUCCESS, TransactOutcome.PRECONDITION_FAILED]
        )

        stored = _assert_store_consistent(flight_bookings, flight, 1, attempts)
        assert stored.available_seats == 179
        assert stored.claimed_by("2C") == str(winners[0].booking_id)
        assert stored.version == 2

    def test_many_users_race_for_the_same_seat(
        self, in_memory_flight_bookings, create_booking
    ):
        """同じ座席への同時予約は何件あっても成功は1件"""
        flight = _sample_flight("LHR")
        flight_bookings = in_memory_flight_bookings("condition", [flight])
        service = NoLockingBookFlightService(flight_bookings)
        bookings = [create_booking(seat_number="7F") for _ in range(8)]

        attempts = run_concurrent_bookings(service, bookings)

        assert sum(attempt.success for attempt in attempts) == 1
        _assert_store_consistent(flight_bookings, flight, 1, attempts)
        assert flight_bookings.outcomes.count(TransactOutcome.PRECONDITION_FAILED) == 7

    def test_seatless_bookings_against_last_two_seats(
        self, in_memory_flight_bookings, create_booking
    ):
        """残り2席に3件の座席指定なし予約を行うと2件だけ成功する"""
        flight = _sample_flight("BER")
        flight_bookings = in_memory_flight_bookings("condition", [flight])
        service = NoLockingBookFlightService(flight_bookings)
        bookings = [
            create_booking(
                seat_number=None,
                flight_number="OS567",
                source="BER",
                destination="VIE",
                departure_date_time=sample_data.BER_VIE_DEPARTURE,
            )
            for _ in range(3)
        ]

        attempts = run_concurrent_bookings(service, bookings)

        assert sum(attempt.success for attempt in attempts) == 2
        stored = _assert_store_consistent(flight_bookings, flight, 1, attempts)
        assert stored.available_seats == 0
        assert stored.held_seats == 119
        assert stored.claimed_seat_map == {"4D": flight.claimed_by("4D")}

    def test_seatless_bookings_never_oversell(
        self, in_memory_flight_bookings, create_booking, create_flight
    ):
        """空席数を超える予約は成功しない"""
        flight = create_flight(total_seats=4)
        flight_bookings = in_memory_flight_bookings("condition", [flight])
        service = NoLockingBookFlightService(flight_bookings)
        bookings = [create_booking(seat_number=None) for _ in range(10)]

        attempts = run_concurrent_bookings(service, bookings)

        assert sum(attempt.success for attempt in attempts) == 4
        stored = _assert_store_consistent(flight_bookings, flight, 1, attempts)
        assert stored.available_seats == 0

    def test_distinct_seats_both_succeed(self, in_memory_flight_bookings, create_booking):
        """異なる座席の同時予約はどちらも成功する"""
        flight = _sample_flight("LHR")
        flight_bookings = in_memory_flight_bookings("condition", [flight])
        service = NoLockingBookFlightService(flight_bookings)
        first = create_booking(seat_number="5A")
        second = create_booking(seat_number="5B")

        attempts = run_concurrent_bookings(service, [first, second])

        assert all(attempt.success for attempt in attempts)
        stored = _assert_store_consistent(flight_bookings, flight, 1, attempts)
        assert stored.claimed_seat_map == {
            "5A": str(first.booking_id),
            "5B": str(second.booking_id),
        }
        assert stored.available_seats == 178
        assert stored.version == 3

    def test_missing_flight_is_rejected(self, in_memory_flight_bookings, create_booking):
        """存在しないフライトへの予約は拒否され、予約は登録されない"""
        flight_bookings = in_memory_flight_bookings("condition", [])
        service = NoLockingBookFlightService(flight_bookings)

        assert service.book_flight(create_booking()) is False
        assert flight_bookings.stored_bookings() == []


class TestOptimisticLockingConcurrency:
    """楽観ロックによる並行予約のテスト"""

    def test_stale_read_loses(self, in_memory_flight_bookings, create_booking):
        """同じ Version を読んだ2件のうち、後からコミットした方が失敗する"""

        # Arrange
        flight = _sample_flight("AMS")
        flight_bookings = in_memory_flight_bookings(
            "version", [flight], read_barrier=threading.Barrier(2)
        )
        service = BookFlightOptimisticLockingService(flight_bookings)
        bookings = [
            create_booking(
                seat_number="2D",
                flight_number="KL456",
                source="AMS",
                destination="FRA",
                departure_date_time=sample_data.AMS_FRA_DEPARTURE,
            )
            for _ in range(2)
        ]

        # Act
        attempts = run_concurrent_bookings(service, bookings)

        # Assert
        winners = [attempt.booking for attempt in attempts if attempt.success]
        assert len(winners) == 1
        assert sorted(flight_bookings.outcomes) == sorted(
            [TransactOutcome.SUCCESS, TransactOutcome.PRECONDITION_FAILED]
        )

        stored = _assert_store_consistent(flight_bookings, flight, 1, attempts)
        assert stored.claimed_by("2D") == str(winners[0].booking_id)
        assert stored.claimed_by("1A") == flight.claimed_by("1A")
        assert stored.available_seats == 149

    def test_retry_after_stale_read_books_another_held_seat(
        self, in_memory_flight_bookings, create_booking, create_flight
    ):
        """座席指定なしなら、再試行で2件とも成功する"""
        flight = create_flight(total_seats=5)
        # 1回目の読み込みだけ待ち合わせ、再試行時の読み込みは待たない
        flight_bookings = in_memory_flight_bookings(
            "version", [flight], read_barrier=_OneShotBarrier(2)
        )
        service = BookFlightOptimisticLockingService(flight_bookings, max_attempts=2)
        bookings = [create_booking(seat_number=None) for _ in range(2)]

        attempts = run_concurrent_bookings(service, bookings)

        assert all(attempt.success for attempt in attempts)
        stored = _assert_store_consistent(flight_bookings, flight, 1, attempts)
        assert stored.held_seats == 2
        assert flight_bookings.outcomes.count(TransactOutcome.PRECONDITION_FAILED) == 1

    def test_same_seat_has_single_winner(self, in_memory_flight_bookings, create_booking):
        """同じ座席への同時予約は何件あっても成功は1件"""
        flight = _sample_flight("LHR")
        flight_bookings = in_memory_flight_bookings("version", [flight])
        service = BookFlightOptimisticLockingService(flight_bookings, max_attempts=3)
        bookings = [create_booking(seat_number="2C") for _ in range(8)]

        attempts = run_concurrent_bookings(service, bookings)

        assert sum(attempt.success for attempt in attempts) == 1
        _assert_store_consistent(flight_bookings, flight, 1, attempts)

    def test_seatless_bookings_never_oversell(
        self, in_memory_flight_bookings, create_booking, create_flight
    ):
        """楽観ロックでも空席数を超える予約は成功しない"""
        flight = create_flight(total_seats=4)
        flight_bookings = in_memory_flight_bookings("version", [flight])
        service = BookFlightOptimisticLockingService(flight_bookings, max_attempts=20)
        bookings = [create_booking(seat_number=None) for _ in range(10)]

        attempts = run_concurrent_bookings(service, bookings)

        successes = sum(attempt.success for attempt in attempts)
        assert 1 <= successes <= 4
        _assert_store_consistent(flight_bookings, flight, 1, attempts)

    def test_missing_flight_does_not_transact(
        self, in_memory_flight_bookings, create_booking
    ):
        """存在しないフライトはトランザクションを実行しない"""
        flight_bookings = in_memory_flight_bookings("version", [])
        service = BookFlightOptimisticLockingService(flight_bookings)

        assert service.book_flight(create_booking()) is False
        assert flight_bookings.transact_calls == 0


class TestFullItemVersionedConcurrency:
    """フライト全体を書き戻す楽観ロックの並行予約のテスト"""

    def test_stale_full_item_write_loses(
        self, in_memory_flight_bookings, create_booking
    ):
        """古い Version で書き戻そうとした方が失敗し、勝者の座席が上書きされない"""

        # Arrange
        flight = _sample_flight("AMS")
        flight_bookings = in_memory_flight_bookings(
            "full_item", [flight], read_barrier=threading.Barrier(2)
        )
        service = BookFlightOptimisticLockingService(flight_bookings)
        bookings = [
            create_booking(
                seat_number="2E",
                flight_number="KL456",
                source="AMS",
                destination="FRA",
                departure_date_time=sample_data.AMS_FRA_DEPARTURE,
            )
            for _ in range(2)
        ]

        # Act
        attempts = run_concurrent_bookings(service, bookings)

        # Assert
        winners = [attempt.booking for attempt in attempts if attempt.success]
        assert len(winners) == 1
        stored = _assert_store_consistent(flight_bookings, flight, 1, attempts)
        assert stored.claimed_by("2E") == str(winners[0].booking_id)
        assert stored.claimed_by("1A") == flight.claimed_by("1A")
        assert stored.available_seats == 149
        assert stored.version == 2

    def test_distinct_seats_with_retry(
        self, in_memory_flight_bookings, create_booking, create_flight
    ):
        """異なる座席なら、再試行で敗者の座席も勝者の座席を消さずに書き戻される"""
        flight = create_flight(total_seats=5)
        flight_bookings = in_memory_flight_bookings(
            "full_item", [flight], read_barrier=_OneShotBarrier(2)
        )
        service = BookFlightOptimisticLockingService(flight_bookings, max_attempts=2)
        first = create_booking(seat_number="1A")
        second = create_booking(seat_number="1B")

        attempts = run_concurrent_bookings(service, [first, second])

        assert all(attempt.success for attempt in attempts)
        stored = _assert_store_consistent(flight_bookings, flight, 1, attempts)
        assert stored.claimed_seat_map == {
            "1A": str(first.booking_id),
            "1B": str(second.booking_id),
        }
        assert stored.available_seats == 3


class _OneShotBarrier:
    """最初の parties 回の wait だけ待ち合わせるバリア"""

    def __init__(self, parties: int) -> None:
        self._barrier = threading.Barrier(parties)
        self._lock = threading.Lock()
        self._remaining = parties

    def wait(self, timeout: float | None = None) -> None:
        with self._lock:
            if self._remaining == 0:
                return
            self._remaining -= 1
        self._barrier.wait(timeout=timeout)


@pytest.mark.parametrize("guard", ["condition", "version", "full_item"])
def test_mixed_history_keeps_invariants(guard, in_memory_flight_bookings, create_booking):
    """座席指定あり・なしが混在しても保存則と Version の対応が保たれる"""
    flight = _sample_flight("FCO")
    flight_bookings = in_memory_flight_bookings(guard, [flight])
    if guard == "condition":
        service = NoLockingBookFlightService(flight_bookings)
    else:
        service = BookFlightOptimisticLockingService(flight_bookings, max_attempts=5)
    seats = ["3C", "3D", "3D", None, None, "4A", "4A", "4A", None, "3C", "5F", None]
    bookings = [
        create_booking(
            seat_number=seat,
            flight_number="LH234",
            source="FCO",
            destination="MUC",
            departure_date_time=sample_data.FCO_MUC_DEPARTURE,
        )
        for seat in seats
    ]

    attempts = run_concurrent_bookings(service, bookings, max_workers=6)

    stored = _assert_store_consistent(flight_bookings, flight, 1, attempts)
    assert stored.claimed_by("3C") == flight.claimed_by("3C")
    assert len(set(stored.claimed_seat_map.values())) == len(stored.claimed_seat_map)
