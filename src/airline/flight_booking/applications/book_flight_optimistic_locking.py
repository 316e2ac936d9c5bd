from airline.flight_booking.applications.book_flight_use_case import BookFlightUseCase
from airline.flight_booking.domain.entity import Booking
from airline.flight_booking.domain.repository import FlightBookings
from airline.flight_booking.domain.value_object import TransactSummary
from airline.shared.utils.logger import get_logger

logger = get_logger()


class BookFlightOptimisticLockingService(BookFlightUseCase):
    """楽観ロックによるフライト予約サービス

    フライトを読み込み、メモリ上で座席を確保してから Version 条件付きでトランザクションを実行する。
    読み込みからトランザクションまでの間に他の予約がコミットされると PRECONDITION_FAILED になる。

    max_attempts が 2 以上の場合、PRECONDITION_FAILED のときだけフライトを再読込して再試行する。
    再読込で座席が埋まっていれば、その時点で False を返す（再試行しても無駄なため）。
    """

    def __init__(self, flight_bookings: FlightBookings, max_attempts: int = 1) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self._flight_bookings = flight_bookings
        self._max_attempts = max_attempts

    def book_flight(self, booking: Booking) -> bool:
        """フライトを予約する"""
        for attempt in range(1, self._max_attempts + 1):
            summary = self._attempt(booking)
            if summary is None:
                return False

            self._log(booking, summary)
            if summary.success:
                return True
            if not summary.precondition_failed or attempt == self._max_attempts:
                return False

            logger.info(
                "Retrying after concurrent modification",
                extra={"booking_id": str(booking.booking_id), "attempt": attempt},
            )
        return False

    def _attempt(self, booking: Booking) -> TransactSummary | None:
        """1 回分の読み込み・確保・トランザクション

        トランザクションを実行せずに予約不可と判断した場合は None を返す。
        """
        flight = self._flight_bookings.find_flight(booking.flight_primary_key())
        if flight is None:
            logger.warning(
                "Flight not available for booking",
                extra={"flight_key": str(booking.flight_primary_key())},
            )
            return None

        if not flight.any_seat_available():
            logger.warning(
                "No available seats for the flight",
                extra={"flight_number": str(flight.flight_number)},
            )
            return None

        if booking.seat_number is not None:
            if not flight.claim_seat(booking.seat_number, str(booking.booking_id)):
                logger.warning(
                    "The requested seat is already claimed",
                    extra={
                        "flight_number": str(flight.flight_number),
                        "seat_number": booking.seat_number,
                    },
                )
                return None
        else:
            flight.increment_held_seats()

        flight.decrement_available_seats()

        return self._flight_bookings.transact_book_flight(booking, flight)

    def _log(self, booking: Booking, summary: TransactSummary) -> None:
        extra = {
            "booking_id": str(booking.booking_id),
            "flight_number": str(booking.flight_number),
            "seat_number": booking.seat_number,
        }
        if summary.success:
            logger.info("Flight booked successfully", extra=extra)
            return

        if summary.precondition_failed:
            logger.warning(
                "Optimistic locking failed: another actor modified the flight "
                "concurrently. Consider attempting again",
                extra=extra,
            )
            return

        if summary.transaction_cancelled:
            logger.warning(summary.failure_reason, extra=extra)
            return

        logger.error(summary.failure_reason, extra=extra)
