from airline.flight_booking.applications.book_flight_use_case import BookFlightUseCase
from airline.flight_booking.domain.entity import Booking
from airline.flight_booking.domain.repository import FlightBookings
from airline.flight_booking.domain.value_object import TransactSummary
from airline.shared.utils.logger import get_logger

logger = get_logger()


class NoLockingBookFlightService(BookFlightUseCase):
    """ロックなしのフライト予約サービス

    事前の読み込みを行わず、条件式付きのトランザクションだけで予約する。
    PRECONDITION_FAILED は「座席が埋まっている / 満席」という確定した結果。
    """

    def __init__(self, flight_bookings: FlightBookings) -> None:
        self._flight_bookings = flight_bookings

    def book_flight(self, booking: Booking) -> bool:
        """フライトを予約する"""
        summary = self._flight_bookings.transact_book_flight(booking, None)
        self._log(booking, summary)
        return summary.success

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
                "No seats available or specified seat already taken", extra=extra
            )
            return

        if summary.transaction_cancelled:
            logger.warning(summary.failure_reason, extra=extra)
            return

        logger.error(summary.failure_reason, extra=extra)
