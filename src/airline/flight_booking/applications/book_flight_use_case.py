from abc import ABC, abstractmethod

from airline.flight_booking.domain.entity import Booking


class BookFlightUseCase(ABC):
    """フライト予約ユースケース"""

    @abstractmethod
    def book_flight(self, booking: Booking) -> bool:
        """フライトを予約する

        Returns:
            bool: トランザクションが成功した場合のみ True
        """
        raise NotImplementedError
