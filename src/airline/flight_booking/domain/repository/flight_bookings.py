from abc import ABC, abstractmethod

from airline.flight_booking.domain.entity import Booking, Flight
from airline.flight_booking.domain.value_object import (
    BookingId,
    FlightPrimaryKey,
    TransactSummary,
)


class FlightBookings(ABC):
    """フライト予約レポジトリ

    フライトの参照・予約の参照と、予約トランザクション（フライト更新 + 予約登録）を抽象化する。
    """

    @abstractmethod
    def find_flight(self, primary_key: FlightPrimaryKey) -> Flight | None:
        """主キーでフライトを検索する（強い整合性の読み込み）"""
        raise NotImplementedError

    @abstractmethod
    def find_booking(self, customer_email: str, booking_id: BookingId) -> Booking | None:
        """顧客メールアドレスと予約IDで予約を検索する（強い整合性の読み込み）"""
        raise NotImplementedError

    @abstractmethod
    def transact_book_flight(
        self, booking: Booking, flight: Flight | None
    ) -> TransactSummary:
        """フライトの座席更新と予約の登録を 1 トランザクションで実行する

        実装によっては flight を使わない。
        ストアが拒否・失敗した場合は例外ではなく TransactSummary で返す。
        """
        raise NotImplementedError
