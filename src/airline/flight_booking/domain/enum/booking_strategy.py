from enum import Enum


class BookingStrategy(str, Enum):
    """予約トランザクションの整合性戦略"""

    NO_LOCKING = "no_locking"
    OPTIMISTIC_LOCKING = "optimistic_locking"
    OPTIMISTIC_LOCKING_FULL_ITEM = "optimistic_locking_full_item"
