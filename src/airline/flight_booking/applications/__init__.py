from .book_flight_no_locking import (
    NoLockingBookFlightService as NoLockingBookFlightService,
)
from .book_flight_optimistic_locking import (
    BookFlightOptimisticLockingService as BookFlightOptimisticLockingService,
)
from .book_flight_use_case import BookFlightUseCase as BookFlightUseCase
