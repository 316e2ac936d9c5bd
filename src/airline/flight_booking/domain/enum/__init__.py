from .booking_strategy import BookingStrategy as BookingStrategy
from .transact_outcome import TransactOutcome as TransactOutcome
