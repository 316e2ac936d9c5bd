from .entity import Booking as Booking
from .entity import BookingKey as BookingKey
from .entity import Flight as Flight
from .enum import BookingStrategy as BookingStrategy
from .enum import TransactOutcome as TransactOutcome
from .factory import BookingDetails as BookingDetails
from .factory import BookingFactory as BookingFactory
from .repository import FlightBookings as FlightBookings
from .value_object import BookingId as BookingId
from .value_object import FlightNumber as FlightNumber
from .value_object import FlightPrimaryKey as FlightPrimaryKey
from .value_object import TransactSummary as TransactSummary
