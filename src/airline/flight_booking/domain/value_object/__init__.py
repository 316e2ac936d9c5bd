from .booking_id import BookingId as BookingId
from .flight_number import FlightNumber as FlightNumber
from .flight_primary_key import FlightPrimaryKey as FlightPrimaryKey
from .transact_summary import TransactSummary as TransactSummary
