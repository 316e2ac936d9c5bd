from .flight_bookings import FlightBookings as FlightBookings
