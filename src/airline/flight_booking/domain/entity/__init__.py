from .booking import Booking as Booking
from .booking import BookingKey as BookingKey
from .flight import Flight as Flight
