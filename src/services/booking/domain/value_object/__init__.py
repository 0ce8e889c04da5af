from .boarding_pass import BoardingPass as BoardingPass
from .booking_id import BookingId as BookingId
from .card_number import CardNumber as CardNumber
from .passenger import Passenger as Passenger
from .pnr import Pnr as Pnr
from .seat_assignment import SeatAssignment as SeatAssignment
