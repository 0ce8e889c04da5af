from .entity import Booking as Booking
from .enum import BookingStatus as BookingStatus
from .factory import BookingFactory as BookingFactory
from .repository import BookingRepository as BookingRepository
from .service import Notifier as Notifier
from .service import SeatAssigner as SeatAssigner
from .value_object import BoardingPass as BoardingPass
from .value_object import BookingId as BookingId
from .value_object import CardNumber as CardNumber
from .value_object import Passenger as Passenger
from .value_object import Pnr as Pnr
from .value_object import SeatAssignment as SeatAssignment
