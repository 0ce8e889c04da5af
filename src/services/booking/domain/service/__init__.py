from .notifier import Notifier as Notifier
from .seat_assigner import SeatAssigner as SeatAssigner
