from .fixed_seat_assigner import FixedSeatAssigner as FixedSeatAssigner
from .in_memory_booking_repository import (
    InMemoryBookingRepository as InMemoryBookingRepository,
)
from .logging_notifier import LoggingNotifier as LoggingNotifier
