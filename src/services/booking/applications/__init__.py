from .booking_lifecycle import BookingLifecycle as BookingLifecycle
from .booking_lifecycle import PaymentResult as PaymentResult
