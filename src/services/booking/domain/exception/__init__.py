from .exceptions import (
    BookingNotConfirmedException as BookingNotConfirmedException,
)
from .exceptions import BookingNotFoundException as BookingNotFoundException
from .exceptions import IdentityMismatchException as IdentityMismatchException
from .exceptions import InvalidCardException as InvalidCardException
from .exceptions import (
    InvalidBookingStateException as InvalidBookingStateException,
)
