from .entity import Flight as Flight
from .exception import FlightNotFoundException as FlightNotFoundException
from .exception import FlightUnavailableException as FlightUnavailableException
from .exception import NoSeatsAvailableException as NoSeatsAvailableException
from .factory import FlightFactory as FlightFactory
from .factory import FlightRecord as FlightRecord
from .repository import FlightRepository as FlightRepository
from .value_object import FlightId as FlightId
