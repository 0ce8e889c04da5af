from .flight_factory import FlightFactory as FlightFactory
from .flight_factory import FlightRecord as FlightRecord
