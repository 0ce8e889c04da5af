from .in_memory_flight_repository import (
    InMemoryFlightRepository as InMemoryFlightRepository,
)
from .seed_flights import DEFAULT_FLIGHTS as DEFAULT_FLIGHTS
from .seed_flights import load_flight_records as load_flight_records
