"""Airport runway control.

An airport clears planes to land and take off, refusing movements during
storms, when it is full, or for planes it is not holding.

Typical usage:
    from skyport.airports import Airport, CapacityError

    airport = Airport(capacity=3)
    plane = airport.create_plane()
    airport.clear_takeoff(plane)
"""

from skyport.airports.airport import Airport
from skyport.airports.errors import (
    AirportError,
    CapacityError,
    PlaneNotFoundError,
    StormyWeatherError,
)
from skyport.airports.events import PlaneDepartedEvent, PlaneLandedEvent

__all__ = [
    "Airport",
    "AirportError",
    "CapacityError",
    "PlaneDepartedEvent",
    "PlaneLandedEvent",
    "PlaneNotFoundError",
    "StormyWeatherError",
]
