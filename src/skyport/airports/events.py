"""Events published by an airport after a completed movement.

Events are published only once the airport has updated its set of grounded
planes; a refused or failed movement publishes nothing.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from skyport.aircraft.plane import IPlane
from skyport.core.event_bus import Event

if TYPE_CHECKING:
    from skyport.airports.airport import Airport


@dataclass
class PlaneLandedEvent(Event):
    """A plane landed and is now grounded at the airport.

    Attributes:
        plane: The plane that landed.
        airport: The airport it landed at.
    """

    plane: IPlane
    airport: "Airport"


@dataclass
class PlaneDepartedEvent(Event):
    """A plane took off and is no longer grounded at the airport.

    Attributes:
        plane: The plane that took off.
        airport: The airport it left.
    """

    plane: IPlane
    airport: "Airport"
