"""Planes handled by an airport.

A plane is identified by the object itself: two planes are the same plane
only if they are the same instance. The plane keeps no record of where it
is; the airport's set of grounded planes is the sole source of truth.

Typical usage:
    plane = Plane(callsign="N12345")
    airport.clear_landing(plane)
"""

from abc import ABC, abstractmethod

from skyport.core.logging_system import get_logger

logger = get_logger(__name__)


class IPlane(ABC):
    """Capability an airport needs from a plane.

    Either action may raise to signal that the plane could not perform it;
    the airport lets that exception through and leaves its state untouched.
    """

    @abstractmethod
    def land(self) -> None:
        """Touch down on the runway."""

    @abstractmethod
    def takeoff(self) -> None:
        """Leave the runway."""


class Plane(IPlane):
    """Default plane whose actions always succeed.

    Examples:
        >>> plane = Plane("N12345")
        >>> plane.land()
        >>> plane.takeoff()
    """

    def __init__(self, callsign: str | None = None) -> None:
        """Initialize plane.

        Args:
            callsign: Optional label used in logs and repr. It plays no part
                in identity.
        """
        self.callsign = callsign

    def land(self) -> None:
        logger.debug("%r landing", self)

    def takeoff(self) -> None:
        logger.debug("%r taking off", self)

    def __repr__(self) -> str:
        if self.callsign:
            return f"Plane({self.callsign})"
        return f"Plane(0x{id(self):x})"
