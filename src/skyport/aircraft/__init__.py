"""Aircraft that use an airport's runway.

Typical usage:
    from skyport.aircraft import Plane

    plane = Plane(callsign="N12345")
"""

from skyport.aircraft.plane import IPlane, Plane

__all__ = [
    "IPlane",
    "Plane",
]
