"""Errors raised when an airport refuses a runway movement.

Each error carries a fixed default message so callers and logs see the same
wording for the same refusal.
"""


class AirportError(Exception):
    """Base class for movements refused by an airport."""

    default_message = "Movement refused"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class StormyWeatherError(AirportError):
    """Raised when a landing or takeoff is requested during a storm."""

    default_message = "Weather is stormy and too unsafe"


class CapacityError(AirportError):
    """Raised when a plane asks to land at a full airport."""

    default_message = "Airport is at capacity"


class PlaneNotFoundError(AirportError):
    """Raised when a plane that is not grounded here asks to take off."""

    default_message = "Plane is not at this airport"
