"""Runway control for a single airport.

The airport holds the set of planes currently grounded there and is the only
place that set changes. Every movement is guarded: landings need flyable
weather and a free slot, takeoffs need the plane to be here and flyable
weather. Only when the guards pass is the plane asked to act, and only when
the plane's action succeeds does the set change.

Typical usage:
    from skyport.airports import Airport
    from skyport.weather import FixedWeather

    airport = Airport(capacity=3, weather=FixedWeather("sunny"))
    plane = airport.create_plane()
    airport.has_plane(plane)  # True
    airport.clear_takeoff(plane)
"""

from collections.abc import Callable

from skyport.aircraft.plane import IPlane, Plane
from skyport.airports.errors import CapacityError, PlaneNotFoundError, StormyWeatherError
from skyport.airports.events import PlaneDepartedEvent, PlaneLandedEvent
from skyport.core.config import DEFAULT_CAPACITY, AirportSettings
from skyport.core.event_bus import EventBus
from skyport.core.logging_system import get_logger
from skyport.weather.conditions import WeatherCondition
from skyport.weather.provider import IWeatherProvider, RandomWeather, as_weather_provider

logger = get_logger(__name__)

WeatherSource = IWeatherProvider | Callable[[], WeatherCondition | str]


class Airport:
    """An airport that clears planes to land and take off.

    Attributes:
        DEFAULT_CAPACITY: Capacity used when none is given.
        capacity: Maximum number of planes grounded at once.
        weather_provider: Where the airport gets its weather from.
        event_bus: Optional bus receiving PlaneLandedEvent/PlaneDepartedEvent.

    Examples:
        >>> airport = Airport(capacity=2, weather=FixedWeather("sunny"))
        >>> plane = Plane("N12345")
        >>> airport.clear_landing(plane)
        Plane(N12345)
        >>> airport.has_plane(plane)
        True
    """

    DEFAULT_CAPACITY = DEFAULT_CAPACITY

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        weather: WeatherSource | None = None,
        event_bus: EventBus | None = None,
        plane_factory: Callable[..., IPlane] = Plane,
    ) -> None:
        """Initialize airport.

        Args:
            capacity: Maximum number of grounded planes (>= 0).
            weather: Weather provider or zero-argument callable. Defaults to
                RandomWeather.
            event_bus: Optional bus to publish movement events on.
            plane_factory: Builds the planes returned by create_plane.

        Raises:
            ValueError: If capacity is not a non-negative integer.
        """
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise ValueError(f"capacity must be an integer, got: {capacity!r}")
        if capacity < 0:
            raise ValueError(f"capacity must be >= 0, got: {capacity}")

        self.capacity = capacity
        self.weather_provider = as_weather_provider(weather)
        self.event_bus = event_bus
        self._plane_factory = plane_factory
        self._planes: set[IPlane] = set()

        logger.info("Airport opened with capacity %d", capacity)

    @classmethod
    def from_settings(
        cls,
        settings: AirportSettings,
        weather: WeatherSource | None = None,
        event_bus: EventBus | None = None,
    ) -> "Airport":
        """Build an airport from loaded settings.

        Without an explicit weather source, the airport gets RandomWeather
        using the storm probability and seed from the settings.
        """
        if weather is None:
            weather = RandomWeather(settings.storm_probability, settings.seed)
        return cls(capacity=settings.capacity, weather=weather, event_bus=event_bus)

    @property
    def planes(self) -> frozenset[IPlane]:
        """Planes currently grounded here."""
        return frozenset(self._planes)

    @property
    def is_full(self) -> bool:
        return len(self._planes) >= self.capacity

    @property
    def available_slots(self) -> int:
        return self.capacity - len(self._planes)

    def weather(self) -> WeatherCondition:
        """Ask the weather provider for the current condition."""
        return self.weather_provider.current()

    def has_plane(self, plane: IPlane) -> bool:
        """Check whether a plane is grounded here."""
        return plane in self._planes

    def clear_landing(self, plane: IPlane) -> IPlane:
        """Clear a plane to land.

        Args:
            plane: The plane requesting to land.

        Returns:
            The plane, now grounded here.

        Raises:
            StormyWeatherError: If the weather is stormy.
            CapacityError: If the airport is full.
            Exception: Whatever ``plane.land()`` raises, unchanged.
        """
        if self.weather() is WeatherCondition.STORMY:
            logger.info("Landing refused for %r: stormy weather", plane)
            raise StormyWeatherError()

        if self.is_full:
            logger.info("Landing refused for %r: at capacity (%d)", plane, self.capacity)
            raise CapacityError()

        plane.land()
        self._planes.add(plane)
        logger.info("%r landed (%d/%d)", plane, len(self._planes), self.capacity)

        if self.event_bus is not None:
            self.event_bus.publish(PlaneLandedEvent(plane=plane, airport=self))

        return plane

    def clear_takeoff(self, plane: IPlane) -> None:
        """Clear a grounded plane to take off.

        The plane must be grounded here; that is checked before the weather.

        Args:
            plane: The plane requesting to take off.

        Raises:
            PlaneNotFoundError: If the plane is not grounded here.
            StormyWeatherError: If the weather is stormy.
            Exception: Whatever ``plane.takeoff()`` raises, unchanged.
        """
        if plane not in self._planes:
            logger.info("Takeoff refused for %r: not at this airport", plane)
            raise PlaneNotFoundError()

        if self.weather() is WeatherCondition.STORMY:
            logger.info("Takeoff refused for %r: stormy weather", plane)
            raise StormyWeatherError()

        plane.takeoff()
        self._planes.discard(plane)
        logger.info("%r departed (%d/%d)", plane, len(self._planes), self.capacity)

        if self.event_bus is not None:
            self.event_bus.publish(PlaneDepartedEvent(plane=plane, airport=self))

    def create_plane(self, *args, **kwargs) -> IPlane:
        """Build a new plane and clear it to land here.

        Arguments are passed to the plane factory, e.g. ``callsign`` for the
        default Plane. If the landing is refused, the new plane is dropped
        and the error propagates.

        Returns:
            The new, grounded plane.
        """
        return self.clear_landing(self._plane_factory(*args, **kwargs))

    def __contains__(self, plane: object) -> bool:
        return plane in self._planes

    def __len__(self) -> int:
        return len(self._planes)

    def __repr__(self) -> str:
        return f"Airport(capacity={self.capacity}, grounded={len(self._planes)})"
