"""Weather providers consulted by the airport before every movement.

The airport never decides the weather itself; it asks an ``IWeatherProvider``.
``RandomWeather`` is the default and reports a storm now and then.
``FixedWeather`` always reports the same condition, which makes it the
provider of choice for tests and scripted scenarios.

Typical usage:
    weather = FixedWeather(WeatherCondition.SUNNY)
    airport = Airport(weather=weather)
    weather.condition = WeatherCondition.STORMY  # storm rolls in
"""

import random
from abc import ABC, abstractmethod
from collections.abc import Callable

from skyport.core.config import DEFAULT_STORM_PROBABILITY
from skyport.core.logging_system import get_logger
from skyport.weather.conditions import WeatherCondition

logger = get_logger(__name__)


class IWeatherProvider(ABC):
    """Source of the current weather condition."""

    @abstractmethod
    def current(self) -> WeatherCondition:
        """Report the weather right now.

        Returns:
            The current WeatherCondition.
        """


class RandomWeather(IWeatherProvider):
    """Weather that is usually sunny and occasionally stormy.

    Each call to ``current`` is an independent draw.

    Examples:
        >>> weather = RandomWeather(storm_probability=0.25, seed=7)
        >>> weather.current()
        <WeatherCondition.SUNNY: 'sunny'>
    """

    def __init__(
        self, storm_probability: float = DEFAULT_STORM_PROBABILITY, seed: int | None = None
    ) -> None:
        """Initialize random weather.

        Args:
            storm_probability: Probability of a storm on each draw (0.0-1.0).
            seed: Optional seed for reproducible sequences.

        Raises:
            ValueError: If storm_probability is outside [0, 1].
        """
        if not 0.0 <= storm_probability <= 1.0:
            raise ValueError(f"storm_probability must be between 0 and 1, got: {storm_probability}")

        self.storm_probability = storm_probability
        self._rng = random.Random(seed)

    def current(self) -> WeatherCondition:
        if self._rng.random() < self.storm_probability:
            return WeatherCondition.STORMY
        return WeatherCondition.SUNNY

    def __repr__(self) -> str:
        return f"RandomWeather(storm_probability={self.storm_probability})"


class FixedWeather(IWeatherProvider):
    """Weather that never changes unless ``condition`` is reassigned."""

    def __init__(self, condition: WeatherCondition | str = WeatherCondition.SUNNY) -> None:
        self.condition = WeatherCondition.parse(condition)

    def current(self) -> WeatherCondition:
        return self.condition

    def __repr__(self) -> str:
        return f"FixedWeather({self.condition.value})"


class CallableWeather(IWeatherProvider):
    """Adapts a zero-argument function into a weather provider.

    The function may return a WeatherCondition or its string value.
    """

    def __init__(self, func: Callable[[], WeatherCondition | str]) -> None:
        self._func = func

    def current(self) -> WeatherCondition:
        return WeatherCondition.parse(self._func())

    def __repr__(self) -> str:
        return f"CallableWeather({self._func!r})"


def as_weather_provider(
    weather: IWeatherProvider | Callable[[], WeatherCondition | str] | None,
) -> IWeatherProvider:
    """Normalize the ways an airport can be given its weather.

    Args:
        weather: A provider, a zero-argument callable, or None for the
            default RandomWeather.

    Returns:
        An IWeatherProvider.

    Raises:
        TypeError: If weather is none of the accepted kinds.
    """
    if weather is None:
        provider: IWeatherProvider = RandomWeather()
    elif isinstance(weather, IWeatherProvider):
        provider = weather
    elif callable(weather):
        provider = CallableWeather(weather)
    else:
        raise TypeError(f"Expected a weather provider or callable, got: {type(weather).__name__}")

    logger.debug("Using weather provider %r", provider)
    return provider
