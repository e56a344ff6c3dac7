"""Weather conditions and the providers that report them.

Typical usage:
    from skyport.weather import FixedWeather, RandomWeather, WeatherCondition

    weather = RandomWeather(storm_probability=0.1, seed=42)
    if weather.current() is WeatherCondition.STORMY:
        ...
"""

from skyport.weather.conditions import WeatherCondition
from skyport.weather.provider import (
    CallableWeather,
    FixedWeather,
    IWeatherProvider,
    RandomWeather,
    as_weather_provider,
)

__all__ = [
    "CallableWeather",
    "FixedWeather",
    "IWeatherProvider",
    "RandomWeather",
    "WeatherCondition",
    "as_weather_provider",
]
