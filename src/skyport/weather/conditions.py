"""Weather conditions relevant to runway operations."""

from enum import Enum


class WeatherCondition(Enum):
    """Weather reported to the tower.

    Attributes:
        SUNNY: Landings and takeoffs are permitted.
        STORMY: All runway movements are suspended.
    """

    SUNNY = "sunny"
    STORMY = "stormy"

    @classmethod
    def parse(cls, value: "WeatherCondition | str") -> "WeatherCondition":
        """Convert a condition or its name into a WeatherCondition.

        Args:
            value: A WeatherCondition, or "sunny"/"stormy" in any case.

        Returns:
            The matching WeatherCondition.

        Raises:
            ValueError: If the value does not name a known condition.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise ValueError(f"Unknown weather condition: {value!r}")

    @property
    def is_flyable(self) -> bool:
        return self is not WeatherCondition.STORMY
