"""Pytest configuration and fixtures for all tests."""

import tempfile
from pathlib import Path

import pytest
import yaml

from skyport.aircraft import IPlane
from skyport.core.logging_system import initialize_logging
from skyport.weather import FixedWeather, WeatherCondition

_TEST_LOG_DIR = Path(tempfile.mkdtemp(prefix="skyport-tests-"))


def _initialize_test_logging() -> None:
    """Send all test-run logging to a temporary directory, file only."""
    config_path = _TEST_LOG_DIR / "logging.yaml"
    config_path.write_text(
        yaml.safe_dump(
            {
                "log_dir": str(_TEST_LOG_DIR),
                "console": {"enabled": False},
                "combined_log": {"filename": "skyport-tests.log", "backup_count": 1},
            }
        ),
        encoding="utf-8",
    )
    initialize_logging(config_path, use_platform_dir=False)


# Must run before test modules import skyport and create their loggers
_initialize_test_logging()


@pytest.fixture
def restore_test_logging():
    """Put the test logging configuration back after a test that replaced it."""
    yield
    _initialize_test_logging()


class RecordingPlane(IPlane):
    """Plane whose actions always succeed and are counted."""

    def __init__(self, name: str = "recording") -> None:
        self.name = name
        self.land_calls = 0
        self.takeoff_calls = 0

    def land(self) -> None:
        self.land_calls += 1

    def takeoff(self) -> None:
        self.takeoff_calls += 1

    def __repr__(self) -> str:
        return f"RecordingPlane({self.name})"


class FailingPlane(RecordingPlane):
    """Plane whose actions are counted and then always fail."""

    def land(self) -> None:
        super().land()
        raise RuntimeError("Plane cannot land")

    def takeoff(self) -> None:
        super().takeoff()
        raise RuntimeError("Plane cannot take off")


class InertPlane(IPlane):
    """Plane that ignores every request."""

    def land(self) -> None:
        pass

    def takeoff(self) -> None:
        pass


@pytest.fixture
def sunny() -> FixedWeather:
    """Weather fixed to sunny; reassign ``condition`` to change it."""
    return FixedWeather(WeatherCondition.SUNNY)


@pytest.fixture
def stormy() -> FixedWeather:
    return FixedWeather(WeatherCondition.STORMY)


@pytest.fixture
def plane() -> RecordingPlane:
    return RecordingPlane()


@pytest.fixture
def failing_plane() -> FailingPlane:
    return FailingPlane("failing")


@pytest.fixture
def inert_plane() -> InertPlane:
    return InertPlane()


@pytest.fixture
def make_plane():
    """Factory for fresh, distinct RecordingPlanes."""
    return RecordingPlane
