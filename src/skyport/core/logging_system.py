"""Logging system for the airport model and its collaborators.

Logging is configured from a YAML file and writes to the console and to a
combined log file. Components get cached loggers through ``get_logger`` and
may be given their own level or a dedicated file in the ``components``
section of the configuration.

Platform-specific log locations:
    - macOS: ~/Library/Logs/Skyport/skyport.log
    - Linux: ~/.skyport/logs/skyport.log
    - Windows: %AppData%/Skyport/Logs/skyport.log

Each initialization rotates the previous logs, keeping the last 5 runs.

Typical usage example:
    from skyport.core.logging_system import get_logger

    logger = get_logger(__name__)
    logger.info("Cleared %s to land", plane)
"""

import logging
import logging.handlers
import os
import platform
import time
from pathlib import Path
from typing import Any

import yaml

_logging_config: dict[str, Any] = {}
_loggers_cache: dict[str, logging.Logger] = {}
_root_handlers: list[logging.Handler] = []
_initialized = False


class LoggingError(Exception):
    """Raised when logging system operations fail."""


def get_platform_log_dir() -> Path:
    """Get platform-specific log directory.

    Returns:
        Path to the platform-appropriate log directory:
        - macOS: ~/Library/Logs/Skyport
        - Linux: ~/.skyport/logs
        - Windows: %AppData%/Skyport/Logs
    """
    system = platform.system()

    if system == "Darwin":
        return Path.home() / "Library" / "Logs" / "Skyport"
    elif system == "Windows":
        appdata = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return appdata / "Skyport" / "Logs"
    else:
        return Path.home() / ".skyport" / "logs"


def rotate_logs(log_dir: Path, log_filename: str = "skyport.log", keep_count: int = 5) -> None:
    """Rotate logs on startup, keeping the last N runs.

    Renames the current log to ``<name>.1``, shifts older logs up by one and
    deletes the log that falls beyond ``keep_count``.

    Args:
        log_dir: Directory containing log files.
        log_filename: Base name of the log file.
        keep_count: Number of old logs to keep.
    """
    log_file = log_dir / log_filename

    if not log_file.exists():
        return

    oldest_log = log_dir / f"{log_filename}.{keep_count}"
    if oldest_log.exists():
        oldest_log.unlink()

    for i in range(keep_count - 1, 0, -1):
        old_log = log_dir / f"{log_filename}.{i}"
        if old_log.exists():
            old_log.rename(log_dir / f"{log_filename}.{i + 1}")

    log_file.rename(log_dir / f"{log_filename}.1")


def initialize_logging(config_path: str | Path | None = None, use_platform_dir: bool = True) -> None:
    """Initialize the logging system from YAML configuration.

    Call once at startup, before any logging occurs. Rotates the logs of
    previous runs.

    Args:
        config_path: Path to a logging configuration YAML file. If None, the
            default configuration is used.
        use_platform_dir: If True, log to the platform-specific directory.
            If False, use ``log_dir`` from the configuration (development and
            testing).

    Raises:
        LoggingError: If the configuration cannot be loaded.
    """
    global _logging_config, _initialized

    if config_path:
        try:
            config_path = Path(config_path)
            if not config_path.exists():
                raise LoggingError(f"Logging config file not found: {config_path}")

            with config_path.open("r", encoding="utf-8") as f:
                loaded = yaml.safe_load(f) or {}
        except Exception as e:
            raise LoggingError(f"Failed to load logging config: {e}") from e

        _logging_config = _merge_with_defaults(loaded)
    else:
        _logging_config = _get_default_config()

    if use_platform_dir:
        _logging_config["log_dir"] = str(get_platform_log_dir())

    log_dir = Path(_logging_config["log_dir"])
    log_dir.mkdir(parents=True, exist_ok=True)

    combined = _logging_config["combined_log"]
    rotate_logs(log_dir, combined["filename"], combined["backup_count"])

    # Cached loggers were configured against the previous settings
    _loggers_cache.clear()
    _configure_root_logger()

    _initialized = True


def _get_default_config() -> dict[str, Any]:
    """Get default logging configuration."""
    return {
        "version": 1,
        "level": "INFO",
        "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        "date_format": "%Y-%m-%d %H:%M:%S",
        "log_dir": "logs",
        "combined_log": {
            "enabled": True,
            "filename": "skyport.log",
            "backup_count": 5,
        },
        "console": {
            "enabled": True,
            "level": "INFO",
        },
        "components": {},
    }


def _merge_with_defaults(loaded: dict[str, Any]) -> dict[str, Any]:
    """Overlay a loaded configuration on top of the defaults, one level deep."""
    config = _get_default_config()
    for key, value in loaded.items():
        if isinstance(value, dict) and isinstance(config.get(key), dict):
            config[key] = {**config[key], **value}
        else:
            config[key] = value
    return config


def _configure_root_logger() -> None:
    """Configure the root logger with console and combined file handlers."""
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # filtered per handler

    # Only replace handlers installed here; others (e.g. test capture) stay
    for handler in _root_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _root_handlers.clear()

    console_config = _logging_config["console"]
    if console_config.get("enabled", True):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(_level(console_config.get("level", _logging_config["level"])))
        console_handler.setFormatter(_get_formatter())
        root_logger.addHandler(console_handler)
        _root_handlers.append(console_handler)

    combined_config = _logging_config["combined_log"]
    if combined_config.get("enabled", True):
        log_file = Path(_logging_config["log_dir"]) / combined_config["filename"]

        # Rotation happens on startup, not by size
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(_get_formatter())
        root_logger.addHandler(file_handler)
        _root_handlers.append(file_handler)


def _level(name: str) -> int:
    """Translate a level name from the configuration into a logging level."""
    level = logging.getLevelName(str(name).upper())
    if not isinstance(level, int):
        raise LoggingError(f"Unknown log level: {name}")
    return level


class MillisecondFormatter(logging.Formatter):
    """Formatter that appends milliseconds with a dot separator."""

    def formatTime(self, record, datefmt=None):
        ct = self.converter(record.created)
        s = time.strftime(datefmt or "%Y-%m-%d %H:%M:%S", ct)
        return f"{s}.{int(record.msecs):03d}"


def _get_formatter() -> logging.Formatter:
    return MillisecondFormatter(_logging_config["format"], _logging_config["date_format"])


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a component.

    Loggers are cached. A component listed under ``components`` in the
    configuration may set ``level``, ``dedicated_file`` or ``enabled``.

    Args:
        name: Logger name, usually the module's ``__name__``.

    Returns:
        Configured logger instance.

    Examples:
        >>> log = get_logger("skyport.airports.airport")
        >>> log.info("Plane %s landed", plane)

    Note:
        Use lazy formatting (%) instead of f-strings.
    """
    if not _initialized:
        initialize_logging()

    if name in _loggers_cache:
        return _loggers_cache[name]

    logger = logging.getLogger(name)
    component_config = _logging_config.get("components", {}).get(name, {})

    if component_config.get("enabled", True):
        logger.disabled = False
        if "level" in component_config:
            logger.setLevel(_level(component_config["level"]))

        if component_config.get("dedicated_file", False):
            log_file = Path(_logging_config["log_dir"]) / f"{name}.log"
            file_handler = logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=component_config.get("max_bytes", 10485760),
                backupCount=component_config.get("backup_count", 5),
                encoding="utf-8",
            )
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(_get_formatter())
            logger.addHandler(file_handler)
    else:
        logger.disabled = True

    _loggers_cache[name] = logger
    return logger


def shutdown_logging() -> None:
    """Flush and close all handlers.

    The next ``get_logger`` call initializes logging again.
    """
    global _initialized

    logging.shutdown()
    _loggers_cache.clear()
    _initialized = False
