"""Unit tests for the logging system with platform-aware paths and rotation."""

import logging
from pathlib import Path
from unittest.mock import patch

import pytest

from skyport.core.logging_system import (
    LoggingError,
    get_logger,
    get_platform_log_dir,
    initialize_logging,
    rotate_logs,
    shutdown_logging,
)

pytestmark = pytest.mark.usefixtures("restore_test_logging")


@pytest.fixture
def platform_dir(tmp_path):
    """Point the platform log directory at a temporary directory."""
    with patch("skyport.core.logging_system.get_platform_log_dir", return_value=tmp_path):
        yield tmp_path


class TestPlatformLogDir:
    """Tests for get_platform_log_dir function."""

    def test_macos_log_dir(self) -> None:
        with patch("platform.system", return_value="Darwin"):
            assert get_platform_log_dir() == Path.home() / "Library" / "Logs" / "Skyport"

    def test_linux_log_dir(self) -> None:
        with patch("platform.system", return_value="Linux"):
            assert get_platform_log_dir() == Path.home() / ".skyport" / "logs"

    def test_windows_log_dir(self) -> None:
        with patch("platform.system", return_value="Windows"):
            with patch.dict("os.environ", {"APPDATA": "C:/Users/Test/AppData/Roaming"}):
                log_dir = get_platform_log_dir()
                assert log_dir == Path("C:/Users/Test/AppData/Roaming") / "Skyport" / "Logs"

    def test_unknown_platform_defaults_to_linux(self) -> None:
        with patch("platform.system", return_value="FreeBSD"):
            assert get_platform_log_dir() == Path.home() / ".skyport" / "logs"


class TestLogRotation:
    """Tests for log rotation functionality."""

    def test_rotate_logs_no_existing_log(self, tmp_path) -> None:
        """Test rotation when no log file exists - should do nothing."""
        rotate_logs(tmp_path, "test.log", 5)

        assert list(tmp_path.glob("*")) == []

    def test_rotate_logs_multiple_files(self, tmp_path) -> None:
        """Test rotation shifts every existing log by one."""
        (tmp_path / "test.log").write_text("current")
        (tmp_path / "test.log.1").write_text("previous-1")
        (tmp_path / "test.log.2").write_text("previous-2")

        rotate_logs(tmp_path, "test.log", 5)

        assert not (tmp_path / "test.log").exists()
        assert (tmp_path / "test.log.1").read_text() == "current"
        assert (tmp_path / "test.log.2").read_text() == "previous-1"
        assert (tmp_path / "test.log.3").read_text() == "previous-2"

    def test_rotate_logs_deletes_oldest(self, tmp_path) -> None:
        """Test that the log beyond keep_count is deleted."""
        (tmp_path / "test.log").write_text("current")
        for i in range(1, 3):
            (tmp_path / f"test.log.{i}").write_text(f"old-{i}")

        rotate_logs(tmp_path, "test.log", keep_count=2)

        assert (tmp_path / "test.log.1").read_text() == "current"
        assert (tmp_path / "test.log.2").read_text() == "old-1"
        assert not (tmp_path / "test.log.3").exists()


class TestLoggingInitialization:
    """Tests for logging system initialization."""

    def test_initialize_with_platform_dir(self, platform_dir) -> None:
        """Test initialization writes to the platform directory."""
        initialize_logging(use_platform_dir=True)

        get_logger("skyport.test").info("Test message")
        shutdown_logging()

        assert "Test message" in (platform_dir / "skyport.log").read_text()

    def test_initialize_with_missing_config(self) -> None:
        with pytest.raises(LoggingError, match="Logging config file not found"):
            initialize_logging(config_path="/nonexistent/config.yaml")

    def test_initialize_with_broken_config(self, tmp_path) -> None:
        config_path = tmp_path / "logging.yaml"
        config_path.write_text("console: [unclosed\n")

        with pytest.raises(LoggingError, match="Failed to load logging config"):
            initialize_logging(config_path=config_path)

    def test_config_file_log_dir(self, tmp_path) -> None:
        """Test the configured directory is used outside platform mode."""
        log_dir = tmp_path / "custom"
        config_path = tmp_path / "logging.yaml"
        config_path.write_text(
            f"log_dir: {log_dir.as_posix()}\n"
            "console:\n"
            "  enabled: false\n"
            "combined_log:\n"
            "  filename: tower.log\n"
        )

        initialize_logging(config_path, use_platform_dir=False)
        get_logger("skyport.test").warning("Configured")
        shutdown_logging()

        assert "Configured" in (log_dir / "tower.log").read_text()

    def test_unknown_level_rejected(self, tmp_path) -> None:
        config_path = tmp_path / "logging.yaml"
        config_path.write_text(f"log_dir: {tmp_path.as_posix()}\nconsole:\n  level: LOUD\n")

        with pytest.raises(LoggingError, match="Unknown log level"):
            initialize_logging(config_path, use_platform_dir=False)


class TestLoggerFunctionality:
    """Tests for logger creation and usage."""

    def test_get_logger_caches_loggers(self, platform_dir) -> None:
        initialize_logging(use_platform_dir=True)

        logger1 = get_logger("skyport.cached")
        logger2 = get_logger("skyport.cached")

        assert isinstance(logger1, logging.Logger)
        assert logger1 is logger2

    def test_logger_writes_all_levels_to_file(self, platform_dir) -> None:
        initialize_logging(use_platform_dir=True)

        logger = get_logger("skyport.levels")
        logger.debug("Debug message")
        logger.error("Error message")
        shutdown_logging()

        content = (platform_dir / "skyport.log").read_text()
        assert "Debug message" in content
        assert "Error message" in content

    def test_component_level_and_dedicated_file(self, tmp_path) -> None:
        """Test per-component settings from the components section."""
        config_path = tmp_path / "logging.yaml"
        config_path.write_text(
            f"log_dir: {tmp_path.as_posix()}\n"
            "console:\n"
            "  enabled: false\n"
            "components:\n"
            "  skyport.tower:\n"
            "    level: WARNING\n"
            "    dedicated_file: true\n"
            "  skyport.silent:\n"
            "    enabled: false\n"
        )
        initialize_logging(config_path, use_platform_dir=False)

        tower = get_logger("skyport.tower")
        tower.info("Hidden")
        tower.warning("Shown")
        silent = get_logger("skyport.silent")
        shutdown_logging()

        assert tower.level == logging.WARNING
        assert silent.disabled
        dedicated = (tmp_path / "skyport.tower.log").read_text()
        assert "Shown" in dedicated
        assert "Hidden" not in dedicated

        # Leave the shared logger objects as other tests expect them
        tower.setLevel(logging.NOTSET)
        for handler in list(tower.handlers):
            tower.removeHandler(handler)
        silent.disabled = False

    def test_auto_initialize_on_first_logger(self, platform_dir) -> None:
        """Test that getting a logger initializes logging when needed."""
        shutdown_logging()

        logger = get_logger("skyport.auto")

        assert isinstance(logger, logging.Logger)
        assert (platform_dir / "skyport.log").exists()


class TestLogRotationIntegration:
    """Integration tests for log rotation on startup."""

    def test_startup_rotates_existing_log(self, platform_dir) -> None:
        """Test that initialization rotates the previous session's log."""
        initialize_logging(use_platform_dir=True)
        get_logger("skyport.test").info("First session")
        shutdown_logging()

        initialize_logging(use_platform_dir=True)
        get_logger("skyport.test").info("Second session")
        shutdown_logging()

        log_file = platform_dir / "skyport.log"
        assert "First session" in (platform_dir / "skyport.log.1").read_text()
        assert "Second session" in log_file.read_text()
        assert "First session" not in log_file.read_text()

    def test_multiple_sessions_keep_five_logs(self, platform_dir) -> None:
        """Test that only the 5 most recent old logs are kept."""
        for i in range(7):
            initialize_logging(use_platform_dir=True)
            get_logger("skyport.test").info("Session %d", i)
            shutdown_logging()

        assert len(list(platform_dir.glob("skyport.log*"))) == 6
        assert "Session 1" in (platform_dir / "skyport.log.5").read_text()
