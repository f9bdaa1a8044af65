"""Tests for speedradar._logging — file output and call tracing."""

from __future__ import annotations

import logging
import os

import pytest

from speedradar._logging import LOGGER_NAME, configure_file_logging, log_call


class _FakeTarget:
    """Minimal class to test the tracing decorator."""

    @log_call
    def report(self, speed: float) -> str:
        return f"{speed} km/h"

    @log_call
    def report_failing(self) -> None:
        raise RuntimeError("server down")


@pytest.fixture(autouse=True)
def _reset_file_handler():
    """Detach any file handler installed by a test."""
    import speedradar._logging as mod

    logger = logging.getLogger(LOGGER_NAME)
    old_level = logger.level
    old_handler = mod._file_handler
    mod._file_handler = None

    yield

    if mod._file_handler is not None:
        mod._file_handler.close()
        logger.removeHandler(mod._file_handler)
    mod._file_handler = old_handler
    logger.setLevel(old_level)


class TestConfigureFileLogging:
    def test_default_path_beside_package(self) -> None:
        import speedradar
        import speedradar._logging as mod

        package_parent = os.path.dirname(os.path.dirname(os.path.abspath(speedradar.__file__)))
        assert os.path.dirname(os.path.abspath(mod._LOG_FILE)) == os.path.join(package_parent, "logs")
        assert os.path.basename(mod._LOG_FILE) == "radar.log"

    def test_writes_records(self, tmp_path) -> None:
        log_file = tmp_path / "radar.log"
        handler = configure_file_logging(str(log_file))
        logging.getLogger("speedradar.sensor").info("Measured speed: %s km/h", 120.0)
        handler.flush()

        content = log_file.read_text()
        assert "| INFO | Measured speed: 120.0 km/h" in content

    def test_creates_log_directory(self, tmp_path) -> None:
        new_dir = tmp_path / "nested" / "logs"
        configure_file_logging(str(new_dir / "radar.log"))
        assert new_dir.exists()
        assert (new_dir / "radar.log").exists()

    def test_handler_installed_once(self, tmp_path) -> None:
        first = configure_file_logging(str(tmp_path / "a.log"))
        second = configure_file_logging(str(tmp_path / "b.log"))
        assert first is second
        handlers = [h for h in logging.getLogger(LOGGER_NAME).handlers if h is first]
        assert len(handlers) == 1


class TestLogCall:
    def test_returns_result(self) -> None:
        assert _FakeTarget().report(120.0) == "120.0 km/h"

    def test_logs_call_and_ok(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="speedradar.calls"):
            _FakeTarget().report(120.0)
        assert "CALL: _FakeTarget.report(120.0)" in caplog.text
        assert "OK: _FakeTarget.report" in caplog.text

    def test_logs_failure_and_reraises(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="speedradar.calls"):
            with pytest.raises(RuntimeError, match="server down"):
                _FakeTarget().report_failing()
        assert "FAIL: _FakeTarget.report_failing -> RuntimeError: server down" in caplog.text

    def test_preserves_function_name(self) -> None:
        assert _FakeTarget().report.__name__ == "report"
