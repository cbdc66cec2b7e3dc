"""Tests for logging and timing helpers."""
import logging

import pytest

from mcp_config_compiler.utils import (
    PerfStats,
    global_stats,
    setup_logging,
    timed,
    timed_section,
    timed_section_sync,
)
from mcp_config_compiler.utils.logging_config import PACKAGE_LOGGER


@pytest.fixture(autouse=True)
def clean_stats():
    global_stats.clear()
    yield
    global_stats.clear()


class TestTimed:
    """Tests for the timed decorator and sections."""

    def test_sync_function(self):
        """Sync calls are recorded and return their value."""
        @timed("unit_sync")
        def add(a, b):
            return a + b

        assert add(1, 2) == 3
        assert global_stats.count("unit_sync") == 1

    @pytest.mark.asyncio
    async def test_async_function(self):
        """Async calls are recorded and return their value."""
        @timed("unit_async")
        async def double(x):
            return x * 2

        assert await double(4) == 8
        assert global_stats.count("unit_async") == 1

    def test_exception_propagates(self):
        """Failures are recorded and re-raised."""
        @timed("unit_fail")
        def boom():
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            boom()
        assert global_stats.count("unit_fail") == 1

    def test_sync_section(self):
        """Sync sections are recorded."""
        with timed_section_sync("unit_section", device_id="core-1", title="ACL"):
            pass

        assert global_stats.count("unit_section") == 1

    @pytest.mark.asyncio
    async def test_async_section_reraises(self):
        """Async sections record failures and re-raise."""
        with pytest.raises(ValueError):
            async with timed_section("unit_async_section"):
                raise ValueError("bad")

        assert global_stats.count("unit_async_section") == 1


class TestPerfStats:
    """Tests for PerfStats."""

    def test_summary(self):
        """Summary lists each operation with its count."""
        stats = PerfStats()
        stats.record("compile_device", 2.0)
        stats.record("compile_device", 4.0)

        summary = stats.summary()

        assert "compile_device" in summary
        assert "count=   2" in summary
        assert "avg=    3.00ms" in summary

    def test_clear(self):
        """Clear drops all data."""
        stats = PerfStats()
        stats.record("x", 1.0)

        stats.clear()

        assert stats.count("x") == 0


class TestSetupLogging:
    """Tests for setup_logging."""

    @pytest.fixture
    def log_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("CLIFORGE_LOG_FILE", str(tmp_path / "cliforge.log"))
        yield tmp_path
        for name in ("cliforge", "cliforge.perf", PACKAGE_LOGGER):
            logger = logging.getLogger(name)
            for handler in list(logger.handlers):
                if getattr(handler, "_cliforge_handler", False):
                    logger.removeHandler(handler)
                    handler.close()

    def test_idempotent(self, log_env):
        """Calling twice does not duplicate handlers."""
        setup_logging()
        count = len(logging.getLogger(PACKAGE_LOGGER).handlers)

        setup_logging()

        assert len(logging.getLogger(PACKAGE_LOGGER).handlers) == count
        assert (log_env / "cliforge.log").exists()
        assert (log_env / "cliforge-perf.log").exists()
