"""Logging configuration for the cliforge compiler, CLI and MCP server.

Provides:
- Rotating file log plus console output
- A separate performance logger with its own rotating file
- Timing decorator and context managers for compile sections

Environment Variables:
    CLIFORGE_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR (default: INFO)
    CLIFORGE_LOG_FILE: Path to log file (default: ~/.cliforge/cliforge.log)
    CLIFORGE_LOG_MAX_SIZE: Max log file size in MB (default: 10)
    CLIFORGE_LOG_BACKUPS: Number of backup files to keep (default: 5)

Usage:
    from mcp_config_compiler.utils.logging_config import setup_logging, timed

    setup_logging()  # Safe to call more than once

    @timed("compile_device")
    def compile_node(node, connections):
        ...

    with timed_section_sync("section", device_id="core-1", feature="ACL"):
        ...
"""
import asyncio
import functools
import logging
import os
import time
from contextlib import asynccontextmanager, contextmanager
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Callable, Optional

# Performance logger - separate from main logger for easy filtering
perf_logger = logging.getLogger("cliforge.perf")
main_logger = logging.getLogger("cliforge")

PACKAGE_LOGGER = "mcp_config_compiler"
_HANDLER_TAG = "_cliforge_handler"


def get_log_level() -> int:
    """Get log level from environment."""
    level_str = os.environ.get("CLIFORGE_LOG_LEVEL", "INFO").upper()
    return getattr(logging, level_str, logging.INFO)


def get_log_file() -> Path:
    """Get log file path from environment."""
    default_path = Path.home() / ".cliforge" / "cliforge.log"
    return Path(os.environ.get("CLIFORGE_LOG_FILE", str(default_path)))


def _tag(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _HANDLER_TAG, True)
    return handler


def _has_handlers(logger: logging.Logger) -> bool:
    return any(getattr(h, _HANDLER_TAG, False) for h in logger.handlers)


def setup_logging() -> None:
    """Configure logging for the application.

    Sets up:
    - Console handler (respects CLIFORGE_LOG_LEVEL)
    - Rotating file handler at DEBUG
    - Performance logger writing to cliforge-perf.log

    Calling it again leaves the existing handlers in place.
    """
    if _has_handlers(main_logger):
        return

    log_level = get_log_level()
    log_file = get_log_file()
    max_bytes = int(os.environ.get("CLIFORGE_LOG_MAX_SIZE", "10")) * 1024 * 1024
    backup_count = int(os.environ.get("CLIFORGE_LOG_BACKUPS", "5"))

    log_file.parent.mkdir(parents=True, exist_ok=True)

    main_format = logging.Formatter(
        "%(asctime)s.%(msecs)03d | %(name)-32s | %(levelname)-7s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    perf_format = logging.Formatter(
        "%(asctime)s.%(msecs)03d | PERF | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    console_handler = _tag(logging.StreamHandler())
    console_handler.setLevel(log_level)
    console_handler.setFormatter(main_format)

    file_handler = _tag(RotatingFileHandler(
        log_file, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
    ))
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(main_format)

    perf_log_file = log_file.parent / "cliforge-perf.log"
    perf_handler = _tag(RotatingFileHandler(
        perf_log_file, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
    ))
    perf_handler.setLevel(logging.DEBUG)
    perf_handler.setFormatter(perf_format)

    # Package modules log under their own names; route them to the same handlers
    for name in ("cliforge", PACKAGE_LOGGER):
        logger = logging.getLogger(name)
        logger.setLevel(logging.DEBUG)
        logger.addHandler(console_handler)
        logger.addHandler(file_handler)

    perf_logger.setLevel(logging.DEBUG)
    perf_logger.addHandler(perf_handler)
    perf_logger.propagate = False

    main_logger.info(f"Logging initialized: level={logging.getLevelName(log_level)}, file={log_file}")
    perf_logger.info(f"Performance logging to: {perf_log_file}")


def _report(operation: str, device_id: Optional[str], start: float, error: Optional[Exception] = None,
            extra: Optional[dict] = None) -> None:
    elapsed = (time.perf_counter() - start) * 1000
    global_stats.record(operation, elapsed)
    status = "OK" if error is None else f"FAIL: {error}"
    msg = f"{operation:20s} | {device_id or 'N/A':15s} | {elapsed:8.2f}ms | {status}"
    if extra:
        msg += " | " + " | ".join(f"{k}={v}" for k, v in extra.items())
    if error is None:
        perf_logger.info(msg)
    else:
        perf_logger.warning(msg)


def _device_of(args: tuple) -> Optional[str]:
    # The first argument is usually a Node (id) or a holder with device_id
    if not args:
        return None
    first = args[0]
    return getattr(first, "device_id", None) or getattr(first, "id", None)


def timed(operation: str, device_id: Optional[str] = None):
    """Decorator to log execution time of sync/async functions.

    Args:
        operation: Name of the operation (e.g., "compile_device", "translate")
        device_id: Optional device identifier (otherwise taken from the first argument)
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        async def async_wrapper(*args, **kwargs) -> Any:
            dev_id = device_id or _device_of(args)
            start = time.perf_counter()
            try:
                result = await func(*args, **kwargs)
            except Exception as e:
                _report(operation, dev_id, start, e)
                raise
            _report(operation, dev_id, start)
            return result

        @functools.wraps(func)
        def sync_wrapper(*args, **kwargs) -> Any:
            dev_id = device_id or _device_of(args)
            start = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                _report(operation, dev_id, start, e)
                raise
            _report(operation, dev_id, start)
            return result

        if asyncio.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator


@asynccontextmanager
async def timed_section(operation: str, device_id: Optional[str] = None, **extra):
    """Async context manager for timing code sections.

    Usage:
        async with timed_section("compile_device", device_id="core-1"):
            ...
    """
    start = time.perf_counter()
    try:
        yield
    except Exception as e:
        _report(operation, device_id, start, e, extra)
        raise
    _report(operation, device_id, start, extra=extra)


@contextmanager
def timed_section_sync(operation: str, device_id: Optional[str] = None, **extra):
    """Sync context manager for timing code sections."""
    start = time.perf_counter()
    try:
        yield
    except Exception as e:
        _report(operation, device_id, start, e, extra)
        raise
    _report(operation, device_id, start, extra=extra)


class PerfStats:
    """Collect and report timing statistics per operation.

    Usage:
        stats = PerfStats()
        stats.record("section", 1.5)
        print(stats.summary())
    """

    def __init__(self):
        self._data: dict[str, list[float]] = {}

    def record(self, operation: str, duration_ms: float) -> None:
        """Record a timing measurement."""
        self._data.setdefault(operation, []).append(duration_ms)

    def count(self, operation: str) -> int:
        return len(self._data.get(operation, []))

    def summary(self) -> str:
        """Generate summary statistics."""
        lines = ["Performance Summary", "=" * 60]
        for op, times in sorted(self._data.items()):
            if not times:
                continue
            count = len(times)
            avg = sum(times) / count
            lines.append(
                f"{op:20s} | count={count:4d} | "
                f"avg={avg:8.2f}ms | min={min(times):8.2f}ms | max={max(times):8.2f}ms"
            )
        return "\n".join(lines)

    def clear(self) -> None:
        """Clear all recorded data."""
        self._data.clear()


# Global stats instance for convenience
global_stats = PerfStats()
