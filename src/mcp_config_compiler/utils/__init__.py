"""Logging and timing helpers."""
from .logging_config import (
    setup_logging,
    timed,
    timed_section,
    timed_section_sync,
    perf_logger,
    PerfStats,
    global_stats,
)

__all__ = [
    "setup_logging",
    "timed",
    "timed_section",
    "timed_section_sync",
    "perf_logger",
    "PerfStats",
    "global_stats",
]
