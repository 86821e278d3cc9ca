"""
Timing utilities for performance measurement.
"""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional

from ..logger import log_timing


@dataclass
class TimingResult:
    """Result of a timed operation."""
    name: str
    duration_sec: float
    success: bool = True
    error: Optional[str] = None

    @property
    def duration_ms(self) -> float:
        return self.duration_sec * 1000

    def __str__(self) -> str:
        if self.duration_sec < 1:
            return f"{self.name}: {self.duration_ms:.1f}ms"
        elif self.duration_sec < 60:
            return f"{self.name}: {self.duration_sec:.2f}s"
        else:
            minutes = int(self.duration_sec // 60)
            seconds = self.duration_sec % 60
            return f"{self.name}: {minutes}m {seconds:.1f}s"


@contextmanager
def timed_operation(
    name: str,
    logger: Optional[logging.Logger] = None,
) -> Iterator[TimingResult]:
    """
    Context manager for timing operations.

    Usage:
        with timed_operation("Index build", logger) as timing:
            # do work
        print(f"Took {timing.duration_ms:.1f}ms")

    Args:
        name: Name of the operation (for logging)
        logger: Optional logger; short operations log at DEBUG, long at INFO

    Yields:
        TimingResult that will be populated on exit
    """
    result = TimingResult(name=name, duration_sec=0.0)
    start = time.perf_counter()

    try:
        yield result
        result.success = True
    except Exception as e:
        result.success = False
        result.error = str(e)
        raise
    finally:
        result.duration_sec = time.perf_counter() - start

        if logger:
            if result.success:
                log_timing(logger, name, result.duration_sec)
            else:
                logger.warning(f"{result} (failed: {result.error})")
