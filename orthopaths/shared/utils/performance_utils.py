"""Timing and memory helpers."""
import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional

import psutil

logger = logging.getLogger(__name__)


@dataclass
class TimingResult:
    """Filled in when the timed block exits."""
    label: str
    elapsed_seconds: float = 0.0
    memory_delta_mb: float = 0.0


def memory_profiler() -> float:
    """Return resident set size of the current process in MB."""
    return psutil.Process().memory_info().rss / (1024 * 1024)


@contextmanager
def timing_context(label: str, log: Optional[logging.Logger] = None) -> Iterator[TimingResult]:
    """Time a block and log elapsed wall time and RSS change at DEBUG."""
    log = log or logger
    result = TimingResult(label=label)
    memory_before = memory_profiler()
    start = time.perf_counter()
    try:
        yield result
    finally:
        result.elapsed_seconds = time.perf_counter() - start
        result.memory_delta_mb = memory_profiler() - memory_before
        log.debug(f"{label}: {result.elapsed_seconds * 1000:.2f} ms, "
                  f"RSS delta {result.memory_delta_mb:+.2f} MB")
