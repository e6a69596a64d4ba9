# versecard/utils/timing.py
"""
Timing utilities for development and debugging.
"""
import time
import functools
from typing import Callable, Any, Optional

from ..logging_config import get_logger

logger = get_logger('timing')


class Timer:
    """
    Context manager for timing code blocks.

    Usage:
        with Timer("format verse", log_level="DEBUG"):
            ...
    """

    def __init__(self, name: str, log_level: str = "INFO"):
        self.name = name
        self.log_level = log_level.upper()
        self.start_time: Optional[float] = None
        self.end_time: Optional[float] = None

    def _log(self, message: str) -> None:
        log_func = getattr(logger, self.log_level.lower(), logger.info)
        log_func(message)

    def __enter__(self):
        self.start_time = time.perf_counter()
        self._log(f"⏱️  START: {self.name}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.end_time = time.perf_counter()
        elapsed_ms = (self.end_time - self.start_time) * 1000

        if exc_type is not None:
            logger.error(f"❌ FAILED: {self.name} (after {elapsed_ms:.1f}ms) - {exc_type.__name__}: {exc_val}")
        else:
            self._log(f"✅ DONE: {self.name} ({elapsed_ms:.1f}ms)")

        return False

    @property
    def elapsed(self) -> float:
        """Elapsed time in seconds."""
        if self.start_time is None:
            return 0.0
        end = self.end_time if self.end_time is not None else time.perf_counter()
        return end - self.start_time


def timed(name: Optional[str] = None, log_level: str = "DEBUG"):
    """
    Decorator for timing function execution.

    Args:
        name: Optional custom name for the operation
        log_level: Log level for timing messages (default: DEBUG)
    """
    def decorator(func: Callable) -> Callable:
        operation_name = name or func.__name__

        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            with Timer(operation_name, log_level):
                return func(*args, **kwargs)

        return wrapper
    return decorator
