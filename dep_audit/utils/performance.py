"""Timing helpers for dep_audit scans."""

import functools
import logging
import os
import time
from typing import Any, Callable, TypeVar

F = TypeVar('F', bound=Callable[..., Any])

BENCHMARK_ENV_VAR = "DEP_AUDIT_VERBOSE_BENCHMARK"


def benchmark(func: F) -> F:
    """Simple benchmark decorator.

    Args:
        func: Function to benchmark

    Returns:
        Wrapped function with timing
    """
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        start_time = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            # Only report if explicitly requested
            if os.environ.get(BENCHMARK_ENV_VAR):
                elapsed = time.perf_counter() - start_time
                logging.getLogger("Performance").info(
                    "%s took %.4f seconds", func.__qualname__, elapsed
                )
    return wrapper  # type: ignore[return-value]
