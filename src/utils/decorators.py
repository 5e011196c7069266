"""Utility decorators for common functionality."""

import functools
import time
from typing import Callable, Any
from utils.logging import get_logger

logger = get_logger(__name__)


def timer(func: Callable) -> Callable:
    """Decorator to time function execution and log results.

    The duration is logged even when the call raises.
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs) -> Any:
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed = time.perf_counter() - start
            logger.debug(f"{func.__qualname__} took {elapsed:.4f} seconds")
    return wrapper
