"""Utility decorators for activity instrumentation."""
import functools
import time
from typing import Callable
from activity_system.utils.logging import get_logger

logger = get_logger(__name__)


def log_execution(name: str = None, log_result: bool = False):
    """
    Decorator to log function execution with timing.

    Args:
        name: Label used in log records (defaults to the function name)
        log_result: Whether to log the function result

    Example:
        @log_execution("grade_evaluator")
        def run(self):
            ...
    """
    def decorator(func: Callable):
        label = name or func.__name__

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            start_time = time.perf_counter()
            logger.info(f"Starting {label}", extra={"activity": label})

            try:
                result = func(*args, **kwargs)
            except EOFError:
                # input closed: the session is ending, not failing
                logger.info(f"Input closed during {label}", extra={"activity": label})
                raise
            except Exception as e:
                execution_time = (time.perf_counter() - start_time) * 1000
                logger.error(
                    f"Failed {label}",
                    extra={"activity": label, "execution_time_ms": round(execution_time, 2), "error": str(e)}
                )
                raise

            execution_time = (time.perf_counter() - start_time) * 1000
            log_extra = {"activity": label, "execution_time_ms": round(execution_time, 2)}
            if log_result:
                log_extra["result"] = str(result)[:100]

            logger.info(f"Completed {label}", extra=log_extra)
            return result

        return wrapper

    return decorator
