import functools
import logging
from typing import Callable

from .._result import Result, is_failure


def log_failures(logger: logging.Logger, level: int = logging.WARNING):
    """Decorator to log the failures returned by a function.

    The result of the decorated function is returned unchanged. Failures are logged
    at the given level, successes at DEBUG level.
    """

    def decorator[**P, T, E](
        func: Callable[P, Result[T, E]]
    ) -> Callable[P, Result[T, E]]:
        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, E]:
            result = func(*args, **kwargs)
            if is_failure(result):
                logger.log(
                    level, "%s returned a failure: %r", func.__name__, result.error
                )
            else:
                logger.log(logging.DEBUG, "%s returned a success.", func.__name__)
            return result

        return wrapper

    return decorator
