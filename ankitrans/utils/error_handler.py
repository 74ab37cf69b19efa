"""Error handling helpers for extraction rules and batch lookups"""

import logging
from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar, cast

from ..exceptions import AnkiTransError

T = TypeVar("T")


def handle_errors(
    default_return: Any = None,
    log_level: int = logging.ERROR,
    reraise_on: type[Exception] | tuple[type[Exception], ...] | None = None,
    operation_name: str | None = None,
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """
    Decorator turning an exception into a logged ``default_return``.

    Extraction strategies are wrapped with it so markup of an unexpected
    shape becomes "no result" instead of an error.

    Args:
        default_return: Value to return when an error occurs
        log_level: Logging level for the failure message
        reraise_on: Exception type(s) to propagate unchanged
        operation_name: Name used in log messages (defaults to function name)
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        op_name = operation_name or func.__name__
        logger = logging.getLogger(func.__module__)

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            try:
                return func(*args, **kwargs)
            except Exception as e:
                if reraise_on and isinstance(e, reraise_on):
                    raise

                if isinstance(e, AnkiTransError):
                    logger.log(log_level, f"{op_name} failed: {e.message}")
                else:
                    # Tracebacks only for failures that are worth a look
                    logger.log(
                        log_level,
                        f"{op_name} failed with {type(e).__name__}: {e}",
                        exc_info=log_level >= logging.ERROR,
                    )
                return cast(T, default_return)

        return wrapper

    return decorator


class ErrorCollector:
    """Collects per-word failures of a batch lookup"""

    def __init__(self) -> None:
        self.failures: list[tuple[str, Exception]] = []

    def add_error(self, word: str, error: Exception) -> None:
        self.failures.append((word, error))

    def has_errors(self) -> bool:
        return bool(self.failures)

    def log_all(self, logger: logging.Logger) -> None:
        """Expected failures at WARNING, anything else at ERROR"""
        for word, error in self.failures:
            if isinstance(error, AnkiTransError):
                logger.warning(f"{word}: {error.message}")
            else:
                logger.error(f"{word}: unexpected {type(error).__name__}: {error}")
