"""
Translation of domain exceptions into HTTP errors.

Endpoints are decorated with ``handle_service_errors``; any
``SafeRescueError`` raised below them is logged and re-raised as an
``HTTPException`` whose status comes from the exception class and
whose ``detail`` is the exception message.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException

from .exceptions import SafeRescueError

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def handle_service_errors(func: F) -> F:
    """Decorator mapping ``SafeRescueError`` subclasses to ``HTTPException``."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except SafeRescueError as exc:
            if exc.status_code >= 500:
                logger.error("%s failed: %s", func.__name__, exc)
            else:
                logger.warning("%s rejected: %s", func.__name__, exc)
            raise HTTPException(status_code=exc.status_code, detail=exc.message) from exc

    return wrapper  # type: ignore[return-value]
