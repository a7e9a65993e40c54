import inspect
import logging
from functools import wraps
from typing import Any, Callable, Mapping, Optional, TypeVar

from .envelope import ResponseEnvelope
from .envelope import build_envelope
from .helpers import error
from .logging_config import configure_logging
from .status import StatusCode

configure_logging()
logger = logging.getLogger(__name__)


class APIException(Exception):
    """Base exception for API errors, carrying a message and status code."""

    def __init__(
        self,
        message: str,
        code: int = StatusCode.INTERNAL_SERVER_ERROR,
        data: Optional[Mapping[str, Any]] = None,
    ):
        super().__init__(message)
        self.code = int(code)
        self.message = message
        self.data = data


def exception_to_envelope(exc: BaseException) -> ResponseEnvelope:
    """Convert an exception into a response envelope.

    :class:`APIException` keeps its code, message and payload. Anything else
    goes through :func:`~status_responses.helpers.error`, so its details are
    logged but never returned.
    """
    if isinstance(exc, APIException):
        logger.error(f"APIException: {exc.message} (code={exc.code})")
        return build_envelope(exc.code, exc.message, exc.data)
    return error(exc)


F = TypeVar("F", bound=Callable[..., Any])


def handle_exceptions(func: F) -> F:
    """Decorator turning exceptions raised by ``func`` into envelopes.

    Works for plain functions and coroutine functions. Return values are
    passed through untouched.
    """

    if inspect.iscoroutinefunction(func):

        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            logger.debug(f"Executing {func.__name__} with args={args} kwargs={kwargs}")
            try:
                result = await func(*args, **kwargs)
            except Exception as e:
                return exception_to_envelope(e)
            logger.debug(f"{func.__name__} completed successfully.")
            return result

        return async_wrapper  # type: ignore

    @wraps(func)
    def wrapper(*args, **kwargs):
        logger.debug(f"Executing {func.__name__} with args={args} kwargs={kwargs}")
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            return exception_to_envelope(e)
        logger.debug(f"{func.__name__} completed successfully.")
        return result

    return wrapper  # type: ignore


__all__ = ["APIException", "exception_to_envelope", "handle_exceptions"]
