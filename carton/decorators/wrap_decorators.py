from __future__ import annotations

import inspect
from functools import wraps
from logging import Logger
from typing import Any, Callable, Optional

from carton.core._logging import get_logger, safe_log
from carton.option import Option
from carton.result import Result

logger: Logger = get_logger()


__all__ = [
    "returns_result",
    "returns_option",
]


def returns_result(
    *,
    catch: tuple[type[Exception], ...] = (Exception,),
    logger: Optional[Logger] = logger,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """
    Make a function return a Result instead of raising.

    Parameters:
        catch: Exception classes converted into Err; anything else propagates.
        logger: Logger that receives a debug record for every captured exception.

    Coroutine functions get an async wrapper built on ``Result.from_throwing_async``.

    Example:
        >>> @returns_result(catch=(ValueError,))
        ... def parse(text: str) -> int:
        ...     return int(text)
        >>> parse("x").is_err
        True
    """

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        if inspect.iscoroutinefunction(func):
            @wraps(func)
            async def async_wrapper(*args, **kwargs) -> Result[Any, Exception]:
                result: Result[Any, Exception] = await Result.from_throwing_async(
                    lambda: func(*args, **kwargs), catch
                )
                if result.is_err:
                    safe_log(logger, 'debug', f"@returns_result: {func.__qualname__} failed with {result.peek!r}")
                return result

            return async_wrapper

        @wraps(func)
        def wrapper(*args, **kwargs) -> Result[Any, Exception]:
            result: Result[Any, Exception] = Result.from_throwing(
                lambda: func(*args, **kwargs), catch
            )
            if result.is_err:
                safe_log(logger, 'debug', f"@returns_result: {func.__qualname__} failed with {result.peek!r}")
            return result

        return wrapper
    return decorator


def returns_option(
    *,
    swallow_errors: bool = False,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """
    Make a function return an Option around its return value.

    Parameters:
        swallow_errors: If True, an exception raised by the function gives an
            absent Option instead of propagating.
    """

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        if inspect.iscoroutinefunction(func):
            @wraps(func)
            async def async_wrapper(*args, **kwargs) -> Option[Any]:
                if swallow_errors:
                    return await Option.from_async(lambda: func(*args, **kwargs))
                return Option.wrap(await func(*args, **kwargs))

            return async_wrapper

        @wraps(func)
        def wrapper(*args, **kwargs) -> Option[Any]:
            if swallow_errors:
                return Option.from_callable(lambda: func(*args, **kwargs))
            return Option.wrap(func(*args, **kwargs))

        return wrapper
    return decorator
