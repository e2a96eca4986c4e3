from __future__ import annotations

import inspect
from typing import (
    Any,
    Awaitable,
    Callable,
    Generic,
    NoReturn,
    TypeVar,
    Union,
)

from carton.core._enums import ResultVariant
from carton.core._logging import safe_log
from carton.core.exceptions import InvalidStateError
from carton.option import Option
from carton.registry.config_registry import ConfigRegistry
from carton.utils._utils import NOTHING, _Nothing


__all__: list[str] = [
    "Result",
]

T = TypeVar("T")   # success type
U = TypeVar("U")   # success type after transform
E = TypeVar("E")   # error type
F = TypeVar("F")   # error type after transform
R = TypeVar("R")   # handler return type

_DEFAULT_CATCH: tuple[type[Exception], ...] = (Exception,)


class Result(Generic[T, E]):
    """
    Either a success value (Ok) or a failure cause (Err).

    Like ``Option``, the payload can be taken out exactly once: after
    ``take_value()`` or ``take_cause()`` succeeds the container is DRAINED,
    which reads as a failure whose cause can no longer be recovered.

    Example:
        >>> res = Result.from_throwing(lambda: int("10"))
        >>> res.is_ok
        True
        >>> res.take_value()
        10
        >>> res.is_drained
        True

    The drained transition mutates the instance, so a Result must not be
    read from several threads without external locking.
    """

    __slots__ = ("_tag", "_payload")

    # consuming reads mutate the instance
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, tag: ResultVariant, payload: Any = NOTHING) -> None:
        tag = ResultVariant(tag)
        if tag is ResultVariant.DRAINED and payload is not NOTHING:
            raise ValueError("A drained Result carries no payload")
        self._tag: ResultVariant = tag
        self._payload: T | E | _Nothing = payload

    @classmethod
    def ok(cls, value: T) -> Result[T, Any]:
        return cls(ResultVariant.OK, value)

    @classmethod
    def err(cls, cause: E) -> Result[Any, E]:
        return cls(ResultVariant.ERR, cause)

    @classmethod
    def from_throwing(
        cls,
        fn: Callable[[], T],
        catch: tuple[type[Exception], ...] = _DEFAULT_CATCH,
    ) -> Result[T, Exception]:
        """
        Call ``fn`` and turn its outcome into a Result.

        Args:
            fn: Zero-argument callable that may raise.
            catch: Exception classes converted into Err. Anything else propagates.

        Returns:
            Ok(return value), or Err(the raised exception, unchanged).
        """
        try:
            value: T = fn()
        except catch as exc:
            _log_capture("from_throwing", fn, exc)
            return cls.err(exc)
        return cls.ok(value)

    @classmethod
    async def from_throwing_async(
        cls,
        fn: Callable[[], Awaitable[T]] | Awaitable[T],
        catch: tuple[type[Exception], ...] = _DEFAULT_CATCH,
    ) -> Result[T, Exception]:
        """
        Await an asynchronous computation and turn its outcome into a Result.

        ``fn`` may be a zero-argument callable returning an awaitable, or the
        awaitable itself. Cancellation is never converted.
        """
        try:
            awaitable = fn if inspect.isawaitable(fn) else fn()
            value: T = await awaitable  # type: ignore[misc]
        except catch as exc:
            _log_capture("from_throwing_async", fn, exc)
            return cls.err(exc)
        return cls.ok(value)

    @property
    def variant(self) -> ResultVariant:
        return self._tag

    @property
    def is_ok(self) -> bool:
        return self._tag is ResultVariant.OK

    @property
    def is_err(self) -> bool:
        """True for Err, and for a drained Result (a failure with no recoverable cause)."""
        return self._tag is not ResultVariant.OK

    @property
    def is_drained(self) -> bool:
        return self._tag is ResultVariant.DRAINED

    @property
    def peek(self) -> T | E | _Nothing:
        """The raw payload (value or cause), ``NOTHING`` once drained."""
        return self._payload

    @property
    def as_ok_option(self) -> Option[T]:
        """Present(value) if Ok, absent otherwise. Does not consume."""
        if self._tag is ResultVariant.OK:
            return Option.wrap(self._payload)  # type: ignore[arg-type]
        return Option.absent()

    @property
    def as_err_option(self) -> Option[E]:
        """Present(cause) if Err, absent otherwise. Does not consume."""
        if self._tag is ResultVariant.ERR:
            return Option.wrap(self._payload)  # type: ignore[arg-type]
        return Option.absent()

    def take_value(self) -> T:
        """
        Hand the success value over and drain the Result.

        Raises:
            InvalidStateError: If the Result is Err or already drained.
        """
        if self._tag is not ResultVariant.OK:
            self._raise_wrong_channel("take_value()")
        return self._drain()

    def take_cause(self) -> E:
        """
        Hand the failure cause over and drain the Result.

        Raises:
            InvalidStateError: If the Result is Ok or already drained.
        """
        if self._tag is not ResultVariant.ERR:
            self._raise_wrong_channel("take_cause()")
        return self._drain()

    def expect(self, message: str) -> T:
        """Same as ``take_value()``, raising ``InvalidStateError(message)`` on failure."""
        if self._tag is not ResultVariant.OK:
            raise InvalidStateError(f"{message}: {self._describe()}")
        return self._drain()

    def _drain(self) -> Any:
        payload = self._payload
        previous: ResultVariant = self._tag
        self._tag = ResultVariant.DRAINED
        self._payload = NOTHING
        if ConfigRegistry.get().log_consumption:
            safe_log(
                ConfigRegistry.logger(),
                'debug',
                f"Result drained from {previous.value}, handed out {payload!r}",
            )
        return payload

    def _describe(self) -> str:
        if self._tag is ResultVariant.DRAINED:
            return "Result was already drained"
        return f"Result is {self._tag.value.capitalize()}({self._payload!r})"

    def _raise_wrong_channel(self, operation: str) -> NoReturn:
        raise InvalidStateError(f"{operation} called but {self._describe()}")

    def unwrap_or(self, default: U) -> Union[T, U]:
        """The success value if Ok, else ``default``. Does not consume."""
        if self._tag is ResultVariant.OK:
            return self._payload  # type: ignore[return-value]
        return default

    def unwrap_or_else(self, fn: Callable[[E], U]) -> Union[T, U]:
        """
        The success value if Ok, else ``fn(cause)``. Does not consume.

        Raises:
            InvalidStateError: If the Result is drained.
        """
        if self._tag is ResultVariant.OK:
            return self._payload  # type: ignore[return-value]
        if self._tag is ResultVariant.DRAINED:
            self._raise_wrong_channel("unwrap_or_else()")
        return fn(self._payload)  # type: ignore[arg-type]

    def map(self, fn: Callable[[T], U]) -> Result[U, E]:
        """Transform the success value; Err and drained Results pass through."""
        if self._tag is ResultVariant.OK:
            return Result.ok(fn(self._payload))  # type: ignore[arg-type]
        return self  # type: ignore[return-value]

    def map_err(self, fn: Callable[[E], F]) -> Result[T, F]:
        """Transform the failure cause; Ok and drained Results pass through."""
        if self._tag is ResultVariant.ERR:
            return Result.err(fn(self._payload))  # type: ignore[arg-type]
        return self  # type: ignore[return-value]

    def and_then(self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Chain computations that may fail (aka bind/flatMap)."""
        if self._tag is ResultVariant.OK:
            return fn(self._payload)  # type: ignore[arg-type]
        return self  # type: ignore[return-value]

    def or_else(self, fn: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Handle error with a fallback that may also fail."""
        if self._tag is ResultVariant.ERR:
            return fn(self._payload)  # type: ignore[arg-type]
        return self  # type: ignore[return-value]

    def match(self, *, on_ok: Callable[[T], R], on_err: Callable[[E], R]) -> R:
        """
        Run exactly one handler, chosen by the current tag, and return its result.

        Raises:
            InvalidStateError: If the Result is drained; no handler can be given a payload.
        """
        if self._tag is ResultVariant.OK:
            return on_ok(self._payload)  # type: ignore[arg-type]
        if self._tag is ResultVariant.ERR:
            return on_err(self._payload)  # type: ignore[arg-type]
        self._raise_wrong_channel("match()")

    def or_(self, other: Result[T, F]) -> Result[T, F]:
        """This Result if Ok, otherwise ``other``."""
        return self if self._tag is ResultVariant.OK else other  # type: ignore[return-value]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        return self._tag is other._tag and self._payload == other._payload

    def __repr__(self) -> str:
        if self._tag is ResultVariant.DRAINED:
            return "Result.drained()"
        return f"Result.{self._tag.value}({self._payload!r})"


def _log_capture(operation: str, fn: Any, exc: Exception) -> None:
    safe_log(
        ConfigRegistry.logger(),
        'debug',
        f"Result.{operation}: {fn!r} raised {type(exc).__name__}: {exc}",
    )
