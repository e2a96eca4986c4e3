from __future__ import annotations

from typing import (
    TYPE_CHECKING,
    Any,
    Awaitable,
    Callable,
    Generic,
    Iterator,
    TypeVar,
    Union,
)

from carton.core._enums import OptionVariant
from carton.core._logging import safe_log
from carton.core.exceptions import EmptyAccessError
from carton.registry.config_registry import ConfigRegistry
from carton.utils._utils import NOTHING, _Nothing, is_absent_value

if TYPE_CHECKING:
    from carton.result import Result


__all__: list[str] = [
    "Option",
]

T = TypeVar("T")   # contained type
U = TypeVar("U")   # contained type after transform
E = TypeVar("E")   # cause type for conversions
R = TypeVar("R")   # handler return type


class Option(Generic[T]):
    """
    A value that may or may not be present.

    The container is a tag (``OptionVariant``) plus one payload slot. Reading
    the value with ``take_value()`` or ``expect()`` hands it over to the caller
    and leaves the container absent, so the same instance cannot be taken from
    twice. Every other accessor (``peek``, ``unwrap_or``, ``map``, ``match``...)
    only looks at the payload.

    Example:
        >>> opt = Option.wrap(3)
        >>> opt.map(lambda n: n + 1).take_value()
        4
        >>> opt.take_value()
        3
        >>> opt.is_absent
        True

    Containers are not safe to take from concurrently; the consuming read
    mutates the instance.
    """

    __slots__ = ("_tag", "_value")

    # consuming reads mutate the instance
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, tag: OptionVariant, value: Any = NOTHING) -> None:
        tag = OptionVariant(tag)
        if tag is OptionVariant.PRESENT and is_absent_value(value):
            raise ValueError(
                f"Cannot build a present Option around {value!r}; use Option.wrap() or Option.absent()"
            )
        if tag is OptionVariant.ABSENT and value is not NOTHING:
            raise ValueError("An absent Option carries no value")
        self._tag: OptionVariant = tag
        self._value: T | _Nothing = value

    @classmethod
    def wrap(cls, value: T | None) -> Option[T]:
        """
        Wrap a raw value.

        ``None`` and ``NOTHING`` (and, under ``AbsencePolicy.FALSY``, any falsy
        value) produce an absent Option; anything else a present one.
        """
        if is_absent_value(value, ConfigRegistry.get().absence_policy):
            return cls.absent()
        return cls(OptionVariant.PRESENT, value)

    @classmethod
    def absent(cls) -> Option[Any]:
        """Return a new absent Option."""
        return cls(OptionVariant.ABSENT)

    @classmethod
    def from_callable(cls, fn: Callable[[], T | None]) -> Option[T]:
        """
        Run ``fn`` and wrap what it returns.

        An exception raised by ``fn`` gives an absent Option.
        """
        try:
            value = fn()
        except Exception as exc:
            safe_log(
                ConfigRegistry.logger(),
                'debug',
                f"Option.from_callable: {fn!r} raised {exc!r}, returning absent",
            )
            return cls.absent()
        return cls.wrap(value)

    @classmethod
    async def from_async(cls, fn: Callable[[], Awaitable[T | None]]) -> Option[T]:
        """Await ``fn()`` and wrap the outcome, like ``from_callable``."""
        try:
            value = await fn()
        except Exception as exc:
            safe_log(
                ConfigRegistry.logger(),
                'debug',
                f"Option.from_async: {fn!r} raised {exc!r}, returning absent",
            )
            return cls.absent()
        return cls.wrap(value)

    @property
    def variant(self) -> OptionVariant:
        return self._tag

    @property
    def is_present(self) -> bool:
        return self._tag is OptionVariant.PRESENT

    @property
    def is_absent(self) -> bool:
        return self._tag is OptionVariant.ABSENT

    @property
    def peek(self) -> T | _Nothing:
        """The payload, or ``NOTHING`` when absent. Never changes the container."""
        return self._value

    def take_value(self) -> T:
        """
        Hand the value over to the caller and leave this Option absent.

        Raises:
            EmptyAccessError: If the Option is absent, including when the
                value was already taken.
        """
        return self._take("take_value() called on an absent Option")

    def expect(self, message: str) -> T:
        """Same as ``take_value()``, raising ``EmptyAccessError(message)`` when absent."""
        return self._take(message)

    def _take(self, message: str) -> T:
        if self._tag is OptionVariant.ABSENT:
            raise EmptyAccessError(message)
        value: T = self._value  # type: ignore[assignment]
        self._tag = OptionVariant.ABSENT
        self._value = NOTHING
        if ConfigRegistry.get().log_consumption:
            safe_log(ConfigRegistry.logger(), 'debug', f"Option drained, handed out {value!r}")
        return value

    def unwrap_or(self, default: U) -> Union[T, U]:
        """The payload if present, else ``default``. Does not consume."""
        if self._tag is OptionVariant.PRESENT:
            return self._value  # type: ignore[return-value]
        return default

    def unwrap_or_else(self, fn: Callable[[], U]) -> Union[T, U]:
        """The payload if present, else ``fn()``. Does not consume."""
        if self._tag is OptionVariant.PRESENT:
            return self._value  # type: ignore[return-value]
        return fn()

    def map(self, fn: Callable[[T], U | None]) -> Option[U]:
        """Transform the payload into a new Option; an absent Option is returned as is."""
        if self._tag is OptionVariant.ABSENT:
            return self  # type: ignore[return-value]
        return Option.wrap(fn(self._value))  # type: ignore[arg-type]

    def map_or(self, default: U, fn: Callable[[T], U]) -> Option[U]:
        """Transform the payload, or wrap ``default`` when absent."""
        if self._tag is OptionVariant.ABSENT:
            return Option.wrap(default)
        return Option.wrap(fn(self._value))  # type: ignore[arg-type]

    def and_then(self, fn: Callable[[T], Option[U]]) -> Option[U]:
        """Chain a computation that itself returns an Option."""
        if self._tag is OptionVariant.ABSENT:
            return self  # type: ignore[return-value]
        return fn(self._value)  # type: ignore[arg-type]

    def flatten(self) -> Option[Any]:
        """
        Collapse nested Options one level at a time.

        ``Option.wrap(Option.wrap(5)).flatten()`` is the inner ``Option(5)``;
        an Option that does not hold another Option is returned unchanged.
        """
        if self._tag is OptionVariant.PRESENT and isinstance(self._value, Option):
            return self._value.flatten()
        return self

    def match(self, *, on_present: Callable[[T], R], on_absent: Callable[[], R]) -> R:
        """Run exactly one handler, chosen by the current tag, and return its result."""
        if self._tag is OptionVariant.PRESENT:
            return on_present(self._value)  # type: ignore[arg-type]
        return on_absent()

    def or_(self, other: Option[T]) -> Option[T]:
        """This Option if present, otherwise ``other``."""
        return self if self._tag is OptionVariant.PRESENT else other

    def ok_or(self, cause: E) -> Result[T, E]:
        """Ok(payload) if present, otherwise Err(cause). Does not consume."""
        from carton.result import Result

        if self._tag is OptionVariant.PRESENT:
            return Result.ok(self._value)  # type: ignore[arg-type]
        return Result.err(cause)

    def __iter__(self) -> Iterator[T]:
        if self._tag is OptionVariant.PRESENT:
            yield self._value  # type: ignore[misc]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        return self._tag is other._tag and self._value == other._value

    def __repr__(self) -> str:
        if self._tag is OptionVariant.PRESENT:
            return f"Option.present({self._value!r})"
        return "Option.absent()"
