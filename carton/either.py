from __future__ import annotations

from typing import Any, Callable, Generic, NoReturn, TypeVar, Union

from carton.core._enums import EitherVariant
from carton.core.exceptions import InvalidStateError
from carton.option import Option


__all__: list[str] = [
    "Either",
]

L = TypeVar("L")   # left type
Rt = TypeVar("Rt")  # right type
U = TypeVar("U")
Ret = TypeVar("Ret")


class Either(Generic[L, Rt]):
    """
    One of two values, Left or Right, with no success/failure meaning attached.

    Unlike Option and Result, reading an Either never consumes it: the
    ``unwrap_*`` accessors can be called any number of times. Instances are
    immutable and hashable when their payload is.

    Example:
        >>> parsed = Either.left(42) if "42".isdigit() else Either.right("42")
        >>> parsed.map_left(lambda n: n * 2).unwrap_left()
        84
    """

    __slots__ = ("_tag", "_value")

    def __init__(self, tag: EitherVariant, value: Any) -> None:
        object.__setattr__(self, "_tag", EitherVariant(tag))
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @classmethod
    def left(cls, value: L) -> Either[L, Any]:
        return cls(EitherVariant.LEFT, value)

    @classmethod
    def right(cls, value: Rt) -> Either[Any, Rt]:
        return cls(EitherVariant.RIGHT, value)

    @property
    def variant(self) -> EitherVariant:
        return self._tag

    @property
    def is_left(self) -> bool:
        return self._tag is EitherVariant.LEFT

    @property
    def is_right(self) -> bool:
        return self._tag is EitherVariant.RIGHT

    @property
    def as_left_option(self) -> Option[L]:
        return Option.wrap(self._value) if self.is_left else Option.absent()

    @property
    def as_right_option(self) -> Option[Rt]:
        return Option.wrap(self._value) if self.is_right else Option.absent()

    def unwrap_left(self) -> L:
        if not self.is_left:
            raise InvalidStateError(f"unwrap_left() called on Right({self._value!r})")
        return self._value

    def unwrap_right(self) -> Rt:
        if not self.is_right:
            raise InvalidStateError(f"unwrap_right() called on Left({self._value!r})")
        return self._value

    def unwrap_left_or(self, default: U) -> Union[L, U]:
        return self._value if self.is_left else default

    def unwrap_right_or(self, default: U) -> Union[Rt, U]:
        return self._value if self.is_right else default

    def map_left(self, fn: Callable[[L], U]) -> Either[U, Rt]:
        """Transform a Left value; a Right passes through unchanged."""
        if self.is_left:
            return Either.left(fn(self._value))
        return self  # type: ignore[return-value]

    def map_right(self, fn: Callable[[Rt], U]) -> Either[L, U]:
        """Transform a Right value; a Left passes through unchanged."""
        if self.is_right:
            return Either.right(fn(self._value))
        return self  # type: ignore[return-value]

    def map(self, fn: Callable[[Union[L, Rt]], U]) -> Either[Any, Any]:
        """Transform whichever value is held, keeping the side."""
        return Either(self._tag, fn(self._value))

    def swap(self) -> Either[Rt, L]:
        if self.is_left:
            return Either.right(self._value)
        return Either.left(self._value)

    def match(self, *, on_left: Callable[[L], Ret], on_right: Callable[[Rt], Ret]) -> Ret:
        if self.is_left:
            return on_left(self._value)
        return on_right(self._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Either):
            return NotImplemented
        return self._tag is other._tag and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._tag, self._value))

    def __repr__(self) -> str:
        return f"Either.{self._tag.value}({self._value!r})"
