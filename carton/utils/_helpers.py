from __future__ import annotations

from typing import Any, TypeVar

from carton.core._enums import EitherVariant, OptionVariant, ResultVariant
from carton.either import Either
from carton.option import Option
from carton.result import Result


__all__: list[str] = [
    "wrap",
    "wrap_absent",
    "wrap_ok",
    "wrap_err",
    "left",
    "right",
    "is_present_variant",
    "is_absent_variant",
    "is_ok_variant",
    "is_err_variant",
    "is_left_variant",
    "is_right_variant",
    "option_to_result",
    "result_to_option",
]

T = TypeVar("T")
E = TypeVar("E")


def wrap(value: T | None) -> Option[T]:
    return Option.wrap(value)


def wrap_absent() -> Option[Any]:
    return Option.absent()


def wrap_ok(value: T) -> Result[T, Any]:
    return Result.ok(value)


def wrap_err(cause: E) -> Result[Any, E]:
    return Result.err(cause)


def left(value: T) -> Either[T, Any]:
    return Either.left(value)


def right(value: T) -> Either[Any, T]:
    return Either.right(value)


# Predicates look at the tag only; any other object is simply not a match.

def is_present_variant(obj: Any) -> bool:
    return isinstance(obj, Option) and obj.variant is OptionVariant.PRESENT


def is_absent_variant(obj: Any) -> bool:
    return isinstance(obj, Option) and obj.variant is OptionVariant.ABSENT


def is_ok_variant(obj: Any) -> bool:
    return isinstance(obj, Result) and obj.variant is ResultVariant.OK


def is_err_variant(obj: Any) -> bool:
    """True for Err Results, including drained ones."""
    return isinstance(obj, Result) and obj.variant is not ResultVariant.OK


def is_left_variant(obj: Any) -> bool:
    return isinstance(obj, Either) and obj.variant is EitherVariant.LEFT


def is_right_variant(obj: Any) -> bool:
    return isinstance(obj, Either) and obj.variant is EitherVariant.RIGHT


def option_to_result(opt: Option[T], cause: E) -> Result[T, E]:
    """Convert Option to Result, using cause if absent."""
    return opt.ok_or(cause)


def result_to_option(res: Result[T, E]) -> Option[T]:
    """Convert Result to Option, discarding the cause."""
    return res.as_ok_option
