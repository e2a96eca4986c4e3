from __future__ import annotations


__all__: list[str] = [
    "CartonError",
    "EmptyAccessError",
    "InvalidStateError",
]


class CartonError(Exception):
    """Base class for every error raised by carton containers."""


class EmptyAccessError(CartonError, LookupError):
    """
    Raised when a value is taken out of an absent Option.

    This covers containers that were created empty as well as containers
    whose value was already handed out by ``take_value()`` or ``expect()``.
    """


class InvalidStateError(CartonError, RuntimeError):
    """
    Raised when a container is read through the wrong channel.

    Examples: ``take_value()`` on an Err Result, ``take_cause()`` on an Ok
    Result, any consuming read on a drained Result, ``unwrap_left()`` on a
    Right Either.
    """
