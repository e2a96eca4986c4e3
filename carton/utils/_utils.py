from __future__ import annotations

from typing import Any, Final

from carton.core._enums import AbsencePolicy


__all__: list[str] = [
    "NOTHING",
    "is_absent_value",
]


class _Nothing:
    """Marker for "no payload". Carries no state, so one instance is shared."""

    __slots__ = ()

    _instance: _Nothing | None = None

    def __new__(cls) -> _Nothing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NOTHING"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "NOTHING"


NOTHING: Final[_Nothing] = _Nothing()


def is_absent_value(value: Any, policy: AbsencePolicy = AbsencePolicy.NONE_ONLY) -> bool:
    """Decide whether a raw value means "no value" under the given policy."""
    if value is None or value is NOTHING:
        return True
    if policy is AbsencePolicy.FALSY:
        return not value
    return False
