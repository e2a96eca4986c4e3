from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from carton.core._enums import AbsencePolicy
from carton.core._logging import DEFAULT_LOGGER_NAME


__all__: list[str] = [
    "CartonConfig",
]


@dataclass(frozen=True)
class CartonConfig:
    """
    Process-wide settings for carton containers.

    Attributes:
        absence_policy: Which raw values ``Option.wrap`` treats as absent
        log_consumption: Emit a debug record every time a consuming read drains a container
        logger_name: Name of the logger used for library records

    Example - enabling consumption tracing:
        from carton import ConfigRegistry

        ConfigRegistry.configure(log_consumption=True)
    """
    absence_policy: AbsencePolicy = AbsencePolicy.NONE_ONLY
    log_consumption: bool = False
    logger_name: str = DEFAULT_LOGGER_NAME

    def __post_init__(self) -> None:
        # accept raw enum values ("falsy") the same way the enum constructor does
        object.__setattr__(self, "absence_policy", AbsencePolicy(self.absence_policy))
        if not self.logger_name:
            raise ValueError("logger_name must be a non-empty string")

    def with_changes(self, **changes: Any) -> CartonConfig:
        """Return a copy with the given fields replaced."""
        unknown: set[str] = set(changes) - set(self.to_dict())
        if unknown:
            raise ValueError(f"Unknown config fields: {sorted(unknown)}")
        return replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        return {
            "absence_policy": self.absence_policy.value,
            "log_consumption": self.log_consumption,
            "logger_name": self.logger_name,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CartonConfig:
        """Build a config from a plain dictionary; missing keys keep their defaults."""
        return cls(
            absence_policy=AbsencePolicy(data.get("absence_policy", AbsencePolicy.NONE_ONLY)),
            log_consumption=bool(data.get("log_consumption", False)),
            logger_name=data.get("logger_name", DEFAULT_LOGGER_NAME),
        )
