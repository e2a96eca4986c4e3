from __future__ import annotations

import logging
from typing import Any

from carton.core._logging import get_logger
from carton.models.models import CartonConfig


__all__: list[str] = [
    "ConfigRegistry",
]


class ConfigRegistry:
    """
    Holds the active ``CartonConfig`` for the process.

    Containers read the active config at the moment an operation runs, so a
    change applies to every container created or read afterwards.

    Example:
        from carton import ConfigRegistry, AbsencePolicy

        # treat 0, "" and [] as absent when wrapping
        ConfigRegistry.configure(absence_policy=AbsencePolicy.FALSY)

        # back to defaults
        ConfigRegistry.reset()
    """

    _config: CartonConfig = CartonConfig()

    @classmethod
    def get(cls) -> CartonConfig:
        """Return the active configuration."""
        return cls._config

    @classmethod
    def update(cls, config: CartonConfig) -> None:
        """
        Replace the active configuration.

        Args:
            config: New CartonConfig

        Raises:
            TypeError: If config is not a CartonConfig
        """
        if not isinstance(config, CartonConfig):
            raise TypeError(
                f"Expected CartonConfig, got {type(config).__name__}"
            )
        cls._config = config

    @classmethod
    def configure(cls, **changes: Any) -> CartonConfig:
        """
        Change individual fields of the active configuration.

        Returns:
            The new active CartonConfig
        """
        cls._config = cls._config.with_changes(**changes)
        return cls._config

    @classmethod
    def reset(cls) -> None:
        """Restore the default configuration."""
        cls._config = CartonConfig()

    @classmethod
    def logger(cls) -> logging.Logger:
        return get_logger(cls._config.logger_name)
