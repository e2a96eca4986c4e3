from __future__ import annotations

import logging
from typing import Optional

_logger: Optional[logging.Logger] = None

DEFAULT_LOGGER_NAME: str = "carton"


def _silence(logger: logging.Logger) -> logging.Logger:
    # Add NullHandler to prevent "No handler found" warnings
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get or create the package logger for carton.

    The logger carries a NullHandler, so nothing is emitted unless the
    application configures logging itself.

    Args:
        name: Optional logger name. If None, uses 'carton'.

    Returns:
        Logger instance with NullHandler

    Example:
        >>> from carton.core._logging import get_logger
        >>> logger = get_logger()
        >>> logger.debug("silent unless the application configures logging")
    """
    global _logger

    if name is not None and name != DEFAULT_LOGGER_NAME:
        return _silence(logging.getLogger(name))

    if _logger is None:
        _logger = _silence(logging.getLogger(DEFAULT_LOGGER_NAME))

    return _logger


def safe_log(logger: Optional[logging.Logger], level: str, message: str, **kwargs) -> None:
    """
    Log a message without ever letting a logging failure escape.

    Args:
        logger: Logger instance (any type) or None
        level: Log level ('debug', 'info', 'warning', 'error')
        message: Message to log
        **kwargs: Additional arguments for logging

    Example:
        >>> from carton.core._logging import safe_log, get_logger
        >>> safe_log(get_logger(), 'debug', 'Option drained')
    """
    if logger is None:
        return

    try:
        if isinstance(logger, logging.Logger):
            log_method = getattr(logger, level, logger.info)
            if kwargs:
                log_method(message, **kwargs)
            else:
                log_method(message)
        elif hasattr(logger, level):
            getattr(logger, level)(message)
        elif hasattr(logger, 'log'):
            logger.log(message)
    except Exception:
        pass


_module_logger = get_logger()
