"""Logging utility for geodetics"""

__all__ = ['LOGGER', 'set_log_level', 'warn_once']

import logging
from typing import Union

LOGGER = logging.getLogger('geodetics')
LOGGER.setLevel(logging.WARNING)
_LOG_HANDLER = logging.StreamHandler()
_LOG_FORMATTER = logging.Formatter('[%(levelname)s] %(name)s: %(message)s')
_LOG_HANDLER.setFormatter(_LOG_FORMATTER)
LOGGER.addHandler(_LOG_HANDLER)

_WARNINGS = set()


def set_log_level(level: Union[int, str]):
    """
    Sets the level of the package logger. Loggers of individual classes
    (see LoggingMixin) inherit this level.

    Args:
        level:
            A logging level, e.g. logging.DEBUG or 'DEBUG'
    """
    LOGGER.setLevel(level)


def warn_once(warning: str):
    """Logs a warning through the package logger, once per distinct message"""
    if warning not in _WARNINGS:
        LOGGER.warning(warning)
        _WARNINGS.add(warning)
