"""Utility mixin classes"""

__all__ = ['LoggingMixin']

import logging

from geodetics.utils.logging import LOGGER


class LoggingMixin:  # pylint: disable=too-few-public-methods
    """
    Mixin class for logging. Each class gets its own logger, named after its
    module and class, so records are routed through the package logger.
    """

    WARNED_ONCE: set = set()

    @property
    def logger(self) -> logging.Logger:
        _class = self.__class__
        if _class.__module__.startswith(f'{LOGGER.name}.'):
            return logging.getLogger(f'{_class.__module__}.{_class.__qualname__}')

        # Subclasses defined outside the package still log under it
        return LOGGER.getChild(f'{_class.__module__}.{_class.__qualname__}')

    @classmethod
    def _set_warned_once(cls, msg):
        """Appends message to classvar"""
        cls.WARNED_ONCE.add(msg)

    def warn_once(self, msg, *args, **kwargs):
        """Logs a warning only once per message"""
        if msg in self.WARNED_ONCE:
            return

        self.logger.warning(msg, *args, **kwargs)
        self._set_warned_once(msg)
