"""Exceptions raised by geodetics when a computation cannot be carried out"""

__all__ = ['Error', 'OperationNotReversibleError', 'UnsupportedComputationError']


class Error(RuntimeError):
    """Base class for all exceptions that are thrown from the geodetics package."""


class UnsupportedComputationError(Error):
    """
    The requested computation is not available for the given model, e.g. the
    inverse geodetic problem on a non-spherical ellipsoid. The inputs themselves
    are valid.
    """


class OperationNotReversibleError(Error):
    """A coordinate operation was asked to run in reverse, but its method is one-way."""
