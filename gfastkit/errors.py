"""Guards that turn failures into application errors."""

import logging

_log = logging.getLogger(__name__)


class AppError(Exception):
    """Raised when a guarded value signals a failure."""


def ensure_no_error(err, msg=None):
    """Raise :class:`AppError` if *err* is set.

    With *msg* the original error is logged and *msg* becomes the message;
    otherwise the error's own text is used.
    """
    if err is None:
        return
    cause = err if isinstance(err, BaseException) else None
    if msg is not None:
        _log.error("%s", err)
        raise AppError(msg) from cause
    raise AppError(str(err)) from cause


def ensure_not_none(value, msg):
    """Return *value*, raising :class:`AppError` with *msg* if it is None."""
    if value is None:
        raise AppError(msg)
    return value