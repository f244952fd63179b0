"""
pushflow Errors
===============

Exceptions raised by the stream primitives, plus `StreamError`, a ready-made
error value producers can push through `Observer.error`.
"""

from typing import Any, Optional


class PushflowError(Exception):
    """Base class for errors raised by pushflow itself."""

    pass


class HandlerError(PushflowError, TypeError):
    """Handler set could not be built from the given callbacks."""

    pass


class TeardownError(PushflowError, RuntimeError):
    """Teardown slot misused (non-callable, or assigned twice)."""

    pass


class StreamError(Exception):
    """
    Error value emitted through a stream's terminal error channel.

    Carries a human readable ``message`` and a ``kind`` tag so handlers can
    branch on the failure category without isinstance checks. ``kind``
    defaults to the class name.
    """

    def __init__(
        self, message: str, kind: Optional[str] = None, payload: Any = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind or type(self).__name__
        self.payload = payload

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, kind={self.kind!r})"


def describe_error(error: BaseException) -> "tuple[str, str]":
    """Return ``(kind, message)`` for any exception, error-like or not."""
    message = getattr(error, "message", None)
    if not isinstance(message, str):
        message = str(error)
    kind = getattr(error, "kind", None)
    if not isinstance(kind, str):
        kind = type(error).__name__
    return kind, message
