"""
pushflow - Push-Based Observable Streams
========================================

A minimal, synchronous observable primitive. An Observable wraps a producer;
subscribing runs the producer against a fresh Observer that forwards values to
optional ``next`` / ``error`` / ``complete`` handlers and shuts itself off after
the first terminal event.

    >>> from pushflow import Observable
    >>> seen = []
    >>> subscription = Observable.from_([1, 2, 3]).subscribe({"next": seen.append})
    >>> seen
    [1, 2, 3]
    >>> subscription.unsubscribe()
"""

from .errors import (
    HandlerError,
    PushflowError,
    StreamError,
    TeardownError,
    describe_error,
)
from .observable import (
    ErrorLike,
    HandlerSet,
    Observable,
    Observer,
    Subscription,
    create,
    from_iterable,
)

__all__ = [
    # Core
    "Observable",
    "Observer",
    "Subscription",
    "HandlerSet",
    "ErrorLike",
    # Factories
    "create",
    "from_iterable",
    # Errors
    "PushflowError",
    "HandlerError",
    "TeardownError",
    "StreamError",
    "describe_error",
]
