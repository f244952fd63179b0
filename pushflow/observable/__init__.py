"""
pushflow Observable Module
==========================

Synchronous push streams: the Observable/Observer/Subscription core, the
HandlerSet record and the factory functions.
"""

from pushflow.observable.core import Observable, Observer, Subscription
from pushflow.observable.factories import create, from_iterable
from pushflow.observable.types import ErrorLike, HandlerSet

__all__ = [
    "ErrorLike",
    "HandlerSet",
    "Observable",
    "Observer",
    "Subscription",
    "create",
    "from_iterable",
]
