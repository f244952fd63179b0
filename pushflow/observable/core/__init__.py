"""
pushflow Core
=============

The three runtime pieces of a stream: Observable (producer wrapper),
Observer (per-subscription dispatcher) and Subscription (cancel handle).
"""

from pushflow.observable.core.observable import Observable
from pushflow.observable.core.observer import Observer
from pushflow.observable.core.subscription import Subscription

__all__ = ["Observable", "Observer", "Subscription"]
