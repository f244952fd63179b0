"""
Caller-held handle for cancelling one subscription.
"""

from typing import TYPE_CHECKING, Generic

from ..types.common_types import K, T

if TYPE_CHECKING:
    from .observer import Observer


class Subscription(Generic[T, K]):
    """
    Returned by ``Observable.subscribe``.

    Holds nothing but its Observer; ``unsubscribe()`` delegates to it and is
    safe to call any number of times. Usable as a context manager that
    unsubscribes on exit.
    """

    __slots__ = ("_observer",)

    def __init__(self, observer: "Observer[T, K]") -> None:
        self._observer = observer

    def unsubscribe(self) -> None:
        self._observer.unsubscribe()

    def __enter__(self) -> "Subscription[T, K]":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.unsubscribe()
