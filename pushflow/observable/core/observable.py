"""
pushflow Observable - Cold, Synchronous Push Stream
===================================================

An Observable wraps a producer function. Nothing happens until
``subscribe``: each call builds a fresh Observer, runs the producer against
it on the caller's thread, and binds whatever teardown the producer hands
back. The Observable itself keeps no per-subscription state, so one instance
may be subscribed any number of times.

Ordering note: the teardown is bound *after* the producer returns. A
producer that completes or errors synchronously has already terminated the
Observer by then, so its teardown is not run at bind time. An explicit
``Subscription.unsubscribe()`` afterwards runs it once.
"""

import logging
from typing import Any, Callable, Generic, Iterable, Mapping, Optional, Union

from ..types.common_types import K, Producer, T
from ..types.handlers import HandlerSet
from .observer import Observer
from .subscription import Subscription


class Observable(Generic[T, K]):
    """A reusable description of a synchronous value sequence."""

    __slots__ = ("_producer",)

    def __init__(self, producer: Producer) -> None:
        if not callable(producer):
            raise TypeError(
                f"Observable producer must be callable, got {type(producer).__name__}"
            )
        self._producer = producer

    @classmethod
    def from_(cls, values: Iterable[T]) -> "Observable[T, Any]":
        """
        Emit every element of ``values`` in order, then complete.

        ``values`` is copied up front so that one-shot iterators still give
        every subscription the full sequence.
        """
        snapshot = tuple(values)

        def produce(observer: Observer[T, Any]) -> Callable[[], None]:
            for value in snapshot:
                observer.next(value)

            observer.complete()

            def teardown() -> None:
                logging.debug("unsubscribed")

            return teardown

        return cls(produce)

    def subscribe(
        self,
        handlers: Union[HandlerSet[T, K], Mapping[str, Any], None] = None,
        *,
        on_next: Optional[Callable[[T], Any]] = None,
        on_error: Optional[Callable[[K], Any]] = None,
        on_complete: Optional[Callable[[], Any]] = None,
    ) -> Subscription[T, K]:
        handler_set = HandlerSet.coerce(
            handlers, on_next=on_next, on_error=on_error, on_complete=on_complete
        )
        observer: Observer[T, K] = Observer(handler_set)
        logging.debug(f"Subscribing {observer!r} to {self!r}")

        observer.teardown = self._producer(observer)

        return Subscription(observer)

    def __repr__(self) -> str:
        name = getattr(self._producer, "__qualname__", type(self._producer).__name__)
        return f"Observable({name})"
