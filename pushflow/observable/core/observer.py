"""
pushflow Observer - Per-Subscription Dispatcher
===============================================

An Observer sits between a producer and one subscriber's HandlerSet. It is
created fresh for every ``Observable.subscribe`` call and guarantees:

- no handler fires once the Observer has terminated
- at most one terminal event (``error`` or ``complete``) reaches the handlers
- the producer's teardown runs at most once

State machine::

    Active --error()/complete()/unsubscribe()--> Terminated

Nothing leaves Terminated. Handler exceptions are not caught here; they
propagate to whoever drove the dispatch.
"""

import logging
from typing import Any, Callable, Generic, Mapping, Optional, Union

from ...errors import TeardownError
from ..types.common_types import K, T, Teardown
from ..types.handlers import HandlerSet


class Observer(Generic[T, K]):
    """Guards a HandlerSet for the lifetime of a single subscription."""

    def __init__(
        self, handlers: Union[HandlerSet[T, K], Mapping[str, Any], None] = None
    ) -> None:
        self.handlers: HandlerSet[T, K] = HandlerSet.coerce(handlers)
        self.is_unsubscribed = False
        self._stopping = False
        self._teardown: Optional[Teardown] = None
        self._teardown_assigned = False
        self._teardown_ran = False

    @property
    def closed(self) -> bool:
        return self.is_unsubscribed

    @property
    def teardown(self) -> Optional[Teardown]:
        return self._teardown

    @teardown.setter
    def teardown(self, teardown: Optional[Teardown]) -> None:
        """
        Bind the producer's cleanup closure. Allowed once.

        Assigning onto an already terminated Observer stores the closure but
        does not run it; the next explicit ``unsubscribe()`` will.
        """
        if self._teardown_assigned:
            raise TeardownError("Teardown already assigned to this observer")
        if teardown is not None and not callable(teardown):
            raise TeardownError(
                f"Producer must return a callable teardown or None, got {type(teardown).__name__}"
            )
        self._teardown_assigned = True
        self._teardown = teardown

    def next(self, value: T) -> None:
        if self.is_unsubscribed or self._stopping:
            return
        if self.handlers.on_next is not None:
            self.handlers.on_next(value)

    def error(self, error: K) -> None:
        if self.is_unsubscribed or self._stopping:
            logging.debug(f"Ignoring error after termination: {error!r}")
            return

        self._terminate(self.handlers.on_error, error)

    def complete(self) -> None:
        if self.is_unsubscribed or self._stopping:
            logging.debug("Ignoring complete after termination")
            return

        self._terminate(self.handlers.on_complete)

    def _terminate(self, handler: Optional[Callable[..., Any]], *args: Any) -> None:
        # Events re-entering from inside the terminal handler are dropped. A
        # raising handler leaves the Observer active.
        self._stopping = True
        try:
            if handler is not None:
                handler(*args)
        except BaseException:
            self._stopping = False
            raise

        self.unsubscribe()

    def unsubscribe(self) -> None:
        """
        Terminate the Observer and run the teardown if it has not run yet.

        The flag flips before the teardown is called, so anything the
        teardown tries to emit is dropped.
        """
        if not self.is_unsubscribed:
            logging.debug(f"{self!r} terminated")
        self.is_unsubscribed = True

        if self._teardown is None or self._teardown_ran:
            return

        self._teardown_ran = True
        logging.debug(f"{self!r} running teardown")
        self._teardown()

    def __repr__(self) -> str:
        state = "terminated" if self.is_unsubscribed else "active"
        return f"Observer<{state}>"
