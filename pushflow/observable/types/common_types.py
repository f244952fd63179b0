"""
Common type variables and callable aliases shared by the stream primitives.
"""

from typing import TYPE_CHECKING, Callable, Optional, TypeVar

from .protocols import ErrorLike

if TYPE_CHECKING:
    from ..core.observer import Observer

# Value emitted by a stream
T = TypeVar("T")

# Terminal error carried by a stream
K = TypeVar("K", bound=ErrorLike)

NextHandler = Callable[[T], None]
ErrorHandler = Callable[[K], None]
CompleteHandler = Callable[[], None]

# Cleanup closure handed back by a producer
Teardown = Callable[[], None]

# Subscribe-time side effect wrapped by an Observable
Producer = Callable[["Observer[T, K]"], Optional[Teardown]]
