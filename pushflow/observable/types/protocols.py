"""
Structural shapes for values flowing through a stream.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ErrorLike(Protocol):
    """
    Shape expected of values sent down the error channel.

    Anything exposing a ``message`` and a ``kind`` qualifies;
    `pushflow.errors.StreamError` is the stock implementation.
    """

    message: str
    kind: str
