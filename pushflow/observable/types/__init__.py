"""
Type shapes for pushflow streams: type variables, callable aliases, the
error-like protocol and the HandlerSet record.
"""

from .common_types import (
    CompleteHandler,
    ErrorHandler,
    K,
    NextHandler,
    Producer,
    T,
    Teardown,
)
from .handlers import HandlerSet
from .protocols import ErrorLike

__all__ = [
    "CompleteHandler",
    "ErrorHandler",
    "ErrorLike",
    "HandlerSet",
    "K",
    "NextHandler",
    "Producer",
    "T",
    "Teardown",
]
