"""
pushflow HandlerSet - Optional Callback Record
==============================================

A HandlerSet bundles the three callbacks a subscriber may care about. Every
field is optional; a missing callback means the subscriber ignores that kind
of event. Dispatch is "call if present", nothing more.
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, Mapping, Optional, Union

from ...errors import HandlerError
from .common_types import K, T

# Accepted mapping keys, both the short form and the attribute names
_KEY_ALIASES = {
    "next": "on_next",
    "error": "on_error",
    "complete": "on_complete",
    "on_next": "on_next",
    "on_error": "on_error",
    "on_complete": "on_complete",
}


@dataclass(frozen=True)
class HandlerSet(Generic[T, K]):
    """Up to three optional subscriber callbacks."""

    on_next: Optional[Callable[[T], Any]] = None
    on_error: Optional[Callable[[K], Any]] = None
    on_complete: Optional[Callable[[], Any]] = None

    def __post_init__(self) -> None:
        for name in ("on_next", "on_error", "on_complete"):
            handler = getattr(self, name)
            if handler is not None and not callable(handler):
                raise HandlerError(
                    f"{name} must be callable, got {type(handler).__name__}"
                )

    @property
    def is_empty(self) -> bool:
        return (
            self.on_next is None and self.on_error is None and self.on_complete is None
        )

    @classmethod
    def coerce(
        cls,
        handlers: Union["HandlerSet[T, K]", Mapping[str, Any], None] = None,
        **overrides: Any,
    ) -> "HandlerSet[T, K]":
        """
        Build a HandlerSet from whatever a caller handed to ``subscribe``.

        ``handlers`` may be an existing HandlerSet, a mapping keyed by
        ``next``/``error``/``complete`` (or the ``on_*`` spellings), or None.
        Non-None keyword ``overrides`` win over the same field in ``handlers``.
        """
        if isinstance(handlers, HandlerSet):
            fields = {
                "on_next": handlers.on_next,
                "on_error": handlers.on_error,
                "on_complete": handlers.on_complete,
            }
        elif handlers is None:
            fields = {}
        elif isinstance(handlers, Mapping):
            fields = {}
            for key, handler in handlers.items():
                if key not in _KEY_ALIASES:
                    raise HandlerError(f"Unknown handler key: {key!r}")
                name = _KEY_ALIASES[key]
                if name in fields:
                    raise HandlerError(f"Handler {name!r} given more than once")
                fields[name] = handler
        else:
            raise HandlerError(
                f"Expected a HandlerSet or a mapping of handlers, got {type(handlers).__name__}"
            )

        overridden = False
        for key, handler in overrides.items():
            if key not in ("on_next", "on_error", "on_complete"):
                raise HandlerError(f"Unknown handler keyword: {key!r}")
            if handler is not None:
                fields[key] = handler
                overridden = True

        if isinstance(handlers, HandlerSet) and not overridden:
            return handlers
        return cls(**fields)
