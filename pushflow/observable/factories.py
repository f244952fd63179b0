"""
Module-level constructors for Observables.
"""

from typing import Any, Iterable

from .core.observable import Observable
from .types.common_types import Producer, T


def from_iterable(values: Iterable[T]) -> Observable[T, Any]:
    """Function form of `Observable.from_`."""
    return Observable.from_(values)


def create(producer: Producer) -> Observable:
    """Wrap ``producer`` in an Observable."""
    return Observable(producer)
