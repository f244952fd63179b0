"""
Shared pytest fixtures for pushflow tests.
"""

import pytest

from pushflow import HandlerSet, StreamError


class Recorder:
    """Records every handler call in order as ``(event, payload)`` pairs."""

    def __init__(self):
        self.events = []

    def on_next(self, value):
        self.events.append(("next", value))

    def on_error(self, error):
        self.events.append(("error", error))

    def on_complete(self):
        self.events.append(("complete", None))

    @property
    def values(self):
        return [payload for event, payload in self.events if event == "next"]

    def count(self, event):
        return sum(1 for name, _ in self.events if name == event)

    def handlers(self):
        return HandlerSet(
            on_next=self.on_next,
            on_error=self.on_error,
            on_complete=self.on_complete,
        )


class TeardownCounter:
    """Callable teardown that counts its invocations."""

    def __init__(self):
        self.calls = 0

    def __call__(self):
        self.calls += 1


@pytest.fixture
def recorder():
    """Provide a fresh Recorder for each test."""
    return Recorder()


@pytest.fixture
def teardown():
    """Provide a fresh TeardownCounter for each test."""
    return TeardownCounter()


@pytest.fixture
def stream_error():
    return StreamError("boom", kind="Upstream")
