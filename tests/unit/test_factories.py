"""Tests for the from_ / from_iterable / create factories."""

import logging

import pytest

from pushflow import Observable, create, from_iterable


@pytest.mark.unit
@pytest.mark.observable
def test_from_emits_values_in_order_then_completes(recorder):
    """All values in order, then exactly one complete, no error"""
    Observable.from_(["v1", "v2", "v3"]).subscribe(recorder.handlers())

    assert recorder.events == [
        ("next", "v1"),
        ("next", "v2"),
        ("next", "v3"),
        ("complete", None),
    ]
    assert recorder.count("error") == 0


@pytest.mark.unit
@pytest.mark.observable
def test_from_collects_dict_payloads():
    """Pushing records into a list yields the same records"""
    received = []

    Observable.from_([{"id": 1}, {"id": 2}]).subscribe({"next": received.append})

    assert received == [{"id": 1}, {"id": 2}]


@pytest.mark.unit
@pytest.mark.observable
def test_from_complete_follows_all_values():
    """complete fires once, after the last value"""
    order = []

    Observable.from_([{"id": 1}, {"id": 2}]).subscribe(
        {
            "next": lambda value: order.append(value["id"]),
            "complete": lambda: order.append("done"),
        }
    )

    assert order == [1, 2, "done"]


@pytest.mark.unit
@pytest.mark.observable
def test_from_empty_sequence_only_completes(recorder):
    """An empty sequence completes immediately"""
    Observable.from_([]).subscribe(recorder.handlers())

    assert recorder.events == [("complete", None)]


@pytest.mark.unit
@pytest.mark.observable
def test_from_with_empty_handlers_is_silent():
    """Subscribing with no handlers raises nothing"""
    subscription = Observable.from_(["v1"]).subscribe({})
    subscription.unsubscribe()


@pytest.mark.unit
@pytest.mark.observable
def test_from_snapshots_one_shot_iterators(recorder):
    """Every subscription sees the full sequence, even from a generator"""
    source = Observable.from_(value for value in range(3))

    source.subscribe({"next": recorder.on_next})
    source.subscribe({"next": recorder.on_next})

    assert recorder.values == [0, 1, 2, 0, 1, 2]


@pytest.mark.unit
@pytest.mark.observable
def test_from_teardown_logs_on_explicit_unsubscribe(caplog):
    """The from_ teardown runs on the first explicit unsubscribe only"""
    subscription = Observable.from_([1]).subscribe()

    with caplog.at_level(logging.DEBUG):
        subscription.unsubscribe()
        subscription.unsubscribe()

    assert [r.getMessage() for r in caplog.records].count("unsubscribed") == 1


@pytest.mark.unit
@pytest.mark.observable
def test_from_iterable_matches_classmethod(recorder):
    """from_iterable is the function form of Observable.from_"""
    source = from_iterable((1, 2))

    assert isinstance(source, Observable)
    source.subscribe(recorder.handlers())
    assert recorder.events == [("next", 1), ("next", 2), ("complete", None)]


@pytest.mark.unit
@pytest.mark.observable
def test_create_wraps_producer(recorder):
    """create() builds an Observable around a producer"""

    def produce(observer):
        observer.next("only")
        return None

    create(produce).subscribe(recorder.handlers())

    assert recorder.values == ["only"]
