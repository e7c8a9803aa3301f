"""Tests for Store dispatch, selection and observation.

Critical Invariants:
- Reducers fold in registration order
- A failing dispatch commits nothing and fires no observer
- Observers fire once per committed dispatch, in registration order
"""

import logging
import threading
from dataclasses import dataclass, field, replace

import pytest

from unistate import (
    AddEntity,
    Collection,
    NotFoundError,
    RemoveEntity,
    Store,
    Subscription,
    UpdateEntity,
    entity_reducer,
    on_field,
    select_field,
)


@dataclass(frozen=True, slots=True)
class Item:
    id: int
    done: bool = False


@dataclass(frozen=True, slots=True)
class State:
    items: Collection[Item] = field(default_factory=Collection.empty)
    log: tuple[str, ...] = ()


items_reducer = on_field("items", entity_reducer)


def tagging_reducer(tag: str):
    def reducer(state: State, action: object) -> State:
        return replace(state, log=(*state.log, tag))

    return reducer


def failing_reducer(state: State, action: object) -> State:
    raise RuntimeError("boom")


def test_initial_state(make_store):
    state = State()
    store = make_store(state)
    assert store.get_state() is state
    assert store.state is state
    assert store.dispatch_count == 0


def test_register_reducer_is_chainable(make_store):
    store = make_store(State())
    assert store.register_reducer(items_reducer) is store
    assert store.register_reducers(tagging_reducer("a"), tagging_reducer("b")) is store


def test_dispatch_replaces_state(make_store):
    store = make_store(State(), items_reducer)
    before = store.get_state()

    store.dispatch(AddEntity(Item(1)))

    assert store.get_state().items.ids == (1,)
    assert before.items.ids == (), "Old snapshots stay valid"
    assert store.dispatch_count == 1


def test_reducers_fold_in_registration_order(make_store):
    """CRITICAL: r1 runs before r2, r2 sees r1's output."""
    store = make_store(State())
    store.register_reducer(tagging_reducer("r1")).register_reducer(tagging_reducer("r2"))

    store.dispatch("go")
    store.dispatch("go")

    assert store.get_state().log == ("r1", "r2", "r1", "r2")


def test_reducer_receives_previous_reducer_output(make_store):
    seen = []

    def spy(state: State, action: object) -> State:
        seen.append(state.items.ids)
        return state

    store = make_store(State(), items_reducer, spy)
    store.dispatch(AddEntity(Item(4)))

    assert seen == [(4,)]


def test_failing_dispatch_commits_nothing(make_store):
    """CRITICAL: no partial commit, no observer fired."""
    store = make_store(State(), items_reducer, tagging_reducer("after"))
    store.dispatch(AddEntity(Item(1)))
    committed = store.get_state()
    calls = []
    store.observe(select_field("items"), calls.append)

    with pytest.raises(NotFoundError):
        store.dispatch(UpdateEntity(Item(9)))

    assert store.get_state() is committed
    assert calls == []
    assert store.dispatch_count == 1


def test_failure_in_later_reducer_discards_earlier_output(make_store):
    store = make_store(State(), items_reducer, failing_reducer)

    with pytest.raises(RuntimeError, match="boom"):
        store.dispatch(AddEntity(Item(1)))

    assert store.get_state().items.ids == ()


def test_store_usable_after_failure(make_store):
    store = make_store(State(), items_reducer)
    with pytest.raises(NotFoundError):
        store.dispatch(RemoveEntity(1))

    store.dispatch(AddEntity(Item(1)))
    assert store.get_state().items.ids == (1,)


def test_select_does_not_register(make_store):
    store = make_store(State(), items_reducer)
    store.dispatch(AddEntity(Item(1)))
    calls = []

    assert store.select(lambda s: len(s.items)) == 1
    store.select(calls.append)
    assert calls == [store.get_state()]
    calls.clear()
    store.dispatch(AddEntity(Item(2)))

    assert calls == []


def test_observer_fires_once_per_dispatch(make_store):
    store = make_store(State(), items_reducer)
    counts = []
    store.observe(lambda s: len(s.items), counts.append)

    store.dispatch(AddEntity(Item(1)))
    store.dispatch(AddEntity(Item(2)))
    store.dispatch(RemoveEntity(1))

    assert counts == [1, 2, 1]


def test_observers_fire_in_registration_order_after_commit(make_store):
    store = make_store(State(), items_reducer)
    order = []
    store.observe(select_field("items"), lambda _: order.append(("a", store.get_state().items)))
    store.observe(select_field("items"), lambda items: order.append(("b", items)))

    store.dispatch(AddEntity(Item(1)))

    assert [name for name, _ in order] == ["a", "b"]
    assert order[0][1] is store.get_state().items, "State is committed before observers run"


def test_observe_does_not_fire_retroactively(make_store):
    store = make_store(State(), items_reducer)
    store.dispatch(AddEntity(Item(1)))
    calls = []

    subscription = store.observe(select_field("items"), calls.append)

    assert isinstance(subscription, Subscription)
    assert calls == []


def test_distinct_observer_skips_unchanged_values(make_store):
    store = make_store(State(), items_reducer, tagging_reducer("t"))
    calls = []
    store.observe(lambda s: len(s.items), calls.append, distinct=True)

    store.dispatch(AddEntity(Item(1)))
    store.dispatch("noop")
    store.dispatch(AddEntity(Item(2)))

    assert calls == [1, 2]


def test_dispose_stops_notifications(make_store):
    store = make_store(State(), items_reducer)
    calls = []
    subscription = store.observe(lambda s: len(s.items), calls.append)

    store.dispatch(AddEntity(Item(1)))
    subscription.dispose()
    subscription.dispose()
    store.dispatch(AddEntity(Item(2)))

    assert calls == [1]
    assert not subscription.active


def test_dispose_during_notification(make_store):
    """An observer disposing a later subscription prevents it from firing."""
    store = make_store(State(), items_reducer)
    calls = []
    later: list[Subscription] = []
    store.observe(select_field("items"), lambda _: later[0].dispose())
    later.append(store.observe(select_field("items"), calls.append))

    store.dispatch(AddEntity(Item(1)))

    assert calls == []


def test_observer_error_propagates_after_commit(make_store):
    store = make_store(State(), items_reducer)
    calls = []

    def broken(_):
        raise ValueError("observer failed")

    store.observe(select_field("items"), broken)
    store.observe(select_field("items"), calls.append)

    with pytest.raises(ValueError, match="observer failed"):
        store.dispatch(AddEntity(Item(1)))

    assert store.get_state().items.ids == (1,)
    assert calls == []


def test_observer_error_logged_when_configured(make_store, caplog):
    store = make_store(State(), items_reducer, observer_errors="log")
    calls = []

    def broken(_):
        raise ValueError("observer failed")

    store.observe(select_field("items"), broken)
    store.observe(lambda s: len(s.items), calls.append)

    with caplog.at_level(logging.ERROR, logger="unistate.store.store"):
        store.dispatch(AddEntity(Item(1)))

    assert calls == [1]
    assert "Observer" in caplog.text
    assert "observer failed" in caplog.text


def test_distinct_observer_redelivers_value_after_failed_delivery(make_store, caplog):
    """A value whose delivery raised was never delivered, so distinct must not skip it."""
    store = make_store(State(), items_reducer, tagging_reducer("t"), observer_errors="log")
    delivered = []
    failures = []

    def flaky(count):
        if not failures:
            failures.append(count)
            raise ValueError("first delivery failed")
        delivered.append(count)

    store.observe(lambda s: len(s.items), flaky, distinct=True)

    with caplog.at_level(logging.ERROR, logger="unistate.store.store"):
        store.dispatch(AddEntity(Item(1)))
    store.dispatch("noop")
    store.dispatch("noop")

    assert failures == [1]
    assert delivered == [1], "Same value retried once, then skipped as delivered"


def test_dispatch_serialized_across_threads(make_store):
    def count(state: State, action: object) -> State:
        return replace(state, log=(*state.log, "x"))

    store = make_store(State(), count)

    def worker():
        for _ in range(50):
            store.dispatch("tick")

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(store.get_state().log) == 200
    assert store.dispatch_count == 200


def test_store_reads_settings_from_environment(monkeypatch):
    monkeypatch.setenv("UNISTATE_OBSERVER_ERRORS", "log")
    store: Store[State, object] = Store(State())
    assert store.settings.observer_errors == "log"
