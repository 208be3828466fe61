from __future__ import annotations

from collections.abc import Callable

from carinventory.models.car import Car
from carinventory.state.store import InventoryState, StateStore

_CAR = Car(id=5, make="Mazda", model="MX-5", year=2021, price=30000)


def test_initial_state() -> None:
    state = StateStore().state
    assert state == InventoryState(cars=(), is_loading=False, error_message=None)


def test_update_produces_new_snapshot() -> None:
    store = StateStore()
    before = store.state

    after = store.update(cars=[_CAR])

    assert before.cars == ()
    assert after.cars == (_CAR,)
    assert store.state is after
    assert after.cars[0].id == 5


def test_begin_and_finish_operation() -> None:
    store = StateStore(InventoryState(error_message="old"))

    loading = store.begin_operation()
    assert loading.is_loading is True
    assert loading.error_message is None

    done = store.finish_operation(error_message="Network error: refused")
    assert done.is_loading is False
    assert done.error_message == "Network error: refused"
    assert done.cars == ()


def test_listener_errors_do_not_propagate() -> None:
    store = StateStore()
    seen: list[InventoryState] = []

    def _broken(_state: InventoryState) -> None:
        raise RuntimeError("renderer crashed")

    store.subscribe(_broken)
    store.subscribe(seen.append)
    store.update(is_loading=True)

    assert len(seen) == 1


def test_dispatch_defers_notifications() -> None:
    pending: list[Callable[[], None]] = []
    store = StateStore(dispatch=pending.append)
    seen: list[InventoryState] = []
    store.subscribe(seen.append)

    store.update(is_loading=True)
    store.update(is_loading=False, cars=(_CAR,))
    assert seen == []

    for callback in pending:
        callback()

    assert [state.is_loading for state in seen] == [True, False]
    assert seen[-1].cars == (_CAR,)


def test_unsubscribe_is_idempotent() -> None:
    store = StateStore()
    seen: list[InventoryState] = []
    unsubscribe = store.subscribe(seen.append)

    unsubscribe()
    unsubscribe()
    store.update(is_loading=True)

    assert seen == []


def test_finish_operation_with_cars_replaces_record_set() -> None:
    store = StateStore(InventoryState(cars=(_CAR,), error_message=None))
    store.begin_operation()

    done = store.finish_operation(cars=[])

    assert done.cars == ()
    assert done.is_loading is False
    assert done.error_message is None


def test_finish_operation_without_cars_keeps_record_set() -> None:
    store = StateStore(InventoryState(cars=(_CAR,)))

    assert store.finish_operation().cars == (_CAR,)
