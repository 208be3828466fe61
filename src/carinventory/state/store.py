"""Observable in-memory state for the inventory client.

Snapshots are immutable; every change produces a new
:class:`InventoryState` and notifies subscribers with it.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from carinventory.models.car import Car

_logger = logging.getLogger(__name__)

StateListener = Callable[["InventoryState"], None]
Dispatcher = Callable[[Callable[[], None]], Any]


def _call_now(callback: Callable[[], None]) -> None:
    callback()


class InventoryState(BaseModel):
    """Snapshot of the three fields a presentation layer renders."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    cars: tuple[Car, ...] = Field(default_factory=tuple)
    is_loading: bool = False
    error_message: str | None = None


class StateStore:
    """Holds the current snapshot and fans changes out to listeners.

    *dispatch* decides where listener callbacks run.  The default calls
    them inline; pass ``loop.call_soon_threadsafe`` (or a GUI toolkit's
    equivalent) to marshal notifications onto a renderer thread.
    Notifications of overlapping operations are not ordered relative to
    each other.
    """

    def __init__(
        self,
        initial: InventoryState | None = None,
        *,
        dispatch: Dispatcher | None = None,
    ) -> None:
        self._state = initial if initial is not None else InventoryState()
        self._dispatch: Dispatcher = dispatch if dispatch is not None else _call_now
        self._listeners: list[StateListener] = []

    @property
    def state(self) -> InventoryState:
        return self._state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register *listener* and return a callable that removes it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def update(self, **changes: Any) -> InventoryState:
        """Replace fields of the current snapshot and notify listeners."""
        if "cars" in changes and not isinstance(changes["cars"], tuple):
            changes["cars"] = tuple(changes["cars"])
        self._state = self._state.model_copy(update=changes)
        self._notify(self._state)
        return self._state

    def begin_operation(self) -> InventoryState:
        """Mark a request as in flight and clear the previous error."""
        return self.update(is_loading=True, error_message=None)

    def finish_operation(
        self,
        *,
        cars: Iterable[Car] | None = None,
        error_message: str | None = None,
    ) -> InventoryState:
        """Mark the request as done, applying either new cars or an error."""
        changes: dict[str, Any] = {"is_loading": False}
        if cars is not None:
            changes["cars"] = tuple(cars)
        if error_message is not None:
            changes["error_message"] = error_message
        return self.update(**changes)

    def _notify(self, snapshot: InventoryState) -> None:
        for listener in list(self._listeners):
            self._dispatch(lambda listener=listener: self._invoke(listener, snapshot))

    @staticmethod
    def _invoke(listener: StateListener, snapshot: InventoryState) -> None:
        try:
            listener(snapshot)
        except Exception:
            _logger.debug("State listener failed", exc_info=True)
