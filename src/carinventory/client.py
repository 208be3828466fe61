"""High-level async client for the car inventory API."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Iterable
from typing import Any

import aiohttp

from carinventory._api import cars as _cars_api
from carinventory._constants import UNKNOWN_ERROR_BODY
from carinventory._transport import HttpTransport, Transport
from carinventory.config import InventoryConfig
from carinventory.exceptions import (
    InventoryDecodeError,
    InventoryEncodeError,
    InventoryError,
    InventoryInvalidResponseError,
    InventoryStatusError,
    InventoryTransportError,
)
from carinventory.models.car import Car
from carinventory.state.store import Dispatcher, InventoryState, StateListener, StateStore

_logger = logging.getLogger(__name__)

# Suffix appended to user-facing error text, per operation.
_LIST = ""
_ADD = " adding car"
_DELETE = " deleting car"
_DELETE_ALL = " deleting all cars"


def format_error(exc: InventoryError, context: str = "") -> str:
    """Turn a library exception into the text shown to the user."""
    if isinstance(exc, InventoryInvalidResponseError):
        return f"Invalid HTTP response{context}."
    if isinstance(exc, InventoryTransportError):
        return f"Network error{context}: {exc}"
    if isinstance(exc, InventoryStatusError):
        body = exc.body if exc.body is not None else UNKNOWN_ERROR_BODY
        return f"Server error{context} ({exc.status_code}): {body}"
    if isinstance(exc, InventoryDecodeError):
        return f"Failed to decode cars: {exc}"
    if isinstance(exc, InventoryEncodeError):
        return f"Failed to encode car data: {exc}"
    return str(exc)


class CarInventoryClient:
    """Async client owning the car record set of a remote inventory.

    Every operation issues one request, never raises for request
    failures, and returns the resulting :class:`InventoryState`.  Errors
    are reported through ``state.error_message`` only.

    Usage::

        async with CarInventoryClient(config) as client:
            client.subscribe(render)
            await client.fetch_cars()

    Operations are not serialized against each other: if a caller starts
    a second one before the first completes, both write the shared state
    and the last one to finish wins.
    """

    def __init__(
        self,
        config: InventoryConfig | None = None,
        *,
        session: aiohttp.ClientSession | None = None,
        transport: Transport | None = None,
        on_state_change: StateListener | None = None,
        dispatch: Dispatcher | None = None,
    ) -> None:
        self._config = config if config is not None else InventoryConfig()
        self._external_session = session is not None
        self._http_session = session
        self._transport: Transport | None = transport
        self._external_transport = transport is not None
        self._store = StateStore(dispatch=dispatch)
        if on_state_change is not None:
            self._store.subscribe(on_state_change)

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> CarInventoryClient:
        if self._external_transport:
            return self
        if self._http_session is None:
            self._http_session = aiohttp.ClientSession()
        self._transport = HttpTransport(self._config, self._http_session)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if self._external_transport:
            return
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        self._transport = None

    # ------------------------------------------------------------------
    # Observable state
    # ------------------------------------------------------------------

    @property
    def config(self) -> InventoryConfig:
        return self._config

    @property
    def state(self) -> InventoryState:
        return self._store.state

    @property
    def cars(self) -> tuple[Car, ...]:
        return self._store.state.cars

    @property
    def is_loading(self) -> bool:
        return self._store.state.is_loading

    @property
    def error_message(self) -> str | None:
        return self._store.state.error_message

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Call *listener* with every new state snapshot.

        Returns a callable that removes the subscription.
        """
        return self._store.subscribe(listener)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _require_transport(self) -> Transport:
        if self._transport is None:
            raise InventoryError("Client not initialized. Use 'async with CarInventoryClient(...) as client:'")
        return self._transport

    async def _run(
        self,
        call: Callable[[Transport], Awaitable[Any]],
        context: str,
        on_success: Callable[[Any], Iterable[Car] | None],
    ) -> InventoryState:
        """Run one request with the loading/error bookkeeping around it.

        *on_success* maps the endpoint result to the new record set, or
        ``None`` to keep the current one.
        """
        transport = self._require_transport()
        self._store.begin_operation()
        try:
            result = await call(transport)
        except InventoryError as exc:
            message = format_error(exc, context)
            _logger.warning("%s", message)
            return self._store.finish_operation(error_message=message)
        except BaseException:
            self._store.update(is_loading=False)
            raise
        return self._store.finish_operation(cars=on_success(result))

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def fetch_cars(self) -> InventoryState:
        """Replace the record set with the server's listing (``GET /cars``).

        On failure the record set is left untouched.
        """
        return await self._run(
            lambda transport: _cars_api.fetch_car_list(self._config, transport),
            _LIST,
            lambda cars: cars,
        )

    async def add_car(self, car: Car) -> InventoryState:
        """Create *car* on the server (``POST /cars``), then re-fetch.

        The server-assigned id only becomes known through the follow-up
        listing, so a successful create always triggers exactly one
        :meth:`fetch_cars`.
        """
        state = await self._run(
            lambda transport: _cars_api.create_car(self._config, transport, car),
            _ADD,
            lambda _: None,
        )
        if state.error_message is not None:
            return state
        _logger.debug("Created %s, refreshing list", car)
        return await self.fetch_cars()

    async def delete_car(self, car_id: int) -> InventoryState:
        """Delete one car (``DELETE /cars/{id}``) and drop it locally.

        Every local record carrying *car_id* is removed; no re-fetch is
        performed.
        """

        def _remove(_: Any) -> list[Car]:
            return [car for car in self._store.state.cars if car.id != car_id]

        return await self._run(
            lambda transport: _cars_api.delete_car(self._config, transport, car_id),
            _DELETE,
            _remove,
        )

    async def delete_all_cars(self) -> InventoryState:
        """Delete every car (``DELETE /cars/all``) and empty the record set."""
        return await self._run(
            lambda transport: _cars_api.delete_all_cars(self._config, transport),
            _DELETE_ALL,
            lambda _: (),
        )
