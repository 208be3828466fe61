"""Car collection endpoints: ``/cars``, ``/cars/{id}`` and ``/cars/all``.

Each function performs exactly one HTTP round trip and raises a typed
:mod:`carinventory.exceptions` error for anything other than the
expected status.  State handling lives in :mod:`carinventory.client`.
"""

from __future__ import annotations

import logging

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from carinventory._constants import DELETE_ALL_SEGMENT, STATUS_CREATED, STATUS_DELETED, STATUS_LIST_OK
from carinventory._transport import Transport, TransportResponse
from carinventory.config import InventoryConfig
from carinventory.exceptions import InventoryDecodeError, InventoryEncodeError, InventoryStatusError
from carinventory.models.car import Car

_logger = logging.getLogger(__name__)

_CAR_LIST = TypeAdapter(list[Car])


def describe_validation_error(exc: ValidationError) -> str:
    """Summarise the first pydantic error as ``"<location>: <message>"``."""
    errors = exc.errors(include_url=False)
    if not errors:
        return str(exc)
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = str(first.get("msg", "invalid value"))
    extra = f" (+{len(errors) - 1} more)" if len(errors) > 1 else ""
    if location:
        return f"{location}: {message}{extra}"
    return f"{message}{extra}"


def _expect_status(response: TransportResponse, expected: int, endpoint: str) -> None:
    if response.status == expected:
        return
    raise InventoryStatusError(
        f"HTTP {response.status} from {endpoint} (expected {expected})",
        status_code=response.status,
        body=response.text,
        endpoint=endpoint,
    )


def encode_car(car: Car) -> str:
    """Serialize *car* into a create request body.

    The id is never sent; the server assigns it on insert.
    """
    if car.is_persisted:
        _logger.debug("Dropping id %s from create payload", car.id)
    try:
        return car.model_dump_json(by_alias=True, exclude_none=True, exclude={"id"})
    except (PydanticSerializationError, TypeError, ValueError) as exc:
        raise InventoryEncodeError(str(exc)) from exc


def decode_car_list(text: str | None, *, endpoint: str = "") -> list[Car]:
    """Parse a JSON array of cars, keeping server order."""
    if text is None:
        raise InventoryDecodeError("No data received from server.", endpoint=endpoint)
    try:
        return _CAR_LIST.validate_json(text)
    except ValidationError as exc:
        raise InventoryDecodeError(describe_validation_error(exc), endpoint=endpoint) from exc


async def fetch_car_list(config: InventoryConfig, transport: Transport) -> list[Car]:
    """GET the collection and return every car the server knows about."""
    endpoint = config.collection_path
    response = await transport.request("GET", endpoint)
    _expect_status(response, STATUS_LIST_OK, endpoint)
    cars = decode_car_list(response.text, endpoint=endpoint)
    _logger.debug("Fetched %d cars", len(cars))
    return cars


async def create_car(config: InventoryConfig, transport: Transport, car: Car) -> None:
    """POST a new car.

    The response body is ignored: callers must re-fetch the collection to
    learn the server-assigned id.
    """
    endpoint = config.collection_path
    body = encode_car(car)
    response = await transport.request("POST", endpoint, json_body=body)
    _expect_status(response, STATUS_CREATED, endpoint)


async def delete_car(config: InventoryConfig, transport: Transport, car_id: int) -> None:
    """DELETE a single car by id."""
    endpoint = f"{config.collection_path}/{int(car_id)}"
    response = await transport.request("DELETE", endpoint)
    _expect_status(response, STATUS_DELETED, endpoint)


async def delete_all_cars(config: InventoryConfig, transport: Transport) -> None:
    """DELETE every car in the collection."""
    endpoint = f"{config.collection_path}/{DELETE_ALL_SEGMENT}"
    response = await transport.request("DELETE", endpoint)
    _expect_status(response, STATUS_DELETED, endpoint)
