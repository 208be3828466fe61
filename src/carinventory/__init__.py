"""carinventory - Async Python client for a REST car inventory."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("carinventory")
except PackageNotFoundError:
    __version__ = "0+local"
from carinventory.client import CarInventoryClient
from carinventory.config import InventoryConfig
from carinventory.exceptions import (
    CarValidationError,
    InventoryConfigError,
    InventoryDecodeError,
    InventoryEncodeError,
    InventoryError,
    InventoryInvalidResponseError,
    InventoryStatusError,
    InventoryTransportError,
)
from carinventory.models import Car, CarDraft
from carinventory.state import InventoryState, StateStore

__all__ = [
    "__version__",
    "Car",
    "CarDraft",
    "CarInventoryClient",
    "CarValidationError",
    "InventoryConfig",
    "InventoryConfigError",
    "InventoryDecodeError",
    "InventoryEncodeError",
    "InventoryError",
    "InventoryInvalidResponseError",
    "InventoryState",
    "InventoryStatusError",
    "InventoryTransportError",
    "StateStore",
]
