"""Custom exception hierarchy for carinventory."""

from __future__ import annotations


class InventoryError(Exception):
    """Base exception for all carinventory errors."""


class InventoryConfigError(InventoryError):
    """Invalid or missing configuration."""


class InventoryTransportError(InventoryError):
    """Network-level failure (connection refused, DNS, timeout)."""

    def __init__(self, message: str, *, endpoint: str = "") -> None:
        self.endpoint = endpoint
        super().__init__(message)


class InventoryInvalidResponseError(InventoryTransportError):
    """The server answered with something that is not a usable HTTP response."""


class InventoryStatusError(InventoryError):
    """Server returned a status code other than the one the endpoint expects.

    ``body`` holds the response text when it could be decoded, ``None``
    otherwise.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        body: str | None = None,
        endpoint: str = "",
    ) -> None:
        self.status_code = status_code
        self.body = body
        self.endpoint = endpoint
        super().__init__(message)


class InventoryDecodeError(InventoryError):
    """Response body could not be parsed into car records."""

    def __init__(self, message: str, *, endpoint: str = "") -> None:
        self.endpoint = endpoint
        super().__init__(message)


class InventoryEncodeError(InventoryError):
    """A car record could not be serialized into a request body."""


class CarValidationError(InventoryError, ValueError):
    """User supplied form input that does not describe a valid car."""
