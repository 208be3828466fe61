"""Client configuration for carinventory."""

from __future__ import annotations

import dataclasses
import os
from typing import Any
from urllib.parse import urlsplit

from carinventory._constants import BASE_URL, COLLECTION_PATH, DEFAULT_REQUEST_TIMEOUT, USER_AGENT
from carinventory.exceptions import InventoryConfigError


@dataclasses.dataclass(frozen=True)
class InventoryConfig:
    """Client configuration.

    Parameters
    ----------
    base_url : str
        Scheme, host and port of the inventory server
        (e.g. ``"http://192.168.1.100:3000"``).  A trailing slash is
        stripped.
    collection_path : str
        Path of the car collection resource.  Defaults to ``"/cars"``.
    request_timeout : float
        Total per-request timeout in seconds handed to aiohttp.
    user_agent : str
        Value of the ``User-Agent`` header sent with every request.
    """

    base_url: str = BASE_URL
    collection_path: str = COLLECTION_PATH
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    user_agent: str = USER_AGENT

    def __post_init__(self) -> None:
        base_url = str(self.base_url).strip().rstrip("/")
        parts = urlsplit(base_url)
        if parts.scheme not in {"http", "https"} or not parts.netloc:
            raise InventoryConfigError(f"base_url must be an http(s) URL, got {self.base_url!r}")
        object.__setattr__(self, "base_url", base_url)

        path = str(self.collection_path).strip()
        if not path.strip("/"):
            raise InventoryConfigError("collection_path must be non-empty")
        object.__setattr__(self, "collection_path", "/" + path.strip("/"))

        try:
            timeout = float(self.request_timeout)
        except (TypeError, ValueError) as exc:
            raise InventoryConfigError(f"request_timeout must be numeric, got {self.request_timeout!r}") from exc
        if timeout <= 0:
            raise InventoryConfigError(f"request_timeout must be positive, got {timeout}")
        object.__setattr__(self, "request_timeout", timeout)

    @classmethod
    def from_env(cls, **overrides: Any) -> InventoryConfig:
        """Create configuration from environment variables.

        Reads ``CARINV_BASE_URL``, ``CARINV_COLLECTION_PATH``,
        ``CARINV_REQUEST_TIMEOUT`` and ``CARINV_USER_AGENT``.  Explicit
        keyword arguments override environment values.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "CARINV_BASE_URL": "base_url",
            "CARINV_COLLECTION_PATH": "collection_path",
            "CARINV_USER_AGENT": "user_agent",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        # request_timeout is numeric, handle separately
        timeout_env = env.get("CARINV_REQUEST_TIMEOUT")
        if timeout_env is not None and "request_timeout" not in overrides:
            try:
                config_kwargs["request_timeout"] = float(timeout_env)
            except ValueError as exc:
                raise InventoryConfigError(f"CARINV_REQUEST_TIMEOUT is not a number: {timeout_env!r}") from exc

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
