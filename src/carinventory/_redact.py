"""Helpers for safe debug logging of HTTP traffic.

Request and response bodies can be arbitrarily large and header maps may
carry credentials added by a reverse proxy.  Everything here works on
what the transport actually logs: header mappings and JSON (or plain
text) bodies.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

_SENSITIVE_KEYS: frozenset[str] = frozenset(
    {
        "authorization",
        "proxy-authorization",
        "cookie",
        "set-cookie",
        "x-api-key",
        "token",
        "password",
    }
)

_REDACTED = "<redacted>"


def _truncate(text: str, max_string: int) -> str:
    if len(text) > max_string:
        return f"{text[:max_string]}…<truncated>"
    return text


def redact_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Copy *headers* with credential-bearing values hidden."""
    return {name: _REDACTED if name.lower() in _SENSITIVE_KEYS else value for name, value in headers.items()}


def redact_for_log(value: Any, *, max_string: int = 512) -> Any:
    """Return a copy of a decoded JSON value suitable for debug logs.

    Object members with sensitive names are hidden and long strings are
    truncated.  JSON numbers, booleans and ``null`` pass through.
    """
    if isinstance(value, str):
        return _truncate(value, max_string)
    if isinstance(value, Mapping):
        return {
            str(key): _REDACTED
            if str(key).lower() in _SENSITIVE_KEYS
            else redact_for_log(item, max_string=max_string)
            for key, item in value.items()
        }
    if isinstance(value, list):
        return [redact_for_log(item, max_string=max_string) for item in value]
    return value


def redact_body_for_log(text: str | None, *, max_string: int = 256) -> Any:
    """Redact an HTTP body for logging, parsing it as JSON when possible.

    JSON bodies are redacted structurally so sensitive keys inside objects
    are hidden; anything else is logged as truncated text.
    """
    if text is None:
        return None
    try:
        parsed = json.loads(text)
    except ValueError:
        return _truncate(text, max_string)
    return redact_for_log(parsed, max_string=max_string)
