"""Base model for car inventory payloads.

Every wire model inherits from :class:`InventoryBaseModel` which
provides:

* frozen instances, so snapshots handed to observers cannot be mutated.
* ``populate_by_name=True`` so models can be built from either the
  Python field names or the server's JSON keys.
* ``extra="ignore"`` so additional server columns do not break parsing.
* strict typing: the server must send JSON integers for integer fields.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class InventoryBaseModel(BaseModel):
    """Base for inventory wire models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        strict=True,
    )

    def to_payload(self, **kwargs: Any) -> dict[str, Any]:
        """Return the JSON-ready dict using the server's key names.

        ``None`` fields are omitted.
        """
        return self.model_dump(by_alias=True, exclude_none=True, mode="json", **kwargs)
