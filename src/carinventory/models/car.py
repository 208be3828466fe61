"""Car record model and form-input validation."""

from __future__ import annotations

import re
from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator

from carinventory._constants import MIN_CAR_YEAR
from carinventory.exceptions import CarValidationError
from carinventory.models._base import InventoryBaseModel

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


class Car(InventoryBaseModel):
    """A single car record.

    ``id`` is ``None`` for records that only exist client-side as a
    pending creation payload; the server assigns it on insert.
    """

    id: int | None = Field(default=None, alias="car_id")
    make: str
    model: str = Field(alias="model_name")
    year: int
    price: int

    @property
    def is_persisted(self) -> bool:
        """Whether the record refers to a server-side row."""
        return self.id is not None

    def __str__(self) -> str:
        return f"{self.year} {self.make} {self.model}"


def _parse_int(value: str) -> int | None:
    if not _INTEGER_RE.fullmatch(value):
        return None
    return int(value)


class CarDraft(BaseModel):
    """Raw form input for a new car, before validation.

    Make and model are trimmed; year and price are kept exactly as typed,
    so surrounding whitespace makes them invalid.  :meth:`to_car` applies
    the add-car form rules and builds a :class:`Car` without an id.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    make: str = ""
    model: str = ""
    year: str = ""
    price: str = ""

    @field_validator("make", "model")
    @classmethod
    def _trim(cls, value: str) -> str:
        return value.strip()

    def validate_input(self, *, current_year: int | None = None) -> tuple[int, int]:
        """Check the form rules and return the parsed ``(year, price)``.

        Rules are checked in field order and the first failure wins.

        Raises
        ------
        CarValidationError
            With a user-facing message for the first invalid field.
        """
        if current_year is None:
            current_year = date.today().year

        if not self.make:
            raise CarValidationError("Make cannot be empty.")
        if not self.model:
            raise CarValidationError("Model cannot be empty.")

        year = _parse_int(self.year)
        if year is None or not MIN_CAR_YEAR <= year <= current_year + 1:
            raise CarValidationError("Year must be a valid number (e.g., 2023).")

        price = _parse_int(self.price)
        if price is None or price <= 0:
            raise CarValidationError("Price must be a positive number.")

        return year, price

    def to_car(self, *, current_year: int | None = None) -> Car:
        """Validate the draft and return the car to submit."""
        year, price = self.validate_input(current_year=current_year)
        return Car(make=self.make, model=self.model, year=year, price=price)
