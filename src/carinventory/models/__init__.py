"""Data models for the car inventory API."""

from carinventory.models._base import InventoryBaseModel
from carinventory.models.car import Car, CarDraft

__all__ = [
    "Car",
    "CarDraft",
    "InventoryBaseModel",
]
