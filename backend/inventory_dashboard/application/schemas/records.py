"""Typed shapes of each collection's field bag."""

from typing import Any

from pydantic import BaseModel, field_validator


def _blank_to_none(value: Any) -> Any:
    """Treat empty or whitespace-only input as an absent value."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


class InventoryItemFields(BaseModel):
    """Field bag of an inventory item; every key optional."""

    name: str | None = None
    sku: str | None = None
    category: str | None = None
    quantity: int | None = None
    min_quantity: int | None = None
    unit_price: float | None = None
    location: str | None = None

    model_config = {"extra": "allow"}

    @field_validator("quantity", "min_quantity", "unit_price", mode="before")
    @classmethod
    def _coerce_number(cls, value: Any) -> Any:
        return _blank_to_none(value)


class CategoryFields(BaseModel):
    """Field bag of a category record."""

    name: str | None = None

    model_config = {"extra": "allow"}


class LocationFields(BaseModel):
    """Field bag of a location record."""

    name: str | None = None
    description: str | None = None

    model_config = {"extra": "allow"}
