"""Dialog-scoped form value objects.

Each dialog owns its own form instance. A form is passed into a submit
operation and a fresh one is returned on success, so no input state is
shared between the add and edit dialogs.
"""

from typing import Any

from pydantic import BaseModel, field_validator

from inventory_dashboard.application.schemas.records import (
    CategoryFields,
    InventoryItemFields,
    LocationFields,
)
from inventory_dashboard.domain.entities import Record

DEFAULT_CATEGORY = "electronics"
DEFAULT_MIN_QUANTITY = 10


class InventoryItemForm(BaseModel):
    """Input of the add/edit inventory item dialog."""

    name: str = ""
    sku: str = ""
    category: str = DEFAULT_CATEGORY
    quantity: int = 0
    min_quantity: int = DEFAULT_MIN_QUANTITY
    unit_price: float = 0
    location: str = ""

    @field_validator("quantity", "unit_price", mode="before")
    @classmethod
    def _blank_number_is_zero(cls, value: Any) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            return 0
        return value

    @field_validator("min_quantity", mode="before")
    @classmethod
    def _blank_min_is_default(cls, value: Any) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            return DEFAULT_MIN_QUANTITY
        return value

    @classmethod
    def empty(cls, min_quantity: int = DEFAULT_MIN_QUANTITY) -> "InventoryItemForm":
        return cls(min_quantity=min_quantity)

    @classmethod
    def from_record(
        cls, record: Record, min_quantity: int = DEFAULT_MIN_QUANTITY
    ) -> "InventoryItemForm":
        """Prefill an edit form; falsy values fall back to the new-item defaults.

        Stored counts that are fractional or not numbers at all are read
        through ``Record.number`` and truncated to whole units.
        """
        return cls(
            name=record.text("name"),
            sku=record.text("sku"),
            category=record.text("category") or DEFAULT_CATEGORY,
            quantity=int(record.number("quantity")),
            min_quantity=int(record.number("min_quantity")) or min_quantity,
            unit_price=record.number("unit_price"),
            location=record.text("location"),
        )

    def to_fields(self, partial: bool = False) -> InventoryItemFields:
        """Field bag for the store; ``partial`` keeps only explicitly set fields."""
        return InventoryItemFields(**self.model_dump(exclude_unset=partial))


class CategoryForm(BaseModel):
    """Input of the add/edit category dialog."""

    name: str = ""

    @classmethod
    def from_record(cls, record: Record) -> "CategoryForm":
        return cls(name=record.text("name"))

    def to_fields(self, partial: bool = False) -> CategoryFields:
        return CategoryFields(**self.model_dump(exclude_unset=partial))


class LocationForm(BaseModel):
    """Input of the add/edit location dialog."""

    name: str = ""
    description: str = ""

    @classmethod
    def from_record(cls, record: Record) -> "LocationForm":
        return cls(name=record.text("name"), description=record.text("description"))

    def to_fields(self, partial: bool = False) -> LocationFields:
        return LocationFields(**self.model_dump(exclude_unset=partial))
