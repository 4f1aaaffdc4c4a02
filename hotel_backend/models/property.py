"""Pydantic models representing property domain objects."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, List, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


def _whole_number(value: Any) -> Any:
    # 100.0 is accepted as 100; 12.5 still fails the strict int check
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


NonEmptyText = Annotated[str, Field(strict=True, min_length=1)]
StateCode = Annotated[str, Field(strict=True, min_length=2, max_length=2)]
RoomCount = Annotated[int, Field(strict=True, gt=0), BeforeValidator(_whole_number)]
Currency = Annotated[float, Field(strict=True, ge=0, allow_inf_nan=False)]
Fraction = Annotated[float, Field(strict=True, ge=0, le=1, allow_inf_nan=False)]

REQUIRED_FIELDS = ("name", "city", "state", "rooms", "adr", "occupancy", "revpar")
DESCRIPTIVE_FIELDS = ("rating", "amenities", "description", "address", "status")
MUTABLE_FIELDS = REQUIRED_FIELDS + DESCRIPTIVE_FIELDS


class PropertyAttributes(BaseModel):
    name: str
    city: str
    state: str
    rooms: int
    adr: float
    occupancy: float
    revpar: float
    rating: Optional[float] = None
    amenities: List[str] = Field(default_factory=list)
    description: Optional[str] = None
    address: Optional[str] = None
    status: str = "ACTIVE"


class PropertyInput(PropertyAttributes):
    """Write payload for create and update; revpar is taken as given."""

    model_config = ConfigDict(extra="ignore")

    name: NonEmptyText
    city: NonEmptyText
    state: StateCode
    rooms: RoomCount
    adr: Currency
    occupancy: Fraction
    revpar: Currency


class Property(PropertyAttributes):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    created_at: datetime = Field(alias="createdAt")


class FieldError(BaseModel):
    field: str
    message: str


class DeleteResponse(BaseModel):
    message: str


__all__ = [
    "PropertyAttributes",
    "PropertyInput",
    "Property",
    "FieldError",
    "DeleteResponse",
    "REQUIRED_FIELDS",
    "DESCRIPTIVE_FIELDS",
    "MUTABLE_FIELDS",
]
