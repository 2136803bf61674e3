"""Building entity — the product of the builder and the prototype for copies."""

from __future__ import annotations
from enum import Enum
from typing import Any
from uuid import UUID, uuid4
from pydantic import BaseModel, Field


class BuildingType(str, Enum):
    RESIDENTIAL = "Residential"
    COMMERCIAL = "Commercial"


class Building(BaseModel):
    """
    An identity-bearing building record.

    Equality and hashing use `id` only: two buildings with the same
    type/floors/color but different ids are different buildings.
    `clone()` and `model_copy()` always issue a fresh id. Passing `id=`
    to the constructor reuses that id as-is.
    """
    id: UUID = Field(default_factory=uuid4, frozen=True)
    type: str = Field(frozen=True)  # Open-ended label, BuildingType lists the common ones
    floors: int | None = None
    color: str | None = None

    def clone(self) -> Building:
        """Copy the attribute values into a new building with a fresh id."""
        return Building(type=self.type, floors=self.floors, color=self.color)

    def model_copy(
        self, *, update: dict[str, Any] | None = None, deep: bool = False,
    ) -> Building:
        update = dict(update or {})
        update["id"] = uuid4()
        return super().model_copy(update=update, deep=deep)

    def describe(self, verb: str = "Built") -> str:
        return (
            f"{verb} {self.type} building with {self.floors or 0} floors "
            f"and color {self.color or ''}"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Building):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
