"""Building builders — fluent construction of Building entities.

A builder holds one in-progress building. Setters mutate it and return
the builder so calls can be chained:

    ConcreteBuildingBuilder("Residential").set_floors(5).set_color("Blue").build()
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TypeVar

from buildlab.models.building import Building

B = TypeVar("B", bound="BuildingBuilder")


class BuildingBuilder(ABC):
    """Interface shared by all building builders."""

    @abstractmethod
    def set_floors(self: B, number: int) -> B:
        """Store the floor count. No range check is applied."""
        ...

    @abstractmethod
    def set_color(self: B, color: str) -> B:
        """Store the color label. The empty string is a valid color."""
        ...

    @abstractmethod
    def build(self) -> Building:
        """Return the building under construction."""
        ...


class ConcreteBuildingBuilder(BuildingBuilder):
    """
    Builder that writes straight into the Building it returns.

    `build()` hands out the held instance itself, not a copy, and may be
    called repeatedly. Callers that need an independent instance clone it.
    """

    def __init__(self, type: str) -> None:
        self._building = Building(type=type)

    def set_floors(self, number: int) -> ConcreteBuildingBuilder:
        self._building.floors = number
        return self

    def set_color(self, color: str) -> ConcreteBuildingBuilder:
        self._building.color = color
        return self

    def build(self) -> Building:
        return self._building
