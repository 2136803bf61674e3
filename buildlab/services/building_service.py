"""High-level building service — facade for the API layer."""

from __future__ import annotations

import logging
import re

from buildlab.config import BuildLabSettings, get_settings
from buildlab.core.builder import ConcreteBuildingBuilder
from buildlab.core.session import BuildSession
from buildlab.models import Building

logger = logging.getLogger(__name__)

INTEGER_RE = re.compile(r"[+-]?[0-9]+")


class BuildingService:
    """Turns raw form inputs into builder calls and session updates."""

    def __init__(
        self,
        settings: BuildLabSettings | None = None,
        session: BuildSession | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.session = session or BuildSession(
            min_copies=self.settings.min_copies,
            max_copies=self.settings.max_copies,
        )

    @staticmethod
    def parse_floors(text: str) -> int | None:
        """Parse the floors field; anything that is not an integer means unset."""
        if isinstance(text, str) and INTEGER_RE.fullmatch(text):
            return int(text)
        logger.debug("Floors %r is not an integer; leaving floors unset", text)
        return None

    def build(self, type: str, floors_text: str, color_text: str) -> Building:
        builder = ConcreteBuildingBuilder(type)

        floors = self.parse_floors(floors_text)
        if floors is not None:
            builder.set_floors(floors)
        builder.set_color(color_text)

        building = builder.build()
        self.session.record_result(building)
        return building

    def copy(self, count: int | None = None) -> list[Building]:
        if count is None:
            count = self.settings.default_copies
        return self.session.copy_current(count)

    def clear(self) -> int:
        return self.session.clear_copies()

    def building_types(self) -> list[str]:
        return list(self.settings.building_types)
