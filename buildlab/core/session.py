"""Build session — owns the current result and its copies across actions."""

from __future__ import annotations

import logging

from buildlab.core.errors import CopyCountOutOfRange, NoCurrentResult
from buildlab.models import Building, SessionState

logger = logging.getLogger(__name__)


class BuildSession:
    """
    Holds the most recently built building and the list of its copies.

    The mutation surface is `record_result`, `copy_current` and
    `clear_copies`. Recording a new result replaces the copy source;
    existing copies are kept.
    """

    def __init__(self, min_copies: int = 1, max_copies: int = 10) -> None:
        self.min_copies = min_copies
        self.max_copies = max_copies
        self.result: Building | None = None
        self.copies: list[Building] = []

    @property
    def state(self) -> SessionState:
        if self.result is None:
            return SessionState.EMPTY
        if self.copies:
            return SessionState.HAS_RESULT_AND_COPIES
        return SessionState.HAS_RESULT_ONLY

    @property
    def can_copy(self) -> bool:
        return self.result is not None

    @property
    def can_clear(self) -> bool:
        return len(self.copies) > 0

    def record_result(self, building: Building) -> None:
        self.result = building
        logger.info("Recorded %s (%s)", building.describe(), building.id)

    def copy_current(self, count: int) -> list[Building]:
        """
        Append `count` clones of the current result, one clone() per copy.

        Raises NoCurrentResult if nothing has been built yet and
        CopyCountOutOfRange if `count` is outside the session bounds.
        """
        if self.result is None:
            raise NoCurrentResult()
        if not self.min_copies <= count <= self.max_copies:
            raise CopyCountOutOfRange(count, self.min_copies, self.max_copies)

        clones = [self.result.clone() for _ in range(count)]
        self.copies.extend(clones)
        logger.info(
            "Copied %s %d time(s); %d copies total",
            self.result.id, count, len(self.copies),
        )
        return clones

    def clear_copies(self) -> int:
        """Remove every copy. Returns how many were removed."""
        removed = len(self.copies)
        self.copies.clear()
        logger.info("Deleted %d copies", removed)
        return removed
