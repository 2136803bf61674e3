"""Exceptions raised by the building core."""

from __future__ import annotations


class BuildLabError(Exception):
    """Base class for all buildlab errors."""


class NoCurrentResult(BuildLabError):
    """A copy was requested before any building was recorded."""

    def __init__(self) -> None:
        super().__init__("No building has been built yet; build one before copying")


class CopyCountOutOfRange(BuildLabError, ValueError):
    """The requested number of copies is outside the allowed bounds."""

    def __init__(self, count: int, minimum: int, maximum: int) -> None:
        self.count = count
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            f"Number of copies must be between {minimum} and {maximum}, got {count}"
        )
