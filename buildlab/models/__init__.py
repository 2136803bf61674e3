from .building import Building, BuildingType
from .session import SessionState

__all__ = [
    "Building", "BuildingType",
    "SessionState",
]
