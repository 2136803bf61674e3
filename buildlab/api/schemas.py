"""API request/response schemas."""

from __future__ import annotations
from uuid import UUID
from pydantic import BaseModel

from buildlab.core.session import BuildSession
from buildlab.models import Building, BuildingType, SessionState


class BuildRequest(BaseModel):
    """Form fields as typed by the user."""
    type: str = BuildingType.RESIDENTIAL.value
    floors: str = ""
    color: str = ""


class CopyRequest(BaseModel):
    """Request body for POST /copies."""
    count: int | None = None  # None = configured default


class BuildingOut(BaseModel):
    id: UUID
    type: str
    floors: int | None
    color: str | None
    label: str

    @classmethod
    def from_building(cls, building: Building, verb: str) -> BuildingOut:
        return cls(
            id=building.id,
            type=building.type,
            floors=building.floors,
            color=building.color,
            label=building.describe(verb),
        )


class SessionResponse(BaseModel):
    """Everything the form displays after an action."""
    state: SessionState
    result: BuildingOut | None = None
    copies: list[BuildingOut] = []
    can_copy: bool = False
    can_clear: bool = False

    @classmethod
    def from_session(cls, session: BuildSession) -> SessionResponse:
        result = None
        if session.result is not None:
            result = BuildingOut.from_building(session.result, "Built")
        return cls(
            state=session.state,
            result=result,
            copies=[BuildingOut.from_building(b, "Copied") for b in session.copies],
            can_copy=session.can_copy,
            can_clear=session.can_clear,
        )
