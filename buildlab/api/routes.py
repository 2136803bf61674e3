"""FastAPI route definitions."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from buildlab.services.building_service import BuildingService
from buildlab.api.schemas import (
    BuildRequest, CopyRequest, SessionResponse,
)

router = APIRouter()


def get_service(request: Request) -> BuildingService:
    """The service owned by the running app."""
    return request.app.state.service


@router.get("/types", response_model=list[str])
async def list_types(service: BuildingService = Depends(get_service)) -> list[str]:
    """Building types offered by the form."""
    return service.building_types()


@router.post("/build", response_model=SessionResponse)
async def build_building(
    request: BuildRequest,
    service: BuildingService = Depends(get_service),
) -> SessionResponse:
    """Build a building from the form fields and make it the current result."""
    service.build(request.type, request.floors, request.color)
    return SessionResponse.from_session(service.session)


@router.post("/copies", response_model=SessionResponse)
async def copy_building(
    request: CopyRequest,
    service: BuildingService = Depends(get_service),
) -> SessionResponse:
    """Append clones of the current result."""
    service.copy(request.count)
    return SessionResponse.from_session(service.session)


@router.delete("/copies", response_model=SessionResponse)
async def delete_copies(service: BuildingService = Depends(get_service)) -> SessionResponse:
    service.clear()
    return SessionResponse.from_session(service.session)


@router.get("/session", response_model=SessionResponse)
async def get_session(service: BuildingService = Depends(get_service)) -> SessionResponse:
    return SessionResponse.from_session(service.session)


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
