"""Shared pytest fixtures."""

import pytest
from fastapi.testclient import TestClient

from buildlab.api.main import create_app
from buildlab.config import BuildLabSettings
from buildlab.core.session import BuildSession
from buildlab.services.building_service import BuildingService


@pytest.fixture
def settings() -> BuildLabSettings:
    return BuildLabSettings(_env_file=None)


@pytest.fixture
def session() -> BuildSession:
    return BuildSession()


@pytest.fixture
def service(settings: BuildLabSettings) -> BuildingService:
    return BuildingService(settings)


@pytest.fixture
def client(settings: BuildLabSettings) -> TestClient:
    return TestClient(create_app(settings))
