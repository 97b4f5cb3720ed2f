"""Pytest configuration: test environment and shared fixtures."""

import os

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_FILE", "")
os.environ.setdefault("FALLBACK_LOG_FILE", "")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from app.core.dependencies import get_channel_repository, get_dialog_repository  # noqa: E402
from app.main import app  # noqa: E402
from app.repository.v1.channels import ChangeURLDialogRepository, ChannelURLRepository  # noqa: E402
from app.services.v1.channels import ChannelURLService  # noqa: E402

TEAM_URL = "https://chat.example.com/my-team"


@pytest.fixture
def dialog_repository() -> ChangeURLDialogRepository:
    return ChangeURLDialogRepository(ttl=60)


@pytest.fixture
def channel_repository() -> ChannelURLRepository:
    return ChannelURLRepository()


@pytest.fixture
def service(dialog_repository, channel_repository) -> ChannelURLService:
    return ChannelURLService(dialog_repository=dialog_repository, channel_repository=channel_repository)


@pytest.fixture
def client(dialog_repository, channel_repository):
    app.dependency_overrides[get_dialog_repository] = lambda: dialog_repository
    app.dependency_overrides[get_channel_repository] = lambda: channel_repository
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
