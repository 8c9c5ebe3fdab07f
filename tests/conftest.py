"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from photo_contest.api.app import create_app
from photo_contest.config import Settings
from photo_contest.containers import AppContainer
from photo_contest.services.dispatcher import Dispatcher
from photo_contest.services.registry import PhotoRegistry

IMAGE_URI = "data:image/jpeg;base64,ZmFrZS1pbWFnZQ=="


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="test", max_request_bytes=1024 * 1024)


@pytest.fixture
def registry() -> PhotoRegistry:
    return PhotoRegistry()


@pytest.fixture
def dispatcher(registry: PhotoRegistry) -> Dispatcher:
    return Dispatcher(registry)


@pytest.fixture
def container(
    settings: Settings, registry: PhotoRegistry, dispatcher: Dispatcher
) -> AppContainer:
    return AppContainer(settings=settings, registry=registry, dispatcher=dispatcher)


@pytest.fixture
def client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))
