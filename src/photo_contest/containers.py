"""Dependency container wiring for the application."""

from dataclasses import dataclass

from photo_contest.config import Settings
from photo_contest.services.dispatcher import Dispatcher
from photo_contest.services.registry import PhotoRegistry


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    registry: PhotoRegistry
    dispatcher: Dispatcher


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container with a fresh registry."""
    resolved_settings = settings or Settings()
    registry = PhotoRegistry()
    return AppContainer(
        settings=resolved_settings,
        registry=registry,
        dispatcher=Dispatcher(registry),
    )
