"""Root test fixtures shared across all test types.

Unit tests run against the in-memory store. Database fixtures live in
tests/integration/conftest.py.
"""

import os

# Set APP_ENV to testing before any app imports
os.environ.setdefault("HUB_APP_ENV", "testing")

# ruff: noqa: E402 - Imports must be after env var setup
from collections.abc import Generator

import pytest
import structlog
from structlog.testing import CapturingLogger

from src.hub.categories import APP, SEO, WEBSITE
from src.hub.core.config import get_settings
from src.hub.core.logging import clear_session_context
from src.hub.repositories import ProjectRepository
from src.hub.schemas import AppProject, SeoProject, WebsiteProject
from src.hub.services import ProjectHub
from src.hub.stores import MemoryCollectionStore
from tests.helpers import TickingClock

# Clear settings cache to ensure test environment variables are picked up
get_settings.cache_clear()


# --- Store and clock ---


@pytest.fixture
def clock() -> TickingClock:
    """Deterministic clock that advances one second per reading."""
    return TickingClock()


@pytest.fixture
def memory_store() -> MemoryCollectionStore:
    return MemoryCollectionStore()


# --- Repositories ---


@pytest.fixture
def website_repo(
    memory_store: MemoryCollectionStore, clock: TickingClock
) -> ProjectRepository[WebsiteProject]:
    return ProjectRepository(WEBSITE, memory_store, clock)


@pytest.fixture
def app_repo(memory_store: MemoryCollectionStore, clock: TickingClock) -> ProjectRepository[AppProject]:
    return ProjectRepository(APP, memory_store, clock)


@pytest.fixture
def seo_repo(memory_store: MemoryCollectionStore, clock: TickingClock) -> ProjectRepository[SeoProject]:
    return ProjectRepository(SEO, memory_store, clock)


@pytest.fixture
def hub(memory_store: MemoryCollectionStore, clock: TickingClock) -> ProjectHub:
    return ProjectHub(memory_store, clock)


# --- Logging ---


@pytest.fixture
def capturing_logger() -> Generator[CapturingLogger]:
    """Route structlog output to a CapturingLogger for the test."""
    cap_logger = CapturingLogger()

    # Save original configuration to restore later
    old_config = structlog.get_config()

    structlog.configure(
        processors=[structlog.contextvars.merge_contextvars],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=lambda *args, **kwargs: cap_logger,
        cache_logger_on_first_use=False,
    )

    clear_session_context()
    yield cap_logger
    clear_session_context()
    structlog.configure(**old_config)
