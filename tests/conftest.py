"""
Shared fixtures for the cat management tests.

Every test gets a fresh repository and, for HTTP tests, a fresh
application with rate limiting disabled.
"""

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from app.application.cats.cat_service import CatService
from app.core.config import Settings
from app.infrastructure.cats.in_memory_cat_repository import InMemoryCatRepository
from app.main import create_app


class FakeClock:
    """Clock that returns a fixed time until advanced."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float = 1.0) -> None:
        self.now = self.now + timedelta(seconds=seconds)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def repository(clock: FakeClock) -> InMemoryCatRepository:
    return InMemoryCatRepository(clock=clock)


@pytest.fixture
def service(repository: InMemoryCatRepository) -> CatService:
    return CatService(repository=repository)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(rate_limit_enabled=False, log_level="WARNING", docs_enabled=True)


@pytest.fixture
def client(test_settings: Settings, repository: InMemoryCatRepository) -> TestClient:
    app = create_app(settings=test_settings, repository=repository)
    return TestClient(app)
