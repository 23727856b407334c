"""Shared fixtures: a fresh SQLite database per test behind the real app."""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from geocapture.core.config import Settings
from geocapture.core.db import LocationStore
from geocapture.main import create_app
from geocapture.models.location import Location


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        database_url=f"sqlite:///{tmp_path / 'test.db'}",
        app_env="test",
        log_level="DEBUG",
        log_file=None,
        redirect_url="https://example.com/next",
    )


@pytest.fixture
def store(settings: Settings) -> LocationStore:
    store = LocationStore(settings.database_url)
    yield store
    store.dispose()


@pytest.fixture
def client(settings: Settings, store: LocationStore):
    app = create_app(settings=settings, store=store)
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client


@pytest.fixture
def count_locations(store: LocationStore):
    def _count() -> int:
        with store.session() as db:
            return db.query(Location).count()

    return _count
