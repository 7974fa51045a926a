"""Pytest configuration and shared fixtures for Asgard API tests."""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from asgard_api.app.core.config import Settings
from asgard_api.app.core.db import init_db
from asgard_api.app.main import create_app
from asgard_api.app.repositories import Repositories, memory_repositories, sqlite_repositories


@pytest.fixture
def database_path(tmp_path: Path) -> str:
    """Provide a migrated SQLite database in a temporary directory."""
    path = str(tmp_path / "asgard-test.db")
    init_db(path)
    return path


@pytest.fixture
def test_settings(database_path: str) -> Settings:
    return Settings(database_url=database_path, health_timeout_seconds=1.0)


@pytest.fixture(params=["sqlite", "memory"])
def repositories(request, database_path: str) -> Repositories:
    """Run a test once against each implementation of the ports."""
    if request.param == "sqlite":
        return sqlite_repositories(database_path)
    return memory_repositories()


@pytest.fixture
def sqlite_repos(database_path: str) -> Repositories:
    return sqlite_repositories(database_path)


@pytest.fixture
def client(repositories: Repositories, test_settings: Settings):
    """HTTP client over an app backed by each repository implementation."""
    app = create_app(repositories, settings=test_settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sqlite_client(sqlite_repos: Repositories, test_settings: Settings):
    app = create_app(sqlite_repos, settings=test_settings)
    with TestClient(app) as test_client:
        yield test_client
