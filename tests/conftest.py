from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session


def pytest_configure() -> None:
    # Ensure a local .env cannot leak production settings into the test run.
    os.environ["ENVIRONMENT"] = "test"


@pytest.fixture()
def settings(tmp_path: Path):
    from jobboard.config import Settings

    return Settings(
        environment="test",
        db_url=f"sqlite:///{tmp_path / 'test.db'}",
        jwt_secret="test-secret",
        rate_limit_enabled=False,
    )


@pytest.fixture()
def app(settings):
    from jobboard.main import create_app

    return create_app(settings)


@pytest.fixture()
def client(app) -> Iterator[TestClient]:
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def database(client) -> Any:
    # The same handle the running app uses, so API calls and direct ORM access see one DB.
    return client.app.state.database


@pytest.fixture()
def db_session(database) -> Iterator[Session]:
    with database.session() as session:
        yield session
