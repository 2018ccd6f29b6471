from __future__ import annotations

import os
from datetime import datetime, timedelta
from typing import Any, Callable

import pytest
from fastapi.testclient import TestClient


BASE_TIME = datetime(2024, 1, 1, 9, 0, 0)


def pytest_configure() -> None:
    # Ensure the SQLAlchemy engine is created against sqlite for tests.
    os.environ["DATABASE_URL"] = "sqlite:///./test.db"
    os.environ["ENVIRONMENT"] = "test"
    os.environ["DEFAULT_LANGUAGE"] = "english"
    os.environ.setdefault("LOG_LEVEL", "WARNING")


@pytest.fixture()
def db() -> Any:
    from jobsearch.database import Base, SessionLocal, engine
    import jobsearch.models  # noqa: F401

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)

    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(db) -> Any:
    from jobsearch.main import create_app

    app = create_app()
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def add_jobs(db) -> Callable[..., list[Any]]:
    """Insert jobs through the seeding path so search vectors are built like production.

    Each dict overrides the defaults below; jobs without an explicit ``created_at`` get
    increasing timestamps one minute apart starting at BASE_TIME.
    """

    from jobsearch.data.seed import JobSeed, seed_jobs

    counter = {"n": 0}

    def _add(*overrides: dict[str, Any]) -> list[Any]:
        seeds = []
        for item in overrides:
            counter["n"] += 1
            data: dict[str, Any] = {
                "company": "Acme Corp",
                "title": "Software Engineer",
                "description": "Build and maintain web services.",
                "language": "english",
                "created_at": BASE_TIME + timedelta(minutes=counter["n"]),
            }
            data.update(item)
            seeds.append(JobSeed.model_validate(data))
        return seed_jobs(db, seeds)

    return _add
