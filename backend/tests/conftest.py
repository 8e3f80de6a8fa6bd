"""Shared fixtures: an in-memory SQLite store and a wired test client."""

from __future__ import annotations

import os

# Must be set before anything imports app.core.config / app.db.session.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("AUTO_CREATE_TABLES", "false")

from collections.abc import Callable, Generator
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import Engine
from sqlalchemy.orm import Session, sessionmaker

from app.api.dependencies.db import get_session
from app.core.config import Settings
from app.db.base import Base
from app.db.session import build_engine, init_db
from app.main import create_app
from app.repositories.product_repository import ProductRepository
from app.services.product_mapper import ProductMapper
from app.services.product_service import ProductService


@pytest.fixture
def engine() -> Generator[Engine, None, None]:
    engine = build_engine("sqlite://")
    init_db(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db_session(engine: Engine) -> Generator[Session, None, None]:
    session = sessionmaker(bind=engine, autoflush=False, autocommit=False)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def repository(db_session: Session) -> ProductRepository:
    return ProductRepository(db_session)


@pytest.fixture
def service(repository: ProductRepository) -> ProductService:
    return ProductService(repository, ProductMapper())


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, database_url="sqlite://", auto_create_tables=False)


@pytest.fixture
def application(settings: Settings, db_session: Session) -> FastAPI:
    app = create_app(settings)

    def _session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[get_session] = _session_override
    return app


@pytest.fixture
def client(application: FastAPI) -> TestClient:
    return TestClient(application)


@pytest.fixture
def create_product(client: TestClient) -> Callable[..., dict[str, Any]]:
    """POST a product through the API and return the response body."""

    def _create(**overrides: Any) -> dict[str, Any]:
        payload = {"name": "Laptop Dell Inspiron", "price": 1500000}
        payload.update(overrides)
        response = client.post("/api/products", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _create
