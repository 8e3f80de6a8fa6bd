"""Health probes and CORS wiring."""

from fastapi.testclient import TestClient

from app import main as app_main
from app.api.dependencies.db import get_session
from app.db import session as db_session
from app.db.session import build_engine
from app.main import create_app


def test_live(client):
    response = client.get("/health/live")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_ready_with_reachable_database(client, engine, monkeypatch):
    monkeypatch.setattr(db_session, "engine", engine)

    response = client.get("/health/ready")

    assert response.status_code == 200
    assert response.json()["checks"]["database"]["status"] == "healthy"


def test_ready_with_unreachable_database(client, tmp_path, monkeypatch):
    missing = tmp_path / "no-such-dir" / "products.db"
    monkeypatch.setattr(db_session, "engine", build_engine(f"sqlite:///{missing}"))

    response = client.get("/health/ready")

    assert response.status_code == 503
    body = response.json()
    assert body["status"] == "unhealthy"
    assert body["checks"]["database"]["status"] == "unhealthy"


def test_cors_preflight_allows_any_local_port(client):
    response = client.options(
        "/api/products",
        headers={
            "Origin": "http://localhost:4321",
            "Access-Control-Request-Method": "POST",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:4321"


def test_cors_rejects_foreign_origin(client):
    response = client.options(
        "/api/products",
        headers={
            "Origin": "https://evil.example.com",
            "Access-Control-Request-Method": "POST",
        },
    )

    assert "access-control-allow-origin" not in response.headers


def test_list_exposes_total_count_header(client, create_product):
    create_product()

    response = client.get("/api/products", headers={"Origin": "http://localhost:3000"})

    assert response.headers["access-control-allow-origin"] == "http://localhost:3000"
    assert "X-Total-Count" in response.headers["access-control-expose-headers"]


def test_custom_api_prefix(settings, db_session):
    app = create_app(settings.model_copy(update={"api_prefix": "/v2"}))

    def _session_override():
        yield db_session

    app.dependency_overrides[get_session] = _session_override

    response = TestClient(app).get("/v2/products")

    assert response.status_code == 200
    assert response.json()["totalElements"] == 0


def test_startup_creates_tables_on_module_engine(settings, monkeypatch):
    calls = []
    monkeypatch.setattr(app_main, "init_db", lambda: calls.append("init"))
    app = create_app(settings.model_copy(update={"auto_create_tables": True}))

    with TestClient(app):
        pass

    assert calls == ["init"]


def test_startup_skips_table_creation_when_disabled(settings, monkeypatch):
    calls = []
    monkeypatch.setattr(app_main, "init_db", lambda: calls.append("init"))

    with TestClient(create_app(settings)):
        pass

    assert calls == []
