from unittest.mock import MagicMock

from fastapi import FastAPI
from fastapi.testclient import TestClient

from api.dependencies import rate_limits
from api.routes.system import router as system_router
from infrastructure.configuration import Settings
from infrastructure.services import get_settings


def _make_app() -> FastAPI:
    app = FastAPI()
    rate_limits.setup_rate_limiter(app)
    app.include_router(system_router)
    return app


def test_get_version_unknown(monkeypatch):
    monkeypatch.delenv("GIT_SHA", raising=False)
    client = TestClient(_make_app())

    response = client.get("/version")

    assert response.status_code == 200
    assert response.json() == {"version": "Unknown"}


def test_get_version_known():
    app = _make_app()
    settings = MagicMock(spec=Settings)
    settings.GIT_SHA = "foo"
    app.dependency_overrides[get_settings] = lambda: settings

    response = TestClient(app).get("/version")

    assert response.status_code == 200
    assert response.json() == {"version": "foo"}


def test_health():
    response = TestClient(_make_app()).get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "locales": ["en", "fi"]}
