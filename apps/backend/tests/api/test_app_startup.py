"""
Tests for application startup and the health route.
"""

import pytest
from fastapi.testclient import TestClient

from app.agent.exceptions import ConfigurationError
from app.core.config import Settings
from conftest import StubProvider


@pytest.fixture
def patch_settings(monkeypatch):
    for var in ("LLM_PROVIDER", "LLM_API_KEY", "OPENAI_API_KEY", "GEMINI_API_KEY", "LL_MODEL"):
        monkeypatch.delenv(var, raising=False)

    def _apply(**values):
        monkeypatch.setattr("app.main.settings", Settings(_env_file=None, **values))

    return _apply


class TestStartup:

    def test_missing_api_key_fails_fast(self, patch_settings):
        from app.main import create_app
        patch_settings(LLM_PROVIDER="openai")

        with pytest.raises(ConfigurationError):
            with TestClient(create_app()):
                pass

    @pytest.mark.parametrize("provider_name", ["openai", "gemini"])
    def test_configured_provider_reported_by_health(self, patch_settings, provider_name):
        from app.main import create_app
        patch_settings(LLM_PROVIDER=provider_name, LLM_API_KEY="test-key")

        with TestClient(create_app()) as client:
            response = client.get("/api/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "provider": provider_name}

    def test_injected_provider_skips_configuration(self, patch_settings):
        from app.main import create_app
        patch_settings(LLM_PROVIDER="openai")

        with TestClient(create_app(provider=StubProvider(reply="{}"))) as client:
            response = client.get("/api/health")

        assert response.json()["provider"] == "stub"


class TestCors:

    PREFLIGHT = {"Access-Control-Request-Method": "POST"}

    def test_wildcard_origins_do_not_allow_credentials(self, patch_settings):
        from app.main import create_app
        patch_settings(ALLOWED_ORIGINS=["*"])

        with TestClient(create_app(provider=StubProvider(reply="{}"))) as client:
            response = client.options(
                "/api/analyze", headers={"Origin": "https://any.example", **self.PREFLIGHT}
            )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"
        assert "access-control-allow-credentials" not in response.headers

    def test_explicit_origins_allow_credentials(self, patch_settings):
        from app.main import create_app
        patch_settings(ALLOWED_ORIGINS=["http://localhost:3000"])

        with TestClient(create_app(provider=StubProvider(reply="{}"))) as client:
            allowed = client.options(
                "/api/analyze", headers={"Origin": "http://localhost:3000", **self.PREFLIGHT}
            )
            rejected = client.options(
                "/api/analyze", headers={"Origin": "https://any.example", **self.PREFLIGHT}
            )

        assert allowed.headers["access-control-allow-origin"] == "http://localhost:3000"
        assert allowed.headers["access-control-allow-credentials"] == "true"
        assert rejected.status_code == 400
