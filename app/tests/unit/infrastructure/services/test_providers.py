"""
Unit tests for dependency injection providers.

Tests cover:
- Provider caching behavior
- Providers built from environment settings
- Dependency override pattern for testing
"""

from unittest.mock import MagicMock

from fastapi import FastAPI
from fastapi.testclient import TestClient

from infrastructure.configuration import Settings
from infrastructure.i18n import Locale, LocaleResolver, TranslationService
from infrastructure.services.dependencies import (
    GreetServiceDep,
    LocaleResolverDep,
    SettingsDep,
    TranslationServiceDep,
)
from infrastructure.services.providers import (
    get_greet_service,
    get_locale_cookie,
    get_locale_resolver,
    get_settings,
    get_translation_service,
)
from modules.greeting import GreetService
from tests.factories.i18n import make_translator


class TestGetSettings:
    """Tests for get_settings() provider function."""

    def test_get_settings_returns_cached_instance(self):
        result1 = get_settings()
        result2 = get_settings()

        assert isinstance(result1, Settings)
        assert result1 is result2

    def test_get_settings_cache_can_be_cleared(self):
        instance1 = get_settings()
        get_settings.cache_clear()
        instance2 = get_settings()

        assert instance1 is not instance2


class TestI18nProviders:
    """Tests for translation and locale providers."""

    def test_translation_service_is_singleton(self):
        service = get_translation_service()

        assert isinstance(service, TranslationService)
        assert service is get_translation_service()

    def test_translation_service_loads_configured_bundles(self):
        service = get_translation_service()

        assert service.translate(Locale("fi"), "yourName") == "Nimesi"

    def test_translation_service_uses_translations_dir(self, monkeypatch, tmp_path):
        (tmp_path / "labelsbundle.en.yml").write_text("yourName: Custom name\n")
        monkeypatch.setenv("TRANSLATIONS_DIR", str(tmp_path))

        service = get_translation_service()

        assert service.translate(Locale("en"), "yourName") == "Custom name"

    def test_locale_resolver_follows_supported_locales(self, monkeypatch):
        monkeypatch.setenv("SUPPORTED_LOCALES", "fi,en")

        resolver = get_locale_resolver()

        assert isinstance(resolver, LocaleResolver)
        assert resolver.default_locale == Locale("fi")

    def test_locale_cookie_from_server_settings(self, monkeypatch):
        monkeypatch.setenv("LOCALE_COOKIE_NAME", "lang")
        monkeypatch.setenv("LOCALE_COOKIE_MAX_AGE", "60")

        cookie = get_locale_cookie()

        assert cookie.name == "lang"
        assert cookie.max_age == 60

    def test_greet_service_shares_translation_service(self):
        greet_service = get_greet_service()

        assert isinstance(greet_service, GreetService)
        assert greet_service.translation_service is get_translation_service()


class TestDependencyOverridePattern:
    """Tests for FastAPI dependency override pattern."""

    def test_settings_dep_with_dependency_override(self):
        app = FastAPI()

        @app.get("/config")
        def get_config(settings: SettingsDep) -> dict:
            return {"prefix": settings.PREFIX}

        mock_settings = MagicMock(spec=Settings)
        mock_settings.PREFIX = "test-"
        app.dependency_overrides[get_settings] = lambda: mock_settings

        response = TestClient(app).get("/config")

        assert response.json() == {"prefix": "test-"}

    def test_translation_service_dep_override(self):
        app = FastAPI()

        @app.get("/label")
        def get_label(translation: TranslationServiceDep) -> dict:
            return {"label": translation.translate(Locale("en"), "yourName")}

        translator = make_translator(catalogs={"en": {"yourName": "Overridden"}})
        app.dependency_overrides[get_translation_service] = lambda: TranslationService(
            translator=translator
        )

        response = TestClient(app).get("/label")

        assert response.json() == {"label": "Overridden"}

    def test_locale_and_greet_deps(self):
        app = FastAPI()

        @app.get("/hello")
        def hello(resolver: LocaleResolverDep, greet_service: GreetServiceDep) -> dict:
            locale = resolver.resolve("fi", None)
            return {"greeting": greet_service.greet("Ada", locale)}

        response = TestClient(app).get("/hello")

        assert response.json() == {"greeting": "Hei Ada"}
