import sys
from pathlib import Path

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `infrastructure.i18n`) works regardless of pytest invocation.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest  # noqa: E402

from infrastructure.i18n import Locale  # noqa: E402
from infrastructure.logging import configure_logging  # noqa: E402
from infrastructure.services import providers  # noqa: E402

configure_logging()


@pytest.fixture(autouse=True)
def clear_provider_caches():
    """Reset cached providers so environment overrides apply per test."""
    yield
    providers.get_greet_service.cache_clear()
    providers.get_locale_cookie.cache_clear()
    providers.get_locale_resolver.cache_clear()
    providers.get_translation_service.cache_clear()
    providers.get_settings.cache_clear()


@pytest.fixture
def en():
    return Locale.from_string("en")


@pytest.fixture
def fi():
    return Locale.from_string("fi")


@pytest.fixture
def supported_locales(en, fi):
    return [en, fi]
