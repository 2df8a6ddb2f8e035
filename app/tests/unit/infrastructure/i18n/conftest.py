"""Feature-level fixtures for i18n system tests.

Provides bundle directories and loaders for locale resolution and
translation scenarios.
"""

import pytest

from infrastructure.i18n import YAMLTranslationLoader
from tests.factories.i18n import write_bundles


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create temporary directory with sample YAML bundles.

    Returns a directory structure like:
    - labelsbundle.yml
    - labelsbundle.en.yml
    - labelsbundle.fi.yml
    """
    return write_bundles(tmp_path)


@pytest.fixture
def yaml_loader(temp_translations_dir):
    """Create YAMLTranslationLoader for temporary translations directory."""
    return YAMLTranslationLoader(temp_translations_dir)


@pytest.fixture
def accept_language_headers():
    """Collection of Accept-Language headers for testing."""
    return {
        "simple_fi": "fi",
        "regional_fi": "fi-FI",
        "with_quality": "fi-FI,fi;q=0.9,en;q=0.8",
        "unsupported_first": "fr-FR,fr;q=0.9,en;q=0.5",
        "wildcard": "*,fi;q=0.5",
        "invalid_quality": "en;q=invalid,fi",
    }
