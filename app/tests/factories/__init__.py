"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_locale,
    make_translation_catalog,
    make_translator,
    write_bundles,
)

__all__ = [
    "make_locale",
    "make_translation_catalog",
    "make_translator",
    "write_bundles",
]
