"""Tests for infrastructure.i18n.translator module."""

import pytest

from infrastructure.i18n import Locale, TranslationCatalog, Translator
from tests.factories.i18n import make_translation_catalog, make_translator


class TestTranslator:
    """Tests for Translator."""

    def test_translator_from_loaded_catalogs(self, yaml_loader, en, fi):
        translator = Translator(yaml_loader.load_all(), yaml_loader.load_base())

        assert set(translator.get_available_locales()) == {en, fi}
        assert translator.base_catalog.get_message("fi") == "Suomi"
        assert translator.translate_message("yourName", fi) == "Nimesi"

    def test_empty_translator(self, en):
        translator = Translator({})

        assert translator.get_available_locales() == []
        assert translator.base_catalog.locale is None
        assert translator.translate_message("yourName", en) == "yourName"

    def test_catalogs_are_read_only(self):
        translator = make_translator()

        with pytest.raises(TypeError):
            translator.catalogs[Locale("sv")] = TranslationCatalog(Locale("sv"))

    def test_source_mapping_is_copied(self, en):
        catalogs = {en: make_translation_catalog(en)}
        translator = Translator(catalogs)

        catalogs.clear()

        assert translator.get_available_locales() == [en]

    def test_translate_message(self, en, fi):
        translator = make_translator()

        assert translator.translate_message("yourName", en) == "Your name"
        assert translator.translate_message("yourName", fi) == "Nimesi"

    def test_translate_with_positional_argument(self, en, fi):
        translator = make_translator()

        assert translator.translate_message("helloName", en, ["Ada"]) == "Hello Ada"
        assert translator.translate_message("helloName", fi, ["Ada"]) == "Hei Ada"

    def test_translate_with_several_arguments(self, en):
        translator = make_translator(catalogs={"en": {"pair": "{1} and {0}, {0}"}})

        assert translator.translate_message("pair", en, ["a", "b"]) == "b and a, a"

    def test_arguments_are_stringified(self, en):
        translator = make_translator(catalogs={"en": {"count": "{0} items"}})

        assert translator.translate_message("count", en, [3]) == "3 items"

    def test_missing_argument_leaves_placeholder(self, en):
        translator = make_translator()

        assert translator.translate_message("helloName", en) == "Hello {0}"

    def test_extra_arguments_are_ignored(self, en):
        translator = make_translator()

        assert translator.translate_message("yourName", en, ["unused"]) == "Your name"

    def test_non_positional_braces_are_kept(self, en):
        translator = make_translator(catalogs={"en": {"raw": "{name} {0}"}})

        assert translator.translate_message("raw", en, ["x"]) == "{name} x"

    def test_falls_back_to_base_bundle(self, en, fi):
        translator = make_translator()

        # Language names exist only in the base bundle
        assert translator.translate_message("fi", en) == "Suomi"
        assert translator.translate_message("en", fi) == "English"

    def test_locale_bundle_overrides_base(self, en):
        translator = make_translator(
            catalogs={"en": {"title": "Locale title"}},
            base={"title": "Base title"},
        )

        assert translator.translate_message("title", en) == "Locale title"

    def test_regional_locale_falls_back_to_language(self):
        translator = make_translator()

        assert translator.translate_message("yourName", Locale("fi-FI")) == "Nimesi"

    def test_unknown_locale_uses_base_then_key(self):
        translator = make_translator()
        sv = Locale("sv")

        assert translator.translate_message("en", sv) == "English"
        assert translator.translate_message("yourName", sv) == "yourName"

    def test_missing_key_returns_key(self, en):
        translator = make_translator()

        assert translator.translate_message("no.such.key", en) == "no.such.key"

    def test_missing_base_bundle_returns_key(self, en):
        translator = make_translator(base={})

        assert translator.translate_message("fi", en) == "fi"

    def test_has_message(self, en):
        translator = make_translator()

        assert translator.has_message("yourName", en)
        assert not translator.has_message("missing", en)
        # Base bundle keys do not count for a locale
        assert not translator.has_message("fi", en)
        assert not translator.has_message("yourName", Locale("sv"))

    @pytest.mark.parametrize("tag", ["en", "fi"])
    @pytest.mark.parametrize(
        "key",
        ["selectLanguage", "yourName", "helloButton", "helloAnonymous", "helloName"],
    )
    def test_every_label_translated_for_every_locale(self, tag, key):
        translator = make_translator()
        message = translator.translate_message(key, Locale(tag))

        assert message
        assert message != key
