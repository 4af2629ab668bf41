"""
Tests for language code handling.
"""

from f10n.core.languages import (
    get_language_name,
    normalize_language_code,
    parse_language_list,
    same_language,
    to_bcp47,
)


class TestLanguageCodes:
    def test_normalize(self):
        assert normalize_language_code("ES") == "es"
        assert normalize_language_code(" pt-br ") == "pt_BR"
        assert normalize_language_code("zh_hant") == "zh_Hant"
        assert normalize_language_code("German") == "de"

    def test_bcp47(self):
        assert to_bcp47("pt_BR") == "pt-BR"
        assert to_bcp47("fr") == "fr"

    def test_same_language(self):
        assert same_language("EN", "en")
        assert not same_language("pt", "pt_BR")

    def test_names(self):
        assert get_language_name("de") == "German"
        assert get_language_name("es_MX") == "Spanish"
        assert get_language_name("xx") == "xx"

    def test_parse_list(self):
        assert parse_language_list("fr de,es  fr") == ["fr", "de", "es"]
        assert parse_language_list(["IT", "tr,pt-BR"]) == ["it", "tr", "pt_BR"]
