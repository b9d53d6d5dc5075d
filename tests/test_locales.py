from landing_composer.locales import (
    DEFAULT_LOCALE,
    LOCALES,
    alternate_locales,
    is_locale,
    negotiate_locale,
    normalize_locale,
)


def test_normalize_locale_maps_regional_tags_to_base():
    assert normalize_locale("en-US") == "en"
    assert normalize_locale("es_PE") == "es"
    assert normalize_locale("EN") == "en"


def test_normalize_locale_defaults_for_unsupported_values():
    assert DEFAULT_LOCALE == "es"
    assert normalize_locale("fr") == "es"
    assert normalize_locale(None) == "es"
    assert normalize_locale("") == "es"


def test_is_locale():
    assert is_locale("es")
    assert is_locale("en-GB")
    assert not is_locale("de")
    assert not is_locale(42)


def test_negotiate_locale_uses_first_supported_language():
    assert negotiate_locale("de-DE,de;q=0.9,en-US;q=0.8,es;q=0.7") == "en"
    assert negotiate_locale(["fr", "es-MX"]) == "es"
    assert negotiate_locale("fr-FR", fallback="en") == "en"
    assert negotiate_locale(None) == "es"


def test_alternate_locales():
    assert LOCALES == ("es", "en")
    assert alternate_locales("es") == ["en"]
    assert alternate_locales("en-US") == ["es"]
