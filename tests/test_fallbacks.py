import pytest

from landing_composer.fallbacks import (
    DEFAULT_FALLBACK_STORE,
    FallbackMissingError,
    StaticFallbackStore,
    fallback,
)
from landing_composer.locales import LOCALES
from landing_composer.models.sections import SECTION_SCHEMAS
from landing_composer.validation import validate_section


@pytest.mark.parametrize("locale", LOCALES)
@pytest.mark.parametrize("kind", sorted(SECTION_SCHEMAS))
def test_every_kind_has_a_valid_fallback_in_every_locale(kind, locale):
    result = validate_section(kind, fallback(kind, locale))

    assert result.ok, result.issues


def test_locales_have_distinct_copy():
    assert fallback("faq", "es")["title"] != fallback("faq", "en")["title"]
    assert DEFAULT_FALLBACK_STORE.kinds("es") == DEFAULT_FALLBACK_STORE.kinds("en")


def test_fallbacks_are_copies():
    payload = fallback("hero", "es")
    payload["headline"] = "cambiado"
    payload["media"]["src"] = "/otra.webp"

    fresh = fallback("hero", "es")
    assert fresh["headline"] != "cambiado"
    assert fresh["media"]["src"] == "/images/landing/hero-desktop.webp"


def test_missing_fallback_raises_lookup_error():
    store = StaticFallbackStore({"es": {}})

    with pytest.raises(FallbackMissingError):
        store.get("hero", "es")
    with pytest.raises(LookupError):
        store.get("hero", "en")
