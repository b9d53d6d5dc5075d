import pytest

from landing_composer.composer import GenericBlock, PageComposer, SectionBlock, compose, compose_page
from landing_composer.fallbacks import StaticFallbackStore, fallback
from landing_composer.models.props import FaqProps
from landing_composer.normalizers import NORMALIZERS, normalize
from landing_composer.sanitizer import sanitize


def test_output_mirrors_input_order_and_length():
    sections = [
        {"kind": "faq", "data": fallback("faq", "en")},
        {"kind": "newsletter", "data": {"placeholder": "you@example.com"}},
        "not a section",
        {"data": {"orphan": True}},
        {"kind": "hero", "data": fallback("hero", "en")},
    ]

    blocks = compose(sections, "en")

    assert len(blocks) == len(sections)
    assert [block.kind for block in blocks] == ["faq", "generic", "generic", "generic", "hero"]
    assert blocks[1] == GenericBlock(kind_name="newsletter", data={"placeholder": "you@example.com"})
    assert blocks[2] == GenericBlock(kind_name="unknown")
    assert blocks[3].kind_name == "unknown"
    assert blocks[3].data == {"orphan": True}


def test_generic_block_wire_shape():
    (block,) = compose([{"kind": "promo-banner", "data": [1, 2]}])

    assert block.model_dump() == {"kind": "generic", "kindName": "promo-banner", "data": [1, 2]}


def test_missing_data_is_filled_from_locale_fallback():
    (es_block,) = compose([{"kind": "faq"}], "es")
    (en_block,) = compose([{"kind": "faq"}], "en-US")

    assert isinstance(es_block, SectionBlock)
    assert es_block.props.title == fallback("faq", "es")["title"]
    assert en_block.props.title == fallback("faq", "en")["title"]


def test_unsupported_locale_uses_default_locale():
    (block,) = compose([{"kind": "cta-minimal"}], "fr")

    assert block.props.title == fallback("cta-minimal", "es")["title"]


def test_legacy_inline_data_is_recovered_before_normalizing():
    legacy = fallback("hero", "es")
    del legacy["align"]
    legacy["theme"] = {"align": "center"}
    legacy["ctaText"] = "Ver más"

    (block,) = compose([{"kind": "hero", "data": legacy}], "es")

    assert block.props.align == "center"
    assert block.props.headline == legacy["headline"]


def test_unrecoverable_inline_data_falls_back():
    (block,) = compose([{"kind": "pricing", "data": {"plans": "pronto"}}], "es")

    assert [plan.price for plan in block.props.plans] == ["S/ 1,890 / único", "S/ 3,490 / único", "A medida"]
    assert [plan.featured for plan in block.props.plans] == [False, True, False]


def test_section_envelopes_are_unwrapped():
    data = fallback("interactive-3d", "en")

    (block,) = compose([{"kind": "interactive-3d", "data": {"kind": "interactive-3d", "data": data}}], "en")

    assert block.props.aria_label == data["eyebrow"]


def test_composition_ignores_canonical_order():
    blocks = compose([{"kind": "faq"}, {"kind": "hero"}], "es")

    assert [block.kind for block in blocks] == ["faq", "hero"]


def test_missing_fallback_yields_minimal_props():
    composer = PageComposer(fallbacks=StaticFallbackStore({}))

    (block,) = composer.compose([{"kind": "faq"}], "en")

    assert block.props == FaqProps(title="")


def test_failing_normalizer_is_replaced_by_minimal_props():
    def flaky(payload):
        if payload is not None:
            raise RuntimeError("boom")
        return FaqProps(title="")

    composer = PageComposer(normalizers={**NORMALIZERS, "faq": flaky})

    (block,) = composer.compose([{"kind": "faq"}], "es")

    assert block.props.title == ""


@pytest.mark.parametrize("sections", [None, "hero", 42, {"kind": "hero"}])
def test_non_list_input_composes_to_nothing(sections):
    assert compose(sections, "es") == []


def test_compose_page_accepts_page_shaped_objects_only():
    page = {"kind": "page", "sections": [{"kind": "faq"}]}

    assert [block.kind for block in compose_page(page, "en")] == ["faq"]
    assert compose_page({"kind": "page"}, "en") == []
    assert compose_page("page", "en") == []


def test_section_block_wire_shape():
    (block,) = compose([{"kind": "studioIntro"}], "en")

    dumped = block.model_dump()
    assert dumped["kind"] == "studioIntro"
    assert dumped["props"]["cta"] == {"label": "Meet the studio", "href": "/en/contact", "isExternal": False}


LEGACY_PAYLOADS = {
    "hero": {
        "kicker": "  ESTUDIO ",
        "headline": "Ideas que se mueven",
        "tagline": "Branding – Web",
        "media": {"kind": "image", "src": " /images/hero.webp ", "alt": "Escultura", "loop": True},
        "theme": {"align": "center", "tone": "dark"},
        "ctaText": "Ver más",
    },
    "value-grid": {
        "title": "DISEÑO\nSIN\nLÍMITES\nEXTRA",
        "cards": [
            {"eyebrow": "De idea a realidad", "subtitle": "Convertimos tu idea en producto."},
            {"title": "Diseño UI/UX", "body": "Interfaces claras.", "chip": {"items": ["Blog", {"label": "Tienda", "icon": "/i/s.svg"}, ""]}},
            {"title": "Responsivo", "body": "Cualquier pantalla.", "image": {"src": "/img/r.webp", "alt": "Pantallas", "width": 640}},
            {"title": "Optimización Total", "body": "Rendimiento y SEO."},
            {"title": "Sobrante", "body": "Se descarta."},
        ],
    },
    "service": {
        "kind": "service",
        "key": "landing",
        "header": {"title": "  Landing Page ", "subtitle": " Lista en semanas ", "badge": "Popular"},
        "pricing": {"note": "Precio desde: S/ 1,890", "plans": []},
        "featuresLeft": ["Diseño a medida", "  ", 3, "SEO básico "],
        "featuresRight": "no es una lista",
        "faq": [{"q": "¿?", "a": "..."}],
    },
}


@pytest.mark.parametrize("kind", sorted(LEGACY_PAYLOADS))
def test_legacy_data_composes_like_its_sanitized_form(kind):
    legacy = LEGACY_PAYLOADS[kind]

    (from_legacy,) = compose([{"kind": kind, "data": legacy}], "es")
    (from_sanitized,) = compose([{"kind": kind, "data": sanitize(kind, legacy)}], "es")

    assert from_legacy.props == from_sanitized.props
    assert from_legacy.props != normalize(kind, fallback(kind, "es"))


@pytest.mark.parametrize("locale", ["es", "en"])
@pytest.mark.parametrize("kind", ["hero", "value-grid", "service", "faq", "pricing"])
def test_missing_data_composes_exactly_like_the_fallback(kind, locale):
    (block,) = compose([{"kind": kind}], locale)

    assert block.props == normalize(kind, fallback(kind, locale))


@pytest.mark.parametrize(("kind", "kind_name"), [("", ""), (5, "5"), (None, "unknown")])
def test_generic_block_keeps_any_present_kind_as_text(kind, kind_name):
    (block,) = compose([{"kind": kind, "data": {"x": 1}}], "es")

    assert block.model_dump() == {"kind": "generic", "kindName": kind_name, "data": {"x": 1}}
