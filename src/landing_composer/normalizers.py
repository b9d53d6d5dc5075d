from __future__ import annotations

import logging
import re
from typing import Any, Callable, Mapping, Sequence, TypeVar

from pydantic import ValidationError

from .models.props import (
    BigStatementLayoutProps,
    BigStatementLeftProps,
    BigStatementProps,
    BigStatementRightProps,
    CapabilitiesHeaderProps,
    CapabilitiesProps,
    CapabilityProps,
    CmsItemProps,
    CmsProps,
    CtaMinimalProps,
    ExternalLinkProps,
    FaqItemProps,
    FaqProps,
    HeroMediaProps,
    HeroProps,
    ImageProps,
    Interactive3DProps,
    LinkProps,
    MessageBarProps,
    MessagePartProps,
    PricingHeadingProps,
    PricingPlanProps,
    PricingProps,
    RichInlineProps,
    RichParagraphProps,
    SectionProps,
    ServiceDetailProps,
    StackGridGroupProps,
    StackGridItemProps,
    StackGridProps,
    StudioIntroProps,
    ValueGridCardProps,
    ValueGridProps,
    WordmarkOffsetProps,
)
from .models.sections import (
    SECTION_SCHEMAS,
    CapabilitiesData,
    ContentModel,
    CtaMinimalData,
    FaqData,
    HeroData,
    Interactive3DData,
    MessageBarData,
    PriceAmount,
    PricingData,
    RichParagraph,
    ServiceDetailData,
    StudioIntroData,
    ValueGridData,
    WordmarkOffsetData,
    is_absolute_url,
    is_public_path,
)
from .validation import CANONICAL_KIND_ORDER

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=ContentModel)

HERO_TEXT_DEFAULTS = {
    "kicker": "AGENCIA CREATIVA & TECH",
    "headline": "Límites",
    "tagline": "UX/UI – Branding – Desarrollo Web",
}
HERO_DEFAULT_POSTER = "/images/landing/hero-desktop.webp"
HERO_DEFAULT_ALT = "Hero visual"

BIG_STATEMENT_DEFAULT_LINES = ("BIG", "IDEAS")
BIG_STATEMENT_MAX_LINES = 4
BIG_STATEMENT_CONTAINERS = ("md", "lg", "xl", "2xl")

VALUE_GRID_DEFAULT_TITLE = ("DISEÑO", "SIN LÍMITES")
VALUE_GRID_DEFAULT_CARDS = (
    "De idea a realidad",
    "Diseño UI/UX Intuitivo",
    "Responsivo",
    "Optimización Total",
)
# The second card historically rendered its CMS widget as a chip list.
VALUE_GRID_CHIP_CARD = 1

STACK_GRID_PLACEHOLDER_ICON = "/logos/stack/placeholder.svg"

MESSAGE_BAR_PLACEHOLDER = (
    MessagePartProps(text="Mensaje", highlight=True),
    MessagePartProps(text="Configura messageBar.json", highlight=False),
)

CTA_MINIMAL_DEFAULT = {
    "title": "¿Listo para algo personalizado?",
    "action": {"label": "Habla con nosotros", "href": "/contact"},
}


def unwrap_payload(kind: str, value: Any) -> Any:
    """Return the bare payload whether ``value`` is the payload or a section envelope.

    Accepts ``{"kind": kind, "data": {...}}`` and ``{"kind": kind, ...fields}``.
    """
    if isinstance(value, Mapping) and value.get("kind") == kind:
        if "data" in value:
            return value["data"]
        return {key: item for key, item in value.items() if key != "kind"}
    return value


def _parse(model: type[ModelT], payload: Any) -> ModelT | None:
    if payload is None:
        return None
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        logger.debug(
            "Payload rejected by normalizer",
            extra={"model": model.__name__, "error_count": exc.error_count()},
        )
        return None


def _clip(value: Any, fallback: str, max_length: int) -> str:
    if not isinstance(value, str) or not value.strip():
        return fallback
    return value.strip()[:max_length]


def _text(value: Any) -> str:
    return str(value).strip() if value is not None else ""


def normalize_price(price: str | PriceAmount | Mapping[str, Any]) -> str:
    """Collapse a price into one display string: ``"amount / period"`` or the bare amount."""
    if isinstance(price, str):
        return price
    if isinstance(price, Mapping):
        price = PriceAmount.model_validate(price)
    return f"{price.amount} / {price.period}" if price.period else price.amount


def normalize_hero(payload: Any) -> HeroProps:
    data = _parse(HeroData, payload)
    if data is None:
        return HeroProps(
            **HERO_TEXT_DEFAULTS,
            media=HeroMediaProps(type="image", src=HERO_DEFAULT_POSTER, alt=HERO_DEFAULT_ALT, priority=True),
            align="start",
        )

    media_type = "model" if data.media.kind == "model" else "image"
    poster = None
    priority = None
    if media_type == "model":
        poster = data.media.poster if is_public_path(data.media.poster) else HERO_DEFAULT_POSTER
    else:
        priority = True if data.media.priority is None else data.media.priority

    theme_align = data.theme.align if data.theme else None
    if data.align:
        align = data.align
    elif theme_align in ("start", "center"):
        align = theme_align
    else:
        align = "start"

    return HeroProps(
        kicker=_clip(data.kicker, HERO_TEXT_DEFAULTS["kicker"], 60),
        headline=_clip(data.headline, HERO_TEXT_DEFAULTS["headline"], 120),
        tagline=_clip(data.tagline, HERO_TEXT_DEFAULTS["tagline"], 120),
        media=HeroMediaProps(
            type=media_type,
            src=data.media.src if is_public_path(data.media.src) else HERO_DEFAULT_POSTER,
            alt=_clip(data.media.alt, HERO_DEFAULT_ALT, 140),
            poster=poster,
            priority=priority,
        ),
        align=align,
    )


def normalize_studio_intro(payload: Any) -> StudioIntroProps:
    data = _parse(StudioIntroData, payload)
    if data is None:
        return StudioIntroProps(title="", body="", cta=ExternalLinkProps(label="", href=""))
    href = data.cta.href.strip()
    return StudioIntroProps(
        kicker=(data.kicker or "").strip() or None,
        title=data.title,
        body=data.body,
        cta=ExternalLinkProps(label=data.cta.label, href=href, is_external=is_absolute_url(href)),
    )


def normalize_wordmark_offset(payload: Any) -> WordmarkOffsetProps:
    data = _parse(WordmarkOffsetData, payload)
    if data is None:
        return WordmarkOffsetProps(word="")
    return WordmarkOffsetProps(
        word=data.word,
        image_src=data.media.src if data.media else None,
        image_alt=data.media.alt if data.media else None,
    )


def normalize_capabilities(payload: Any) -> CapabilitiesProps:
    data = _parse(CapabilitiesData, payload)
    if data is None:
        return CapabilitiesProps(header=CapabilitiesHeaderProps(headline="", aside=""))
    return CapabilitiesProps(
        header=CapabilitiesHeaderProps(headline=data.header.headline, aside=data.header.aside),
        items=[CapabilityProps(title=item.title, description=item.description) for item in data.items],
    )


def normalize_big_statement(payload: Any) -> BigStatementProps:
    # Field-by-field so that partially valid content still renders.
    data = payload if isinstance(payload, Mapping) else {}
    left = data.get("left") if isinstance(data.get("left"), Mapping) else {}
    right = data.get("right") if isinstance(data.get("right"), Mapping) else {}
    layout = data.get("layout") if isinstance(data.get("layout"), Mapping) else {}

    raw_lines = left.get("lines")
    lines = []
    if isinstance(raw_lines, list):
        lines = [line for line in raw_lines if isinstance(line, str) and line.strip()][:BIG_STATEMENT_MAX_LINES]

    def optional_text(value: Any) -> str | None:
        return value if isinstance(value, str) and value.strip() else None

    container = layout.get("container")
    return BigStatementProps(
        left=BigStatementLeftProps(
            lines=lines or list(BIG_STATEMENT_DEFAULT_LINES),
            aria_label=optional_text(left.get("ariaLabel")),
        ),
        right=BigStatementRightProps(
            kicker=optional_text(right.get("kicker")),
            headline=optional_text(right.get("headline")) or "—",
            copy_text=optional_text(right.get("copy")) or "",
        ),
        layout=BigStatementLayoutProps(
            container=container if container in BIG_STATEMENT_CONTAINERS else "2xl",
            reverse=layout.get("reverse") if isinstance(layout.get("reverse"), bool) else False,
            bleed_y=layout.get("bleedY") if isinstance(layout.get("bleedY"), bool) else False,
        ),
    )


def normalize_value_grid(payload: Any) -> ValueGridProps:
    data = _parse(ValueGridData, payload)
    if data is None:
        return ValueGridProps(
            title_lines=list(VALUE_GRID_DEFAULT_TITLE),
            cards=tuple(ValueGridCardProps(title=title) for title in VALUE_GRID_DEFAULT_CARDS),
        )

    cards = []
    for index, card in enumerate(data.cards):
        cms = None
        chip: dict[str, Any] = {}
        if card.widget is not None:
            cms = CmsProps(
                title=card.widget.title,
                items=[CmsItemProps(label=item.label, icon=item.icon) for item in card.widget.items],
            )
            if index == VALUE_GRID_CHIP_CARD:
                chip = {
                    "chip_title": card.widget.title,
                    "chip_items": [item.label for item in card.widget.items],
                    "chip_icons": [item.icon for item in card.widget.items],
                }
        cards.append(
            ValueGridCardProps(
                title=card.title,
                body=card.body,
                image=ImageProps(src=card.image.src, alt=card.image.alt) if card.image else None,
                cms=cms,
                **chip,
            )
        )
    return ValueGridProps(title_lines=list(data.title), cards=tuple(cards))


def _stack_grid_item(raw: Any) -> StackGridItemProps:
    item = raw if isinstance(raw, Mapping) else {}
    label = _text(item.get("label"))
    icon = item.get("icon")
    alt = _text(item.get("alt") if item.get("alt") is not None else label)
    return StackGridItemProps(
        label=label,
        icon=str(icon) if icon else STACK_GRID_PLACEHOLDER_ICON,
        alt=alt or "icon",
        href=str(item["href"]) if item.get("href") else None,
        description=_text(item.get("description")) or None,
    )


def normalize_stack_grid(payload: Any) -> StackGridProps:
    groups = payload.get("groups") if isinstance(payload, Mapping) else None
    if not isinstance(groups, list):
        return StackGridProps()
    normalized = []
    for raw in groups:
        group = raw if isinstance(raw, Mapping) else {}
        items = group.get("items") if isinstance(group.get("items"), list) else []
        normalized.append(
            StackGridGroupProps(
                title=_text(group.get("title")) or None,
                items=[_stack_grid_item(item) for item in items],
            )
        )
    return StackGridProps(groups=normalized)


def normalize_message_bar(payload: Any) -> MessageBarProps:
    data = _parse(MessageBarData, payload if payload is not None else {})
    if data is None:
        return MessageBarProps(parts=list(MESSAGE_BAR_PLACEHOLDER), separator=" • ", align="center")
    return MessageBarProps(
        parts=[MessagePartProps(text=part.text, highlight=part.highlight) for part in data.text_parts],
        separator=data.separator,
        align=data.align,
    )


def _rich_paragraph(item: str | RichParagraph) -> RichParagraphProps:
    if isinstance(item, str):
        return RichParagraphProps(children=[RichInlineProps(text=item)])
    return RichParagraphProps(
        children=[RichInlineProps(text=child.text, strong=child.strong) for child in item.children]
    )


def _featured_flags(explicit: Sequence[bool | None]) -> list[bool]:
    # Without an explicit flag the middle card of a three plan layout is featured.
    return [
        flag if flag is not None else (len(explicit) == 3 and index == 1)
        for index, flag in enumerate(explicit)
    ]


def normalize_pricing(payload: Any) -> PricingProps:
    data = _parse(PricingData, payload)
    if data is None:
        return PricingProps(heading=PricingHeadingProps())
    featured = _featured_flags([plan.featured for plan in data.plans])
    return PricingProps(
        heading=PricingHeadingProps(title_lines=list(data.heading.title_lines)),
        aside=[_rich_paragraph(item) for item in data.aside],
        plans=[
            PricingPlanProps(
                id=plan.id,
                name=plan.name,
                price=normalize_price(plan.price),
                features=list(plan.features),
                cta=LinkProps(label=plan.cta.label, href=plan.cta.href),
                badge=plan.badge,
                featured=featured[index],
            )
            for index, plan in enumerate(data.plans)
        ],
        disclaimer=data.disclaimer,
    )


def normalize_cta_minimal(payload: Any) -> CtaMinimalProps:
    data = _parse(CtaMinimalData, payload) or CtaMinimalData.model_validate(CTA_MINIMAL_DEFAULT)
    return CtaMinimalProps(
        title=data.title,
        action=LinkProps(label=data.action.label, href=data.action.href),
        align=data.align or "center",
    )


def faq_item_id(question: str, index: int) -> str:
    slug = re.sub(r"[^a-z0-9]+", "-", question.strip().lower()).strip("-")
    return f"{index}-{slug}"


def normalize_faq(payload: Any) -> FaqProps:
    data = _parse(FaqData, payload)
    if data is None:
        return FaqProps(title="")
    return FaqProps(
        title=data.title,
        items=[
            FaqItemProps(id=faq_item_id(item.question, index), question=item.question, answer=item.answer)
            for index, item in enumerate(data.items)
        ],
    )


def normalize_interactive_3d(payload: Any) -> Interactive3DProps:
    data = _parse(Interactive3DData, payload)
    if data is None:
        return Interactive3DProps(eyebrow="", headline="")
    return Interactive3DProps(eyebrow=data.eyebrow, headline=data.headline, aria_label=data.eyebrow)


def normalize_service_detail(payload: Any) -> ServiceDetailProps:
    data = _parse(ServiceDetailData, payload)
    if data is None:
        return ServiceDetailProps(title="")
    cta = None
    if data.overview and data.overview.cta:
        link = data.overview.cta
        href = link.href or ""
        cta = ExternalLinkProps(
            label=link.label,
            href=href,
            is_external=link.external if link.external is not None else is_absolute_url(href),
        )
    return ServiceDetailProps(
        title=data.header.title,
        subtitle=data.header.subtitle,
        badge=data.header.badge,
        price_range=data.price_range,
        features_left=list(data.features_left or []),
        features_right=list(data.features_right or []),
        tags=list(data.tags or []),
        cta=cta,
    )


Normalizer = Callable[[Any], SectionProps]

NORMALIZERS: Mapping[str, Normalizer] = {
    "hero": normalize_hero,
    "studioIntro": normalize_studio_intro,
    "wordmarkOffset": normalize_wordmark_offset,
    "capabilities": normalize_capabilities,
    "bigStatement": normalize_big_statement,
    "value-grid": normalize_value_grid,
    "stack-grid": normalize_stack_grid,
    "message-bar": normalize_message_bar,
    "pricing": normalize_pricing,
    "cta-minimal": normalize_cta_minimal,
    "faq": normalize_faq,
    "interactive-3d": normalize_interactive_3d,
    "service": normalize_service_detail,
}


def normalize(kind: str, payload: Any) -> SectionProps:
    """Convert a resolved payload (bare or wrapped in its section) into render props."""
    try:
        normalizer = NORMALIZERS[kind]
    except KeyError:
        raise KeyError(f"No normalizer registered for section kind {kind!r}") from None
    return normalizer(unwrap_payload(kind, payload))


def verify_registry() -> None:
    """Fail fast when a canonical kind lacks a schema or a normalizer."""
    missing = [
        kind
        for kind in CANONICAL_KIND_ORDER
        if kind not in SECTION_SCHEMAS or kind not in NORMALIZERS
    ]
    if missing:
        raise RuntimeError(f"Section registry incomplete for kinds: {', '.join(missing)}")


__all__ = [
    "NORMALIZERS",
    "verify_registry",
    "normalize",
    "normalize_price",
    "unwrap_payload",
    "faq_item_id",
    "normalize_hero",
    "normalize_studio_intro",
    "normalize_wordmark_offset",
    "normalize_capabilities",
    "normalize_big_statement",
    "normalize_value_grid",
    "normalize_stack_grid",
    "normalize_message_bar",
    "normalize_pricing",
    "normalize_cta_minimal",
    "normalize_faq",
    "normalize_interactive_3d",
    "normalize_service_detail",
]
