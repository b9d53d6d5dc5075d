from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Annotated, Any, Literal, Mapping, Union

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field, StringConstraints
from pydantic.alias_generators import to_camel

PUBLIC_PATH_RE = re.compile(r"/(?!/)\S*")
ABSOLUTE_URL_RE = re.compile(r"https?://", re.IGNORECASE)
SAFE_HREF_RE = re.compile(r"(/|https?://|mailto:|tel:|#)")


def is_public_path(value: object) -> bool:
    return isinstance(value, str) and PUBLIC_PATH_RE.fullmatch(value) is not None


def is_absolute_url(value: object) -> bool:
    return isinstance(value, str) and ABSOLUTE_URL_RE.match(value) is not None


def _public_path(value: str) -> str:
    if not is_public_path(value):
        raise ValueError('must be a public path starting with "/"')
    return value


def _public_path_or_url(value: str) -> str:
    if not (is_public_path(value) or is_absolute_url(value)):
        raise ValueError("href must be a public path starting with '/' or an absolute URL")
    return value


def _safe_href(value: str) -> str:
    if SAFE_HREF_RE.match(value) is None:
        raise ValueError("href must be a public path or a valid URL")
    return value


def _title_lines(value: Any) -> Any:
    # Accepts a newline separated string or a list and keeps non-empty trimmed strings.
    if isinstance(value, str):
        return [line.strip() for line in value.splitlines() if line.strip()]
    if isinstance(value, (list, tuple)):
        return [item.strip() for item in value if isinstance(item, str) and item.strip()]
    return value


def bounded_text(min_length: int = 1, max_length: int | None = None):
    return Annotated[
        str,
        StringConstraints(strip_whitespace=True, min_length=min_length, max_length=max_length),
    ]


Text = bounded_text(1)
LineText = bounded_text(1, 120)
ImageAlt = bounded_text(3, 160)
WidgetLabel = bounded_text(2, 40)
WidgetTitle = bounded_text(2, 24)
CardTitle = bounded_text(3, 80)
CardBody = bounded_text(3, 400)
MessageText = bounded_text(1, 160)
CtaTitle = bounded_text(3)
FaqTitle = bounded_text(2, 120)
FaqQuestion = bounded_text(3, 240)
FaqAnswer = bounded_text(3, 2000)
Line = Annotated[str, StringConstraints(min_length=1)]
PublicPath = Annotated[str, StringConstraints(strip_whitespace=True), AfterValidator(_public_path)]
LinkHref = Annotated[str, AfterValidator(_public_path_or_url)]
SafeHref = Annotated[str, StringConstraints(min_length=1), AfterValidator(_safe_href)]


class ContentModel(BaseModel):
    """Base for section payloads: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class StrictContentModel(ContentModel):
    model_config = ConfigDict(extra="forbid")


# hero


class HeroMedia(ContentModel):
    kind: str
    src: str
    alt: str
    priority: bool | None = None
    poster: str | None = None


class HeroTheme(ContentModel):
    align: str | None = None


class HeroData(StrictContentModel):
    kicker: str
    headline: str
    tagline: str
    media: HeroMedia
    align: Literal["start", "center"] | None = None
    # Older content stored the alignment under ``theme``.
    theme: HeroTheme | None = None


# studioIntro


class StudioIntroCta(ContentModel):
    label: Text
    href: Text


class StudioIntroData(ContentModel):
    kicker: str | None = None
    title: Text
    body: Text
    cta: StudioIntroCta


# wordmarkOffset


class WordmarkMedia(ContentModel):
    kind: Literal["image"]
    src: PublicPath
    alt: str | None = None


class WordmarkOffsetData(ContentModel):
    word: Text
    media: WordmarkMedia | None = None


# capabilities


class CapabilitiesHeader(ContentModel):
    headline: Text
    aside: str


class CapabilityImage(ContentModel):
    src: str
    alt: str | None = None


class CapabilityItem(ContentModel):
    title: Text
    description: str
    image: CapabilityImage | None = None


class CapabilitiesData(ContentModel):
    header: CapabilitiesHeader
    items: list[CapabilityItem] = Field(min_length=1)


# bigStatement


class BigStatementLeft(ContentModel):
    lines: list[Text] = Field(min_length=1, max_length=4)
    aria_label: Text | None = None


class BigStatementRight(ContentModel):
    kicker: Text | None = None
    headline: Text
    copy_text: Text = Field(alias="copy")


class BigStatementLayout(ContentModel):
    reverse: bool | None = None
    container: Literal["md", "lg", "xl", "2xl"] | None = None
    bleed_y: bool | None = None


class BigStatementData(ContentModel):
    left: BigStatementLeft
    right: BigStatementRight
    layout: BigStatementLayout | None = None


# value-grid

TitleLines = Annotated[
    list[LineText],
    BeforeValidator(_title_lines),
    Field(min_length=1, max_length=3),
]


class ValueGridImage(StrictContentModel):
    src: PublicPath
    alt: ImageAlt


class CmsWidgetItem(StrictContentModel):
    label: WidgetLabel
    icon: PublicPath | None = None


class CmsWidget(StrictContentModel):
    kind: Literal["cms"]
    title: WidgetTitle
    items: list[CmsWidgetItem] = Field(min_length=1, max_length=4)


class ValueGridCard(StrictContentModel):
    title: CardTitle
    body: CardBody
    image: ValueGridImage | None = None
    widget: CmsWidget | None = None


class ValueGridData(StrictContentModel):
    title: TitleLines
    # Fixed positions: idea, UI/UX (may carry the CMS widget), responsive, optimization.
    cards: tuple[ValueGridCard, ValueGridCard, ValueGridCard, ValueGridCard]


# stack-grid


class StackGridItem(StrictContentModel):
    label: Text
    icon: PublicPath
    alt: Text
    description: Text | None = None


class StackGridGroup(StrictContentModel):
    title: Text | None = None
    items: list[StackGridItem] = Field(min_length=1)


class StackGridData(ContentModel):
    groups: list[StackGridGroup] = Field(min_length=1)


# message-bar


class MessageBarTextPart(ContentModel):
    text: MessageText
    highlight: bool = False


class MessageBarData(ContentModel):
    text_parts: list[MessageBarTextPart] = Field(min_length=1)
    separator: str = " • "
    align: Literal["left", "center", "right"] = "center"


# pricing


class RichInline(ContentModel):
    text: Line
    strong: bool | None = None


class RichParagraph(ContentModel):
    type: Literal["p"]
    children: list[RichInline] = Field(min_length=1)


class PriceAmount(ContentModel):
    amount: Line
    period: Line | None = None


class PlanCta(ContentModel):
    label: Line
    href: SafeHref


class PricingPlan(ContentModel):
    id: Line
    name: Line
    price: Union[Line, PriceAmount]
    features: list[Line] = Field(min_length=1)
    cta: PlanCta
    badge: str | None = None
    featured: bool | None = None


class PricingHeading(ContentModel):
    title_lines: list[Line] = Field(min_length=1)


class PricingData(ContentModel):
    heading: PricingHeading
    aside: list[Union[Line, RichParagraph]] = Field(min_length=1)
    plans: list[PricingPlan] = Field(min_length=1)
    disclaimer: Line | None = None


# cta-minimal


class CtaAction(ContentModel):
    label: Text
    href: LinkHref


class CtaMinimalData(ContentModel):
    title: CtaTitle
    action: CtaAction
    align: Literal["center", "left", "right"] | None = None


# faq


class FaqItem(ContentModel):
    question: FaqQuestion
    answer: FaqAnswer


class FaqData(ContentModel):
    title: FaqTitle
    items: list[FaqItem] = Field(min_length=1)


# interactive-3d


class Interactive3DData(StrictContentModel):
    eyebrow: Text
    headline: Text


# service (service detail document)


class ServiceCtaLink(StrictContentModel):
    label: Line
    href: Line | None = None
    external: bool | None = None


class ServiceHeader(StrictContentModel):
    title: Line
    subtitle: str | None = None
    badge: str | None = None


class ServiceOverview(StrictContentModel):
    cta: ServiceCtaLink | None = None


class ServiceSeo(StrictContentModel):
    title: Line | None = None
    description: Line | None = None


class ServiceDetailData(StrictContentModel):
    kind: Literal["service"] | None = None
    key: Literal["landing", "website", "ecommerce", "custom"] | None = None
    header: ServiceHeader
    price_range: Line | None = None
    features_left: list[Line] | None = None
    features_right: list[Line] | None = None
    tags: list[Line] | None = None
    overview: ServiceOverview | None = None
    seo: ServiceSeo | None = None


@dataclass(frozen=True)
class SectionSchema:
    kind: str
    model: type[ContentModel]
    requires_data: bool = False


SECTION_SCHEMAS: Mapping[str, SectionSchema] = {
    schema.kind: schema
    for schema in (
        SectionSchema(kind="hero", model=HeroData, requires_data=True),
        SectionSchema(kind="studioIntro", model=StudioIntroData, requires_data=True),
        SectionSchema(kind="wordmarkOffset", model=WordmarkOffsetData),
        SectionSchema(kind="capabilities", model=CapabilitiesData),
        SectionSchema(kind="bigStatement", model=BigStatementData, requires_data=True),
        SectionSchema(kind="value-grid", model=ValueGridData),
        SectionSchema(kind="stack-grid", model=StackGridData),
        SectionSchema(kind="message-bar", model=MessageBarData),
        SectionSchema(kind="pricing", model=PricingData, requires_data=True),
        SectionSchema(kind="cta-minimal", model=CtaMinimalData),
        SectionSchema(kind="faq", model=FaqData),
        SectionSchema(kind="interactive-3d", model=Interactive3DData),
        SectionSchema(kind="service", model=ServiceDetailData),
    )
}


__all__ = [
    "ContentModel",
    "StrictContentModel",
    "SectionSchema",
    "SECTION_SCHEMAS",
    "is_public_path",
    "is_absolute_url",
    "bounded_text",
    "PublicPath",
    "HeroData",
    "HeroMedia",
    "StudioIntroData",
    "WordmarkOffsetData",
    "CapabilitiesData",
    "BigStatementData",
    "ValueGridData",
    "ValueGridCard",
    "StackGridData",
    "MessageBarData",
    "PricingData",
    "PricingPlan",
    "PriceAmount",
    "RichParagraph",
    "CtaMinimalData",
    "FaqData",
    "Interactive3DData",
    "ServiceDetailData",
]
