from __future__ import annotations

from typing import Literal, Sequence

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class SectionProps(BaseModel):
    """Render-ready props handed to the presentation layer."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    def to_wire(self) -> dict[str, object]:
        return self.model_dump(by_alias=True, exclude_none=True)


class LinkProps(SectionProps):
    label: str
    href: str


class ExternalLinkProps(LinkProps):
    is_external: bool = False


class HeroMediaProps(SectionProps):
    type: Literal["image", "model"]
    src: str
    alt: str
    poster: str | None = None
    priority: bool | None = None


class HeroProps(SectionProps):
    kicker: str
    headline: str
    tagline: str
    media: HeroMediaProps
    align: Literal["start", "center"] = "start"


class StudioIntroProps(SectionProps):
    kicker: str | None = None
    title: str
    body: str
    cta: ExternalLinkProps


class WordmarkOffsetProps(SectionProps):
    word: str
    image_src: str | None = None
    image_alt: str | None = None


class CapabilitiesHeaderProps(SectionProps):
    headline: str
    aside: str


class CapabilityProps(SectionProps):
    title: str
    description: str


class CapabilitiesProps(SectionProps):
    header: CapabilitiesHeaderProps
    items: Sequence[CapabilityProps] = Field(default_factory=list)


class BigStatementLeftProps(SectionProps):
    lines: Sequence[str]
    aria_label: str | None = None


class BigStatementRightProps(SectionProps):
    kicker: str | None = None
    headline: str
    copy_text: str = Field(alias="copy")


class BigStatementLayoutProps(SectionProps):
    container: Literal["md", "lg", "xl", "2xl"] = "2xl"
    reverse: bool = False
    bleed_y: bool = False


class BigStatementProps(SectionProps):
    left: BigStatementLeftProps
    right: BigStatementRightProps
    layout: BigStatementLayoutProps


class ImageProps(SectionProps):
    src: str
    alt: str


class CmsItemProps(SectionProps):
    label: str
    icon: str | None = None


class CmsProps(SectionProps):
    title: str
    items: Sequence[CmsItemProps] = Field(default_factory=list)


class ValueGridCardProps(SectionProps):
    title: str
    body: str | None = None
    image: ImageProps | None = None
    cms: CmsProps | None = None
    # Chip fields mirror the CMS widget for renderers built before widgets existed.
    chip_title: str | None = None
    chip_items: Sequence[str] | None = None
    chip_icons: Sequence[str | None] | None = None


class ValueGridProps(SectionProps):
    title_lines: Sequence[str]
    cards: tuple[ValueGridCardProps, ValueGridCardProps, ValueGridCardProps, ValueGridCardProps]


class StackGridItemProps(SectionProps):
    label: str
    icon: str
    alt: str
    href: str | None = None
    description: str | None = None


class StackGridGroupProps(SectionProps):
    title: str | None = None
    items: Sequence[StackGridItemProps] = Field(default_factory=list)


class StackGridProps(SectionProps):
    groups: Sequence[StackGridGroupProps] = Field(default_factory=list)


class MessagePartProps(SectionProps):
    text: str
    highlight: bool = False


class MessageBarProps(SectionProps):
    parts: Sequence[MessagePartProps]
    separator: str = " • "
    align: Literal["left", "center", "right"] = "center"


class RichInlineProps(SectionProps):
    text: str
    strong: bool | None = None


class RichParagraphProps(SectionProps):
    type: Literal["p"] = "p"
    children: Sequence[RichInlineProps]


class PricingHeadingProps(SectionProps):
    title_lines: Sequence[str] = Field(default_factory=list)


class PricingPlanProps(SectionProps):
    id: str
    name: str
    price: str
    features: Sequence[str]
    cta: LinkProps
    badge: str | None = None
    featured: bool = False


class PricingProps(SectionProps):
    heading: PricingHeadingProps
    aside: Sequence[RichParagraphProps] = Field(default_factory=list)
    plans: Sequence[PricingPlanProps] = Field(default_factory=list)
    disclaimer: str | None = None


class CtaMinimalProps(SectionProps):
    title: str
    action: LinkProps
    align: Literal["center", "left", "right"] = "center"


class FaqItemProps(SectionProps):
    id: str
    question: str
    answer: str


class FaqProps(SectionProps):
    title: str
    items: Sequence[FaqItemProps] = Field(default_factory=list)


class Interactive3DProps(SectionProps):
    eyebrow: str
    headline: str
    aria_label: str | None = None
    variant: Literal["fullBleed", "contained"] = "fullBleed"


class ServiceDetailProps(SectionProps):
    title: str
    subtitle: str | None = None
    badge: str | None = None
    price_range: str | None = None
    features_left: Sequence[str] = Field(default_factory=list)
    features_right: Sequence[str] = Field(default_factory=list)
    tags: Sequence[str] = Field(default_factory=list)
    cta: ExternalLinkProps | None = None


__all__ = [
    "SectionProps",
    "LinkProps",
    "ExternalLinkProps",
    "HeroProps",
    "HeroMediaProps",
    "StudioIntroProps",
    "WordmarkOffsetProps",
    "CapabilitiesProps",
    "CapabilitiesHeaderProps",
    "CapabilityProps",
    "BigStatementProps",
    "BigStatementLeftProps",
    "BigStatementRightProps",
    "BigStatementLayoutProps",
    "ImageProps",
    "CmsProps",
    "CmsItemProps",
    "ValueGridProps",
    "ValueGridCardProps",
    "StackGridProps",
    "StackGridGroupProps",
    "StackGridItemProps",
    "MessageBarProps",
    "MessagePartProps",
    "PricingProps",
    "PricingHeadingProps",
    "PricingPlanProps",
    "RichParagraphProps",
    "RichInlineProps",
    "CtaMinimalProps",
    "FaqProps",
    "FaqItemProps",
    "Interactive3DProps",
    "ServiceDetailProps",
]
