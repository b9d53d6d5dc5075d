from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from ..locales import Locale
from .sections import ContentModel, PublicPath, bounded_text

MetaTitle = bounded_text(1, 80)
MetaDescription = bounded_text(1, 160)
Slug = bounded_text(1, 200)


class PageMeta(ContentModel):
    title: MetaTitle | None = None
    description: MetaDescription | None = None
    og_image: PublicPath | None = None


class PageSection(BaseModel):
    """A section entry as stored in the page document; ``data`` is kind specific."""

    model_config = ConfigDict(frozen=True)

    kind: str
    data: Any = None


class PageDocument(ContentModel):
    kind: Literal["page"]
    locale: Locale | None = None
    slug: Slug | None = None
    meta: PageMeta | None = None
    sections: list[PageSection] = Field(min_length=1)

    def section_dicts(self) -> list[dict[str, Any]]:
        return [{"kind": section.kind, "data": section.data} for section in self.sections]


__all__ = ["PageDocument", "PageMeta", "PageSection"]
