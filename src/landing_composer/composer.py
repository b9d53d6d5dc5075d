from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Literal, Mapping, Sequence, Union

from .fallbacks import DEFAULT_FALLBACK_STORE, LocaleFallbackStore
from .locales import Locale, normalize_locale
from .models.page import PageDocument
from .models.props import SectionProps
from .normalizers import NORMALIZERS, Normalizer, unwrap_payload, verify_registry
from .recovery import recover_section

logger = logging.getLogger(__name__)

UNKNOWN_KIND = "unknown"


@dataclass(frozen=True)
class SectionBlock:
    kind: str
    props: SectionProps

    def model_dump(self) -> dict[str, object]:
        return {"kind": self.kind, "props": self.props.to_wire()}


@dataclass(frozen=True)
class GenericBlock:
    """Pass-through for sections the composer has no normalizer for."""

    kind_name: str
    data: Any = None
    kind: Literal["generic"] = field(default="generic", init=False)

    def model_dump(self) -> dict[str, object]:
        return {"kind": self.kind, "kindName": self.kind_name, "data": self.data}


Block = Union[SectionBlock, GenericBlock]


class PageComposer:
    """Turns section entries into render-ready blocks, one block per entry."""

    def __init__(
        self,
        *,
        fallbacks: LocaleFallbackStore | None = None,
        normalizers: Mapping[str, Normalizer] = NORMALIZERS,
    ) -> None:
        self._fallbacks = fallbacks or DEFAULT_FALLBACK_STORE
        self._normalizers = normalizers

    def compose(self, sections: Any, locale: str | None = None) -> list[Block]:
        resolved_locale = normalize_locale(locale)
        if not isinstance(sections, Sequence) or isinstance(sections, (str, bytes)):
            return []
        return [self._compose_entry(entry, resolved_locale) for entry in sections]

    def compose_page(self, page: Any, locale: str | None = None) -> list[Block]:
        if isinstance(page, PageDocument):
            return self.compose(page.section_dicts(), locale)
        if isinstance(page, Mapping) and isinstance(page.get("sections"), list):
            return self.compose(page["sections"], locale)
        return []

    def _compose_entry(self, entry: Any, locale: Locale) -> Block:
        if not isinstance(entry, Mapping):
            return GenericBlock(kind_name=UNKNOWN_KIND)

        kind = entry.get("kind")
        normalizer = self._normalizers.get(kind) if isinstance(kind, str) else None
        if normalizer is None:
            kind_name = UNKNOWN_KIND if kind is None else str(kind)
            return GenericBlock(kind_name=kind_name, data=entry.get("data"))

        payload = self._resolve_payload(kind, entry.get("data"), locale)
        try:
            props = normalizer(payload)
        except Exception:
            logger.exception("Normalizer failed, using minimal props", extra={"kind": kind, "locale": locale})
            props = normalizer(None)
        return SectionBlock(kind=kind, props=props)

    def _resolve_payload(self, kind: str, raw: Any, locale: Locale) -> Any:
        # Inline data, then its sanitized form, then the locale default.
        inline = unwrap_payload(kind, raw)
        if inline is not None:
            recovery = recover_section(kind, inline)
            if recovery.usable and recovery.payload is not None:
                return recovery.payload
        return self._fallback(kind, locale)

    def _fallback(self, kind: str, locale: Locale) -> Any:
        try:
            return self._fallbacks.get(kind, locale)
        except (LookupError, OSError, ValueError):
            logger.error(
                "Locale fallback unavailable",
                exc_info=True,
                extra={"kind": kind, "locale": locale},
            )
            return None


verify_registry()

DEFAULT_COMPOSER = PageComposer()


def compose(sections: Any, locale: str | None = None) -> list[Block]:
    """Compose ``sections`` for ``locale`` with the built-in fallbacks and normalizers."""
    return DEFAULT_COMPOSER.compose(sections, locale)


def compose_page(page: Any, locale: str | None = None) -> list[Block]:
    return DEFAULT_COMPOSER.compose_page(page, locale)


__all__ = [
    "Block",
    "GenericBlock",
    "SectionBlock",
    "PageComposer",
    "DEFAULT_COMPOSER",
    "compose",
    "compose_page",
]
