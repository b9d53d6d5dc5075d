from __future__ import annotations

import copy
import logging
import re
from typing import Any, Callable, Mapping

logger = logging.getLogger(__name__)

# "Precio desde: S/ 1,890" -> "S/ 1,890"
PRICE_LABEL_RE = re.compile(r"^(precio|price)\s+[^:]*:\s*", re.IGNORECASE)

SERVICE_DETAIL_KEYS = (
    "kind",
    "key",
    "header",
    "priceRange",
    "featuresLeft",
    "featuresRight",
    "tags",
    "seo",
)
SERVICE_STRING_LISTS = ("featuresLeft", "featuresRight", "tags")
SERVICE_HEADER_TEXT = ("title", "subtitle", "badge")

HERO_TEXT_KEYS = ("kicker", "headline", "tagline")
HERO_MEDIA_KEYS = ("kind", "src", "alt", "priority", "poster")
HERO_ALIGNMENTS = ("start", "center")

VALUE_GRID_MAX_LINES = 3
VALUE_GRID_CARDS = 4
CMS_MAX_ITEMS = 4


def _trim(value: Any) -> Any:
    return value.strip() if isinstance(value, str) else value


def _text(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def _clean_string_list(value: Any) -> list[str] | None:
    if not isinstance(value, list):
        return None
    return [item.strip() for item in value if isinstance(item, str) and item.strip()]


def sanitize_service_detail(raw: Mapping[str, Any]) -> dict[str, Any]:
    """Map a legacy service detail document onto the current minimal shape.

    ``overview``, ``details``, ``faq`` and ``pricing`` are retired; a pricing
    note survives as ``priceRange``.
    """
    repaired = {key: copy.deepcopy(raw[key]) for key in SERVICE_DETAIL_KEYS if key in raw}

    pricing = raw.get("pricing")
    if isinstance(pricing, Mapping):
        note = pricing.get("note")
        note = "" if note is None else str(note).strip()
        if note:
            cleaned = PRICE_LABEL_RE.sub("", note, count=1).strip()
            repaired["priceRange"] = cleaned or note

    for key in SERVICE_STRING_LISTS:
        if key not in repaired:
            continue
        cleaned_list = _clean_string_list(repaired[key])
        if cleaned_list is None:
            del repaired[key]
        else:
            repaired[key] = cleaned_list

    header = repaired.get("header")
    if isinstance(header, Mapping):
        repaired["header"] = {
            key: _trim(value) if key in SERVICE_HEADER_TEXT else value
            for key, value in header.items()
        }
    return repaired


def sanitize_hero(raw: Mapping[str, Any]) -> dict[str, Any]:
    repaired: dict[str, Any] = {key: _trim(raw[key]) for key in HERO_TEXT_KEYS if key in raw}

    media = raw.get("media")
    if isinstance(media, Mapping):
        repaired["media"] = {key: _trim(media[key]) for key in HERO_MEDIA_KEYS if key in media}
    elif "media" in raw:
        repaired["media"] = copy.deepcopy(media)

    align = _trim(raw.get("align"))
    if align not in HERO_ALIGNMENTS:
        theme = raw.get("theme")
        align = _trim(theme.get("align")) if isinstance(theme, Mapping) else None
    if align in HERO_ALIGNMENTS:
        repaired["align"] = align
    return repaired


def _title_lines(value: Any) -> list[str] | None:
    if isinstance(value, str):
        lines = [line.strip() for line in value.splitlines()]
    elif isinstance(value, (list, tuple)):
        lines = [item.strip() for item in value if isinstance(item, str)]
    else:
        return None
    return [line for line in lines if line][:VALUE_GRID_MAX_LINES]


def _widget_item(item: Any) -> dict[str, Any] | None:
    if isinstance(item, str):
        label = item.strip()
        return {"label": label} if label else None
    if isinstance(item, Mapping):
        return {key: _trim(item[key]) for key in ("label", "icon") if key in item}
    return None


def _cms_widget(widget: Mapping[str, Any], *, default_title: str | None = None) -> dict[str, Any]:
    repaired: dict[str, Any] = {"kind": widget.get("kind", "cms")}
    title = _text(widget.get("title")) or default_title
    if title:
        repaired["title"] = title
    items = widget.get("items")
    if isinstance(items, list):
        cleaned = [entry for entry in map(_widget_item, items) if entry]
        repaired["items"] = cleaned[:CMS_MAX_ITEMS]
    return repaired


def _value_grid_card(card: Any) -> Any:
    # v1 cards carried eyebrow/subtitle/chip; v2 only knows title/body/image/widget.
    if not isinstance(card, Mapping):
        return copy.deepcopy(card)

    eyebrow = _text(card.get("eyebrow"))
    heading = _text(card.get("title")) or eyebrow
    detail = (
        _text(card.get("body"))
        or _text(card.get("subtitle"))
        or (eyebrow if eyebrow != heading else "")
    )

    repaired: dict[str, Any] = {}
    if heading:
        repaired["title"] = heading
    if detail:
        repaired["body"] = detail

    image = card.get("image")
    if isinstance(image, Mapping):
        repaired["image"] = {key: _trim(image[key]) for key in ("src", "alt") if key in image}

    widget = card.get("widget")
    chip = card.get("chip")
    if isinstance(widget, Mapping):
        repaired["widget"] = _cms_widget(widget)
    elif isinstance(chip, Mapping):
        repaired["widget"] = _cms_widget({**chip, "kind": "cms"}, default_title="CMS")
    return repaired


def sanitize_value_grid(raw: Mapping[str, Any]) -> dict[str, Any]:
    """Upgrade a v1 value grid (heterogeneous cards, chip lists) to the v2 card shape."""
    repaired: dict[str, Any] = {}
    if "title" in raw:
        lines = _title_lines(raw["title"])
        repaired["title"] = lines if lines is not None else copy.deepcopy(raw["title"])

    cards = raw.get("cards")
    if isinstance(cards, (list, tuple)):
        repaired["cards"] = [_value_grid_card(card) for card in cards[:VALUE_GRID_CARDS]]
    elif "cards" in raw:
        repaired["cards"] = copy.deepcopy(cards)
    return repaired


Sanitizer = Callable[[Mapping[str, Any]], dict[str, Any]]

SANITIZERS: Mapping[str, Sanitizer] = {
    "service": sanitize_service_detail,
    "hero": sanitize_hero,
    "value-grid": sanitize_value_grid,
}


def sanitize(kind: str, raw: Any) -> Any:
    """Best-effort, one-way repair of a legacy payload for ``kind``.

    Kinds without a legacy shape and non-object payloads come back unchanged.
    Never raises.
    """
    sanitizer = SANITIZERS.get(kind)
    if sanitizer is None or not isinstance(raw, Mapping):
        return raw
    try:
        return sanitizer(raw)
    except Exception:  # pragma: no cover - safety net
        logger.warning("Sanitizer failed, keeping payload as is", exc_info=True, extra={"kind": kind})
        return raw


__all__ = [
    "SANITIZERS",
    "sanitize",
    "sanitize_service_detail",
    "sanitize_hero",
    "sanitize_value_grid",
]
