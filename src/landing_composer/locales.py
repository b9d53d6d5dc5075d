from __future__ import annotations

from typing import Iterable, Literal

Locale = Literal["es", "en"]

# Order matters for negotiation.
LOCALES: tuple[Locale, ...] = ("es", "en")
DEFAULT_LOCALE: Locale = "es"


def _base(value: str) -> str:
    return value.strip().lower().replace("_", "-").split("-")[0]


def is_locale(value: object) -> bool:
    """Return True when ``value`` is a supported locale or a BCP-47 tag of one."""
    return isinstance(value, str) and _base(value) in LOCALES


def normalize_locale(value: str | None) -> Locale:
    """Map a BCP-47 tag onto a supported locale (en-US -> en, es-PE -> es).

    Unsupported or missing values resolve to ``DEFAULT_LOCALE``.
    """
    if not isinstance(value, str):
        return DEFAULT_LOCALE
    base = _base(value)
    for locale in LOCALES:
        if locale == base:
            return locale
    return DEFAULT_LOCALE


def negotiate_locale(
    preferred: str | Iterable[str] | None,
    fallback: Locale = DEFAULT_LOCALE,
) -> Locale:
    """Pick the first supported locale from an Accept-Language value or a list of tags."""
    if not preferred:
        return fallback
    if isinstance(preferred, str):
        items = [part.split(";")[0] for part in preferred.split(",")]
    else:
        items = list(preferred)
    for item in items:
        if is_locale(item):
            return normalize_locale(item)
    return fallback


def alternate_locales(current: str | None) -> list[Locale]:
    resolved = normalize_locale(current)
    return [locale for locale in LOCALES if locale != resolved]


__all__ = [
    "Locale",
    "LOCALES",
    "DEFAULT_LOCALE",
    "is_locale",
    "normalize_locale",
    "negotiate_locale",
    "alternate_locales",
]
