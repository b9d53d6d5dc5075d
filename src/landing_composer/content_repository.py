from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any, Protocol

from .fallbacks import FallbackMissingError
from .locales import Locale

# Kinds and slugs become file names; keep them to one path segment.
NAME_RE = re.compile(r"[A-Za-z0-9][A-Za-z0-9_-]*")


class ContentRepository(Protocol):
    def get_section(self, *, kind: str, locale: Locale) -> Any:
        ...

    def get_page(self, *, slug: str, locale: Locale) -> Any:
        ...


class LocalContentRepository:
    """Reads raw content documents from ``<base>/<locale>/{sections,pages}/<name>.json``.

    Documents come back exactly as stored; validation happens downstream.
    """

    def __init__(self, *, base_path: Path) -> None:
        self._base_path = Path(base_path)

    def get_section(self, *, kind: str, locale: Locale) -> Any:
        return self._read(locale, "sections", kind)

    def get_page(self, *, slug: str, locale: Locale) -> Any:
        return self._read(locale, "pages", slug)

    def get(self, kind: str, locale: Locale) -> Any:
        """Fallback store interface: the stored section document for ``kind``."""
        try:
            return self.get_section(kind=kind, locale=locale)
        except FileNotFoundError as exc:
            raise FallbackMissingError(str(exc)) from exc

    def _read(self, locale: str, folder: str, name: str) -> Any:
        if not NAME_RE.fullmatch(name) or not NAME_RE.fullmatch(locale):
            raise FileNotFoundError(f"Invalid content name: {locale}/{folder}/{name}")
        file_path = self._base_path / locale / folder / f"{name}.json"
        if not file_path.exists():
            raise FileNotFoundError(f"Content document not found: {file_path}")
        with file_path.open("r", encoding="utf-8") as fp:
            return json.load(fp)


__all__ = ["ContentRepository", "LocalContentRepository"]
