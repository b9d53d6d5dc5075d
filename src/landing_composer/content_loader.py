from __future__ import annotations

import asyncio
import logging
from typing import Any, Sequence

from .content_repository import ContentRepository
from .locales import Locale, normalize_locale

logger = logging.getLogger(__name__)


class ContentLoader:
    def __init__(self, *, repository: ContentRepository) -> None:
        self._repository = repository

    def load_section(self, kind: str, locale: str | None = None) -> Any:
        """Stored document for ``kind``, or None when it is missing or unreadable.

        A missing section is not an error here; composition falls back to the
        locale defaults.
        """
        resolved: Locale = normalize_locale(locale)
        try:
            return self._repository.get_section(kind=kind, locale=resolved)
        except FileNotFoundError:
            logger.info("Section document missing", extra={"kind": kind, "locale": resolved})
        except (OSError, ValueError) as exc:
            # ValueError covers JSONDecodeError and UnicodeDecodeError.
            logger.error(
                "Section document unreadable",
                extra={"kind": kind, "locale": resolved, "error": repr(exc)},
            )
        return None

    async def load_sections(self, kinds: Sequence[str], locale: str | None = None) -> list[dict[str, Any]]:
        """Fetch several section documents concurrently as ``{kind, data}`` entries.

        Results keep the order of ``kinds``.
        """
        documents = await asyncio.gather(
            *(asyncio.to_thread(self.load_section, kind, locale) for kind in kinds)
        )
        return [{"kind": kind, "data": data} for kind, data in zip(kinds, documents)]

    def load_page(self, slug: str, locale: str | None = None) -> Any:
        """Raw page document. Raises FileNotFoundError when the page does not exist."""
        return self._repository.get_page(slug=slug, locale=normalize_locale(locale))


__all__ = ["ContentLoader"]
