from __future__ import annotations

import asyncio
import logging
import uuid
from typing import Any, Iterable

from fastapi import Body, FastAPI, Header, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from .composer import Block, PageComposer
from .content_loader import ContentLoader
from .content_repository import ContentRepository
from .locales import Locale, negotiate_locale, normalize_locale
from .logging_config import set_trace_id
from .recovery import PageRecovery, recover_page
from .validation import ValidationIssue, validate_page

logger = logging.getLogger(__name__)

TRACE_HEADER = "X-Cloud-Trace-Context"
CONTENT_UNAVAILABLE = "Content unavailable"


class ComposeRequest(BaseModel):
    page: Any = Field(default=None, description="Page document; recovered before composing")
    sections: list[Any] | None = Field(default=None, description="Raw section entries composed as is")
    locale: str | None = None


class ComposeResponse(BaseModel):
    locale: Locale
    blocks: list[dict[str, Any]]
    issues: list[dict[str, Any]] = Field(default_factory=list)


class ValidateResponse(BaseModel):
    ok: bool
    issues: list[dict[str, Any]]


def _dump_issues(issues: Iterable[ValidationIssue]) -> list[dict[str, Any]]:
    return [issue.model_dump(mode="json") for issue in issues]


def _dump_blocks(blocks: Iterable[Block]) -> list[dict[str, Any]]:
    return [block.model_dump() for block in blocks]


def _unavailable(issues: Iterable[ValidationIssue]) -> JSONResponse:
    return JSONResponse(status_code=422, content={"detail": CONTENT_UNAVAILABLE, "issues": _dump_issues(issues)})


def create_app(
    *,
    repository: ContentRepository,
    composer: PageComposer | None = None,
    enforce_section_order: bool = False,
) -> FastAPI:
    """Preview service over the composition pipeline."""
    app = FastAPI(title="Landing Composer API", version="0.1.0")
    loader = ContentLoader(repository=repository)
    page_composer = composer or PageComposer()

    @app.middleware("http")
    async def trace_context(request: Request, call_next):
        header = request.headers.get(TRACE_HEADER, "")
        trace_id = header.split("/", 1)[0] or uuid.uuid4().hex
        set_trace_id(trace_id)
        response = await call_next(request)
        response.headers["X-Trace-Id"] = trace_id
        return response

    def compose_recovered(document: Any, locale: Locale) -> ComposeResponse | JSONResponse:
        recovery: PageRecovery = recover_page(document)
        if not recovery.available:
            logger.error(
                "Page structurally invalid",
                extra={"locale": locale, "issues": _dump_issues(recovery.structural_issues)},
            )
            return _unavailable(recovery.structural_issues)
        if recovery.ordering_issues and enforce_section_order:
            return _unavailable(recovery.ordering_issues)
        blocks = page_composer.compose_page(recovery.page, locale)
        return ComposeResponse(
            locale=locale,
            blocks=_dump_blocks(blocks),
            issues=_dump_issues((*recovery.section_issues, *recovery.ordering_issues)),
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/v1/pages:validate", response_model=ValidateResponse)
    async def validate(document: Any = Body(...)) -> ValidateResponse:
        result = validate_page(document)
        return ValidateResponse(ok=result.ok, issues=_dump_issues(result.issues))

    @app.post("/v1/pages:compose", response_model=ComposeResponse)
    async def compose(
        request: ComposeRequest,
        accept_language: str | None = Header(default=None),
    ):
        locale = normalize_locale(request.locale) if request.locale else negotiate_locale(accept_language)
        if request.page is not None:
            return compose_recovered(request.page, locale)
        if request.sections is None:
            raise HTTPException(status_code=400, detail="Either `page` or `sections` is required")
        blocks = page_composer.compose(request.sections, locale)
        return ComposeResponse(locale=locale, blocks=_dump_blocks(blocks))

    @app.get("/v1/pages/{locale}/{slug}", response_model=ComposeResponse)
    async def get_page(locale: str, slug: str):
        resolved = normalize_locale(locale)
        try:
            document = await asyncio.to_thread(loader.load_page, slug, resolved)
        except FileNotFoundError:
            raise HTTPException(status_code=404, detail="Page not found") from None
        except (OSError, ValueError) as exc:
            logger.error("Page document unreadable", extra={"slug": slug, "locale": resolved, "error": repr(exc)})
            return JSONResponse(status_code=422, content={"detail": CONTENT_UNAVAILABLE, "issues": []})
        return compose_recovered(document, resolved)

    @app.get("/v1/sections/{locale}/{kind}")
    async def get_section(locale: str, kind: str) -> dict[str, Any]:
        resolved = normalize_locale(locale)
        document = await asyncio.to_thread(loader.load_section, kind, resolved)
        (block,) = page_composer.compose([{"kind": kind, "data": document}], resolved)
        return {"locale": resolved, "block": block.model_dump()}

    return app


__all__ = ["create_app", "ComposeRequest", "ComposeResponse", "ValidateResponse"]
