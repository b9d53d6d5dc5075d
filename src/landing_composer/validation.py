from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Mapping, Sequence

from pydantic import BaseModel, ConfigDict, ValidationError

from .models.page import PageDocument, PageSection
from .models.sections import SECTION_SCHEMAS, ContentModel

logger = logging.getLogger(__name__)

CANONICAL_KIND_ORDER: tuple[str, ...] = (
    "hero",
    "studioIntro",
    "wordmarkOffset",
    "capabilities",
    "bigStatement",
    "value-grid",
    "stack-grid",
    "message-bar",
    "pricing",
    "cta-minimal",
    "faq",
)

ORDER_MESSAGE = "sections must follow the order: " + " → ".join(CANONICAL_KIND_ORDER)

Path = tuple[str | int, ...]

# Stands in for an absent `data` key; an explicit null is validated like any other value.
MISSING: Any = object()


class IssueCode(str, Enum):
    structure = "STRUCTURE"
    section = "SECTION"
    ordering = "ORDERING"


class ValidationIssue(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: IssueCode
    path: Path = ()
    message: str

    @property
    def section_index(self) -> int | None:
        if len(self.path) >= 2 and self.path[0] == "sections" and isinstance(self.path[1], int):
            return self.path[1]
        return None


@dataclass(frozen=True)
class SectionValidation:
    kind: str
    payload: ContentModel | None = None
    issues: tuple[ValidationIssue, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.issues

    @property
    def recognized(self) -> bool:
        return self.kind in SECTION_SCHEMAS

    def dump(self, raw: Any = None) -> Any:
        """Schema-normalized payload as camelCase data, or ``raw`` when nothing was validated."""
        if self.payload is None:
            return None if raw is MISSING else raw
        return self.payload.model_dump(by_alias=True, exclude_none=True)


@dataclass(frozen=True)
class PageValidation:
    page: PageDocument | None = None
    issues: tuple[ValidationIssue, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.issues

    @property
    def structural_issues(self) -> tuple[ValidationIssue, ...]:
        return tuple(issue for issue in self.issues if issue.code is IssueCode.structure)

    @property
    def section_issues(self) -> tuple[ValidationIssue, ...]:
        return tuple(issue for issue in self.issues if issue.code is IssueCode.section)

    @property
    def ordering_issues(self) -> tuple[ValidationIssue, ...]:
        return tuple(issue for issue in self.issues if issue.code is IssueCode.ordering)


def issues_from_error(
    exc: ValidationError,
    *,
    prefix: Path = (),
    code: IssueCode = IssueCode.section,
) -> list[ValidationIssue]:
    return [
        ValidationIssue(code=code, path=(*prefix, *error["loc"]), message=error["msg"])
        for error in exc.errors(include_url=False)
    ]


def validate_section(kind: str, payload: Any = MISSING, *, path: Path = ()) -> SectionValidation:
    """Validate one section payload against the schema registered for ``kind``.

    Unrecognized kinds pass without checks. A missing payload (``MISSING``) is
    accepted, and filled by the locale fallback later, unless the kind requires
    data. ``None`` is a present payload and fails the schema.
    """
    schema = SECTION_SCHEMAS.get(kind)
    if schema is None:
        return SectionValidation(kind=kind)
    if payload is MISSING:
        if schema.requires_data:
            issue = ValidationIssue(
                code=IssueCode.section,
                path=path,
                message=f"`data` is required for {kind}",
            )
            return SectionValidation(kind=kind, issues=(issue,))
        return SectionValidation(kind=kind)
    try:
        model = schema.model.model_validate(payload)
    except ValidationError as exc:
        return SectionValidation(kind=kind, issues=tuple(issues_from_error(exc, prefix=path)))
    return SectionValidation(kind=kind, payload=model)


def check_section_order(kinds: Iterable[Any]) -> list[ValidationIssue]:
    """Report canonical ordering violations by first occurrence of each listed kind.

    Kinds outside ``CANONICAL_KIND_ORDER`` are ignored and may appear anywhere.
    """
    first_index: dict[str, int] = {}
    for index, kind in enumerate(kinds):
        if kind in CANONICAL_KIND_ORDER and kind not in first_index:
            first_index[kind] = index

    present = [kind for kind in CANONICAL_KIND_ORDER if kind in first_index]
    issues: list[ValidationIssue] = []
    for earlier, later in zip(present, present[1:]):
        if first_index[earlier] > first_index[later]:
            issues.append(
                ValidationIssue(
                    code=IssueCode.ordering,
                    path=("sections", first_index[later], "kind"),
                    message=ORDER_MESSAGE,
                )
            )
    return issues


def validate_page(document: Any) -> PageValidation:
    """Validate a page document in a single pass.

    Envelope problems, per-section schema failures and ordering violations
    are all collected; nothing is raised.
    """
    if not isinstance(document, Mapping):
        issue = ValidationIssue(code=IssueCode.structure, message="page document must be an object")
        return PageValidation(issues=(issue,))

    issues: list[ValidationIssue] = []
    envelope: PageDocument | None = None
    try:
        envelope = PageDocument.model_validate(document)
    except ValidationError as exc:
        issues.extend(issues_from_error(exc, code=IssueCode.structure))

    entries = section_entries(document.get("sections"))
    validated: dict[int, Any] = {}
    for index, kind, data in entries:
        result = validate_section(kind, data, path=("sections", index, "data"))
        if result.ok:
            if result.payload is not None:
                validated[index] = result.dump()
        else:
            issues.extend(result.issues)

    issues.extend(check_section_order(kind for _, kind, _ in entries))

    if issues or envelope is None:
        logger.debug("Page validation failed", extra={"issue_count": len(issues)})
        return PageValidation(issues=tuple(issues))

    sections = [
        PageSection(kind=section.kind, data=validated.get(index, section.data))
        for index, section in enumerate(envelope.sections)
    ]
    return PageValidation(page=envelope.model_copy(update={"sections": sections}))


def section_entries(sections: Any) -> list[tuple[int, str, Any]]:
    if not isinstance(sections, Sequence) or isinstance(sections, (str, bytes)):
        return []
    return [
        (index, section["kind"], section.get("data", MISSING))
        for index, section in enumerate(sections)
        if isinstance(section, Mapping) and isinstance(section.get("kind"), str)
    ]


__all__ = [
    "CANONICAL_KIND_ORDER",
    "MISSING",
    "IssueCode",
    "ValidationIssue",
    "SectionValidation",
    "PageValidation",
    "validate_section",
    "validate_page",
    "check_section_order",
    "issues_from_error",
    "section_entries",
]
