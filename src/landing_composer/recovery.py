from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

from pydantic import ValidationError

from .models.page import PageDocument, PageSection
from .sanitizer import sanitize
from .validation import (
    MISSING,
    IssueCode,
    Path,
    ValidationIssue,
    check_section_order,
    issues_from_error,
    validate_section,
)

logger = logging.getLogger(__name__)


class RecoveryStatus(str, Enum):
    valid = "valid"
    sanitized = "sanitized"
    unrecoverable = "unrecoverable"


@dataclass(frozen=True)
class SectionRecovery:
    kind: str
    status: RecoveryStatus
    payload: Any = None
    issues: tuple[ValidationIssue, ...] = ()

    @property
    def usable(self) -> bool:
        return self.status is not RecoveryStatus.unrecoverable


def recover_section(kind: str, raw: Any, *, path: Path = ()) -> SectionRecovery:
    """Validate ``raw``; on failure sanitize it once and validate again.

    The returned issues are the ones from the first attempt so callers can
    report what was wrong with the stored content. An unrecoverable section
    carries no payload and is left for the locale fallback.
    """
    first = validate_section(kind, raw, path=path)
    if first.ok:
        return SectionRecovery(kind=kind, status=RecoveryStatus.valid, payload=first.dump(raw))

    repaired = sanitize(kind, raw)
    second = validate_section(kind, repaired, path=path)
    if second.ok:
        logger.warning(
            "Section repaired by legacy sanitizer",
            extra={"kind": kind, "issue_count": len(first.issues)},
        )
        return SectionRecovery(
            kind=kind,
            status=RecoveryStatus.sanitized,
            payload=second.dump(repaired),
            issues=first.issues,
        )

    logger.error(
        "Section content unrecoverable",
        extra={"kind": kind, "issues": [issue.message for issue in second.issues]},
    )
    return SectionRecovery(kind=kind, status=RecoveryStatus.unrecoverable, issues=first.issues)


@dataclass(frozen=True)
class PageRecovery:
    page: PageDocument | None = None
    sections: tuple[SectionRecovery, ...] = ()
    structural_issues: tuple[ValidationIssue, ...] = ()
    ordering_issues: tuple[ValidationIssue, ...] = ()
    section_issues: tuple[ValidationIssue, ...] = ()

    @property
    def available(self) -> bool:
        return self.page is not None and not self.structural_issues

    @property
    def sanitized_kinds(self) -> list[str]:
        return [item.kind for item in self.sections if item.status is RecoveryStatus.sanitized]


def recover_page(document: Any) -> PageRecovery:
    """Run recovery over a whole page document.

    Structural problems make the page unavailable. Otherwise every section is
    recovered independently; unrecoverable sections keep ``data`` unset so
    composition substitutes the locale fallback. Ordering issues are reported
    but never block.
    """
    if not isinstance(document, Mapping):
        issue = ValidationIssue(code=IssueCode.structure, message="page document must be an object")
        return PageRecovery(structural_issues=(issue,))

    try:
        envelope = PageDocument.model_validate(document)
    except ValidationError as exc:
        return PageRecovery(structural_issues=tuple(issues_from_error(exc, code=IssueCode.structure)))

    recovered: list[SectionRecovery] = []
    sections: list[PageSection] = []
    for index, section in enumerate(envelope.sections):
        data = section.data if "data" in section.model_fields_set else MISSING
        result = recover_section(section.kind, data, path=("sections", index, "data"))
        recovered.append(result)
        sections.append(PageSection(kind=section.kind, data=result.payload))

    return PageRecovery(
        page=envelope.model_copy(update={"sections": sections}),
        sections=tuple(recovered),
        ordering_issues=tuple(check_section_order(section.kind for section in envelope.sections)),
        section_issues=tuple(issue for item in recovered for issue in item.issues),
    )


__all__ = [
    "RecoveryStatus",
    "SectionRecovery",
    "PageRecovery",
    "recover_section",
    "recover_page",
]
