from landing_composer.fallbacks import fallback
from landing_composer.recovery import RecoveryStatus, recover_page, recover_section


def test_valid_section_is_kept():
    result = recover_section("faq", fallback("faq", "es"))

    assert result.status is RecoveryStatus.valid
    assert result.payload["title"] == "Preguntas frecuentes"
    assert result.issues == ()


def test_legacy_section_is_sanitized_once():
    legacy = fallback("hero", "es")
    legacy["theme"] = {"align": "center"}
    legacy["ctaText"] = "Ver más"
    del legacy["align"]

    result = recover_section("hero", legacy, path=("sections", 0, "data"))

    assert result.status is RecoveryStatus.sanitized
    assert result.payload["align"] == "center"
    assert "ctaText" not in result.payload
    assert result.issues[0].path == ("sections", 0, "data", "ctaText")


def test_unrepairable_section_has_no_payload():
    result = recover_section("pricing", {"plans": "pronto"})

    assert result.status is RecoveryStatus.unrecoverable
    assert result.payload is None
    assert not result.usable
    assert result.issues


def test_recover_page_reports_structure_as_fatal():
    result = recover_page({"kind": "page", "sections": []})

    assert not result.available
    assert result.page is None
    assert result.structural_issues


def test_recover_page_recovers_each_section_independently():
    legacy_grid = fallback("value-grid", "es")
    legacy_grid["cards"].append({"title": "Extra", "body": "Sobra una tarjeta."})
    document = {
        "kind": "page",
        "sections": [
            {"kind": "faq", "data": fallback("faq", "es")},
            {"kind": "hero", "data": fallback("hero", "es")},
            {"kind": "value-grid", "data": legacy_grid},
            {"kind": "pricing", "data": {"plans": "pronto"}},
            {"kind": "newsletter", "data": {"x": 1}},
        ],
    }

    result = recover_page(document)

    assert result.available
    statuses = [section.status for section in result.sections]
    assert statuses == [
        RecoveryStatus.valid,
        RecoveryStatus.valid,
        RecoveryStatus.sanitized,
        RecoveryStatus.unrecoverable,
        RecoveryStatus.valid,
    ]
    assert result.sanitized_kinds == ["value-grid"]
    data = [section.data for section in result.page.sections]
    assert len(data[2]["cards"]) == 4
    assert data[3] is None
    assert data[4] == {"x": 1}
    # faq ahead of hero is advisory only
    assert [issue.path for issue in result.ordering_issues] == [("sections", 0, "kind")]


def test_recover_page_treats_missing_and_null_data_differently():
    result = recover_page({"kind": "page", "sections": [{"kind": "faq"}, {"kind": "faq", "data": None}]})

    assert [section.status for section in result.sections] == [RecoveryStatus.valid, RecoveryStatus.unrecoverable]
    assert [section.data for section in result.page.sections] == [None, None]
    assert [issue.path for issue in result.section_issues] == [("sections", 1, "data")]
