import asyncio
from pathlib import Path

from fastapi.testclient import TestClient

from landing_composer.api import create_app
from landing_composer.content_repository import LocalContentRepository
from landing_composer.fallbacks import fallback

FIXTURES = Path(__file__).parent / "fixtures" / "content"


def make_client(**kwargs) -> TestClient:
    repository = LocalContentRepository(base_path=FIXTURES)
    return TestClient(create_app(repository=repository, **kwargs))


def test_health():
    response = make_client().get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_trace_id_is_propagated():
    response = make_client().get("/health", headers={"X-Cloud-Trace-Context": "abc123/456;o=1"})

    assert response.headers["X-Trace-Id"] == "abc123"


def test_get_page_composes_recovered_sections():
    response = make_client().get("/v1/pages/es/home")

    assert response.status_code == 200
    body = response.json()
    assert body["locale"] == "es"
    blocks = body["blocks"]
    assert [block["kind"] for block in blocks] == ["hero", "studioIntro", "value-grid", "generic", "stack-grid", "pricing"]
    assert blocks[0]["props"]["align"] == "center"
    assert blocks[1]["props"]["title"] == fallback("studioIntro", "es")["title"]
    assert blocks[2]["props"]["cards"][1]["chipItems"] == ["Blog", "Tienda"]
    assert blocks[3] == {"kind": "generic", "kindName": "newsletter", "data": {"placeholder": "tu@correo.com"}}
    assert len(blocks[5]["props"]["plans"]) == 3
    assert {issue["code"] for issue in body["issues"]} == {"SECTION"}


def test_missing_page_is_404():
    response = make_client().get("/v1/pages/es/nowhere")

    assert response.status_code == 404


def test_structurally_invalid_page_is_unavailable():
    response = make_client().get("/v1/pages/es/broken-envelope")

    assert response.status_code == 422
    assert response.json()["detail"] == "Content unavailable"


def test_ordering_issues_are_advisory_by_default():
    response = make_client().get("/v1/pages/en/out-of-order")

    assert response.status_code == 200
    body = response.json()
    assert [block["kind"] for block in body["blocks"]] == ["faq", "hero"]
    ordering = [issue for issue in body["issues"] if issue["code"] == "ORDERING"]
    assert ordering[0]["path"] == ["sections", 0, "kind"]


def test_ordering_issues_can_be_enforced():
    response = make_client(enforce_section_order=True).get("/v1/pages/en/out-of-order")

    assert response.status_code == 422
    assert response.json()["issues"][0]["code"] == "ORDERING"


def test_validate_endpoint_reports_issues():
    client = make_client()

    bad = client.post("/v1/pages:validate", json={"kind": "page", "sections": [{"kind": "hero"}]})
    good = client.post(
        "/v1/pages:validate",
        json={"kind": "page", "sections": [{"kind": "hero", "data": fallback("hero", "en")}]},
    )

    assert bad.status_code == 200
    assert bad.json()["ok"] is False
    assert bad.json()["issues"][0]["path"] == ["sections", 0, "data"]
    assert good.json() == {"ok": True, "issues": []}


def test_compose_endpoint_with_raw_sections_and_accept_language():
    response = make_client().post(
        "/v1/pages:compose",
        json={"sections": [{"kind": "cta-minimal"}, {"kind": "mystery"}]},
        headers={"Accept-Language": "en-GB,en;q=0.9"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["locale"] == "en"
    assert body["blocks"][0]["props"]["title"] == fallback("cta-minimal", "en")["title"]
    assert body["blocks"][1]["kindName"] == "mystery"


def test_compose_endpoint_with_page_document():
    client = make_client()

    ok = client.post("/v1/pages:compose", json={"locale": "es", "page": {"kind": "page", "sections": [{"kind": "faq"}]}})
    unavailable = client.post("/v1/pages:compose", json={"page": {"kind": "page", "sections": []}})
    empty = client.post("/v1/pages:compose", json={"locale": "es"})

    assert ok.status_code == 200
    assert ok.json()["blocks"][0]["props"]["title"] == "Preguntas frecuentes"
    assert unavailable.status_code == 422
    assert empty.status_code == 400


def test_get_section_uses_stored_content_or_fallback():
    client = make_client()

    stored = client.get("/v1/sections/en/message-bar").json()
    missing = client.get("/v1/sections/en/faq").json()

    assert [part["text"] for part in stored["block"]["props"]["parts"]] == ["Ship faster", "Design better"]
    assert missing["block"]["props"]["title"] == fallback("faq", "en")["title"]


def test_unreadable_content_never_fails_the_request(tmp_path):
    (tmp_path / "es" / "pages").mkdir(parents=True)
    (tmp_path / "es" / "sections").mkdir(parents=True)
    (tmp_path / "es" / "pages" / "home.json").write_bytes(b'{"kind": "page", "sections": ["\xff"]}')
    (tmp_path / "es" / "sections" / "faq.json").write_bytes(b'{"title": "\xff\xfe"}')
    client = TestClient(create_app(repository=LocalContentRepository(base_path=tmp_path)))

    page = client.get("/v1/pages/es/home")
    section = client.get("/v1/sections/es/faq")

    assert page.status_code == 422
    assert page.json()["detail"] == "Content unavailable"
    assert section.status_code == 200
    assert section.json()["block"]["props"]["title"] == fallback("faq", "es")["title"]


def test_document_reads_run_off_the_event_loop(monkeypatch):
    offloaded = []
    to_thread = asyncio.to_thread

    async def recording_to_thread(func, *args, **kwargs):
        offloaded.append(func.__name__)
        return await to_thread(func, *args, **kwargs)

    monkeypatch.setattr(asyncio, "to_thread", recording_to_thread)
    client = make_client()

    assert client.get("/v1/pages/es/home").status_code == 200
    assert client.get("/v1/sections/en/faq").status_code == 200
    assert offloaded[0] == "load_page"
    assert offloaded[-1] == "load_section"
