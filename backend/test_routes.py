import json

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from researchai.db import Base, get_db
from researchai.inference import get_llm_client
from researchai.main import app


ANALYSIS_REPLY = json.dumps({
    "title": "Sleep and Memory",
    "abstract": "Sleep consolidates memory.",
    "keyFindings": ["REM matters"],
    "methodology": "RCT",
    "citations": 31,
    "readingTime": "9 min",
    "complexity": "Low",
    "topics": ["Neuroscience"],
})


@pytest.fixture
def api(fake_llm):
    """TestClient whose LLM replies with whatever the test sets on `api.llm`."""
    llm = fake_llm("")
    app.dependency_overrides[get_llm_client] = lambda: llm
    app.dependency_overrides[get_db] = lambda: None
    client = TestClient(app)
    client.llm = llm
    yield client
    app.dependency_overrides.clear()


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(bind=engine, expire_on_commit=False)()
    yield session
    session.close()


def upload(client, name, data, content_type):
    return client.post("/api/analyze-paper", files={"file": (name, data, content_type)})


# ============================
# HEALTH / CATALOG
# ============================

def test_health(api):
    response = api.get("/health")
    assert response.status_code == 200
    assert response.json()["ok"] is True


def test_content_types(api):
    ids = [entry["id"] for entry in api.get("/api/content-types").json()]
    assert ids == ["presentation", "podcast", "summary", "visual"]


# ============================
# ANALYZE
# ============================

def test_analyze_paper_returns_camel_case_analysis(api):
    api.llm.reply = ANALYSIS_REPLY
    response = upload(api, "paper.txt", b"Sleep study text", "text/plain")

    assert response.status_code == 200
    body = response.json()
    assert body["title"] == "Sleep and Memory"
    assert body["keyFindings"] == ["REM matters"]
    assert body["readingTime"] == "9 min"
    assert "Sleep study text" in api.llm.calls[0][1]["content"]


def test_analyze_paper_falls_back_on_prose_reply(api):
    api.llm.reply = "The paper is about sleep."
    body = upload(api, "paper.txt", b"text", "text/plain").json()
    assert body["title"] == "Research Paper Analysis"
    assert body["topics"] == ["Research", "Analysis", "Academic Study"]


def test_analyze_paper_without_file(api):
    response = api.post("/api/analyze-paper")
    assert response.status_code == 400
    assert response.json() == {"error": "No file provided"}


def test_analyze_paper_rejects_unsupported_file(api):
    response = upload(api, "photo.png", b"\x89PNG", "image/png")
    assert response.status_code == 400
    assert response.json() == {"error": "Please upload a valid file (PDF, DOC, DOCX, or TXT)"}
    assert api.llm.calls == []


def test_analyze_paper_reports_llm_failure(api):
    api.llm.error = RuntimeError("boom")
    response = upload(api, "paper.txt", b"text", "text/plain")
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to analyze paper"}


# ============================
# GENERATE CONTENT
# ============================

def test_generate_content(api):
    api.llm.reply = "An executive summary."
    response = api.post(
        "/api/generate-content",
        json={"paperContent": "paper", "contentType": "summary", "analysisResult": None},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["contentType"] == "summary"
    assert body["generatedContent"] == "An executive summary."
    assert body["timestamp"]


@pytest.mark.parametrize(
    "payload",
    [
        {"contentType": "summary"},
        {"paperContent": "paper"},
        {"paperContent": "", "contentType": "summary"},
    ],
)
def test_generate_content_missing_parameters(api, payload):
    response = api.post("/api/generate-content", json=payload)
    assert response.status_code == 400
    assert response.json() == {"error": "Missing required parameters"}


def test_generate_content_invalid_type(api):
    response = api.post("/api/generate-content", json={"paperContent": "p", "contentType": "poem"})
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid content type"}


def test_generate_content_llm_failure(api):
    api.llm.error = RuntimeError("timeout")
    response = api.post("/api/generate-content", json={"paperContent": "p", "contentType": "podcast"})
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to generate content"}


# ============================
# STRUCTURED GENERATION
# ============================

def test_generate_presentation_structured(api):
    api.llm.reply = "# Intro\n- Point one\n## Results\n- Point two"
    response = api.post("/api/generate/presentation", json={"paperContent": "paper"})

    assert response.status_code == 200
    body = response.json()
    assert [slide["title"] for slide in body["slides"]] == ["Intro", "Results"]
    assert body["slides"][0]["speakerNotes"] == ""
    assert body["filename"] == "presentation.md"
    assert body["markdown"].startswith("# Research Presentation\n\n## Slide 1: Intro")


def test_generate_podcast_structured(api):
    api.llm.reply = "Welcome\nThanks"
    body = api.post("/api/generate/podcast", json={"paperContent": "paper"}).json()
    assert [s["speaker"] for s in body["segments"]] == ["Host", "Expert"]
    assert body["duration"] == "0:06"


def test_generate_structured_requires_paper(api):
    response = api.post("/api/generate/executive-summary", json={"paperContent": "   "})
    assert response.status_code == 400
    assert response.json() == {"error": "Please paste your research paper content first"}


def test_generate_structured_unknown_kind(api):
    response = api.post("/api/generate/limerick", json={"paperContent": "paper"})
    assert response.status_code == 404


def test_generate_structured_llm_failure(api):
    api.llm.error = RuntimeError("down")
    response = api.post("/api/generate/visual-summary", json={"paperContent": "paper"})
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to generate visual summary"}


# ============================
# EXPORT
# ============================

def test_export_executive_summary(api):
    summary = {
        "title": "Executive Summary",
        "overview": "Over",
        "keyFindings": ["f"],
        "implications": ["i"],
        "recommendations": ["r"],
        "conclusion": "Done",
    }
    response = api.post("/api/export/executive-summary", json=summary)

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/markdown")
    assert 'filename="executive-summary.md"' in response.headers["content-disposition"]
    assert "## Key Findings\n- f" in response.text


def test_export_rejects_malformed_record(api):
    response = api.post("/api/export/visual-summary", json={"title": "x"})
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid visual summary payload"}


# ============================
# HISTORY
# ============================

def test_generations_are_recorded_and_listed(api, db_session):
    app.dependency_overrides[get_db] = lambda: db_session

    api.llm.reply = ANALYSIS_REPLY
    upload(api, "paper.txt", b"Sleep study text", "text/plain")
    api.llm.reply = "Summary text"
    api.post("/api/generate-content", json={"paperContent": "paper", "contentType": "summary"})

    entries = api.get("/api/generations").json()
    assert [e["kind"] for e in entries] == ["generation", "analysis"]
    assert entries[0]["content_type"] == "summary"
    assert entries[0]["output"] == "Summary text"
    assert entries[1]["fallback_used"] is False


def test_generations_empty_without_persistence(api):
    assert api.get("/api/generations").json() == []
