from pathlib import Path

from fastapi.testclient import TestClient

from term_sheet import app as app_module
from term_sheet.app import create_app
from term_sheet.config import AppConfig
from term_sheet.layout import PdfExtractionError
from term_sheet.pipeline import parse_term_text

FIXTURES = Path(__file__).parent / "fixtures"


def _client():
    return TestClient(create_app(AppConfig(log_json=False)))


def test_health():
    response = _client().get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "max_pdf_mb": 50}


def test_parse_rejects_non_pdf_upload():
    response = _client().post(
        "/parse",
        files={"file": ("notes.txt", b"PART 1A", "text/plain")},
    )

    assert response.status_code == 400


def test_parse_returns_normalised_assignments(monkeypatch):
    text = (FIXTURES / "structural_term.txt").read_text(encoding="utf-8")
    monkeypatch.setattr(app_module, "parse_term_sheet", lambda data, config: parse_term_text(text, page_count=1))

    response = _client().post(
        "/parse",
        files={"file": ("term.pdf", b"%PDF-1.4", "application/pdf")},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["filename"] == "term.pdf"
    assert body["method"] == "Structural Pattern"
    assert body["metadata"]["term_number"] == "IV"
    assert [row["part"] for row in body["assignments"]] == ["TAP A", "1", "22 W"]


def test_parse_reports_extraction_failure(monkeypatch):
    def failing(data, config):
        raise PdfExtractionError("No text could be extracted from the PDF")

    monkeypatch.setattr(app_module, "parse_term_sheet", failing)

    response = _client().post(
        "/parse",
        files={"file": ("scan.pdf", b"%PDF-1.4", "application/pdf")},
    )

    assert response.status_code == 422
    assert response.json()["detail"] == "No text could be extracted from the PDF"
