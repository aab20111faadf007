import asyncio

import pytest
from fastapi.testclient import TestClient

from src.analyzer import InvoiceAnalyzer
from src.api import create_app
from src.api import routes
from src.api.routes import close_analyzer
from src.utils.exceptions import RecognitionServiceError
from factories import FakeRecognizer, make_document, string_field

ANALYZE_URL = "/api/DocumentIntelligence/analyze"


def make_client(recognizer: FakeRecognizer) -> TestClient:
    return TestClient(create_app(analyzer=InvoiceAnalyzer(recognizer=recognizer)))


@pytest.fixture
def recognizer(sample_document):
    return FakeRecognizer([sample_document])


@pytest.fixture
def client(recognizer):
    return make_client(recognizer)


def test_analyze_pdf(client, recognizer):
    response = client.post(ANALYZE_URL, files={"file": ("invoice.pdf", b"%PDF-1.7 data", "application/pdf")})

    assert response.status_code == 200
    data = response.json()["InvoiceData"]
    assert list(data) == [
        "InvoiceFields", "ProductDetails", "AmountDetails",
        "ClientInformation", "PaymentDetails", "TableDetails",
    ]
    assert data["InvoiceFields"]["InvoiceId"] == [{"Value": "INV-2026-001", "Confidence": "97.00%"}]
    assert data["AmountDetails"]["PurchaseOrder"] == [{"Value": "4500012345", "Confidence": "85.00%"}]
    assert data["TableDetails"][0]["Table"][0] == ["Item", "Amount"]
    assert recognizer.calls == [b"%PDF-1.7 data"]


@pytest.mark.parametrize("content_type", ["image/jpeg", "image/png", "IMAGE/PNG"])
def test_images_are_accepted(client, content_type):
    response = client.post(ANALYZE_URL, files={"file": ("scan", b"\x89PNG....", content_type)})
    assert response.status_code == 200


def test_low_confidence_scenario():
    client = make_client(FakeRecognizer([make_document({"Invoice Number": string_field("INV-002", 0.40)})]))
    response = client.post(ANALYZE_URL, files={"file": ("inv.png", b"png", "image/png")})
    assert response.json()["InvoiceData"]["InvoiceFields"] == {
        "InvoiceId": [{"Value": "INV-002", "Confidence": "85.00%"}]
    }


def test_missing_file(client, recognizer):
    response = client.post(ANALYZE_URL)
    assert response.status_code == 400
    assert response.json() == {"Error": "Please select a file.", "ErrorCode": "FileEmpty"}
    assert recognizer.calls == []


def test_empty_file(client, recognizer):
    response = client.post(ANALYZE_URL, files={"file": ("empty.pdf", b"", "application/pdf")})
    assert response.status_code == 400
    assert response.json()["ErrorCode"] == "FileEmpty"
    assert recognizer.calls == []


def test_unsupported_file_type(client, recognizer):
    response = client.post(ANALYZE_URL, files={"file": ("notes.txt", b"hello", "text/plain")})
    assert response.status_code == 400
    assert response.json() == {
        "Error": "Please upload a PDF, JPG, or PNG file.",
        "ErrorCode": "InvalidFileType",
    }
    assert recognizer.calls == []


def test_service_failure():
    client = make_client(FakeRecognizer(error=RecognitionServiceError("401 Unauthorized")))
    response = client.post(ANALYZE_URL, files={"file": ("invoice.pdf", b"%PDF", "application/pdf")})
    assert response.status_code == 500
    assert response.json() == {
        "Error": "Internal server error: Azure Form Recognizer error.",
        "ErrorCode": "AzureError",
    }


def test_unexpected_failure():
    client = make_client(FakeRecognizer(error=RuntimeError("boom")))
    response = client.post(ANALYZE_URL, files={"file": ("invoice.pdf", b"%PDF", "application/pdf")})
    assert response.status_code == 500
    assert response.json() == {"Error": "Internal server error.", "ErrorCode": "UnknownError"}


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_swagger_document(client):
    response = client.get("/swagger/v1/swagger.json")
    assert response.status_code == 200
    assert ANALYZE_URL in response.json()["paths"]


def test_cors_allows_any_origin(client):
    response = client.options(
        ANALYZE_URL,
        headers={"Origin": "https://example.com", "Access-Control-Request-Method": "POST"},
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] in ("*", "https://example.com")


def test_shutdown_closes_analyzer(recognizer):
    app = create_app(analyzer=InvoiceAnalyzer(recognizer=recognizer))
    with TestClient(app) as client:
        assert client.get("/health").status_code == 200
    assert recognizer.closed
    assert app.state.analyzer is None


def test_startup_creates_analyzer_closed_on_shutdown(monkeypatch, recognizer):
    monkeypatch.setattr(routes, "InvoiceAnalyzer", lambda: InvoiceAnalyzer(recognizer=recognizer))
    app = create_app()
    with TestClient(app) as client:
        response = client.post(ANALYZE_URL, files={"file": ("invoice.pdf", b"%PDF", "application/pdf")})
        assert response.status_code == 200
    assert recognizer.calls == [b"%PDF"]
    assert recognizer.closed


def test_lazily_created_analyzer_can_be_closed(monkeypatch, recognizer):
    monkeypatch.setattr(routes, "InvoiceAnalyzer", lambda: InvoiceAnalyzer(recognizer=recognizer))
    app = create_app()
    client = TestClient(app)

    response = client.post(ANALYZE_URL, files={"file": ("invoice.pdf", b"%PDF", "application/pdf")})
    assert response.status_code == 200
    assert app.state.analyzer is not None

    asyncio.run(close_analyzer(app))
    assert recognizer.closed
    assert app.state.analyzer is None
