"""Shared fixtures for the document intelligence tests."""

import sys
from datetime import date
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import ConfigurationManager
from src.recognizer.recognized_document import RecognizedDocument, TableCell
from factories import date_field, make_document, number_field, string_field


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Every test starts from settings.yaml without credential overrides."""
    monkeypatch.delenv("FORM_RECOGNIZER_ENDPOINT", raising=False)
    monkeypatch.delenv("FORM_RECOGNIZER_KEY", raising=False)
    ConfigurationManager.reset()
    yield
    ConfigurationManager.reset()


@pytest.fixture
def sample_document() -> RecognizedDocument:
    return make_document(
        fields={
            "InvoiceId": string_field("INV-2026-001", 0.97),
            "Invoice Number": string_field("INV-2026-001", 0.40),
            "InvoiceDate": date_field(date(2026, 1, 15), "15/01/2026", 0.93),
            "VendorName": string_field("Contoso Ltd", 0.91),
            "CustomerName": string_field("Fabrikam Inc", 0.88),
            "InvoiceTotal": number_field(1234.5, "$1,234.50", 0.95),
            "PurchaseOrder": string_field("4500012345", 0.20),
            "Bank Name": string_field("State Bank", 0.75),
            "Description": string_field("Consulting services", 0.65),
        },
        tables=[[
            TableCell(0, 0, "Item"), TableCell(0, 1, "Amount"),
            TableCell(1, 0, "Consulting"), TableCell(1, 1, "1234.50"),
        ]]
    )
