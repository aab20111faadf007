"""
API Schemas Module.

Pydantic models for the responses of the document intelligence API.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, Field


class ExtractedValueModel(BaseModel):
    Value: str
    Confidence: str = Field(..., examples=["85.00%"])


class TableModel(BaseModel):
    Table: List[List[str]]


class InvoiceDataModel(BaseModel):
    """Grouped invoice data, used for the OpenAPI description."""

    InvoiceFields: Dict[str, List[ExtractedValueModel]] = {}
    ProductDetails: List[Dict[str, List[ExtractedValueModel]]] = []
    AmountDetails: Dict[str, List[ExtractedValueModel]] = {}
    ClientInformation: Dict[str, List[ExtractedValueModel]] = {}
    PaymentDetails: Dict[str, List[ExtractedValueModel]] = {}
    TableDetails: List[TableModel] = []


class SuccessResponse(BaseModel):
    InvoiceData: InvoiceDataModel


class ErrorResponse(BaseModel):
    Error: str
    ErrorCode: str


class HealthResponse(BaseModel):
    status: str = "ok"


def build_success_response(invoice_data: Dict[str, Any]) -> SuccessResponse:
    """Wrap the dictionary form of an InvoiceResult."""
    return SuccessResponse(InvoiceData=InvoiceDataModel(**invoice_data))


__all__ = [
    'ExtractedValueModel',
    'TableModel',
    'InvoiceDataModel',
    'SuccessResponse',
    'ErrorResponse',
    'HealthResponse',
    'build_success_response',
]
