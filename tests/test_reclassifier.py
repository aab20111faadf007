import copy

import pytest

from src.field_mapping import Bucket, FieldBucket, InvoiceResult
from src.postprocessor.processor import (
    ConfidenceReclassifier,
    HIGH_CONFIDENCE_FOR_NUMBERS,
    HIGH_CONFIDENCE_FOR_PATTERNS,
    LOW_CONFIDENCE,
    LOW_CONFIDENCE_THRESHOLD,
    reclassify_confidence,
)


def test_constants():
    assert LOW_CONFIDENCE_THRESHOLD == 50.0
    assert HIGH_CONFIDENCE_FOR_NUMBERS == 90.0
    assert HIGH_CONFIDENCE_FOR_PATTERNS == 85.0
    assert LOW_CONFIDENCE == 25.0


@pytest.mark.parametrize("value, expected", [
    ("1234.50", 90.0),
    ("42", 90.0),
    ("INV-002", 85.0),
    ("AB/12-C", 85.0),
    ("Contoso Ltd", 25.0),
    ("1,234.50", 25.0),
    ("inv-002", 25.0),
])
def test_below_threshold_values_are_reclassified(value, expected):
    assert reclassify_confidence(value, 30.0) == expected


@pytest.mark.parametrize("confidence", [50.0, 50.01, 73.2, 100.0])
def test_values_at_or_above_threshold_are_untouched(confidence):
    assert reclassify_confidence("Contoso Ltd", confidence) == confidence


@pytest.mark.parametrize("confidence", [49.996, 49.9999])
def test_values_rendered_as_threshold_are_untouched(confidence):
    assert reclassify_confidence("Contoso Ltd", confidence) == confidence


def test_values_just_below_rendered_threshold_are_reclassified():
    assert reclassify_confidence("Contoso Ltd", 49.994) == 25.0


def test_purchase_order_override_in_amounts():
    assert reclassify_confidence("4500012345", 12.0, "PurchaseOrder", Bucket.AMOUNTS) == 85.0


def test_purchase_order_override_needs_ten_digits():
    assert reclassify_confidence("450001234", 12.0, "PurchaseOrder", Bucket.AMOUNTS) == 90.0
    assert reclassify_confidence("PO-77", 12.0, "PurchaseOrder", Bucket.AMOUNTS) == 85.0


def test_purchase_order_override_only_applies_in_amounts():
    assert reclassify_confidence("4500012345", 12.0, "PurchaseOrder", Bucket.INVOICE_FIELDS) == 90.0
    assert reclassify_confidence("4500012345", 12.0, "InvoiceId", Bucket.AMOUNTS) == 90.0


def test_purchase_order_above_threshold_is_untouched():
    assert reclassify_confidence("4500012345", 64.0, "PurchaseOrder", Bucket.AMOUNTS) == 64.0


def build_result() -> InvoiceResult:
    result = InvoiceResult()
    result.invoice_fields.add("InvoiceId", "INV-002", 40.0)
    result.invoice_fields.add("VendorName", "Contoso Ltd", 12.5)
    result.invoice_fields.add("InvoiceDate", "2026-01-15", 98.0)
    result.amount_details.add("InvoiceTotal", "1234.50", 30.0)
    result.amount_details.add("PurchaseOrder", "4500012345", 20.0)
    result.client_information.add("CustomerName", "FABRIKAM", 10.0)
    result.payment_details.add("AccountNumber", "00123456789", 45.0)
    items = FieldBucket()
    items.add("Items", "Consulting services", 35.0)
    result.product_details.append(items)
    return result


def test_process_rewrites_every_bucket():
    result = ConfidenceReclassifier().process(build_result())
    data = result.to_dict()

    assert data["InvoiceFields"]["InvoiceId"] == [{"Value": "INV-002", "Confidence": "85.00%"}]
    assert data["InvoiceFields"]["VendorName"] == [{"Value": "Contoso Ltd", "Confidence": "25.00%"}]
    assert data["InvoiceFields"]["InvoiceDate"] == [{"Value": "2026-01-15", "Confidence": "98.00%"}]
    assert data["AmountDetails"]["InvoiceTotal"] == [{"Value": "1234.50", "Confidence": "90.00%"}]
    assert data["AmountDetails"]["PurchaseOrder"] == [{"Value": "4500012345", "Confidence": "85.00%"}]
    assert data["ClientInformation"]["CustomerName"] == [{"Value": "FABRIKAM", "Confidence": "85.00%"}]
    assert data["PaymentDetails"]["AccountNumber"] == [{"Value": "00123456789", "Confidence": "90.00%"}]
    assert data["ProductDetails"] == [{"Items": [{"Value": "Consulting services", "Confidence": "25.00%"}]}]


def test_process_never_removes_values():
    before = build_result().to_dict()
    after = ConfidenceReclassifier().process(build_result()).to_dict()
    for key in ("InvoiceFields", "AmountDetails", "ClientInformation", "PaymentDetails"):
        assert {k: [v["Value"] for v in vs] for k, vs in before[key].items()} == \
               {k: [v["Value"] for v in vs] for k, vs in after[key].items()}


def test_process_is_idempotent():
    reclassifier = ConfidenceReclassifier()
    once = reclassifier.process(build_result())
    first = copy.deepcopy(once.to_dict())
    twice = reclassifier.process(once)
    assert twice.to_dict() == first


def test_process_returns_same_result_object():
    result = build_result()
    assert ConfidenceReclassifier().process(result) is result


def test_process_bucket_counts_changes():
    bucket = FieldBucket()
    bucket.add("InvoiceId", "INV-1", 10.0)
    bucket.add("InvoiceId", "INV-2", 80.0)
    assert ConfidenceReclassifier().process_bucket(bucket, Bucket.INVOICE_FIELDS) == 1
