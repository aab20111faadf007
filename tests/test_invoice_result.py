import json

import pytest

from src.field_mapping import Bucket, FieldBucket, InvoiceResult


def test_bucket_deduplicates_by_value():
    bucket = FieldBucket()
    assert bucket.add("InvoiceId", "INV-1", 91.0)
    assert not bucket.add("InvoiceId", "INV-1", 40.0)
    assert bucket.add("InvoiceId", "INV-2", 40.0)
    assert [(v.value, v.confidence) for v in bucket.get("InvoiceId")] == [("INV-1", 91.0), ("INV-2", 40.0)]


def test_same_value_under_different_fields():
    bucket = FieldBucket()
    bucket.add("CGST", "90", 80.0)
    bucket.add("SGST", "90", 80.0)
    assert len(bucket) == 2


def test_unknown_field_is_empty():
    bucket = FieldBucket()
    assert bucket.get("PAN") == []
    assert "PAN" not in bucket
    assert not bucket


def test_confidence_rendering():
    result = InvoiceResult()
    result.invoice_fields.add("InvoiceId", "INV-1", 97.123)
    result.amount_details.add("InvoiceTotal", "10", 5)
    data = result.to_dict()
    assert data["InvoiceFields"]["InvoiceId"] == [{"Value": "INV-1", "Confidence": "97.12%"}]
    assert data["AmountDetails"]["InvoiceTotal"] == [{"Value": "10", "Confidence": "5.00%"}]


def test_bucket_accessor():
    result = InvoiceResult()
    assert result.bucket(Bucket.AMOUNTS) is result.amount_details
    assert result.bucket(Bucket.CLIENT_INFO) is result.client_information
    with pytest.raises(ValueError):
        result.bucket(Bucket.PRODUCT_DETAILS)


def test_tables_and_json():
    result = InvoiceResult()
    result.table_details.append([["a", "b"], ["c"]])
    data = json.loads(result.to_json())
    assert data["TableDetails"] == [{"Table": [["a", "b"], ["c"]]}]
