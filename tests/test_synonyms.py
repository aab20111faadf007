from dataclasses import FrozenInstanceError

import pytest

from src.field_mapping.synonyms import (
    BUCKET_ROUTES,
    Bucket,
    FIELD_SYNONYMS,
    find_canonical_name,
    get_bucket,
    get_canonical_field,
)


def test_canonical_fields_keep_declared_order():
    names = [f.name for f in FIELD_SYNONYMS]
    assert names[:4] == ["InvoiceId", "InvoiceDate", "VendorName", "VendorAddress"]
    assert names[-3:] == ["AmountInWords", "BillToStateCode", "ShipToStateCode"]
    assert len(names) == len(set(names)) == 23


def test_aliases_are_checked_in_declared_order():
    invoice_id = get_canonical_field("InvoiceId")
    assert invoice_id.aliases == (
        "InvoiceId", "Invoice Number", "Invoice No", "Bill Number", "Reference Number"
    )


@pytest.mark.parametrize("name, bucket", [
    ("InvoiceTotal", Bucket.AMOUNTS),
    ("SubTotal", Bucket.AMOUNTS),
    ("TotalTax", Bucket.AMOUNTS),
    ("PurchaseOrder", Bucket.AMOUNTS),
    ("CustomerName", Bucket.CLIENT_INFO),
    ("CustomerAddress", Bucket.CLIENT_INFO),
    ("AccountName", Bucket.PAYMENT_DETAILS),
    ("BankName", Bucket.PAYMENT_DETAILS),
    ("AccountNumber", Bucket.PAYMENT_DETAILS),
    ("IFSC", Bucket.PAYMENT_DETAILS),
    ("Items", Bucket.PRODUCT_DETAILS),
    ("InvoiceId", Bucket.INVOICE_FIELDS),
    ("GSTIN", Bucket.INVOICE_FIELDS),
    ("PAN", Bucket.INVOICE_FIELDS),
    ("AmountInWords", Bucket.INVOICE_FIELDS),
])
def test_bucket_routing(name, bucket):
    assert get_bucket(name) is bucket
    assert get_canonical_field(name).bucket is bucket


def test_unreferenced_route_is_not_carried():
    assert "CustomerAddressRecipient" not in BUCKET_ROUTES
    assert get_canonical_field("CustomerAddressRecipient") is None


def test_every_route_names_a_canonical_field():
    assert all(get_canonical_field(name) is not None for name in BUCKET_ROUTES)


def test_line_item_aliases_belong_to_items():
    for alias in ("Items", "ProductDetails", "ItemDetails", "Product", "Description", "Service"):
        assert find_canonical_name(alias) == "Items"


def test_find_canonical_name_for_unknown_alias():
    assert find_canonical_name("Invoice Number") == "InvoiceId"
    assert find_canonical_name("Shoe Size") is None


def test_table_is_immutable():
    with pytest.raises(FrozenInstanceError):
        FIELD_SYNONYMS[0].name = "Other"
    assert isinstance(FIELD_SYNONYMS, tuple)
    assert isinstance(FIELD_SYNONYMS[0].aliases, tuple)
