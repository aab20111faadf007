"""
Field Synonyms Module.

This module holds the static table of canonical invoice fields, the
service field names accepted as aliases for each of them, and the
output bucket every canonical field is routed to.

The table is built once at import time and never modified.

Author: ML Engineering Team
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple


class Bucket(Enum):
    """Output groupings. Values are the keys used in the JSON result."""

    INVOICE_FIELDS = "InvoiceFields"
    AMOUNTS = "AmountDetails"
    CLIENT_INFO = "ClientInformation"
    PAYMENT_DETAILS = "PaymentDetails"
    PRODUCT_DETAILS = "ProductDetails"


@dataclass(frozen=True)
class CanonicalField:
    """
    A normalized field name and the service labels that map to it.

    Attributes:
        name: Canonical field name used in the output
        aliases: Service field names, checked in this order
        bucket: Output grouping the field belongs to
    """
    name: str
    aliases: Tuple[str, ...]
    bucket: Bucket = Bucket.INVOICE_FIELDS


# Canonical name -> bucket for everything outside InvoiceFields
BUCKET_ROUTES: Dict[str, Bucket] = {
    "Items": Bucket.PRODUCT_DETAILS,
    "InvoiceTotal": Bucket.AMOUNTS,
    "SubTotal": Bucket.AMOUNTS,
    "TotalTax": Bucket.AMOUNTS,
    "PurchaseOrder": Bucket.AMOUNTS,
    "CustomerName": Bucket.CLIENT_INFO,
    "CustomerAddress": Bucket.CLIENT_INFO,
    "AccountName": Bucket.PAYMENT_DETAILS,
    "BankName": Bucket.PAYMENT_DETAILS,
    "AccountNumber": Bucket.PAYMENT_DETAILS,
    "IFSC": Bucket.PAYMENT_DETAILS,
}


def get_bucket(name: str) -> Bucket:
    """
    Route a canonical field name to its bucket.

    Names without an explicit route belong to InvoiceFields.

    Example:
        >>> get_bucket("PurchaseOrder")
        <Bucket.AMOUNTS: 'AmountDetails'>
        >>> get_bucket("GSTIN")
        <Bucket.INVOICE_FIELDS: 'InvoiceFields'>
    """
    return BUCKET_ROUTES.get(name, Bucket.INVOICE_FIELDS)


_SYNONYMS = (
    ("InvoiceId", ("InvoiceId", "Invoice Number", "Invoice No", "Bill Number", "Reference Number")),
    ("InvoiceDate", ("InvoiceDate", "Date", "Invoice Date", "Billing Date", "Issue Date")),
    ("VendorName", ("VendorName", "Company Name", "Business Name", "Corporate Name",
                    "Enterprise Name", "VendorAddressRecipient")),
    ("VendorAddress", ("VendorAddress", "Address", "Location", "Business Address", "Office Address")),
    ("CustomerName", ("CustomerName", "Bill To", "Invoice To", "Customer", "Recipient",
                      "BillingAddressRecipient", "ShippingAddressRecipient")),
    ("CustomerAddress", ("CustomerAddress", "Ship To", "Delivery To", "Shipping Address",
                         "Consignee", "BillingAddress", "ShippingAddress")),
    ("InvoiceTotal", ("InvoiceTotal", "Amount", "Total Amount Before Tax", "Invoice Total", "Grand Total")),
    ("SubTotal", ("SubTotal", "Amount Before Tax", "Pre-Tax Total")),
    ("TotalTax", ("TotalTax", "TaxAmount", "Tax Total", "Taxes", "Tax")),
    ("PurchaseOrder", ("PurchaseOrder", "PO Number", "Order Number")),
    ("CGST", ("CGST", "Central GST", "Central Goods and Services Tax", "CGST Amount")),
    ("SGST", ("SGST", "State GST", "State Goods and Services Tax", "SGST Amount")),
    ("IGST", ("IGST", "Integrated GST", "Integrated Goods and Services Tax", "IGST Amount")),
    ("GSTIN", ("GSTIN", "GST TIN No", "GST Identification Number", "Goods and Services Tax Number")),
    ("Items", ("Items", "ProductDetails", "ItemDetails", "Product", "Description", "Service")),
    ("PAN", ("PAN No", "Permanent Account Number")),
    ("AccountName", ("Account Name", "Bank Account Name")),
    ("BankName", ("Bank Name",)),
    ("AccountNumber", ("OD A/c No", "Account Number")),
    ("IFSC", ("IFSC Code",)),
    ("AmountInWords", ("Amount in words",)),
    ("BillToStateCode", ("Bill To State Code",)),
    ("ShipToStateCode", ("Ship To State Code",)),
)

# Processing order is the declaration order above
FIELD_SYNONYMS: Tuple[CanonicalField, ...] = tuple(
    CanonicalField(name=name, aliases=aliases, bucket=get_bucket(name))
    for name, aliases in _SYNONYMS
)

_BY_NAME: Dict[str, CanonicalField] = {f.name: f for f in FIELD_SYNONYMS}


def get_canonical_field(name: str) -> Optional[CanonicalField]:
    """Look up a canonical field by name."""
    return _BY_NAME.get(name)


def find_canonical_name(alias: str) -> Optional[str]:
    """
    Find the first canonical field that accepts a service field name.

    Example:
        >>> find_canonical_name("Invoice Number")
        "InvoiceId"
    """
    for canonical in FIELD_SYNONYMS:
        if alias in canonical.aliases:
            return canonical.name
    return None
