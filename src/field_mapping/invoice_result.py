"""
Invoice Result Data Classes.

This module defines the grouped structure returned for an analyzed
document: four field buckets, a list of per-invoice product details
and the flattened tables.

Author: ML Engineering Team
"""

import json
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Tuple

from src.utils.helpers import format_confidence
from .synonyms import Bucket


@dataclass
class ExtractedValue:
    """
    One value found for a canonical field.

    Attributes:
        value: Extracted value as text
        confidence: Confidence as a percentage (0-100)
    """
    value: str
    confidence: float = 0.0

    def to_dict(self) -> Dict[str, str]:
        return {"Value": self.value, "Confidence": format_confidence(self.confidence)}


class FieldBucket:
    """
    Canonical field name -> ordered list of distinct ExtractedValues.

    Field names keep the order in which they were first added; values of a
    field keep insertion order, and a value already present is not added
    again.

    Example:
        >>> bucket = FieldBucket()
        >>> bucket.add("InvoiceId", "INV-1", 91.0)
        True
        >>> bucket.add("InvoiceId", "INV-1", 40.0)
        False
        >>> bucket.get("InvoiceId")[0].confidence
        91.0
    """

    def __init__(self) -> None:
        self._fields: "OrderedDict[str, List[ExtractedValue]]" = OrderedDict()

    def add(self, name: str, value: str, confidence: float) -> bool:
        """
        Record a value for a field unless an equal value is already there.

        Returns:
            True if the value was added.
        """
        values = self._fields.setdefault(name, [])
        if any(existing.value == value for existing in values):
            return False
        values.append(ExtractedValue(value=value, confidence=confidence))
        return True

    def get(self, name: str) -> List[ExtractedValue]:
        """Values recorded for a field (empty list if none)."""
        return self._fields.get(name, [])

    def items(self) -> Iterator[Tuple[str, List[ExtractedValue]]]:
        return iter(self._fields.items())

    def __contains__(self, name: str) -> bool:
        return name in self._fields

    def __len__(self) -> int:
        return len(self._fields)

    def __bool__(self) -> bool:
        return bool(self._fields)

    def to_dict(self) -> Dict[str, List[Dict[str, str]]]:
        return {
            name: [v.to_dict() for v in values]
            for name, values in self._fields.items()
        }

    def __repr__(self) -> str:
        return f"FieldBucket({list(self._fields.keys())})"


@dataclass
class InvoiceResult:
    """
    Grouped result of one analyzed upload.

    Attributes:
        invoice_fields: Identification, vendor and tax fields
        amount_details: Totals, tax totals and purchase order
        client_information: Customer name and address
        payment_details: Bank account fields
        product_details: One bucket per recognized invoice with line items
        table_details: Flattened tables, in document/page/table order

    Example:
        >>> result = InvoiceResult()
        >>> result.invoice_fields.add("InvoiceId", "INV-2026-001", 97.0)
        >>> print(result.to_json())
    """
    invoice_fields: FieldBucket = field(default_factory=FieldBucket)
    amount_details: FieldBucket = field(default_factory=FieldBucket)
    client_information: FieldBucket = field(default_factory=FieldBucket)
    payment_details: FieldBucket = field(default_factory=FieldBucket)
    product_details: List[FieldBucket] = field(default_factory=list)
    table_details: List[List[List[str]]] = field(default_factory=list)

    def bucket(self, bucket: Bucket) -> FieldBucket:
        """
        Get the field bucket for a single-map grouping.

        Raises:
            ValueError: For Bucket.PRODUCT_DETAILS, which is a list.
        """
        buckets = {
            Bucket.INVOICE_FIELDS: self.invoice_fields,
            Bucket.AMOUNTS: self.amount_details,
            Bucket.CLIENT_INFO: self.client_information,
            Bucket.PAYMENT_DETAILS: self.payment_details,
        }
        if bucket not in buckets:
            raise ValueError(f"{bucket.value} holds one bucket per invoice")
        return buckets[bucket]

    def iter_buckets(self) -> Iterator[Tuple[Bucket, FieldBucket]]:
        """Every field bucket, product details included."""
        yield Bucket.INVOICE_FIELDS, self.invoice_fields
        for product_bucket in self.product_details:
            yield Bucket.PRODUCT_DETAILS, product_bucket
        yield Bucket.AMOUNTS, self.amount_details
        yield Bucket.CLIENT_INFO, self.client_information
        yield Bucket.PAYMENT_DETAILS, self.payment_details

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to the JSON structure returned by the API.

        Returns:
            Dictionary keyed by InvoiceFields, ProductDetails, AmountDetails,
            ClientInformation, PaymentDetails and TableDetails.
        """
        return {
            Bucket.INVOICE_FIELDS.value: self.invoice_fields.to_dict(),
            Bucket.PRODUCT_DETAILS.value: [b.to_dict() for b in self.product_details],
            Bucket.AMOUNTS.value: self.amount_details.to_dict(),
            Bucket.CLIENT_INFO.value: self.client_information.to_dict(),
            Bucket.PAYMENT_DETAILS.value: self.payment_details.to_dict(),
            "TableDetails": [{"Table": table} for table in self.table_details],
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    def __repr__(self) -> str:
        return (
            f"InvoiceResult("
            f"invoice_fields={len(self.invoice_fields)}, "
            f"amounts={len(self.amount_details)}, "
            f"products={len(self.product_details)}, "
            f"tables={len(self.table_details)})"
        )
