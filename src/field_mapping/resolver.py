"""
Field Resolver Module.

This module provides the FieldResolver that maps the fields reported
for a recognized invoice onto canonical field names and files them into
the buckets of an InvoiceResult.

Approach:
    For every canonical field, its aliases are looked up in declaration
    order. Each alias present in the document contributes its normalized
    value and confidence; values already recorded for the field are
    skipped. Line items of one invoice are collected into a single
    product-details bucket.

Author: ML Engineering Team
"""

from typing import Optional, Sequence

from src.utils.logger import get_logger
from src.recognizer.recognized_document import RecognizedDocument
from src.postprocessor.normalizers import ValueNormalizer
from .invoice_result import FieldBucket, InvoiceResult
from .synonyms import Bucket, CanonicalField, FIELD_SYNONYMS
from .tables import extract_tables

logger = get_logger(__name__)


class FieldResolver:
    """
    Resolves recognized fields into an InvoiceResult.

    Attributes:
        canonical_fields: Canonical field table, in processing order
        normalizer: ValueNormalizer used to turn values into text

    Example:
        >>> resolver = FieldResolver()
        >>> result = InvoiceResult()
        >>> resolver.resolve(document, result)
        >>> result.invoice_fields.get("InvoiceId")
    """

    def __init__(
        self,
        canonical_fields: Sequence[CanonicalField] = FIELD_SYNONYMS,
        normalizer: Optional[ValueNormalizer] = None
    ) -> None:
        self.canonical_fields = canonical_fields
        self.normalizer = normalizer or ValueNormalizer()

    def resolve(self, document: RecognizedDocument, result: InvoiceResult) -> InvoiceResult:
        """
        Add the fields and tables of one recognized invoice to a result.

        Args:
            document: Recognized invoice.
            result: Result to extend.

        Returns:
            The same InvoiceResult.
        """
        self.resolve_fields(document, result)
        tables = extract_tables(document)
        result.table_details.extend(tables)

        logger.debug(f"Resolved document ({document.form_type}): {len(tables)} table(s)")
        return result

    def resolve_fields(self, document: RecognizedDocument, result: InvoiceResult) -> None:
        """
        File the named fields of one invoice into the result buckets.

        Product details of the invoice go to a fresh bucket that is only
        appended when something was found.
        """
        product_details = FieldBucket()

        for canonical in self.canonical_fields:
            if canonical.bucket is Bucket.PRODUCT_DETAILS:
                target = product_details
            else:
                target = result.bucket(canonical.bucket)
            self._add_field(document, canonical, target)

        if product_details:
            result.product_details.append(product_details)

    def _add_field(
        self,
        document: RecognizedDocument,
        canonical: CanonicalField,
        target: FieldBucket
    ) -> None:
        """Record every alias of a canonical field found in the document."""
        for alias in canonical.aliases:
            recognized = document.get_field(alias)
            if recognized is None:
                continue

            value = self.normalizer.normalize(recognized)
            if value is None:
                continue

            confidence = recognized.confidence * 100
            if target.add(canonical.name, value, confidence):
                logger.debug(
                    f"{canonical.name} <- '{alias}': '{value}' ({confidence:.2f}%)"
                )
