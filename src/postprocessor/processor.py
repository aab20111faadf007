"""
Confidence Reclassifier Module.

This module provides the ConfidenceReclassifier that revisits
low-confidence values of an InvoiceResult and replaces their confidence
based on the shape of the value.

Rules (below the 50% threshold only):
    - Plain decimal numbers          -> 90%
    - Uppercase codes (A-Z 0-9 / -)  -> 85%
    - Anything else                  -> 25%
    - AmountDetails.PurchaseOrder with exactly ten digits -> 85%

Values are never removed, and values at or above the threshold are
left alone. The threshold is compared with the confidence as it is
rendered to clients, so 49.999 counts as 50.00.

Author: ML Engineering Team
"""

from typing import Optional

from src.utils.logger import get_logger
from src.utils.helpers import format_confidence, parse_confidence
from src.field_mapping.invoice_result import InvoiceResult, FieldBucket
from src.field_mapping.synonyms import Bucket
from .validators import ValueShape, classify_shape, is_purchase_order_number

logger = get_logger(__name__)

LOW_CONFIDENCE_THRESHOLD = 50.0
HIGH_CONFIDENCE_FOR_NUMBERS = 90.0
HIGH_CONFIDENCE_FOR_PATTERNS = 85.0
LOW_CONFIDENCE = 25.0

PURCHASE_ORDER_FIELD = "PurchaseOrder"

_SHAPE_CONFIDENCE = {
    ValueShape.NUMBER: HIGH_CONFIDENCE_FOR_NUMBERS,
    ValueShape.CODE: HIGH_CONFIDENCE_FOR_PATTERNS,
    ValueShape.UNKNOWN: LOW_CONFIDENCE,
}


def reclassify_confidence(
    value: str,
    confidence: float,
    field_name: Optional[str] = None,
    bucket: Optional[Bucket] = None
) -> float:
    """
    Compute the confidence to report for a single value.

    Args:
        value: Extracted value.
        confidence: Current confidence as a percentage.
        field_name: Canonical field the value belongs to.
        bucket: Bucket the field lives in.

    Returns:
        The given confidence if it renders at or above the threshold,
        otherwise the shape-based replacement.

    Example:
        >>> reclassify_confidence("INV-002", 40.0)
        85.0
        >>> reclassify_confidence("4500012345", 12.0, "PurchaseOrder", Bucket.AMOUNTS)
        85.0
    """
    if parse_confidence(format_confidence(confidence)) >= LOW_CONFIDENCE_THRESHOLD:
        return confidence

    if (
        bucket is Bucket.AMOUNTS
        and field_name == PURCHASE_ORDER_FIELD
        and is_purchase_order_number(value)
    ):
        return HIGH_CONFIDENCE_FOR_PATTERNS

    return _SHAPE_CONFIDENCE[classify_shape(value)]


class ConfidenceReclassifier:
    """
    Rewrites low confidence scores across an InvoiceResult.

    Every bucket gets the general shape rules; the purchase order rule is
    applied within AmountDetails only. Running the reclassifier again on
    its own output changes nothing.

    Example:
        >>> reclassifier = ConfidenceReclassifier()
        >>> reclassifier.process(result)
        >>> result.invoice_fields.get("InvoiceId")[0].confidence
        85.0
    """

    def __init__(self) -> None:
        self.threshold = LOW_CONFIDENCE_THRESHOLD
        logger.debug(f"ConfidenceReclassifier initialized (threshold: {self.threshold})")

    def process(self, result: InvoiceResult) -> InvoiceResult:
        """
        Reclassify all low-confidence values in place.

        Args:
            result: InvoiceResult produced by the field resolver.

        Returns:
            The same InvoiceResult.
        """
        changed = 0
        for bucket, field_bucket in result.iter_buckets():
            changed += self.process_bucket(field_bucket, bucket)

        logger.info(f"Confidence reclassification complete: {changed} value(s) updated")
        return result

    def process_bucket(self, field_bucket: FieldBucket, bucket: Bucket) -> int:
        """
        Reclassify the values of one bucket in place.

        Returns:
            Number of values whose confidence changed.
        """
        changed = 0
        for field_name, values in field_bucket.items():
            for extracted in values:
                updated = reclassify_confidence(
                    extracted.value, extracted.confidence, field_name, bucket
                )
                if updated != extracted.confidence:
                    logger.debug(
                        f"{bucket.value}.{field_name} '{extracted.value}': "
                        f"{extracted.confidence:.2f}% -> {updated:.2f}%"
                    )
                    extracted.confidence = updated
                    changed += 1
        return changed
