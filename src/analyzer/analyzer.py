"""
Invoice Analyzer Module.

This module provides the InvoiceAnalyzer class that runs one document
through the whole pipeline.

Pipeline:
    Form Recognizer → Field resolution → Table flattening
                    → Confidence reclassification → InvoiceResult

Author: ML Engineering Team
"""

import time
from typing import Iterable, Optional

from src.utils.logger import get_logger
from src.recognizer import DocumentRecognizer, RecognizedDocument
from src.field_mapping import FieldResolver, InvoiceResult
from src.postprocessor import ConfidenceReclassifier

logger = get_logger(__name__)


class InvoiceAnalyzer:
    """
    Analyzes uploaded invoices.

    The recognizer is the only shared resource; every call builds its
    own InvoiceResult.

    Attributes:
        recognizer: Object with an async ``recognize(bytes)`` method
        resolver: FieldResolver instance
        reclassifier: ConfidenceReclassifier instance

    Example:
        >>> analyzer = InvoiceAnalyzer()
        >>> result = await analyzer.analyze(pdf_bytes)
        >>> print(result.to_json())
    """

    def __init__(
        self,
        recognizer: Optional[DocumentRecognizer] = None,
        resolver: Optional[FieldResolver] = None,
        reclassifier: Optional[ConfidenceReclassifier] = None
    ) -> None:
        self.recognizer = recognizer or DocumentRecognizer()
        self.resolver = resolver or FieldResolver()
        self.reclassifier = reclassifier or ConfidenceReclassifier()

        logger.info("InvoiceAnalyzer initialized")

    async def analyze(self, document: bytes) -> InvoiceResult:
        """
        Recognize a document and build its grouped result.

        Args:
            document: Raw bytes of a PDF, JPEG or PNG document.

        Returns:
            InvoiceResult for all invoices found in the document.

        Raises:
            RecognitionServiceError: If the service call fails.
        """
        start_time = time.time()

        documents = await self.recognizer.recognize(document)
        result = self.build_result(documents)

        logger.info(
            f"Analysis complete: {len(documents)} invoice(s), "
            f"time: {time.time() - start_time:.2f}s"
        )
        return result

    def build_result(self, documents: Iterable[RecognizedDocument]) -> InvoiceResult:
        """
        Build the grouped result for already recognized invoices.

        Args:
            documents: Recognized invoices, in service order.

        Returns:
            Reclassified InvoiceResult.
        """
        result = InvoiceResult()
        for document in documents:
            self.resolver.resolve(document, result)

        return self.reclassifier.process(result)

    async def close(self) -> None:
        """Release the recognizer's client."""
        await self.recognizer.close()

