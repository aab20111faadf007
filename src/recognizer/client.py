"""
Document Recognizer Module.

This module wraps the asynchronous Azure Form Recognizer client used to
analyze invoices with the prebuilt invoice model.

Approach:
    One long-lived client is created at startup and shared by all
    requests. Each request submits the document, awaits the long-running
    operation and converts the recognized forms into RecognizedDocument
    instances.

Author: ML Engineering Team
"""

import time
from typing import Any, Dict, List, Optional

from azure.ai.formrecognizer.aio import FormRecognizerClient
from azure.core.credentials import AzureKeyCredential
from azure.core.exceptions import AzureError

from config import get_config
from src.utils.logger import get_logger
from src.utils.exceptions import ConfigurationError, RecognitionServiceError
from .recognized_document import RecognizedDocument

logger = get_logger(__name__)


class DocumentRecognizer:
    """
    Async invoice recognizer backed by Azure Form Recognizer.

    Attributes:
        endpoint: Form Recognizer resource endpoint
        locale: Locale hint passed with every request
        client: Underlying FormRecognizerClient (created lazily)

    Example:
        >>> recognizer = DocumentRecognizer()
        >>> documents = await recognizer.recognize(pdf_bytes)
        >>> print(documents[0].fields.keys())
        >>> await recognizer.close()
    """

    DEFAULT_LOCALE = "en-US"

    def __init__(
        self,
        endpoint: Optional[str] = None,
        key: Optional[str] = None,
        locale: Optional[str] = None,
        client: Optional[Any] = None
    ) -> None:
        """
        Initialize the recognizer.

        Args:
            endpoint: Resource endpoint. If None, uses config.
            key: API key. If None, uses config.
            locale: Locale hint. If None, uses config or "en-US".
            client: Pre-built client, mainly for tests.
        """
        self.endpoint = endpoint or get_config("form_recognizer.endpoint")
        self._key = key or get_config("form_recognizer.key")
        self.locale = locale or get_config("form_recognizer.locale", self.DEFAULT_LOCALE)
        self._client = client

        logger.info(f"DocumentRecognizer initialized (locale: {self.locale})")

    @property
    def client(self) -> Any:
        """Get or create the Form Recognizer client."""
        if self._client is None:
            if not self.endpoint:
                raise ConfigurationError("form_recognizer.endpoint", "endpoint is not configured")
            if not self._key:
                raise ConfigurationError("form_recognizer.key", "key is not configured")

            self._client = FormRecognizerClient(
                endpoint=self.endpoint,
                credential=AzureKeyCredential(self._key)
            )
            logger.info(f"Created Form Recognizer client for {self.endpoint}")
        return self._client

    async def recognize(self, document: bytes) -> List[RecognizedDocument]:
        """
        Analyze a document with the prebuilt invoice model.

        Args:
            document: Raw bytes of a PDF, JPEG or PNG document.

        Returns:
            One RecognizedDocument per invoice found in the document.

        Raises:
            RecognitionServiceError: If the service call fails.
        """
        start_time = time.time()

        try:
            poller = await self.client.begin_recognize_invoices(
                document,
                locale=self.locale
            )
            forms = await poller.result()
        except AzureError as e:
            logger.error(f"Form Recognizer request failed: {e}")
            raise RecognitionServiceError(str(e)) from e

        documents = [RecognizedDocument.from_form(form) for form in forms]

        logger.info(
            f"Recognition complete: {len(documents)} invoice(s), "
            f"time: {time.time() - start_time:.2f}s"
        )
        return documents

    async def close(self) -> None:
        """Close the underlying client if it was created."""
        if self._client is not None:
            await self._client.close()
            self._client = None
            logger.info("Form Recognizer client closed")

    def get_service_info(self) -> Dict[str, Any]:
        """
        Get information about the configured service.

        Returns:
            Dictionary with endpoint and locale.
        """
        return {
            'endpoint': self.endpoint,
            'locale': self.locale,
            'connected': self._client is not None
        }
