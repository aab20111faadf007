"""
Custom Exceptions Module.

This module defines the exceptions used throughout the document
intelligence service. Every exception carries the error code and HTTP
status that the API reports to clients.

Exception Hierarchy:
    DocumentIntelligenceError (base, UnknownError)
    ├── InputError
    │   ├── FileEmptyError (FileEmpty)
    │   └── InvalidFileTypeError (InvalidFileType)
    ├── RecognitionError
    │   └── RecognitionServiceError (AzureError)
    └── ConfigurationError
"""

from typing import List, Optional


class ErrorCode:
    """Error codes reported in the ``ErrorCode`` field of error responses."""

    FILE_EMPTY = "FileEmpty"
    INVALID_FILE_TYPE = "InvalidFileType"
    AZURE_ERROR = "AzureError"
    UNKNOWN_ERROR = "UnknownError"


class DocumentIntelligenceError(Exception):
    """
    Base exception for all document intelligence errors.

    Attributes:
        message: Human-readable error message, safe to show to clients.
        details: Optional dictionary with additional error details.
        error_code: Code reported to API clients.
        status_code: HTTP status reported to API clients.
    """

    error_code = ErrorCode.UNKNOWN_ERROR
    status_code = 500

    def __init__(self, message: str, details: dict = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message

    def to_response(self) -> dict:
        """Return the error descriptor sent to API clients."""
        return {"Error": self.message, "ErrorCode": self.error_code}


# =============================================================================
# INPUT ERRORS
# =============================================================================

class InputError(DocumentIntelligenceError):
    """Base exception for upload validation errors."""

    status_code = 400


class FileEmptyError(InputError):
    """Raised when no file was uploaded or the upload has no content."""

    error_code = ErrorCode.FILE_EMPTY

    def __init__(self, filename: Optional[str] = None):
        super().__init__("Please select a file.", {"filename": filename})


class InvalidFileTypeError(InputError):
    """
    Raised when the uploaded content type is not accepted.

    Example:
        >>> raise InvalidFileTypeError("text/plain", ["application/pdf"])
    """

    error_code = ErrorCode.INVALID_FILE_TYPE

    def __init__(self, content_type: Optional[str], allowed_types: List[str]):
        message = "Please upload a PDF, JPG, or PNG file."
        details = {"content_type": content_type, "allowed_types": allowed_types}
        super().__init__(message, details)


# =============================================================================
# RECOGNITION ERRORS
# =============================================================================

class RecognitionError(DocumentIntelligenceError):
    """Base exception for document recognition errors."""
    pass


class RecognitionServiceError(RecognitionError):
    """Raised when the Form Recognizer service call fails."""

    error_code = ErrorCode.AZURE_ERROR

    def __init__(self, reason: str = None):
        message = "Internal server error: Azure Form Recognizer error."
        super().__init__(message, {"reason": reason})


# =============================================================================
# CONFIGURATION ERRORS
# =============================================================================

class ConfigurationError(DocumentIntelligenceError):
    """Raised when a required configuration value is missing."""

    def __init__(self, key: str, reason: str = None):
        message = "Internal server error."
        super().__init__(message, {"key": key, "reason": reason})


__all__ = [
    'ErrorCode',
    'DocumentIntelligenceError',
    'InputError',
    'FileEmptyError',
    'InvalidFileTypeError',
    'RecognitionError',
    'RecognitionServiceError',
    'ConfigurationError',
]
