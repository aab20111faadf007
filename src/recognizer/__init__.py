"""
Recognizer Module for the Document Intelligence Service.

This module talks to Azure Form Recognizer and converts its results
into SDK-independent data classes.

Features:
    - Async prebuilt-invoice analysis
    - Long-lived, lazily created client
    - RecognizedDocument / RecognizedField / TableCell views

Author: ML Engineering Team
"""

from .client import DocumentRecognizer
from .recognized_document import (
    RecognizedDocument,
    RecognizedField,
    RecognizedPage,
    RecognizedTable,
    TableCell,
    ValueType
)

__all__ = [
    'DocumentRecognizer',
    'RecognizedDocument',
    'RecognizedField',
    'RecognizedPage',
    'RecognizedTable',
    'TableCell',
    'ValueType'
]
