"""
Post-Processing Module for the Document Intelligence Service.

This module provides functionality for:
    - Date and number normalization of recognized values
    - Value shape checks
    - Low-confidence reclassification

Author: ML Engineering Team
"""

from .processor import (
    ConfidenceReclassifier,
    reclassify_confidence,
    LOW_CONFIDENCE_THRESHOLD,
    HIGH_CONFIDENCE_FOR_NUMBERS,
    HIGH_CONFIDENCE_FOR_PATTERNS,
    LOW_CONFIDENCE
)
from .normalizers import DateNormalizer, NumberNormalizer, ValueNormalizer

__all__ = [
    'ConfidenceReclassifier',
    'reclassify_confidence',
    'LOW_CONFIDENCE_THRESHOLD',
    'HIGH_CONFIDENCE_FOR_NUMBERS',
    'HIGH_CONFIDENCE_FOR_PATTERNS',
    'LOW_CONFIDENCE',
    'DateNormalizer',
    'NumberNormalizer',
    'ValueNormalizer'
]
