"""
Utility Module for the Document Intelligence Service.

This module provides common utilities used across all other modules:
    - Logging configuration
    - Exceptions and error codes
    - Common helpers
"""

from .logger import setup_logger, get_logger
from .helpers import ensure_directory, format_confidence, parse_confidence

__all__ = [
    'setup_logger',
    'get_logger',
    'ensure_directory',
    'format_confidence',
    'parse_confidence'
]
