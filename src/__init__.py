"""
Document Intelligence Service - Source Package.

This package contains the modules of the invoice analysis front-end.
Each module has a single responsibility.

Modules:
    - recognizer: Azure Form Recognizer client and result views
    - field_mapping: Canonical fields, aliases, buckets and tables
    - postprocessor: Value normalization and confidence reclassification
    - analyzer: Per-document pipeline
    - api: FastAPI application
    - utils: Logging, exceptions and helpers

Architecture:
    Upload → Form Recognizer → Field Mapping → Reclassification → JSON
"""

__version__ = "1.0.0"
__author__ = "ML Engineering Team"

__all__ = [
    'recognizer',
    'field_mapping',
    'postprocessor',
    'analyzer',
    'api',
    'utils'
]
