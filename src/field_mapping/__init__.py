"""
Field Mapping Module for the Document Intelligence Service.

This module maps service field names onto canonical invoice fields and
groups them into the output buckets.

Features:
    - Static canonical field / alias table
    - Bucket routing
    - Value deduplication per field
    - Table flattening

Author: ML Engineering Team
"""

from .synonyms import Bucket, CanonicalField, FIELD_SYNONYMS, get_bucket
from .invoice_result import ExtractedValue, FieldBucket, InvoiceResult
from .tables import flatten_table, extract_tables
from .resolver import FieldResolver

__all__ = [
    'Bucket',
    'CanonicalField',
    'FIELD_SYNONYMS',
    'get_bucket',
    'ExtractedValue',
    'FieldBucket',
    'InvoiceResult',
    'flatten_table',
    'extract_tables',
    'FieldResolver'
]
