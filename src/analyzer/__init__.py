"""
Analyzer Module for the Document Intelligence Service.

Ties the recognizer, the field resolver and the confidence
reclassifier together for a single uploaded document.

Author: ML Engineering Team
"""

from .analyzer import InvoiceAnalyzer

__all__ = ['InvoiceAnalyzer']
