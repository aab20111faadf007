"""
HTTP API Module for the Document Intelligence Service.

FastAPI application exposing the invoice analysis endpoint.
"""

from .app import create_app

__all__ = ['create_app']
