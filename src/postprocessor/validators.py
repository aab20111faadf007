"""
Value Shape Validators Module.

This module provides the shape checks used to judge low-confidence
values:
    - Plain decimal numbers (up to two fractional digits)
    - Uppercase codes made of letters, digits, slashes and dashes
    - Ten-digit purchase order numbers

Author: ML Engineering Team
"""

import re
from enum import Enum


PLAIN_NUMBER_PATTERN = re.compile(r'\d+(\.\d{1,2})?')
CODE_PATTERN = re.compile(r'[A-Z0-9/-]+')
PURCHASE_ORDER_PATTERN = re.compile(r'\d{10}')


class ValueShape(Enum):
    """Shape classes a value can fall into."""

    NUMBER = "number"
    CODE = "code"
    UNKNOWN = "unknown"


def is_plain_number(value: str) -> bool:
    """
    Check for a plain decimal number.

    Example:
        >>> is_plain_number("1234.50")
        True
        >>> is_plain_number("1,234.50")
        False
    """
    return PLAIN_NUMBER_PATTERN.fullmatch(value) is not None


def is_code(value: str) -> bool:
    """
    Check for an uppercase alphanumeric code (slashes and dashes allowed).

    Example:
        >>> is_code("INV-002")
        True
        >>> is_code("inv-002")
        False
    """
    return CODE_PATTERN.fullmatch(value) is not None


def is_purchase_order_number(value: str) -> bool:
    """
    Check for an exactly ten-digit purchase order number.

    Example:
        >>> is_purchase_order_number("4500012345")
        True
    """
    return PURCHASE_ORDER_PATTERN.fullmatch(value) is not None


def classify_shape(value: str) -> ValueShape:
    """
    Classify a value by shape. Numbers win over codes.

    Example:
        >>> classify_shape("2026")
        <ValueShape.NUMBER: 'number'>
    """
    if is_plain_number(value):
        return ValueShape.NUMBER
    if is_code(value):
        return ValueShape.CODE
    return ValueShape.UNKNOWN
