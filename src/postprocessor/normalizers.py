"""
Value Normalizers Module.

This module turns the typed values reported by the service into the
strings placed in the result:
    - Dates as YYYY-MM-DD
    - Numbers as plain decimal strings
    - Everything else as the recognized text

Author: ML Engineering Team
"""

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from dateutil import parser as date_parser

from src.utils.logger import get_logger
from src.recognizer.recognized_document import RecognizedField, ValueType

logger = get_logger(__name__)


class DateNormalizer:
    """
    Normalizes date values to ISO format (YYYY-MM-DD).

    Accepts ``date``/``datetime`` objects and date strings. A string has
    to name the year, month and day; partial dates such as "March" are
    rejected rather than completed from today.

    Example:
        >>> normalizer = DateNormalizer()
        >>> normalizer.normalize(date(2026, 1, 15))
        "2026-01-15"
        >>> normalizer.normalize("January 15, 2026")
        "2026-01-15"
    """

    OUTPUT_FORMAT = "%Y-%m-%d"

    # Two defaults that differ in year, month and day; a string only counts
    # as a date when both parses agree.
    _DEFAULTS = (datetime(2000, 1, 1), datetime(2001, 2, 2))

    def normalize(self, value: Any) -> Optional[str]:
        """
        Normalize a date value.

        Args:
            value: date, datetime or date string.

        Returns:
            Normalized date string, or None if the value is not a date.
        """
        if isinstance(value, (date, datetime)):
            return value.strftime(self.OUTPUT_FORMAT)

        if isinstance(value, str) and value.strip():
            try:
                parsed = {
                    date_parser.parse(value.strip(), default=default).date()
                    for default in self._DEFAULTS
                }
            except (ValueError, OverflowError) as e:
                logger.debug(f"Could not parse date '{value}': {e}")
                return None

            if len(parsed) == 1:
                return parsed.pop().strftime(self.OUTPUT_FORMAT)
            logger.debug(f"Incomplete date '{value}'")

        return None


class NumberNormalizer:
    """
    Normalizes numeric values to plain decimal strings.

    Trailing zeros are dropped and scientific notation is never used.

    Example:
        >>> normalizer = NumberNormalizer()
        >>> normalizer.normalize(1234.5)
        "1234.5"
        >>> normalizer.normalize(1500.0)
        "1500"
    """

    def normalize(self, value: Any) -> Optional[str]:
        """
        Normalize a numeric value.

        Args:
            value: int, float, Decimal or numeric string.

        Returns:
            Decimal string, or None if the value is not a finite number.
        """
        if isinstance(value, bool) or value is None:
            return None

        try:
            if isinstance(value, float):
                number = Decimal(repr(value))
            elif isinstance(value, (int, Decimal)):
                number = Decimal(value)
            elif isinstance(value, str):
                number = Decimal(value.strip().replace(',', ''))
            else:
                return None
        except InvalidOperation:
            logger.debug(f"Could not parse number: {value!r}")
            return None

        if not number.is_finite():
            return None

        return format(number.normalize(), 'f')


class ValueNormalizer:
    """
    Picks the output string for a recognized field by its value type.

    A typed value that does not match its declared type falls back to the
    recognized text.

    Example:
        >>> normalizer = ValueNormalizer()
        >>> normalizer.normalize(RecognizedField(ValueType.NUMBER, "1,500.00", 1500.0, 0.9))
        "1500"
    """

    def __init__(self) -> None:
        self.date_normalizer = DateNormalizer()
        self.number_normalizer = NumberNormalizer()

    def normalize(self, recognized: RecognizedField) -> Optional[str]:
        """
        Extract the value of a recognized field as text.

        Args:
            recognized: Field reported by the service.

        Returns:
            The normalized value, the raw text on a type mismatch, or None
            if the field carries neither.
        """
        typed = self._normalize_typed(recognized)
        if typed is not None:
            return typed

        if recognized.value_type is not ValueType.OTHER and recognized.value is not None:
            logger.debug(
                f"Value {recognized.value!r} does not match type "
                f"{recognized.value_type.value}, using recognized text"
            )
        return recognized.text

    def _normalize_typed(self, recognized: RecognizedField) -> Optional[str]:
        if recognized.value_type is ValueType.STRING:
            return recognized.value if isinstance(recognized.value, str) else None
        if recognized.value_type is ValueType.DATE:
            return self.date_normalizer.normalize(recognized.value)
        if recognized.value_type is ValueType.NUMBER:
            return self.number_normalizer.normalize(recognized.value)
        return None
