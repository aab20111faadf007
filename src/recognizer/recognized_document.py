"""
Recognized Document Data Classes.

This module defines an SDK-independent view of what the Form Recognizer
service returns for one invoice: named fields with a value type, raw
text, typed value and confidence, plus the tables found on each page.

Author: ML Engineering Team
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional


class ValueType(Enum):
    """Value types the field resolver distinguishes."""

    STRING = "string"
    DATE = "date"
    NUMBER = "number"
    OTHER = "other"

    @classmethod
    def from_service(cls, value_type: Any) -> 'ValueType':
        """
        Map a service value type to a ValueType.

        Accepts the SDK's ``FieldValueType`` members as well as their plain
        string values. Unknown types map to OTHER.

        Example:
            >>> ValueType.from_service("float")
            <ValueType.NUMBER: 'number'>
        """
        if isinstance(value_type, cls):
            return value_type
        raw = getattr(value_type, 'value', value_type)
        return _SERVICE_VALUE_TYPES.get(str(raw).lower(), cls.OTHER)


_SERVICE_VALUE_TYPES = {
    "string": ValueType.STRING,
    "date": ValueType.DATE,
    "float": ValueType.NUMBER,
    "integer": ValueType.NUMBER,
    "number": ValueType.NUMBER,
}


@dataclass
class RecognizedField:
    """
    One named field reported by the service.

    Attributes:
        value_type: Declared type of ``value``
        text: Text as it was recognized on the page
        value: Typed value (str, date, float, ...)
        confidence: Service confidence (0-1)
    """
    value_type: ValueType = ValueType.OTHER
    text: Optional[str] = None
    value: Any = None
    confidence: float = 0.0

    @property
    def is_empty(self) -> bool:
        """True when the service returned neither a value nor text."""
        return self.value is None and self.text is None

    @classmethod
    def from_form_field(cls, form_field: Any) -> 'RecognizedField':
        """Convert an SDK ``FormField``."""
        value_data = getattr(form_field, 'value_data', None)
        return cls(
            value_type=ValueType.from_service(getattr(form_field, 'value_type', None)),
            text=getattr(value_data, 'text', None),
            value=getattr(form_field, 'value', None),
            confidence=getattr(form_field, 'confidence', None) or 0.0
        )


@dataclass
class TableCell:
    """A single table cell addressed by zero-based row and column."""
    row_index: int
    column_index: int
    text: str = ""


@dataclass
class RecognizedTable:
    """A table found on a page."""
    cells: List[TableCell] = field(default_factory=list)

    @classmethod
    def from_form_table(cls, form_table: Any) -> 'RecognizedTable':
        """Convert an SDK ``FormTable``."""
        return cls(cells=[
            TableCell(
                row_index=cell.row_index,
                column_index=cell.column_index,
                text=cell.text or ""
            )
            for cell in form_table.cells
        ])


@dataclass
class RecognizedPage:
    """A page of the recognized document and its tables."""
    page_number: int = 1
    tables: List[RecognizedTable] = field(default_factory=list)


@dataclass
class RecognizedDocument:
    """
    One recognized invoice.

    The service may report several invoices for a single upload; each one
    becomes a RecognizedDocument.

    Example:
        >>> doc = RecognizedDocument(fields={
        ...     "InvoiceId": RecognizedField(ValueType.STRING, "INV-1", "INV-1", 0.9)
        ... })
        >>> doc.get_field("InvoiceId").value
        "INV-1"
    """
    fields: Dict[str, Optional[RecognizedField]] = field(default_factory=dict)
    pages: List[RecognizedPage] = field(default_factory=list)
    form_type: Optional[str] = None

    def get_field(self, name: str) -> Optional[RecognizedField]:
        """Return the named field, or None if it is absent or empty."""
        recognized = self.fields.get(name)
        if recognized is None or recognized.is_empty:
            return None
        return recognized

    @property
    def tables(self) -> Iterator[RecognizedTable]:
        """All tables in page order."""
        for page in self.pages:
            yield from page.tables

    @classmethod
    def from_form(cls, form: Any) -> 'RecognizedDocument':
        """
        Convert an SDK ``RecognizedForm``.

        Args:
            form: RecognizedForm returned by ``begin_recognize_invoices``.

        Returns:
            RecognizedDocument with the same fields and tables.
        """
        fields = {
            name: RecognizedField.from_form_field(form_field) if form_field is not None else None
            for name, form_field in (form.fields or {}).items()
        }
        pages = [
            RecognizedPage(
                page_number=page.page_number,
                tables=[RecognizedTable.from_form_table(t) for t in (page.tables or [])]
            )
            for page in (form.pages or [])
        ]
        return cls(fields=fields, pages=pages, form_type=getattr(form, 'form_type', None))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'RecognizedDocument':
        """
        Create a RecognizedDocument from plain data.

        Expected shape::

            {
                "fields": {"InvoiceId": {"value_type": "string", "text": "...",
                                         "value": "...", "confidence": 0.9}},
                "pages": [{"page_number": 1, "tables": [
                    {"cells": [{"row_index": 0, "column_index": 0, "text": "A"}]}
                ]}]
            }
        """
        fields = {}
        for name, item in (data.get('fields') or {}).items():
            if item is None:
                fields[name] = None
                continue
            fields[name] = RecognizedField(
                value_type=ValueType.from_service(item.get('value_type', 'other')),
                text=item.get('text'),
                value=item.get('value'),
                confidence=item.get('confidence') or 0.0
            )

        pages = []
        for page in data.get('pages') or []:
            tables = [
                RecognizedTable(cells=[TableCell(**cell) for cell in table.get('cells', [])])
                for table in page.get('tables', [])
            ]
            pages.append(RecognizedPage(page_number=page.get('page_number', 1), tables=tables))

        return cls(fields=fields, pages=pages, form_type=data.get('form_type'))
