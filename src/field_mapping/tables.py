"""
Table Flattening Module.

Converts the cell lists reported by the service into row-major grids
of cell text.

Author: ML Engineering Team
"""

from typing import Iterable, List

from src.recognizer.recognized_document import RecognizedDocument, TableCell


def ensure_capacity(grid: List[List[str]], row_index: int, column_index: int) -> None:
    """
    Grow a grid so that grid[row_index][column_index] exists.

    Rows created on the way are padded to column_index + 1 cells; an
    existing row only grows as far as the requested column.
    """
    while len(grid) <= row_index:
        grid.append([""] * (column_index + 1))
    row = grid[row_index]
    while len(row) <= column_index:
        row.append("")


def flatten_table(cells: Iterable[TableCell]) -> List[List[str]]:
    """
    Place cells into a grid by zero-based row and column.

    Missing interior cells are empty strings. Rows are not padded to a
    common width.

    Example:
        >>> flatten_table([TableCell(0, 0, "A"), TableCell(0, 2, "B"), TableCell(2, 1, "C")])
        [["A", "", "B"], ["", ""], ["", "C"]]
    """
    grid: List[List[str]] = []
    for cell in cells:
        ensure_capacity(grid, cell.row_index, cell.column_index)
        grid[cell.row_index][cell.column_index] = cell.text or ""
    return grid


def extract_tables(document: RecognizedDocument) -> List[List[List[str]]]:
    """Flatten every table of a document in page/table order."""
    return [flatten_table(table.cells) for table in document.tables]
