"""
Helper Utilities Module.

This module provides common utility functions used throughout the
document intelligence service. Functions here should be generic and
reusable across different modules.

Functions:
    - ensure_directory: Create directory if it doesn't exist
    - format_confidence: Render a percentage as "NN.NN%"
    - parse_confidence: Read a rendered percentage back
    - guess_content_type: Content type of a local document
    - format_file_size: Human-readable byte counts
"""

import mimetypes
from pathlib import Path
from typing import Optional, Union


def ensure_directory(path: Union[str, Path]) -> Path:
    """
    Ensure a directory exists, creating it if necessary.

    Args:
        path: Directory path to ensure exists.

    Returns:
        Path object pointing to the directory.

    Example:
        >>> ensure_directory("outputs/results")
        PosixPath('outputs/results')
    """
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def format_confidence(percent: float) -> str:
    """
    Render a confidence percentage with two decimals.

    Example:
        >>> format_confidence(85)
        "85.00%"
    """
    return f"{percent:.2f}%"


def parse_confidence(text: str) -> Optional[float]:
    """
    Parse a confidence rendered by format_confidence.

    Returns:
        The percentage as float, or None if the text is not a number.

    Example:
        >>> parse_confidence("42.50%")
        42.5
    """
    try:
        return float(str(text).strip().rstrip('%'))
    except ValueError:
        return None


def guess_content_type(filepath: Union[str, Path]) -> Optional[str]:
    """
    Guess the MIME type of a local file from its extension.

    Example:
        >>> guess_content_type("invoice.PDF")
        "application/pdf"
    """
    content_type, _ = mimetypes.guess_type(str(filepath).lower())
    return content_type


def format_file_size(size_bytes: int) -> str:
    """
    Format file size in human-readable format.

    Example:
        >>> format_file_size(1536)
        "1.5 KB"
    """
    for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
        if size_bytes < 1024.0:
            return f"{size_bytes:.1f} {unit}"
        size_bytes /= 1024.0
    return f"{size_bytes:.1f} PB"
