"""Core utility functions for the specs.json validator.

This module provides shared helpers used by checks and the CLI.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any


def is_blank(value: Any) -> bool:
    """Return True if a value counts as empty for presence checks.

    Blank values are ``None``, the empty string and the empty list. ``0`` and
    ``False`` are real values and are not blank.

    Examples:
        >>> is_blank("")
        True
        >>> is_blank([])
        True
        >>> is_blank(0)
        False
    """
    if value is None:
        return True
    if isinstance(value, str) and value == "":
        return True
    if isinstance(value, list) and len(value) == 0:
        return True
    return False


def get_report_path(document_path: Path, filename: str) -> Path:
    """Get the path of a report written next to the validated document.

    Args:
        document_path: Path to the specs.json file being validated.
        filename: Report file name (e.g., "specs-validation-report.html").

    Returns:
        Path in the same directory as the document.

    Examples:
        >>> get_report_path(Path("project/specs.json"), "report.html")
        PosixPath('project/report.html')
    """
    return document_path.parent / filename
