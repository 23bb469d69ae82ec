"""Core enumerations used across the package."""

from __future__ import annotations

from enum import Enum


class Severity(str, Enum):
    """Severity of a single validation finding.

    Values are strings to ease serialization into JSON and HTML reports.
    """

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    SUCCESS = "success"


# Fixed grouping order used by every reporter
REPORT_ORDER = (
    Severity.ERROR,
    Severity.WARNING,
    Severity.INFO,
    Severity.SUCCESS,
)


__all__ = ["Severity", "REPORT_ORDER"]
