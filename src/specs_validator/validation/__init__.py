"""Validation system for specs.json documents.

This module provides the validation engine and its reporters:

- **Models**: Finding, ValidationResults, ValidationReport - result data structures
- **Checks**: Structural, tiered field and shape checks (see validation/checks/)
- **Config**: Document layout constants, shape rules and report settings
- **Registry**: run_validation(), validate_document(), print_report() - orchestration
- **Reporting**: render_console(), render_html(), render_json() - report rendering

Public API:
    Finding: One recorded validation outcome with a severity and message
    ValidationReport: Immutable, ordered findings of one run
    run_validation: Validate a specs.json file on disk
    validate_document: Validate an already parsed document
    print_report: Display validation results to console

Usage:
    >>> from pathlib import Path
    >>> from specs_validator.validation import run_validation, print_report
    >>> report = run_validation(Path("specs.json"))
    >>> print_report(report)
"""

from __future__ import annotations

from specs_validator.core.enums import Severity
from specs_validator.core.schemas import DEFAULT_SCHEMA, FieldSchema

from .models import Finding, ReportMetadata, ValidationReport, ValidationResults
from .registry import print_report, run_validation, validate_document
from .reporting import render_console, render_html, render_json

__all__ = [
    # Data models
    "Finding",
    "ValidationResults",
    "ValidationReport",
    "ReportMetadata",
    # Schema
    "FieldSchema",
    "DEFAULT_SCHEMA",
    # Runner functions
    "run_validation",
    "validate_document",
    "print_report",
    # Reporters
    "render_console",
    "render_html",
    "render_json",
    # Enums
    "Severity",
]
