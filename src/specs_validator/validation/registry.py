"""Validation check registry and runner.

This module orchestrates validation checks:
- ALL_CHECKS: Field checks (required, recommended, optional) then shape checks
- validate_document(): Runs the structural check and ALL_CHECKS on parsed data
- run_validation(): Reads specs.json from disk and validates it
- print_report(): Displays validation results to console
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Optional

from specs_validator.core.enums import Severity
from specs_validator.core.schemas import DEFAULT_SCHEMA, FieldSchema
from .checks import ValidationCheck
from .checks.nested_object import NestedObjectCheck
from .checks.object_array import ObjectArrayCheck
from .checks.optional_fields import OptionalFieldsCheck
from .checks.recommended_fields import RecommendedFieldsCheck
from .checks.required_fields import RequiredFieldsCheck
from .checks.scalar_type import ScalarTypeCheck
from .checks.string_array import StringArrayCheck
from .checks.structure import StructureCheck
from .config import CONTAINER_KEY, DEFAULT_DOCUMENT_NAME, EXTERNAL_SPEC_SUBFIELDS, SOURCE_SUBFIELDS
from .models import ValidationReport, ValidationResults
from .reporting import render_console

logger = logging.getLogger(__name__)


# Registry of all field and shape checks, run in this order after the
# structural check succeeds
ALL_CHECKS: List[ValidationCheck] = [
    # Tiered field checks
    RequiredFieldsCheck(),
    RecommendedFieldsCheck(),
    OptionalFieldsCheck(),
    # Shape checks
    StringArrayCheck("markdown_paths"),
    NestedObjectCheck("source", SOURCE_SUBFIELDS, label="Source"),
    ObjectArrayCheck("external_specs", EXTERNAL_SPEC_SUBFIELDS, label="External spec"),
    ScalarTypeCheck("katex", bool),
    ScalarTypeCheck("version", str),
]


def load_document(document_path: Path) -> Any:
    """Read and parse a specs.json file.

    Args:
        document_path: Path to the JSON document.

    Returns:
        The parsed JSON value.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file cannot be read or is not valid JSON.
    """
    if not document_path.is_file():
        raise FileNotFoundError(f"File not found: {document_path}")
    try:
        with open(document_path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (json.JSONDecodeError, RecursionError) as e:
        # Valid but very deeply nested JSON exhausts the decoder's recursion limit
        raise ValueError(f"Failed to parse JSON: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ValueError(f"Failed to read {document_path}: {e}") from e


def validate_document(
    data: Any,
    schema: FieldSchema = DEFAULT_SCHEMA,
    document_path: Optional[Path] = None,
) -> ValidationReport:
    """Validate an already parsed specs.json document.

    Args:
        data: The parsed JSON document.
        schema: Field tiers to validate against.
        document_path: Path reported in the results. Defaults to specs.json.

    Returns:
        ValidationReport with all findings in the order they were produced.

    Examples:
        >>> report = validate_document({"specs": [{"title": "My spec"}]})
        >>> report.has_passed()
        False
    """
    if document_path is None:
        document_path = Path(DEFAULT_DOCUMENT_NAME)
    results = ValidationResults()

    spec, structure_findings = StructureCheck(CONTAINER_KEY).validate(data)
    results.extend(structure_findings)
    if spec is None:
        logger.debug("Structural check failed; skipping field checks")
        return results.finalize(document_path)

    for check in ALL_CHECKS:
        findings = check.validate(spec, schema)
        logger.debug("%s produced %d findings", type(check).__name__, len(findings))
        results.extend(findings)

    return results.finalize(document_path)


def run_validation(document_path: Path, schema: FieldSchema = DEFAULT_SCHEMA) -> ValidationReport:
    """Validate a specs.json file on disk.

    Read and parse failures are reported as a single error finding; no further
    checks run in that case.

    Args:
        document_path: Path to the specs.json file.
        schema: Field tiers to validate against.

    Returns:
        ValidationReport for the document.

    Examples:
        >>> report = run_validation(Path("specs.json"))
        >>> print(report.summary())
    """
    try:
        data = load_document(document_path)
    except (FileNotFoundError, ValueError) as e:
        logger.warning("Cannot validate %s: %s", document_path, e)
        results = ValidationResults()
        results.add(Severity.ERROR, str(e))
        return results.finalize(document_path)

    return validate_document(data, schema, document_path)


def print_report(report: ValidationReport, color: bool = True, strict: bool = False) -> None:
    """Print validation report to console.

    Displays findings grouped by severity followed by a summary and a
    PASSED/FAILED banner.

    Args:
        report: ValidationReport to display.
        color: Use ANSI colors.
        strict: Treat warnings as errors in the banner.
    """
    print(render_console(report, color=color, strict=strict))
