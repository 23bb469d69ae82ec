"""Required fields validation check.

Every required field must exist and carry a value. A missing key, a null or
empty string, or an empty array each produce one error; present fields produce
one success finding.
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional

from specs_validator.core.enums import Severity
from specs_validator.core.schemas import FieldSchema
from ..models import Finding

MISSING = "missing"
EMPTY = "empty"
EMPTY_ARRAY = "empty_array"
PRESENT = "present"


def classify_field(spec: Mapping[str, Any], name: str) -> str:
    """Classify a top-level field as missing, empty, empty_array or present.

    Examples:
        >>> classify_field({"title": ""}, "title")
        'empty'
        >>> classify_field({"markdown_paths": []}, "markdown_paths")
        'empty_array'
    """
    if name not in spec:
        return MISSING
    value = spec[name]
    if value is None or (isinstance(value, str) and value == ""):
        return EMPTY
    if isinstance(value, list) and len(value) == 0:
        return EMPTY_ARRAY
    return PRESENT


class RequiredFieldsCheck:
    """Validate that all required fields are present and non-empty."""

    severity = Severity.ERROR
    label = "Required"

    def _problem_message(self, name: str, status: str) -> Optional[str]:
        if status == MISSING:
            return f'{self.label} field "{name}" is missing'
        if status == EMPTY:
            return f'{self.label} field "{name}" is empty or null'
        if status == EMPTY_ARRAY:
            return f'{self.label} field "{name}" is an empty array'
        return None

    def fields(self, schema: FieldSchema) -> tuple:
        return schema.required

    def validate(self, spec: Mapping[str, Any], schema: FieldSchema) -> List[Finding]:
        """Check each field of the tier in declaration order.

        Args:
            spec: The spec record.
            schema: Field tiers for the run.

        Returns:
            One finding per field of the tier.
        """
        findings: List[Finding] = []
        for name in self.fields(schema):
            status = classify_field(spec, name)
            problem = self._problem_message(name, status)
            if problem is not None:
                findings.append(Finding(self.severity, problem, name))
            else:
                findings.append(
                    Finding(Severity.SUCCESS, f'{self.label} field "{name}" is present and valid', name)
                )
        return findings
