"""Nested object shape check.

Verifies that an object field (e.g., ``source``) carries a fixed set of
sub-fields with non-blank values. Each missing sub-field is reported on its
own, addressed as ``parent.subfield``.
"""

from __future__ import annotations

from typing import Any, List, Mapping, Sequence

from specs_validator.core.enums import Severity
from specs_validator.core.schemas import FieldSchema
from specs_validator.core.utils import is_blank
from ..models import Finding


class NestedObjectCheck:
    """Validate required sub-fields of an object-valued field."""

    def __init__(self, field: str, subfields: Sequence[str], label: str) -> None:
        self.field = field
        self.subfields = tuple(subfields)
        self.label = label

    def validate(self, spec: Mapping[str, Any], schema: FieldSchema) -> List[Finding]:
        value = spec.get(self.field)
        if not isinstance(value, dict):
            return []

        findings: List[Finding] = []
        for name in self.subfields:
            if name not in value or is_blank(value[name]):
                findings.append(
                    Finding(
                        Severity.ERROR,
                        f'{self.label} field "{name}" is missing or empty',
                        f"{self.field}.{name}",
                    )
                )

        if not findings:
            findings.append(
                Finding(Severity.SUCCESS, f"{self.label} object structure is valid", self.field)
            )
        return findings
