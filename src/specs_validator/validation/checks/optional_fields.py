"""Optional fields check.

Reports which optional fields are set. Absence is informational only and
optional values are never checked for emptiness.
"""

from __future__ import annotations

from typing import Any, List, Mapping

from specs_validator.core.enums import Severity
from specs_validator.core.schemas import FieldSchema
from ..models import Finding


class OptionalFieldsCheck:
    """Report presence of optional fields."""

    def validate(self, spec: Mapping[str, Any], schema: FieldSchema) -> List[Finding]:
        findings: List[Finding] = []
        for name in schema.optional:
            if name not in spec:
                findings.append(
                    Finding(
                        Severity.INFO,
                        f'Optional field "{name}" is not set (this is acceptable)',
                        name,
                    )
                )
            else:
                findings.append(Finding(Severity.SUCCESS, f'Optional field "{name}" is present', name))
        return findings
