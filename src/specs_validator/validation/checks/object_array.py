"""Array of objects shape check.

Verifies that a list field (e.g., ``external_specs``) holds objects that each
carry a fixed set of non-blank sub-fields. Problems are addressed as
``field[index].subfield``. A closing success finding reports the number of
entries regardless of per-entry errors.
"""

from __future__ import annotations

from typing import Any, List, Mapping, Sequence

from specs_validator.core.enums import Severity
from specs_validator.core.schemas import FieldSchema
from specs_validator.core.utils import is_blank
from ..models import Finding


class ObjectArrayCheck:
    """Validate required sub-fields of each entry of a list-of-objects field."""

    def __init__(self, field: str, subfields: Sequence[str], label: str) -> None:
        self.field = field
        self.subfields = tuple(subfields)
        self.label = label

    def _entry_findings(self, index: int, entry: Any) -> List[Finding]:
        address = f"{self.field}[{index}]"
        if not isinstance(entry, dict):
            return [Finding(Severity.ERROR, f"{self.label} {index} should be an object", address)]
        return [
            Finding(Severity.ERROR, f'{self.label} {index} missing "{name}"', f"{address}.{name}")
            for name in self.subfields
            if name not in entry or is_blank(entry[name])
        ]

    def validate(self, spec: Mapping[str, Any], schema: FieldSchema) -> List[Finding]:
        value = spec.get(self.field)
        if value is None:
            return []
        if not isinstance(value, list):
            return [Finding(Severity.ERROR, f'Field "{self.field}" should be an array', self.field)]

        findings: List[Finding] = []
        for index, entry in enumerate(value):
            findings.extend(self._entry_findings(index, entry))

        noun = self.field.replace("_", " ").capitalize()
        findings.append(
            Finding(Severity.SUCCESS, f"{noun} array contains {len(value)} entries", self.field)
        )
        return findings
