"""Recommended fields validation check.

Same classification as the required check, but problems are warnings and never
fail the run.
"""

from __future__ import annotations

from specs_validator.core.enums import Severity
from specs_validator.core.schemas import FieldSchema
from .required_fields import RequiredFieldsCheck


class RecommendedFieldsCheck(RequiredFieldsCheck):
    """Validate that recommended fields are present; warn otherwise."""

    severity = Severity.WARNING
    label = "Recommended"

    def fields(self, schema: FieldSchema) -> tuple:
        return schema.recommended
