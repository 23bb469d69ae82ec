"""String array shape check.

Verifies that a list field (e.g., ``markdown_paths``) holds only strings. A bad
element yields a single error for the whole field.
"""

from __future__ import annotations

import logging
from typing import Any, List, Mapping

from specs_validator.core.enums import Severity
from specs_validator.core.schemas import FieldSchema
from ..models import Finding

logger = logging.getLogger(__name__)


class StringArrayCheck:
    """Validate that every element of a list field is a string."""

    def __init__(self, field: str) -> None:
        self.field = field

    def validate(self, spec: Mapping[str, Any], schema: FieldSchema) -> List[Finding]:
        """Check the field when it is a non-empty list.

        Missing, empty and non-list values are left to the tiered checks.
        """
        value = spec.get(self.field)
        if not isinstance(value, list) or not value:
            return []

        bad = [i for i, item in enumerate(value) if not isinstance(item, str)]
        if bad:
            logger.debug("%s: non-string elements at positions %s", self.field, bad)
            return [
                Finding(
                    Severity.ERROR,
                    f'Field "{self.field}" should contain only strings',
                    self.field,
                )
            ]
        return [
            Finding(
                Severity.SUCCESS,
                f'Field "{self.field}" contains valid string array',
                self.field,
            )
        ]
