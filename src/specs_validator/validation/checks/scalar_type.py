"""Scalar type check.

Verifies the runtime type of a scalar field when it is set. Type checks never
imply presence; absence is governed by the tiered checks.
"""

from __future__ import annotations

from typing import Any, List, Mapping

from specs_validator.core.enums import Severity
from specs_validator.core.schemas import FieldSchema
from ..models import Finding

# JSON names used in messages
TYPE_NAMES = {
    bool: "boolean",
    str: "string",
    int: "integer",
}


def matches_type(value: Any, expected: type) -> bool:
    """Exact type match; bool and int never stand in for each other.

    Only the types in TYPE_NAMES are supported.

    Examples:
        >>> matches_type(True, bool)
        True
        >>> matches_type(1, bool)
        False
        >>> matches_type(True, int)
        False
    """
    if expected is bool:
        return isinstance(value, bool)
    if isinstance(value, bool):
        return False
    return isinstance(value, expected)


class ScalarTypeCheck:
    """Validate the type of a scalar field when present."""

    def __init__(self, field: str, expected: type) -> None:
        if expected not in TYPE_NAMES:
            raise ValueError(f"Unsupported scalar type for '{field}': {expected!r}")
        self.field = field
        self.expected = expected

    def validate(self, spec: Mapping[str, Any], schema: FieldSchema) -> List[Finding]:
        if self.field not in spec:
            return []
        if matches_type(spec[self.field], self.expected):
            return []
        return [
            Finding(
                Severity.ERROR,
                f'Field "{self.field}" should be a {TYPE_NAMES[self.expected]} value',
                self.field,
            )
        ]
