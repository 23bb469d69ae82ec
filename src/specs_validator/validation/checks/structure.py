"""Structural validation of the whole document.

Checks the outer shape of specs.json before any field is inspected:
``{"specs": [ { ...spec record... } ]}``. The first failure stops the run.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from specs_validator.core.enums import Severity
from ..config import CONTAINER_KEY
from ..models import Finding


def _is_object(value: Any) -> bool:
    return isinstance(value, dict)


class StructureCheck:
    """Validate the outer shape of the document."""

    def __init__(self, container_key: str = CONTAINER_KEY) -> None:
        self.container_key = container_key

    def validate(self, data: Any) -> Tuple[Optional[Dict[str, Any]], List[Finding]]:
        """Check the document shape.

        Args:
            data: The parsed JSON document.

        Returns:
            Tuple of (spec record or None, findings). On failure the findings hold
            exactly one error and the spec record is None; on success they hold one
            success finding.
        """
        key = self.container_key
        if not _is_object(data):
            return None, [
                Finding(Severity.ERROR, "specs.json must contain a JSON object at root level")
            ]

        keys = list(data.keys())
        if len(keys) != 1:
            return None, [
                Finding(
                    Severity.ERROR,
                    f"Root object should contain exactly one field, found {len(keys)}: "
                    f"[{', '.join(keys)}]",
                )
            ]

        if keys[0] != key:
            return None, [
                Finding(Severity.ERROR, f"Root object should contain field '{key}', found '{keys[0]}'")
            ]

        container = data[key]
        if not isinstance(container, list):
            return None, [Finding(Severity.ERROR, f'Field "{key}" should be an array')]

        if len(container) != 1:
            return None, [
                Finding(
                    Severity.ERROR,
                    f'Field "{key}" should contain exactly one object, found {len(container)}',
                )
            ]

        spec = container[0]
        if not _is_object(spec):
            return None, [Finding(Severity.ERROR, f'The item in "{key}" array should be an object')]

        return spec, [Finding(Severity.SUCCESS, "Basic structure validation passed")]
