"""Validation checks base interface.

This module defines the protocol (interface) that all field and shape checks
must implement. Each check inspects one aspect of the spec record (a tier of
fields, or the internal shape of one field) and returns the findings it
produced. Checks never raise for bad input; problems are reported as findings.

To implement a new validation check:

1. Create a new file in this directory (e.g., `my_check.py`)
2. Define a class that implements the ValidationCheck protocol
3. Implement `validate()`
4. Add an instance to the ALL_CHECKS list in registry.py

Example:
    ```python
    # checks/my_check.py
    from typing import Any, List, Mapping
    from specs_validator.core.enums import Severity
    from specs_validator.core.schemas import FieldSchema
    from ..models import Finding

    class MyCheck:
        def validate(self, spec: Mapping[str, Any], schema: FieldSchema) -> List[Finding]:
            return [Finding(Severity.SUCCESS, "My check passed", "my_field")]
    ```
"""

from __future__ import annotations

from typing import Any, List, Mapping, Protocol

from specs_validator.core.schemas import FieldSchema
from ..models import Finding


class ValidationCheck(Protocol):
    """Protocol defining the interface for validation checks.

    Use duck typing (Protocol); no need to inherit from a base class.
    """

    def validate(self, spec: Mapping[str, Any], schema: FieldSchema) -> List[Finding]:
        """Run the validation check.

        Args:
            spec: The spec record (the single object inside the "specs" array).
                Must not be mutated.
            schema: Field tiers for the run.

        Returns:
            Findings in the order they were produced. May be empty.
        """
        ...


__all__ = ["ValidationCheck"]
