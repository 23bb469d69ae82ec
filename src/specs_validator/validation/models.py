"""Validation data models.

This module defines core data structures for validation results:
- Finding: Outcome of a single check (one field, one message)
- ValidationResults: Append-only collector populated during a run
- ValidationReport: Immutable snapshot consumed by the reporters
- ReportMetadata: Document path and generation timestamp for report artifacts
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple, Union

from specs_validator.core.enums import REPORT_ORDER, Severity


@dataclass(frozen=True)
class Finding:
    """Result of a single validation check.

    Attributes:
        severity: Severity of the finding (error, warning, info, success).
        message: Human-readable description of the outcome.
        field: Field the finding refers to (e.g., "source.host"), if any.

    Examples:
        >>> Finding(Severity.ERROR, 'Required field "title" is missing', "title")
        Finding(severity=<Severity.ERROR: 'error'>, message='Required field "title" is missing', field='title')
    """

    severity: Severity
    message: str
    field: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate field constraints."""
        if not isinstance(self.severity, Severity):
            try:
                object.__setattr__(self, "severity", Severity(self.severity))
            except ValueError:
                valid = ", ".join(s.value for s in Severity)
                raise ValueError(
                    f"Invalid severity: {self.severity}. Must be one of: {valid}."
                ) from None
        if not self.message:
            raise ValueError("Finding message must not be empty.")

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {
            "severity": self.severity.value,
            "message": self.message,
            "field": self.field,
        }


def _count_by_severity(findings: Iterable[Finding]) -> Dict[Severity, int]:
    counts = {severity: 0 for severity in Severity}
    for finding in findings:
        counts[finding.severity] += 1
    return counts


class ValidationResults:
    """Append-only collector of findings for one validation run.

    Findings keep their insertion order; a running count is kept per severity.
    Nothing is ever removed or replaced once added.

    Examples:
        >>> results = ValidationResults()
        >>> _ = results.add(Severity.ERROR, 'Required field "title" is missing', "title")
        >>> results.has_passed()
        False
        >>> results.count(Severity.ERROR)
        1
    """

    def __init__(self) -> None:
        self._findings: List[Finding] = []
        self._counts: Dict[Severity, int] = {severity: 0 for severity in Severity}

    def add(
        self,
        severity: Union[Severity, str],
        message: str,
        field: Optional[str] = None,
    ) -> Finding:
        """Record a new finding and return it."""
        finding = Finding(severity, message, field)
        return self.append(finding)

    def append(self, finding: Finding) -> Finding:
        self._findings.append(finding)
        self._counts[finding.severity] += 1
        return finding

    def extend(self, findings: Iterable[Finding]) -> None:
        for finding in findings:
            self.append(finding)

    @property
    def findings(self) -> Tuple[Finding, ...]:
        return tuple(self._findings)

    def __len__(self) -> int:
        return len(self._findings)

    def by_severity(self, severity: Severity) -> List[Finding]:
        """Get all findings of one severity in insertion order."""
        return [f for f in self._findings if f.severity == severity]

    def count(self, severity: Severity) -> int:
        return self._counts[severity]

    def has_passed(self, strict: bool = False) -> bool:
        """Check if validation passed.

        Args:
            strict: If True, treat warnings as errors. Default False.

        Returns:
            True if no errors were recorded (and no warnings in strict mode).
        """
        if self._counts[Severity.ERROR]:
            return False
        if strict and self._counts[Severity.WARNING]:
            return False
        return True

    def finalize(self, document_path: Path) -> "ValidationReport":
        """Freeze the collected findings into an immutable report."""
        return ValidationReport(findings=tuple(self._findings), document_path=document_path)


@dataclass(frozen=True)
class ValidationReport:
    """Aggregated validation results for one specs.json document.

    Attributes:
        findings: All findings of the run, in the order they were recorded.
        document_path: Path to the validated document.

    Examples:
        >>> report = results.finalize(Path("specs.json"))
        >>> report.has_passed()
        True
        >>> report.summary_counts()[Severity.WARNING]
        1
    """

    findings: Tuple[Finding, ...]
    document_path: Path

    def by_severity(self, severity: Severity) -> List[Finding]:
        """Get all findings of one severity in insertion order."""
        return [f for f in self.findings if f.severity == severity]

    def grouped(self) -> List[Tuple[Severity, List[Finding]]]:
        """Findings grouped in report order (error, warning, info, success).

        Empty groups are included; reporters decide whether to render them.
        """
        return [(severity, self.by_severity(severity)) for severity in REPORT_ORDER]

    def count(self, severity: Severity) -> int:
        return sum(1 for f in self.findings if f.severity == severity)

    def summary_counts(self) -> Dict[Severity, int]:
        return _count_by_severity(self.findings)

    def get_error_count(self) -> int:
        return self.count(Severity.ERROR)

    def get_warning_count(self) -> int:
        return self.count(Severity.WARNING)

    def has_passed(self, strict: bool = False) -> bool:
        """Check if validation passed.

        Args:
            strict: If True, treat warnings as errors. Default False.

        Returns:
            True if the report holds no errors (and no warnings in strict mode).
        """
        if self.get_error_count():
            return False
        if strict and self.get_warning_count():
            return False
        return True

    def summary(self) -> str:
        """Generate a concise text summary of validation results.

        Examples:
            >>> print(report.summary())
            Validation Summary:
              File: specs.json
              Findings: 14 recorded (13 success, 0 info, 1 warnings, 0 errors)
              Status: PASSED
        """
        counts = self.summary_counts()
        status = "PASSED" if self.has_passed() else "FAILED"
        return (
            f"Validation Summary:\n"
            f"  File: {self.document_path.name}\n"
            f"  Findings: {len(self.findings)} recorded "
            f"({counts[Severity.SUCCESS]} success, {counts[Severity.INFO]} info, "
            f"{counts[Severity.WARNING]} warnings, {counts[Severity.ERROR]} errors)\n"
            f"  Status: {status}"
        )


@dataclass(frozen=True)
class ReportMetadata:
    """Metadata rendered alongside the findings in report artifacts."""

    document_path: Path
    generated_at: datetime = field(default_factory=datetime.now)
