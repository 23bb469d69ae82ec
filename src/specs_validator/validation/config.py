"""Validation configuration constants and settings.

This module centralizes the document layout constants, the sub-field rules of
the shape checks and the report settings.

Severity Levels:
    - "error": Required fields or shapes are broken; the run fails
    - "warning": Recommended fields are missing; the run still passes
    - "info": Optional fields are not set
    - "success": A check passed

Settings can be loaded from a YAML file, e.g.::

    html_report: true
    json_report: false
    html_filename: specs-validation-report.html
    strict: false
    color: true
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict

import yaml

# ============================================================================
# DOCUMENT LAYOUT
# ============================================================================

# Name of the single root key holding the one-element spec array
CONTAINER_KEY = "specs"

# Document validated when no path is given on the command line
DEFAULT_DOCUMENT_NAME = "specs.json"


# ============================================================================
# SHAPE RULES
# ============================================================================

# Sub-fields every `source` object must carry
SOURCE_SUBFIELDS = ("host", "account", "repo", "branch")

# Sub-fields every `external_specs` entry must carry
EXTERNAL_SPEC_SUBFIELDS = ("external_spec", "gh_page", "url", "terms_dir")


# ============================================================================
# REPORTS
# ============================================================================

HTML_REPORT_FILENAME = "specs-validation-report.html"
JSON_REPORT_FILENAME = "specs-validation-report.json"

VALIDATOR_NAME = "Spec-Up-T specs.json validator"


@dataclass(frozen=True)
class ValidatorSettings:
    """Report and exit-status settings for a validation run.

    Attributes:
        html_report: Write the HTML report next to the document.
        json_report: Also write a JSON report next to the document.
        html_filename: File name of the HTML report.
        json_filename: File name of the JSON report.
        strict: Treat warnings as failures when computing the exit code.
        color: Colorize console output.
    """

    html_report: bool = True
    json_report: bool = False
    html_filename: str = HTML_REPORT_FILENAME
    json_filename: str = JSON_REPORT_FILENAME
    strict: bool = False
    color: bool = True

    def __post_init__(self) -> None:
        """Validate field types."""
        for f in fields(self):
            value = getattr(self, f.name)
            expected = bool if f.type in ("bool", bool) else str
            if not isinstance(value, expected):
                raise ValueError(
                    f"Setting '{f.name}' must be a {expected.__name__}, got {value!r}."
                )
        for name in ("html_filename", "json_filename"):
            value = getattr(self, name)
            if not value or Path(value).name != value:
                raise ValueError(f"Setting '{name}' must be a plain file name, got {value!r}.")

    def with_overrides(self, **overrides: Any) -> "ValidatorSettings":
        """Return a copy with the non-None overrides applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)


def load_settings(settings_file: Path) -> ValidatorSettings:
    """Load validator settings from a YAML file.

    Args:
        settings_file: Path to the YAML settings file.

    Returns:
        ValidatorSettings with file values applied over the defaults.

    Raises:
        FileNotFoundError: If the settings file does not exist.
        ValueError: If the file is not a mapping or holds unknown/invalid keys.

    Examples:
        >>> settings = load_settings(Path("validator.yaml"))
        >>> settings.strict
        False
    """
    if not settings_file.exists():
        raise FileNotFoundError(f"Settings file not found: {settings_file}")
    try:
        with settings_file.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Failed to parse settings file {settings_file}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Settings file {settings_file} must contain a mapping.")

    known = {f.name for f in fields(ValidatorSettings)}
    unknown = sorted(str(k) for k in data if k not in known)
    if unknown:
        raise ValueError(
            f"Unknown settings in {settings_file}: {', '.join(unknown)}. "
            f"Valid settings: {', '.join(sorted(known))}"
        )

    values: Dict[str, Any] = dict(data)
    return ValidatorSettings(**values)
