"""Spec-Up-T specs.json validator.

Validates a single ``specs.json`` project manifest against a tiered field
schema and renders the findings as a console report and a standalone HTML
report. The exit status of the CLI is suitable for CI pipelines.
"""

__all__ = [
    "__version__",
]

__version__ = "0.1.0"
