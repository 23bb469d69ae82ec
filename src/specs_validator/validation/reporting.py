"""Report rendering for validation results.

Every renderer is a pure function of a finalized ValidationReport (plus
ReportMetadata for file artifacts). Renderers never modify the report and the
output depends only on their arguments.

- render_console(): Colored text report for the terminal
- render_html(): Standalone HTML report
- render_json(): Machine-readable JSON report
- write_report(): Write a rendered artifact to disk
"""

from __future__ import annotations

import json
import logging
from html import escape
from pathlib import Path
from typing import Dict, List

from colorlog.escape_codes import parse_colors

from specs_validator.core.enums import Severity
from .config import VALIDATOR_NAME
from .models import Finding, ReportMetadata, ValidationReport

logger = logging.getLogger(__name__)

# ============================================================================
# PER-SEVERITY PRESENTATION
# ============================================================================

SEVERITY_LABELS: Dict[Severity, str] = {
    Severity.ERROR: "ERROR",
    Severity.WARNING: "WARNING",
    Severity.INFO: "INFO",
    Severity.SUCCESS: "SUCCESS",
}

# colorlog color names
SEVERITY_COLORS: Dict[Severity, str] = {
    Severity.ERROR: "bold_red",
    Severity.WARNING: "bold_yellow",
    Severity.INFO: "bold_blue",
    Severity.SUCCESS: "bold_green",
}

SEVERITY_ICONS: Dict[Severity, str] = {
    Severity.ERROR: "❌",
    Severity.WARNING: "⚠️",
    Severity.INFO: "ℹ️",
    Severity.SUCCESS: "✅",
}

# Summary lines, in the order they are printed
SUMMARY_LINES = (
    (Severity.SUCCESS, "✓ Success", "Successful"),
    (Severity.INFO, "ⓘ Info", "Information"),
    (Severity.WARNING, "⚠ Warnings", "Warnings"),
    (Severity.ERROR, "✗ Errors", "Errors"),
)


def _format_finding(finding: Finding) -> str:
    field_info = f" [{finding.field}]" if finding.field else ""
    return f"{finding.message}{field_info}"


# ============================================================================
# CONSOLE
# ============================================================================


def render_console(report: ValidationReport, color: bool = True, strict: bool = False) -> str:
    """Render findings as a console report.

    Findings are grouped error, warning, info, success (one line each),
    followed by the per-severity counts and a single PASSED/FAILED banner.

    Args:
        report: Finalized validation report.
        color: Wrap labels in ANSI color codes.
        strict: Treat warnings as errors in the PASSED/FAILED banner.

    Returns:
        Multi-line report text.

    Examples:
        >>> print(render_console(report, color=False))
        === SPECS.JSON VALIDATION RESULTS ===
        File: /work/specs.json
        <BLANKLINE>
        WARNING: Recommended field "favicon" is missing [favicon]
        ...
    """

    def paint(text: str, colors: str) -> str:
        if not color:
            return text
        return f"{parse_colors(colors)}{text}{parse_colors('reset')}"

    lines: List[str] = [
        paint("=== SPECS.JSON VALIDATION RESULTS ===", "bold_cyan"),
        f"File: {report.document_path}",
        "",
    ]

    for severity, findings in report.grouped():
        if not findings:
            continue
        label = paint(SEVERITY_LABELS[severity], SEVERITY_COLORS[severity])
        for finding in findings:
            lines.append(f"{label}: {_format_finding(finding)}")
        lines.append("")

    counts = report.summary_counts()
    lines.append(paint("=== SUMMARY ===", "bold_cyan"))
    for severity, title, _ in SUMMARY_LINES:
        lines.append(paint(f"{title}: {counts[severity]}", SEVERITY_COLORS[severity]))
    lines.append("")

    if report.has_passed(strict=strict):
        lines.append(paint("🎉 VALIDATION PASSED! specs.json meets all requirements.", "bold_green"))
    elif report.has_passed():
        lines.append(
            paint("❌ VALIDATION FAILED! Strict mode: warnings count as errors.", "bold_red")
        )
    else:
        lines.append(paint("❌ VALIDATION FAILED! Please fix the errors above.", "bold_red"))

    return "\n".join(lines)


# ============================================================================
# HTML
# ============================================================================

_HTML_STYLE = """
        body {
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
            line-height: 1.6;
            max-width: 1200px;
            margin: 0 auto;
            padding: 20px;
            background-color: #f5f5f5;
        }
        .container {
            background: white;
            border-radius: 8px;
            padding: 30px;
            box-shadow: 0 2px 10px rgba(0,0,0,0.1);
        }
        .header {
            text-align: center;
            margin-bottom: 30px;
            padding-bottom: 20px;
            border-bottom: 2px solid #eee;
        }
        .status {
            font-size: 1.5em;
            font-weight: bold;
            padding: 10px 20px;
            border-radius: 5px;
            display: inline-block;
        }
        .status.success { background-color: #d4edda; color: #155724; border: 1px solid #c3e6cb; }
        .status.error { background-color: #f8d7da; color: #721c24; border: 1px solid #f5c6cb; }
        .summary {
            display: grid;
            grid-template-columns: repeat(auto-fit, minmax(200px, 1fr));
            gap: 15px;
            margin: 20px 0;
        }
        .summary-item { text-align: center; padding: 15px; border-radius: 5px; background-color: #f8f9fa; }
        .summary-item.error { border-left: 4px solid #dc3545; }
        .summary-item.warning { border-left: 4px solid #ffc107; }
        .summary-item.info { border-left: 4px solid #17a2b8; }
        .summary-item.success { border-left: 4px solid #28a745; }
        .result-section { margin: 20px 0; padding: 15px; border-radius: 5px; }
        .result-section.error { background-color: #f8d7da; border: 1px solid #f5c6cb; }
        .result-section.warning { background-color: #fff3cd; border: 1px solid #ffeaa7; }
        .result-section.info { background-color: #d1ecf1; border: 1px solid #bee5eb; }
        .result-section.success { background-color: #d4edda; border: 1px solid #c3e6cb; }
        .result-section h3 { margin-top: 0; }
        .result-section li { margin: 5px 0; }
        code {
            background-color: #f1f3f4;
            padding: 2px 4px;
            border-radius: 3px;
            font-family: 'Courier New', monospace;
        }
        .metadata { background-color: #f8f9fa; padding: 15px; border-radius: 5px; margin-bottom: 20px; }
        .metadata table { width: 100%; border-collapse: collapse; }
        .metadata td { padding: 5px 10px; border-bottom: 1px solid #dee2e6; }
        .metadata td:first-child { font-weight: bold; width: 150px; }
        .footer { margin-top: 40px; padding-top: 20px; border-top: 1px solid #eee; text-align: center; color: #6c757d; }
"""


def _html_section(severity: Severity, findings: List[Finding]) -> str:
    items = []
    for finding in findings:
        field_info = f" <code>[{escape(finding.field)}]</code>" if finding.field else ""
        items.append(f"<li>{escape(finding.message)}{field_info}</li>")
    return (
        f'<div class="result-section {severity.value}">\n'
        f"    <h3>{SEVERITY_ICONS[severity]} {SEVERITY_LABELS[severity]} ({len(findings)})</h3>\n"
        f"    <ul>{''.join(items)}</ul>\n"
        f"</div>"
    )


def render_html(
    report: ValidationReport,
    metadata: ReportMetadata,
    validator_name: str = VALIDATOR_NAME,
    strict: bool = False,
) -> str:
    """Render findings as a standalone HTML document.

    The page holds an overall status badge, a metadata table (file tested, test
    date, test suite), summary cards and one section per non-empty severity
    group. All text is HTML-escaped.

    Args:
        report: Finalized validation report.
        metadata: Document path and generation timestamp.
        validator_name: Identity shown in the metadata table and footer.
        strict: Treat warnings as errors for the status badge.

    Returns:
        HTML document as a string.
    """
    passed = report.has_passed(strict=strict)
    status = "PASSED" if passed else "FAILED"
    if strict:
        status = f"{status} (STRICT)"
    status_class = "success" if passed else "error"
    generated = metadata.generated_at.strftime("%Y-%m-%d %H:%M:%S")
    counts = report.summary_counts()

    summary_items = "\n".join(
        f'            <div class="summary-item {severity.value}">\n'
        f"                <h3>{SEVERITY_ICONS[severity]} {counts[severity]}</h3>\n"
        f"                <p>{caption}</p>\n"
        f"            </div>"
        for severity, _, caption in SUMMARY_LINES
    )
    sections = "\n".join(
        _html_section(severity, findings) for severity, findings in report.grouped() if findings
    )

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Specs.json Validation Report</title>
    <style>{_HTML_STYLE}    </style>
</head>
<body>
    <div class="container">
        <div class="header">
            <h1>📋 Specs.json Validation Report</h1>
            <div class="status {status_class}">VALIDATION {status}</div>
        </div>

        <div class="metadata">
            <table>
                <tr><td>File Tested:</td><td><code>{escape(str(metadata.document_path))}</code></td></tr>
                <tr><td>Test Date:</td><td>{escape(generated)}</td></tr>
                <tr><td>Test Suite:</td><td>{escape(validator_name)}</td></tr>
            </table>
        </div>

        <div class="summary">
{summary_items}
        </div>

        <div class="results">
            <h2>📝 Detailed Results</h2>
{sections}
        </div>

        <div class="footer">
            <p>Generated by {escape(validator_name)}</p>
        </div>
    </div>
</body>
</html>
"""


# ============================================================================
# JSON
# ============================================================================


def render_json(report: ValidationReport, metadata: ReportMetadata, strict: bool = False) -> str:
    """Render findings as a JSON document.

    Returns:
        Formatted JSON string with metadata, summary and ordered findings.
    """
    counts = report.summary_counts()
    report_data = {
        "metadata": {
            "document_path": str(metadata.document_path),
            "generated_at": metadata.generated_at.isoformat(),
            "validator": VALIDATOR_NAME,
        },
        "summary": {
            "passed": report.has_passed(strict=strict),
            "strict": strict,
            "errors": counts[Severity.ERROR],
            "warnings": counts[Severity.WARNING],
            "info": counts[Severity.INFO],
            "success": counts[Severity.SUCCESS],
        },
        "findings": [finding.to_dict() for finding in report.findings],
    }
    return json.dumps(report_data, indent=2, ensure_ascii=False)


def write_report(content: str, report_path: Path) -> Path:
    """Write a rendered report, replacing any previous one.

    Raises:
        OSError: If the file cannot be written.
    """
    with open(report_path, "w", encoding="utf-8") as f:
        f.write(content)
    logger.info("Report saved: %s", report_path)
    return report_path
