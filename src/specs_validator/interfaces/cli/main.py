import argparse
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

import colorlog

from specs_validator import __version__ as _PACKAGE_VERSION
from specs_validator.core.utils import get_report_path
from specs_validator.validation.config import (
    DEFAULT_DOCUMENT_NAME,
    ValidatorSettings,
    load_settings,
)
from specs_validator.validation.models import ReportMetadata
from specs_validator.validation.registry import print_report, run_validation
from specs_validator.validation.reporting import render_html, render_json, write_report


def setup_logging(
    verbose: bool = False, warnings_only: bool = False, errors_only: bool = False
) -> None:
    logger = logging.getLogger()
    for h in list(logger.handlers):
        logger.removeHandler(h)
    log_format = (
        "%(asctime)s:%(levelname)s:%(name)s in %(filename)s:%(funcName)s:%(lineno)d: %(message)s"
    )
    log_colors = {
        "DEBUG": "cyan",
        "INFO": "green",
        "WARNING": "yellow",
        "ERROR": "red",
        "CRITICAL": "bold_red",
    }
    stream_handler = colorlog.StreamHandler()
    formatter = colorlog.ColoredFormatter(f"%(log_color)s{log_format}", log_colors=log_colors)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)
    if errors_only:
        logger.setLevel(logging.ERROR)
    elif warnings_only:
        logger.setLevel(logging.WARNING)
    else:
        logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def _resolve_settings(args: argparse.Namespace) -> ValidatorSettings:
    """Load settings from --config (if given) and apply command-line overrides."""
    config_arg = getattr(args, "config", None)
    settings = load_settings(Path(config_arg)) if config_arg else ValidatorSettings()
    return settings.with_overrides(
        strict=True if getattr(args, "strict", False) else None,
        html_report=False if getattr(args, "no_html", False) else None,
        json_report=True if getattr(args, "report_json", False) else None,
        color=False if getattr(args, "no_color", False) else None,
    )


def cmd_validate(args: argparse.Namespace) -> int:
    """Validate a specs.json file and write the reports next to it.

    A failure to write a report is logged and does not change the outcome.

    Returns:
        0 if validation passed
        1 if validation failed (including a missing or unparsable file)
        2 if the settings file is missing or invalid
    """
    try:
        settings = _resolve_settings(args)
    except (FileNotFoundError, ValueError) as e:
        logging.error("Invalid settings: %s", e)
        return 2

    document_path = Path(getattr(args, "path", None) or DEFAULT_DOCUMENT_NAME).resolve()
    logging.info("Validating specs.json file: %s", document_path)

    report = run_validation(document_path)
    passed = report.has_passed(strict=settings.strict)

    print_report(report, color=settings.color, strict=settings.strict)

    metadata = ReportMetadata(document_path=document_path, generated_at=datetime.now())
    artifacts = []
    if settings.html_report:
        artifacts.append(
            (
                render_html(report, metadata, strict=settings.strict),
                get_report_path(document_path, settings.html_filename),
            )
        )
    if settings.json_report:
        artifacts.append(
            (
                render_json(report, metadata, strict=settings.strict),
                get_report_path(document_path, settings.json_filename),
            )
        )
    for content, report_path in artifacts:
        try:
            write_report(content, report_path)
        except OSError as e:
            logging.error("Failed to write report %s: %s", report_path, e)

    if passed:
        return 0
    if settings.strict and not report.get_error_count():
        logging.error(
            "Validation failed in strict mode: %d warnings", report.get_warning_count()
        )
    else:
        logging.error("Validation found %d errors.", report.get_error_count())
    return 1


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="specs-validator",
        description="Validate a Spec-Up-T specs.json file and generate an HTML report",
    )
    p.add_argument(
        "path",
        nargs="?",
        default=DEFAULT_DOCUMENT_NAME,
        help=f"Path to specs.json (defaults to ./{DEFAULT_DOCUMENT_NAME})",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_PACKAGE_VERSION}",
    )
    p.add_argument(
        "--config",
        default=None,
        help="Path to a YAML settings file (report names, strict mode, colors)",
    )
    p.add_argument(
        "--strict",
        action="store_true",
        help="Treat warnings as errors when computing the exit code",
    )
    p.add_argument(
        "--no-html",
        action="store_true",
        help="Do not write the HTML report",
    )
    p.add_argument(
        "--report-json",
        action="store_true",
        help="Also write a JSON report next to the document",
    )
    p.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colors in the console report",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    p.add_argument(
        "--warnings-only",
        action="store_true",
        help="Show only warnings and errors (overrides --verbose)",
    )
    p.add_argument(
        "--errors-only",
        action="store_true",
        help="Show only errors (overrides --warnings-only and --verbose)",
    )
    p.set_defaults(func=cmd_validate)
    return p


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(
        verbose=bool(args.verbose),
        warnings_only=bool(getattr(args, "warnings_only", False)),
        errors_only=bool(getattr(args, "errors_only", False)),
    )
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
