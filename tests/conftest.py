"""Shared pytest configuration and fixtures for specs.json validation tests."""

import copy
import json
from pathlib import Path
from typing import Any, Dict

import pytest


VALID_SPEC: Dict[str, Any] = {
    "title": "Example Specification",
    "description": "Create technical specifications in markdown.",
    "author": "Trust over IP Foundation",
    "spec_directory": "./spec",
    "spec_terms_directory": "terms-definitions",
    "output_path": "./docs",
    "markdown_paths": [
        "spec-head.md",
        "terms-and-definitions-intro.md",
        "spec-body.md",
    ],
    "logo": "https://raw.githubusercontent.com/trustoverip/spec-up-t/master/static/logo.svg",
    "logo_link": "https://github.com/trustoverip/spec-up-t",
    "source": {
        "host": "github",
        "account": "trustoverip",
        "repo": "spec-up-t-starter-pack",
        "branch": "main",
    },
}


def make_document(spec: Dict[str, Any]) -> Dict[str, Any]:
    """Wrap a spec record into a specs.json document."""
    return {"specs": [spec]}


@pytest.fixture
def valid_spec() -> Dict[str, Any]:
    """A spec record with every required field set and no optional fields."""
    return copy.deepcopy(VALID_SPEC)


@pytest.fixture
def valid_document(valid_spec) -> Dict[str, Any]:  # pylint: disable=redefined-outer-name
    return make_document(valid_spec)


@pytest.fixture
def write_specs(tmp_path: Path):
    """Factory writing a document as specs.json under tmp_path."""

    def _write(document: Any, name: str = "specs.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(document, indent=2), encoding="utf-8")
        return path

    return _write
