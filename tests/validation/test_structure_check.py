"""Tests for the structural check of the document root."""

import pytest

from specs_validator.core.enums import Severity
from specs_validator.validation.checks.structure import StructureCheck


@pytest.mark.parametrize(
    "data, message",
    [
        (None, "specs.json must contain a JSON object at root level"),
        ([], "specs.json must contain a JSON object at root level"),
        ("specs", "specs.json must contain a JSON object at root level"),
        ({}, "Root object should contain exactly one field, found 0: []"),
        (
            {"specs": [{}], "extra": 1},
            "Root object should contain exactly one field, found 2: [specs, extra]",
        ),
        ({"spec": [{}]}, "Root object should contain field 'specs', found 'spec'"),
        ({"specs": {}}, 'Field "specs" should be an array'),
        ({"specs": []}, 'Field "specs" should contain exactly one object, found 0'),
        ({"specs": [{}, {}]}, 'Field "specs" should contain exactly one object, found 2'),
        ({"specs": [None]}, 'The item in "specs" array should be an object'),
        ({"specs": [["title"]]}, 'The item in "specs" array should be an object'),
    ],
)
def test_structure_failures(data, message):
    spec, findings = StructureCheck().validate(data)

    assert spec is None
    assert len(findings) == 1
    assert findings[0].severity is Severity.ERROR
    assert findings[0].message == message
    assert findings[0].field is None


def test_structure_success_returns_spec_record():
    record = {"title": "x"}
    spec, findings = StructureCheck().validate({"specs": [record]})

    assert spec is record
    assert [(f.severity, f.message) for f in findings] == [
        (Severity.SUCCESS, "Basic structure validation passed")
    ]


def test_custom_container_key():
    spec, findings = StructureCheck("documents").validate({"documents": [{}]})
    assert spec == {}
    assert findings[0].severity is Severity.SUCCESS
