"""Tests for the string array, nested object, object array and scalar type checks."""

import pytest

from specs_validator.core.enums import Severity
from specs_validator.core.schemas import DEFAULT_SCHEMA
from specs_validator.validation.checks.nested_object import NestedObjectCheck
from specs_validator.validation.checks.object_array import ObjectArrayCheck
from specs_validator.validation.checks.scalar_type import ScalarTypeCheck, matches_type
from specs_validator.validation.checks.string_array import StringArrayCheck
from specs_validator.validation.config import EXTERNAL_SPEC_SUBFIELDS, SOURCE_SUBFIELDS

SOURCE = NestedObjectCheck("source", SOURCE_SUBFIELDS, label="Source")
EXTERNAL_SPECS = ObjectArrayCheck("external_specs", EXTERNAL_SPEC_SUBFIELDS, label="External spec")

FULL_EXTERNAL_SPEC = {
    "external_spec": "toip1",
    "gh_page": "https://trustoverip.github.io/spec-up-t/",
    "url": "https://github.com/trustoverip/spec-up-t",
    "terms_dir": "spec/term-definitions",
}


class TestStringArrayCheck:
    def test_all_strings(self):
        findings = StringArrayCheck("markdown_paths").validate(
            {"markdown_paths": ["a.md", "b.md"]}, DEFAULT_SCHEMA
        )
        assert [(f.severity, f.message, f.field) for f in findings] == [
            (
                Severity.SUCCESS,
                'Field "markdown_paths" contains valid string array',
                "markdown_paths",
            )
        ]

    def test_non_strings_yield_single_error(self):
        findings = StringArrayCheck("markdown_paths").validate(
            {"markdown_paths": ["a.md", 1, None, {"path": "c.md"}]}, DEFAULT_SCHEMA
        )
        assert len(findings) == 1
        assert findings[0].severity is Severity.ERROR
        assert findings[0].message == 'Field "markdown_paths" should contain only strings'

    @pytest.mark.parametrize("spec", [{}, {"markdown_paths": []}, {"markdown_paths": "a.md"}])
    def test_skipped_when_not_a_populated_list(self, spec):
        assert StringArrayCheck("markdown_paths").validate(spec, DEFAULT_SCHEMA) == []


class TestNestedObjectCheck:
    def test_complete_source(self, valid_spec):
        findings = SOURCE.validate(valid_spec, DEFAULT_SCHEMA)
        assert [(f.severity, f.message, f.field) for f in findings] == [
            (Severity.SUCCESS, "Source object structure is valid", "source")
        ]

    def test_each_missing_subfield_reported(self):
        spec = {"source": {"host": "github", "repo": ""}}
        findings = SOURCE.validate(spec, DEFAULT_SCHEMA)

        assert all(f.severity is Severity.ERROR for f in findings)
        assert [f.field for f in findings] == ["source.account", "source.repo", "source.branch"]
        assert findings[0].message == 'Source field "account" is missing or empty'

    def test_falsy_non_blank_values_accepted(self):
        spec = {"source": {"host": "github", "account": 0, "repo": False, "branch": "main"}}
        findings = SOURCE.validate(spec, DEFAULT_SCHEMA)
        assert [f.severity for f in findings] == [Severity.SUCCESS]

    def test_null_subfield_rejected(self):
        spec = {"source": {"host": None, "account": "a", "repo": "r", "branch": "b"}}
        findings = SOURCE.validate(spec, DEFAULT_SCHEMA)
        assert [(f.severity, f.field) for f in findings] == [(Severity.ERROR, "source.host")]

    @pytest.mark.parametrize("value", [None, "github", ["host"], 3])
    def test_skipped_when_not_an_object(self, value):
        assert SOURCE.validate({"source": value}, DEFAULT_SCHEMA) == []

    def test_skipped_when_absent(self):
        assert SOURCE.validate({}, DEFAULT_SCHEMA) == []


class TestObjectArrayCheck:
    def test_missing_subfields_addressed_by_index(self):
        findings = EXTERNAL_SPECS.validate({"external_specs": [{"external_spec": "x"}]}, DEFAULT_SCHEMA)

        assert [(f.severity, f.field) for f in findings] == [
            (Severity.ERROR, "external_specs[0].gh_page"),
            (Severity.ERROR, "external_specs[0].url"),
            (Severity.ERROR, "external_specs[0].terms_dir"),
            (Severity.SUCCESS, "external_specs"),
        ]
        assert findings[0].message == 'External spec 0 missing "gh_page"'
        assert findings[-1].message == "External specs array contains 1 entries"

    def test_valid_entries(self):
        spec = {"external_specs": [FULL_EXTERNAL_SPEC, dict(FULL_EXTERNAL_SPEC, external_spec="b")]}
        findings = EXTERNAL_SPECS.validate(spec, DEFAULT_SCHEMA)
        assert [(f.severity, f.message) for f in findings] == [
            (Severity.SUCCESS, "External specs array contains 2 entries")
        ]

    def test_second_entry_errors_use_its_index(self):
        spec = {"external_specs": [FULL_EXTERNAL_SPEC, dict(FULL_EXTERNAL_SPEC, url="")]}
        findings = EXTERNAL_SPECS.validate(spec, DEFAULT_SCHEMA)
        assert [f.field for f in findings if f.severity is Severity.ERROR] == [
            "external_specs[1].url"
        ]

    def test_non_object_entry(self):
        findings = EXTERNAL_SPECS.validate({"external_specs": ["toip1"]}, DEFAULT_SCHEMA)
        assert [(f.severity, f.message, f.field) for f in findings] == [
            (Severity.ERROR, "External spec 0 should be an object", "external_specs[0]"),
            (Severity.SUCCESS, "External specs array contains 1 entries", "external_specs"),
        ]

    def test_not_an_array(self):
        findings = EXTERNAL_SPECS.validate({"external_specs": {"a": 1}}, DEFAULT_SCHEMA)
        assert [(f.severity, f.message) for f in findings] == [
            (Severity.ERROR, 'Field "external_specs" should be an array')
        ]

    def test_empty_array_reports_zero_entries(self):
        findings = EXTERNAL_SPECS.validate({"external_specs": []}, DEFAULT_SCHEMA)
        assert [(f.severity, f.message) for f in findings] == [
            (Severity.SUCCESS, "External specs array contains 0 entries")
        ]

    @pytest.mark.parametrize("spec", [{}, {"external_specs": None}])
    def test_skipped_when_absent(self, spec):
        assert EXTERNAL_SPECS.validate(spec, DEFAULT_SCHEMA) == []

    def test_idempotent(self):
        spec = {"external_specs": [{"external_spec": "x"}, "bad", FULL_EXTERNAL_SPEC]}
        first = EXTERNAL_SPECS.validate(spec, DEFAULT_SCHEMA)
        second = EXTERNAL_SPECS.validate(spec, DEFAULT_SCHEMA)
        assert first == second


class TestScalarTypeCheck:
    @pytest.mark.parametrize("value", [True, False])
    def test_boolean_accepted(self, value):
        assert ScalarTypeCheck("katex", bool).validate({"katex": value}, DEFAULT_SCHEMA) == []

    @pytest.mark.parametrize("value", ["true", 1, 0, None, [True]])
    def test_boolean_mismatch(self, value):
        findings = ScalarTypeCheck("katex", bool).validate({"katex": value}, DEFAULT_SCHEMA)
        assert [(f.severity, f.message, f.field) for f in findings] == [
            (Severity.ERROR, 'Field "katex" should be a boolean value', "katex")
        ]

    def test_absent_field_yields_nothing(self):
        assert ScalarTypeCheck("katex", bool).validate({}, DEFAULT_SCHEMA) == []

    def test_string_rule(self):
        check = ScalarTypeCheck("version", str)
        assert check.validate({"version": "1.0.0"}, DEFAULT_SCHEMA) == []
        findings = check.validate({"version": 1.0}, DEFAULT_SCHEMA)
        assert findings[0].message == 'Field "version" should be a string value'

    def test_unsupported_type_rejected(self):
        with pytest.raises(ValueError):
            ScalarTypeCheck("source", dict)

    def test_matches_type_is_exact_for_bool_and_int(self):
        assert matches_type(True, bool)
        assert not matches_type(1, bool)
        assert not matches_type(True, int)
        assert matches_type(3, int)
        assert not matches_type(3, str)
        assert not matches_type(3.0, int)

    def test_number_rule_not_supported(self):
        with pytest.raises(ValueError):
            ScalarTypeCheck("weight", float)
