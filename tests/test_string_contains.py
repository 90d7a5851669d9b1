"""Tests for the stringContains validator."""

import copy
import logging

import pytest

from chartassert.validators import (
    StringContainsValidator,
    StructuredValue,
    ValidateContext,
    to_text,
)

from .conftest import make_manifest

OTHER_DOC = """
a:
  b: "different string"
"""


def _validate(validator, documents, **context):
    return validator.validate(ValidateContext(documents=documents, **context))


# --- plain containment ---


def test_contains_ok(manifest):
    validator = StringContainsValidator(path="a.b", content="hello world")
    passed, diff = _validate(validator, [manifest])
    assert passed is True
    assert diff == []


def test_contains_fail(manifest):
    validator = StringContainsValidator(path="a.b", content="not present")
    passed, diff = _validate(validator, [manifest])
    assert passed is False
    assert diff == [
        "DocumentIndex:\t0",
        "ValuesIndex:\t0",
        "Path:\ta.b",
        "Expected to contain:",
        "\tnot present",
        "Actual:",
        "\thello world foo bar",
    ]


def test_negative_ok(manifest):
    validator = StringContainsValidator(path="a.b", content="not present")
    passed, diff = _validate(validator, [manifest], negative=True)
    assert passed is True
    assert diff == []


def test_negative_fail(manifest):
    validator = StringContainsValidator(path="a.b", content="hello world")
    passed, diff = _validate(validator, [manifest], negative=True)
    assert passed is False
    assert diff == [
        "DocumentIndex:\t0",
        "ValuesIndex:\t0",
        "Path:\ta.b",
        "Expected NOT to contain:",
        "\thello world",
        "Actual:",
        "\thello world foo bar",
    ]


def test_ignore_formatting_ok(manifest):
    validator = StringContainsValidator(
        path="a.c", content="multi line string", ignore_formatting=True
    )
    passed, diff = _validate(validator, [manifest])
    assert passed is True
    assert diff == []


def test_without_ignore_formatting_newlines_matter(manifest):
    validator = StringContainsValidator(path="a.c", content="multi line string")
    passed, _ = _validate(validator, [manifest])
    assert passed is False


def test_ignore_formatting_fail_prints_multiline_actual(manifest):
    validator = StringContainsValidator(
        path="a.c", content="not present", ignore_formatting=True
    )
    passed, diff = _validate(validator, [manifest])
    assert passed is False
    assert diff == [
        "DocumentIndex:\t0",
        "ValuesIndex:\t0",
        "Path:\ta.c",
        "Expected to contain:",
        "\tnot present",
        "Actual:",
        "\tmulti",
        "\tline",
        "\tstring",
    ]


def test_structured_content_is_reencoded(manifest):
    validator = StringContainsValidator(path="a.b", content={"key": "value"})
    passed, diff = _validate(validator, [manifest])
    assert passed is False
    assert "key: value" in diff[4]


def test_non_string_actual_is_reencoded(manifest):
    validator = StringContainsValidator(path="a", content="b: hello world")
    passed, diff = _validate(validator, [manifest])
    assert passed is True
    assert diff == []


# --- fromJson ---


def test_from_json_ok(manifest):
    validator = StringContainsValidator(
        path="a.d", from_json=True, content={"name": "test"}
    )
    passed, diff = _validate(validator, [manifest])
    assert passed is True
    assert diff == []


def test_from_json_with_string_content_ok(manifest):
    validator = StringContainsValidator(
        path="a.d", from_json=True, content='{"name":"test"}'
    )
    passed, diff = _validate(validator, [manifest])
    assert passed is True
    assert diff == []


def test_from_json_nested_ok(manifest):
    validator = StringContainsValidator(
        path="a.d", from_json=True, content={"nested": {"value": True}}
    )
    passed, diff = _validate(validator, [manifest])
    assert passed is True
    assert diff == []


def test_from_json_compares_types_strictly(manifest):
    validator = StringContainsValidator(
        path="a.d", from_json=True, content={"nested": {"value": "true"}}
    )
    passed, _ = _validate(validator, [manifest])
    assert passed is False


def test_from_json_fail(manifest):
    validator = StringContainsValidator(
        path="a.d", from_json=True, content={"notfound": "value"}
    )
    passed, diff = _validate(validator, [manifest])
    assert passed is False
    assert diff == [
        "DocumentIndex:\t0",
        "ValuesIndex:\t0",
        "Path:\ta.d",
        "Expected to contain:",
        "\tnotfound: value",
        "Actual:",
        '\t{"name":"test","nested":{"value":true}}',
    ]


def test_from_json_negative_ok(manifest):
    validator = StringContainsValidator(
        path="a.d", from_json=True, content={"notfound": "value"}
    )
    passed, diff = _validate(validator, [manifest], negative=True)
    assert passed is True
    assert diff == []


def test_from_json_invalid_json(manifest):
    validator = StringContainsValidator(
        path="a.b", from_json=True, content={"key": "value"}
    )
    passed, diff = _validate(validator, [manifest])
    assert passed is False
    assert diff[:3] == ["DocumentIndex:\t0", "ValuesIndex:\t0", "Error:"]
    assert diff[3].startswith("\tfailed to parse JSON from 'a.b'")


def test_from_json_invalid_json_fails_even_when_negated(manifest):
    validator = StringContainsValidator(
        path="a.b", from_json=True, content={"key": "value"}
    )
    passed, diff = _validate(validator, [manifest], negative=True)
    assert passed is False
    assert "Error:" in diff


def test_from_json_content_not_a_mapping(manifest):
    validator = StringContainsValidator(path="a.d", from_json=True, content=["a", "b"])
    passed, diff = _validate(validator, [manifest])
    assert passed is False
    assert "Error:" in diff
    assert any("failed to convert Content to map" in line for line in diff)


def test_from_json_date_like_values_compare_as_strings():
    manifest = {"a": {"d": '{"created": "2024-01-01", "name": "test"}'}}
    validator = StringContainsValidator(
        path="a.d", from_json=True, content="created: 2024-01-01"
    )
    passed, diff = _validate(validator, [manifest])
    assert passed is True
    assert diff == []


# --- fromYaml ---


def test_from_yaml_ok(manifest):
    validator = StringContainsValidator(
        path="a.e", from_yaml=True, content={"some": {"nested": "yaml"}}
    )
    passed, diff = _validate(validator, [manifest])
    assert passed is True
    assert diff == []


def test_from_yaml_fail(manifest):
    validator = StringContainsValidator(
        path="a.e", from_yaml=True, content={"notfound": "value"}
    )
    passed, diff = _validate(validator, [manifest])
    assert passed is False
    assert diff == [
        "DocumentIndex:\t0",
        "ValuesIndex:\t0",
        "Path:\ta.e",
        "Expected to contain:",
        "\tnotfound: value",
        "Actual:",
        "\tsome:",
        "\t  nested: yaml",
        "\t  format: true",
    ]


def test_from_yaml_invalid_content(manifest):
    validator = StringContainsValidator(
        path="a.e", from_yaml=True, content="key: [unclosed"
    )
    passed, diff = _validate(validator, [manifest])
    assert passed is False
    assert diff[2] == "Error:"
    assert diff[3].startswith("\tfailed to parse Content as YAML")


def test_from_yaml_date_like_values_compare_as_strings():
    manifest = {"a": {"e": "created: 2024-01-01\nname: test\n"}}
    validator = StringContainsValidator(
        path="a.e", from_yaml=True, content={"created": "2024-01-01"}
    )
    passed, diff = _validate(validator, [manifest])
    assert passed is True
    assert diff == []


# --- long values ---


LONG_PHRASE = " ".join(f"word{i}" for i in range(30))


def test_long_value_in_structure_is_not_folded():
    validator = StringContainsValidator(path="a", content=LONG_PHRASE)
    passed, diff = _validate(validator, [{"a": {"k": LONG_PHRASE}}])
    assert passed is True
    assert diff == []


def test_long_value_diagnostics_stay_on_one_line():
    validator = StringContainsValidator(path="a", content="missing")
    passed, diff = _validate(validator, [{"a": {"k": LONG_PHRASE}}])
    assert passed is False
    assert diff[-2:] == ["Actual:", f"\tk: {LONG_PHRASE}"]


# --- documents and aggregation ---


def test_empty_documents_fail():
    validator = StringContainsValidator(path="a.b", content="hello world")
    passed, diff = _validate(validator, [])
    assert passed is False
    assert diff == [
        "DocumentIndex:\t0",
        "Path:\ta.b",
        "Expected to contain:",
        "\thello world",
        "Actual:",
        "\tno manifest found",
    ]


def test_empty_documents_negative_ok():
    validator = StringContainsValidator(path="a.b", content="hello world")
    passed, diff = _validate(validator, [], negative=True)
    assert passed is True
    assert diff == []


def test_multi_manifest_ok(manifest):
    validator = StringContainsValidator(path="a.b", content="hello world")
    passed, diff = _validate(validator, [manifest, copy.deepcopy(manifest)])
    assert passed is True
    assert diff == []


def test_multi_manifest_fail(manifest):
    validator = StringContainsValidator(path="a.b", content="hello world")
    passed, diff = _validate(validator, [manifest, make_manifest(OTHER_DOC)])
    assert passed is False
    assert diff == [
        "DocumentIndex:\t1",
        "ValuesIndex:\t0",
        "Path:\ta.b",
        "Expected to contain:",
        "\thello world",
        "Actual:",
        "\tdifferent string",
    ]


def test_multi_manifest_fail_fast(manifest):
    validator = StringContainsValidator(path="a.b", content="hello world")
    passed, diff = _validate(
        validator, [make_manifest(OTHER_DOC), manifest], fail_fast=True
    )
    assert passed is False
    assert diff == [
        "DocumentIndex:\t0",
        "ValuesIndex:\t0",
        "Path:\ta.b",
        "Expected to contain:",
        "\thello world",
        "Actual:",
        "\tdifferent string",
    ]


def test_fail_fast_diagnostics_are_a_prefix(manifest):
    other = make_manifest(OTHER_DOC)
    documents = [other, manifest, other]
    validator = StringContainsValidator(path="a.b", content="hello world")

    slow_passed, slow_diff = _validate(validator, documents)
    fast_passed, fast_diff = _validate(validator, documents, fail_fast=True)

    assert slow_passed is fast_passed is False
    assert slow_diff[: len(fast_diff)] == fast_diff
    assert len(fast_diff) < len(slow_diff)
    assert all("DocumentIndex:\t2" != line for line in fast_diff)


def test_document_index_selects_one_document(manifest):
    validator = StringContainsValidator(path="a.b", content="hello world")
    passed, diff = _validate(
        validator, [make_manifest(OTHER_DOC), manifest], document_index=1
    )
    assert passed is True
    assert diff == []


def test_document_index_out_of_range_is_empty_set(manifest):
    validator = StringContainsValidator(path="a.b", content="hello world")
    passed, diff = _validate(validator, [manifest], document_index=5)
    assert passed is False
    assert diff[-1] == "\tno manifest found"


# --- multiple values ---


ITEMS_DOC = """
items:
  - name: web-a
  - name: db
  - name: web-b
"""


def test_each_value_is_checked():
    validator = StringContainsValidator(path="items[*].name", content="web")
    passed, diff = _validate(validator, [make_manifest(ITEMS_DOC)])
    assert passed is False
    assert diff == [
        "DocumentIndex:\t0",
        "ValuesIndex:\t1",
        "Path:\titems[*].name",
        "Expected to contain:",
        "\tweb",
        "Actual:",
        "\tdb",
    ]


def test_all_values_must_pass():
    validator = StringContainsValidator(path="items[*].name", content="")
    passed, diff = _validate(validator, [make_manifest(ITEMS_DOC)])
    assert passed is True
    assert diff == []


def test_fail_fast_stops_at_first_failing_value():
    document = make_manifest("items: [{name: db}, {name: cache}]")
    validator = StringContainsValidator(path="items[*].name", content="web")

    _, slow_diff = _validate(validator, [document])
    _, fast_diff = _validate(validator, [document], fail_fast=True)

    assert "ValuesIndex:\t1" in slow_diff
    assert "ValuesIndex:\t1" not in fast_diff
    assert "ValuesIndex:\t0" in fast_diff


# --- paths ---


def test_unknown_path_fails(manifest):
    validator = StringContainsValidator(path="a.nonexistent", content="hello world")
    passed, diff = _validate(validator, [manifest])
    assert passed is False
    assert diff == [
        "DocumentIndex:\t0",
        "Error:",
        "\tunknown path a.nonexistent",
    ]


def test_unknown_path_negative_ok(manifest):
    validator = StringContainsValidator(path="a.nonexistent", content="hello world")
    passed, diff = _validate(validator, [manifest], negative=True)
    assert passed is True
    assert diff == []


@pytest.mark.parametrize("negative", [False, True])
def test_malformed_path_always_fails(manifest, negative):
    validator = StringContainsValidator(path="a[", content="hello world")
    passed, diff = _validate(validator, [manifest], negative=negative)
    assert passed is False
    assert diff[:2] == ["DocumentIndex:\t0", "Error:"]
    assert diff[2].startswith("\tinvalid path a[")


@pytest.mark.parametrize("negative", [False, True])
def test_path_through_scalar_always_fails(manifest, negative):
    validator = StringContainsValidator(path="a.b.c", content="hello world")
    passed, diff = _validate(validator, [manifest], negative=negative)
    assert passed is False
    assert diff[:2] == ["DocumentIndex:\t0", "Error:"]
    assert "cannot traverse into str" in diff[2]


# --- properties ---


@pytest.mark.parametrize(
    "value",
    ["hello world", "multi\nline", 42, True, 1.5, ["a", "b"], {"k": {"n": [1, 2]}}],
)
def test_value_contains_its_own_text(value):
    validator = StringContainsValidator(path="v", content=to_text(value))
    passed, diff = _validate(validator, [{"v": value}])
    assert passed is True
    assert diff == []


@pytest.mark.parametrize("content", ["hello", "world foo", "absent", "HELLO", ""])
def test_negation_is_the_complement(manifest, content):
    validator = StringContainsValidator(path="a.b", content=content)
    positive, _ = _validate(validator, [manifest])
    negative, _ = _validate(validator, [manifest], negative=True)
    assert positive is not negative


def test_validation_does_not_mutate_inputs(manifest):
    content = {"nested": {"value": True}}
    validator = StringContainsValidator(path="a.d", from_json=True, content=content)
    before = copy.deepcopy(manifest)
    _validate(validator, [manifest])
    assert manifest == before
    assert content == {"nested": {"value": True}}
    assert validator.content == StructuredValue({"nested": {"value": True}})


def test_failure_is_logged_at_debug(manifest, caplog):
    caplog.set_level(logging.DEBUG, logger="chartassert")
    validator = StringContainsValidator(path="a.b", content="not present")
    _validate(validator, [manifest])
    assert "expected content: not present" in caplog.text
