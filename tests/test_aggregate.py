"""Tests for verdict aggregation."""

import pytest

from chartassert.validators import ValidateContext, determine_success, fold_documents, fold_values


# --- determine_success ---


@pytest.mark.parametrize("running", [True, False])
@pytest.mark.parametrize("current", [True, False])
def test_first_verdict_is_taken_as_is(running, current):
    assert determine_success(0, running, current) is current


@pytest.mark.parametrize(
    "running, current, expected",
    [(True, True, True), (True, False, False), (False, True, False), (False, False, False)],
)
def test_later_verdicts_are_conjoined(running, current, expected):
    assert determine_success(3, running, current) is expected


# --- fold_documents ---


def _checker(verdicts, calls):
    def check(document, index):
        calls.append(index)
        return verdicts[index], [] if verdicts[index] else [f"doc {index}"]
    return check


def test_empty_set_fails_with_explanation():
    passed, errors = fold_documents(ValidateContext(), _checker([], []), lambda: ["none"])
    assert passed is False
    assert errors == ["none"]


def test_empty_set_passes_when_negated():
    passed, errors = fold_documents(
        ValidateContext(negative=True), _checker([], []), lambda: ["none"]
    )
    assert passed is True
    assert errors == []


def test_every_document_is_evaluated_without_fail_fast():
    calls = []
    context = ValidateContext(documents=[{}, {}, {}])
    passed, errors = fold_documents(context, _checker([False, True, False], calls), list)
    assert passed is False
    assert calls == [0, 1, 2]
    assert errors == ["doc 0", "doc 2"]


def test_fail_fast_stops_at_first_failure():
    calls = []
    context = ValidateContext(documents=[{}, {}, {}], fail_fast=True)
    passed, errors = fold_documents(context, _checker([True, False, False], calls), list)
    assert passed is False
    assert calls == [0, 1]
    assert errors == ["doc 1"]


def test_all_passing_documents_pass():
    context = ValidateContext(documents=[{}, {}])
    passed, errors = fold_documents(context, _checker([True, True], []), list)
    assert passed is True
    assert errors == []


# --- fold_values ---


def test_no_values_passes_only_when_negated():
    assert fold_values([], lambda i, v: (True, []), ValidateContext()) == (False, [])
    assert fold_values([], lambda i, v: (True, []), ValidateContext(negative=True)) == (True, [])


def test_values_are_conjoined():
    values = [(0, "a"), (1, "b")]
    passed, errors = fold_values(
        values, lambda i, v: (v == "a", [] if v == "a" else [v]), ValidateContext()
    )
    assert passed is False
    assert errors == ["b"]
