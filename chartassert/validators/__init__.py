"""
Validation engine for rendered Kubernetes manifests.

A validator resolves a path in each document, compares every resolved value
with its expectation and folds the per-value and per-document verdicts into
one pass/fail result plus diagnostic lines.

Supported assertions:
    - stringContains: substring, embedded JSON or embedded YAML containment
    - equal: type-strict deep equality
    - matchRegex: regular expression search on strings
    - exists: path resolves to at least one value
    - lengthEqual: list/mapping has an exact length

Usage:
    from chartassert.validators import StringContainsValidator, ValidateContext

    validator = StringContainsValidator(path="a.b", content="hello world")
    passed, fail_info = validator.validate(ValidateContext(documents=[doc]))
"""

# Engine pieces
from .aggregate import determine_success, fold_documents, fold_values
from .containment import contains_mapping, deep_equal
from .content import (
    Content,
    PlainText,
    StructuredValue,
    as_content,
    fold_whitespace,
    load_all_yaml,
    load_yaml,
    marshal_yaml,
    to_text,
)
from .context import Document, ValidateContext
from .path import resolve_path

# Validators
from .base import VALIDATOR_TYPES, AnyValidator, Validator
from .equal import EqualValidator
from .exists import ExistsValidator
from .length import LengthEqualValidator
from .match_regex import MatchRegexValidator
from .string_contains import StringContainsValidator

__all__ = [
    # Engine pieces
    "determine_success",
    "fold_documents",
    "fold_values",
    "contains_mapping",
    "deep_equal",
    "Content",
    "PlainText",
    "StructuredValue",
    "as_content",
    "fold_whitespace",
    "load_all_yaml",
    "load_yaml",
    "marshal_yaml",
    "to_text",
    "Document",
    "ValidateContext",
    "resolve_path",
    # Validators
    "VALIDATOR_TYPES",
    "AnyValidator",
    "Validator",
    "EqualValidator",
    "ExistsValidator",
    "LengthEqualValidator",
    "MatchRegexValidator",
    "StringContainsValidator",
]
