"""
chartassert - assertions for rendered Kubernetes manifests

This package checks rendered chart manifests against declarative
expectations and produces readable failure diagnostics.

Subpackages:
    - validators: path resolution, comparison and verdict aggregation
    - results: assertion results and terminal reporting
    - suite: load assertion suites and rendered manifests

Usage:
    from chartassert import load_suite, load_documents, run_suite, Reporter

    suite, result = load_suite("tests/deployment_test.yaml")
    documents = load_documents(["rendered/deployment.yaml"])

    results = run_suite(suite, documents)
    Reporter().print_results(results)
"""

__version__ = "0.1.0"

# Errors
from .errors import ChartAssertError, DecodeError, DocumentLoadError, PathError

# Re-export validators for convenience
from .validators import (
    # Context
    ValidateContext,
    # Content
    PlainText,
    StructuredValue,
    as_content,
    # Engine pieces
    contains_mapping,
    resolve_path,
    # Validators
    EqualValidator,
    ExistsValidator,
    LengthEqualValidator,
    MatchRegexValidator,
    StringContainsValidator,
)

# Re-export results for convenience
from .results import AssertionResult, Reporter

# Re-export suite for convenience
from .suite import (
    Assertion,
    Defaults,
    Suite,
    ValidationError,
    ValidationResult,
    load_documents,
    load_suite,
    validate_suite_yaml,
)

# Runner
from .runner import run_assertion, run_suite

__all__ = [
    # Package info
    "__version__",
    # Errors
    "ChartAssertError",
    "DecodeError",
    "DocumentLoadError",
    "PathError",
    # Validators - Context
    "ValidateContext",
    # Validators - Content
    "PlainText",
    "StructuredValue",
    "as_content",
    # Validators - Engine pieces
    "contains_mapping",
    "resolve_path",
    # Validators
    "EqualValidator",
    "ExistsValidator",
    "LengthEqualValidator",
    "MatchRegexValidator",
    "StringContainsValidator",
    # Results
    "AssertionResult",
    "Reporter",
    # Suite
    "Assertion",
    "Defaults",
    "Suite",
    "ValidationError",
    "ValidationResult",
    "load_documents",
    "load_suite",
    "validate_suite_yaml",
    # Runner
    "run_assertion",
    "run_suite",
]
