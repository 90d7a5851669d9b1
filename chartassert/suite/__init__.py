"""
Assertion suites.

This package loads declarative assertion suites and the rendered manifests
they run against.

Usage:
    from chartassert.suite import load_suite, load_documents

    suite, result = load_suite("tests/deployment_test.yaml")
    if not result.is_valid:
        print(result)

    documents = load_documents(["rendered/deployment.yaml"])
"""

# Public API
from .loader import load_documents, load_suite, parse_documents, validate_suite_yaml

# Models (for type hints and isinstance checks)
from .models import Assertion, Defaults, Suite

# Validation (for custom validation if needed)
from .validation import SchemaValidator, ValidationError, ValidationResult

__all__ = [
    # Loader functions
    "load_suite",
    "load_documents",
    "parse_documents",
    "validate_suite_yaml",
    # Models
    "Suite",
    "Assertion",
    "Defaults",
    # Validation
    "ValidationResult",
    "ValidationError",
    "SchemaValidator",
]
