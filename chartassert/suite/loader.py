"""
Suite and manifest loaders.

This module provides the public API for loading assertion suites and
rendered manifests from disk or YAML strings.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

import yaml

from ..errors import DocumentLoadError
from ..validators import Document, load_all_yaml, load_yaml
from .models import Suite
from .parser import SchemaParser
from .validation import SchemaValidator, ValidationResult

logger = logging.getLogger(__name__)


def load_suite(path: str | Path) -> tuple[Suite | None, ValidationResult]:
    """
    Load and validate a suite from a YAML file.

    Args:
        path: Path to the YAML suite file

    Returns:
        Tuple of (Suite or None, ValidationResult)
        If validation fails, Suite will be None.

    Example:
        suite, result = load_suite("tests/deployment_test.yaml")
        if not result.is_valid:
            print(result)
            sys.exit(1)
    """
    path = Path(path)

    if not path.exists():
        result = ValidationResult()
        result.add_error(
            str(path),
            "File not found",
            suggestion="Check the file path is correct"
        )
        return None, result

    return _validate_suite_text(path.read_text(), str(path))


def validate_suite_yaml(yaml_string: str) -> tuple[Suite | None, ValidationResult]:
    """
    Validate a suite from a YAML string (useful for testing).

    Args:
        yaml_string: YAML content as a string

    Returns:
        Tuple of (Suite or None, ValidationResult)
    """
    return _validate_suite_text(yaml_string, "yaml")


def _validate_suite_text(text: str, source: str) -> tuple[Suite | None, ValidationResult]:
    try:
        data = load_yaml(text)
    except yaml.YAMLError as e:
        result = ValidationResult()
        result.add_error(
            source,
            f"Invalid YAML syntax: {e}",
            suggestion="Check YAML formatting (indentation, colons, etc.)"
        )
        return None, result

    if not isinstance(data, dict):
        result = ValidationResult()
        result.add_error(
            source,
            "File must contain a YAML object (not a list or scalar)",
            value=type(data).__name__
        )
        return None, result

    validator = SchemaValidator(data)
    result = validator.validate()

    if not result.is_valid:
        return None, result

    suite = SchemaParser(data).parse()
    logger.debug(f"Loaded suite '{suite.name}' with {len(suite.asserts)} assertion(s)")
    return suite, result


def parse_documents(yaml_string: str, source: str = "yaml") -> list[Document]:
    """
    Split a multi-document YAML stream into manifests.

    Empty documents (e.g. templates that rendered nothing) are dropped.

    Raises:
        DocumentLoadError: On invalid YAML or a document that is not a mapping
    """
    try:
        raw_documents = list(load_all_yaml(yaml_string))
    except yaml.YAMLError as e:
        raise DocumentLoadError(f"{source}: invalid YAML: {e}") from e

    documents: list[Document] = []
    for position, document in enumerate(raw_documents):
        if document is None:
            continue
        if not isinstance(document, dict):
            raise DocumentLoadError(
                f"{source}: document {position} must be a mapping, "
                f"got {type(document).__name__}"
            )
        documents.append(document)
    return documents


def load_documents(paths: Iterable[str | Path]) -> list[Document]:
    """
    Load rendered manifests from one or more multi-document YAML files.

    Documents keep the order of the files and of the documents within them.

    Raises:
        DocumentLoadError: If a file is missing or cannot be parsed
    """
    documents: list[Document] = []
    for path in paths:
        path = Path(path)
        if not path.exists():
            raise DocumentLoadError(f"{path}: file not found")
        loaded = parse_documents(path.read_text(), str(path))
        logger.debug(f"Loaded {len(loaded)} document(s) from {path}")
        documents.extend(loaded)
    return documents
