"""
Folding of per-value and per-document verdicts.

Both folds are strict conjunctions: an assertion passes only when every
document passes, and a document passes only when every resolved value does.
With fail_fast set, evaluation stops at the first failure and only the
diagnostics gathered so far are reported.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Sequence

from ..errors import PathError
from .context import Document, ValidateContext
from .diagnostics import error_info
from .path import resolve_path

logger = logging.getLogger(__name__)

# (passed, diagnostic lines)
Verdict = tuple[bool, list[str]]


def determine_success(index: int, running: bool, current: bool) -> bool:
    """Running verdict after folding in the verdict at ``index``."""
    if index == 0:
        return current
    return running and current


def fold_documents(
    context: ValidateContext,
    check_document: Callable[[Document, int], Verdict],
    on_empty: Callable[[], list[str]],
) -> Verdict:
    """
    Fold ``check_document`` over the selected documents.

    An empty document set passes under negation and otherwise fails with the
    lines produced by ``on_empty``.
    """
    manifests = context.manifests()

    if not manifests:
        if context.negative:
            return True, []
        return False, on_empty()

    success = False
    errors: list[str] = []
    for document_index, document in enumerate(manifests):
        document_success, document_errors = check_document(document, document_index)
        errors.extend(document_errors)
        success = determine_success(document_index, success, document_success)

        if not success and context.fail_fast:
            break

    return success, errors


def fold_values(
    values: Sequence[tuple[int, Any]],
    check_value: Callable[[int, Any], Verdict],
    context: ValidateContext,
) -> Verdict:
    """Fold ``check_value`` over the values resolved in one document."""
    success = len(values) == 0 and context.negative
    errors: list[str] = []
    for values_index, value in values:
        value_success, value_errors = check_value(values_index, value)
        errors.extend(value_errors)
        success = determine_success(values_index, success, value_success)

        if not success and context.fail_fast:
            break

    return success, errors


def fold_path_values(
    document: Document,
    document_index: int,
    path: str,
    context: ValidateContext,
    check_value: Callable[[int, Any], Verdict],
) -> Verdict:
    """
    Resolve ``path`` in one document and fold ``check_value`` over the result.

    A path that cannot be resolved always fails. A path that resolves to no
    values fails with "unknown path" unless the assertion is negated.
    """
    try:
        values = resolve_path(document, path)
    except PathError as e:
        logger.debug(f"document {document_index}: {e}")
        return False, error_info(str(e), document_index=document_index)

    if not values and not context.negative:
        return False, error_info(f"unknown path {path}", document_index=document_index)

    return fold_values(values, check_value, context)
