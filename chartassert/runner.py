"""
Runs assertions against rendered manifests.

Each assertion gets its own ValidateContext, so assertions are independent
of each other and of the order they run in.
"""

from __future__ import annotations

import logging
from typing import Sequence

from .results import AssertionResult
from .suite import Assertion, Suite
from .validators import Document, ValidateContext

logger = logging.getLogger(__name__)


def run_assertion(
    assertion: Assertion,
    documents: Sequence[Document],
    index: int = 0,
    fail_fast: bool = False,
) -> AssertionResult:
    """
    Evaluate one assertion.

    Args:
        assertion: The declared assertion
        documents: Rendered manifests
        index: Position of the assertion in its suite (used in the title)
        fail_fast: Stop at the first failing document

    Returns:
        AssertionResult with the verdict and diagnostic lines
    """
    if assertion.skipped:
        logger.info(f"asserts[{index}] `{assertion.assert_type}` skipped: {assertion.skip_reason}")
        return AssertionResult(
            index=index,
            passed=True,
            assert_type=assertion.assert_type,
            not_=assertion.not_,
            custom_info=assertion.custom_info,
            skipped=True,
            skip_reason=assertion.skip_reason or "",
        )

    context = ValidateContext(
        documents=documents,
        negative=assertion.not_,
        fail_fast=fail_fast,
        document_index=assertion.document_index,
    )
    passed, fail_info = assertion.validator.validate(context)
    logger.debug(f"asserts[{index}] `{assertion.assert_type}` passed={passed}")

    return AssertionResult(
        index=index,
        passed=passed,
        assert_type=assertion.assert_type,
        not_=assertion.not_,
        fail_info=tuple(fail_info),
        custom_info=assertion.custom_info,
    )


def run_suite(
    suite: Suite,
    documents: Sequence[Document],
    fail_fast: bool | None = None,
) -> list[AssertionResult]:
    """
    Evaluate every assertion of a suite in declaration order.

    ``fail_fast`` overrides the suite default when given.
    """
    if fail_fast is None:
        fail_fast = suite.defaults.fail_fast

    logger.info(
        f"Running suite '{suite.name}': {len(suite.asserts)} assertion(s) "
        f"on {len(documents)} document(s)"
    )
    return [
        run_assertion(assertion, documents, index, fail_fast)
        for index, assertion in enumerate(suite.asserts)
    ]
