"""matchRegex: the string value at a path matches a regular expression."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

from .aggregate import Verdict, fold_documents, fold_path_values
from .content import to_text
from .context import Document, ValidateContext
from .diagnostics import error_info, fail_info


@dataclass
class MatchRegexValidator:
    """
    Validate that the value at ``path`` matches ``pattern``.

    Matching uses ``re.search``, so the pattern is not anchored unless it
    says so. Non-string values are reported as errors.
    """
    path: str
    pattern: str
    _compiled: re.Pattern = field(init=False, repr=False, compare=False)

    assert_type = "matchRegex"

    def __post_init__(self) -> None:
        self._compiled = re.compile(self.pattern)

    def validate(self, context: ValidateContext) -> Verdict:
        return fold_documents(
            context,
            lambda document, index: self._validate_document(document, index, context),
            lambda: self._fail_info("no manifest found", 0, -1, context.negative),
        )

    def _validate_document(
        self, document: Document, document_index: int, context: ValidateContext
    ) -> Verdict:
        def check(values_index: int, actual: Any) -> Verdict:
            if not isinstance(actual, str):
                return False, error_info(
                    f"expected field '{self.path}' to be a string, "
                    f"got {type(actual).__name__}",
                    document_index=document_index,
                    values_index=values_index,
                )
            matched = self._compiled.search(actual) is not None
            if matched == context.negative:
                return False, self._fail_info(
                    actual, document_index, values_index, context.negative
                )
            return True, []

        return fold_path_values(document, document_index, self.path, context, check)

    def _fail_info(
        self, actual: Any, document_index: int, values_index: int, negative: bool
    ) -> list[str]:
        return fail_info(
            "to match",
            self.path,
            self.pattern,
            to_text(actual),
            negative=negative,
            document_index=document_index,
            values_index=values_index,
        )
