"""equal: the value at a path is deeply equal to an expected value."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .aggregate import Verdict, fold_documents, fold_path_values
from .containment import deep_equal
from .content import fold_whitespace, to_text
from .context import Document, ValidateContext
from .diagnostics import fail_info


@dataclass
class EqualValidator:
    """
    Validate that the value at ``path`` equals ``value``.

    Comparison is type-strict: ``3`` does not equal ``"3"`` or ``3.0``.
    With ``ignore_formatting`` two strings are compared after collapsing
    whitespace runs.
    """
    path: str
    value: Any = None
    ignore_formatting: bool = False

    assert_type = "equal"

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
            if self._equals(actual) == context.negative:
                return False, self._fail_info(
                    actual, document_index, values_index, context.negative
                )
            return True, []

        return fold_path_values(document, document_index, self.path, context, check)

    def _equals(self, actual: Any) -> bool:
        if (
            self.ignore_formatting
            and isinstance(actual, str)
            and isinstance(self.value, str)
        ):
            return fold_whitespace(actual).strip() == fold_whitespace(self.value).strip()
        return deep_equal(actual, self.value)

    def _fail_info(
        self, actual: Any, document_index: int, values_index: int, negative: bool
    ) -> list[str]:
        return fail_info(
            "to equal",
            self.path,
            to_text(self.value),
            to_text(actual),
            negative=negative,
            document_index=document_index,
            values_index=values_index,
        )
