"""lengthEqual: the sequence or mapping at a path has an exact length."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .aggregate import Verdict, fold_documents, fold_path_values
from .context import Document, ValidateContext
from .diagnostics import error_info, fail_info


@dataclass
class LengthEqualValidator:
    path: str
    count: int = 0

    assert_type = "lengthEqual"

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
            if not isinstance(actual, (list, dict)):
                return False, error_info(
                    f"expected field '{self.path}' to be a list or mapping, "
                    f"got {type(actual).__name__}",
                    document_index=document_index,
                    values_index=values_index,
                )
            if (len(actual) == self.count) == context.negative:
                return False, self._fail_info(
                    f"length {len(actual)}", document_index, values_index, context.negative
                )
            return True, []

        return fold_path_values(document, document_index, self.path, context, check)

    def _fail_info(
        self, actual: str, document_index: int, values_index: int, negative: bool
    ) -> list[str]:
        return fail_info(
            "to have length",
            self.path,
            str(self.count),
            actual,
            negative=negative,
            document_index=document_index,
            values_index=values_index,
        )
