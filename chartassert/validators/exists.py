"""exists: a path resolves to at least one value."""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import PathError
from .aggregate import Verdict, fold_documents
from .context import Document, ValidateContext
from .diagnostics import error_info, location_info
from .path import resolve_path


@dataclass
class ExistsValidator:
    """
    Validate that ``path`` exists in every document.

    Negated, the path must be absent. A malformed path fails either way.
    """
    path: str

    assert_type = "exists"

    def validate(self, context: ValidateContext) -> Verdict:
        return fold_documents(
            context,
            lambda document, index: self._validate_document(document, index, context),
            lambda: self._fail_info(0, context.negative),
        )

    def _validate_document(
        self, document: Document, document_index: int, context: ValidateContext
    ) -> Verdict:
        try:
            values = resolve_path(document, self.path)
        except PathError as e:
            return False, error_info(str(e), document_index=document_index)

        if bool(values) == context.negative:
            return False, self._fail_info(document_index, context.negative)
        return True, []

    def _fail_info(self, document_index: int, negative: bool) -> list[str]:
        not_annotation = " NOT" if negative else ""
        return [
            *location_info(document_index),
            f"Path:\t{self.path}",
            f"Expected{not_annotation} to exist",
        ]
