"""
stringContains: the value at a path contains the expected content.

Three comparison modes are supported:

    - plain substring search, optionally ignoring formatting (whitespace runs
      are collapsed on both sides before searching)
    - from_json: the value is a JSON document that must structurally contain
      the expected mapping
    - from_yaml: the same, for a YAML document
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from ..errors import DecodeError
from .aggregate import Verdict, fold_documents, fold_path_values
from .containment import contains_mapping
from .content import (
    Content,
    PlainText,
    as_content,
    content_mapping,
    content_text,
    decode_json_mapping,
    decode_yaml_mapping,
    fold_whitespace,
    to_text,
)
from .context import Document, ValidateContext
from .diagnostics import error_info, fail_info

logger = logging.getLogger(__name__)


@dataclass
class StringContainsValidator:
    """
    Validate that the value at ``path`` contains ``content``.

    Attributes:
        path: Path of the value(s) to check
        content: Expected text or structured value
        ignore_formatting: Collapse whitespace before a plain comparison
        from_json: Decode the value as JSON and compare structurally
        from_yaml: Decode the value as YAML and compare structurally
    """
    path: str
    content: Content = PlainText("")
    ignore_formatting: bool = False
    from_json: bool = False
    from_yaml: bool = False

    assert_type = "stringContains"

    def __post_init__(self) -> None:
        self.content = as_content(self.content)

    def validate(self, context: ValidateContext) -> Verdict:
        """Run the check against every selected document."""
        return fold_documents(
            context,
            lambda document, index: self._validate_document(document, index, context),
            lambda: self._fail_info("no manifest found", 0, -1, context.negative),
        )

    def _validate_document(
        self, document: Document, document_index: int, context: ValidateContext
    ) -> Verdict:
        return fold_path_values(
            document,
            document_index,
            self.path,
            context,
            lambda values_index, value: self._validate_single(
                to_text(value), document_index, values_index, context
            ),
        )

    def _validate_single(
        self, actual: str, document_index: int, values_index: int, context: ValidateContext
    ) -> Verdict:
        try:
            found = self._contains(actual)
        except DecodeError as e:
            logger.debug(f"document {document_index}, value {values_index}: {e}")
            return False, error_info(
                str(e), document_index=document_index, values_index=values_index
            )

        if found == context.negative:
            return False, self._fail_info(
                actual, document_index, values_index, context.negative
            )
        return True, []

    def _contains(self, actual: str) -> bool:
        if self.from_json:
            return contains_mapping(
                decode_json_mapping(actual, self.path), content_mapping(self.content)
            )

        if self.from_yaml:
            return contains_mapping(
                decode_yaml_mapping(actual, self.path), content_mapping(self.content)
            )

        expected = content_text(self.content)
        if self.ignore_formatting:
            return fold_whitespace(expected) in fold_whitespace(actual)
        return expected in actual

    def _fail_info(
        self, actual: Any, document_index: int, values_index: int, negative: bool
    ) -> list[str]:
        expected = content_text(self.content)

        logger.debug(f"expected content: {expected}")
        logger.debug(f"actual string: {actual}")
        logger.debug(
            f"ignore_formatting={self.ignore_formatting} "
            f"from_json={self.from_json} from_yaml={self.from_yaml}"
        )

        return fail_info(
            "to contain",
            self.path,
            expected,
            to_text(actual),
            negative=negative,
            document_index=document_index,
            values_index=values_index,
        )
