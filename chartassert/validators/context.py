"""Validation context shared by every validator of one assertion."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence

# A decoded manifest
Document = dict[str, Any]


@dataclass(frozen=True)
class ValidateContext:
    """
    Read-only inputs of one validation call.

    Attributes:
        documents: Rendered manifests to check, in template order
        negative: Invert the assertion ("does not contain")
        fail_fast: Stop at the first failing document or value
        document_index: Only check the document at this position
    """
    documents: Sequence[Document] = field(default_factory=list)
    negative: bool = False
    fail_fast: bool = False
    document_index: int | None = None

    def manifests(self) -> list[Document]:
        """Documents selected for validation."""
        if self.document_index is None:
            return list(self.documents)
        if 0 <= self.document_index < len(self.documents):
            return [self.documents[self.document_index]]
        return []
