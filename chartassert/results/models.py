"""
Assertion result model.

One AssertionResult is produced per assertion and never changed
afterwards. Failure information is kept as the flat list of diagnostic
lines produced by the validator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class AssertionResult:
    """
    Result of evaluating one assertion against a set of documents.

    Attributes:
        index: Position of the assertion in its suite
        passed: Overall verdict
        assert_type: Validator keyword, e.g. "stringContains"
        not_: Whether the assertion was negated
        fail_info: Diagnostic lines (empty when passed)
        custom_info: Optional label replacing the generated title
        skipped: The assertion was not evaluated
        skip_reason: Why it was skipped
    """
    index: int
    passed: bool
    assert_type: str = ""
    not_: bool = False
    fail_info: tuple[str, ...] = field(default_factory=tuple)
    custom_info: str = ""
    skipped: bool = False
    skip_reason: str = ""

    def title(self) -> str:
        if self.custom_info:
            return self.custom_info
        not_annotation = " NOT" if self.not_ else ""
        return f"- asserts[{self.index}]{not_annotation} `{self.assert_type}` fail"

    def stringify(self) -> str:
        """Render as tab-indented plain text."""
        content = f"\t\t {self.title()} \n"
        for line in self.fail_info:
            content += f"\t\t\t {line} \n"
        return content

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "index": self.index,
            "assert_type": self.assert_type,
            "not": self.not_,
            "passed": self.passed,
            "skipped": self.skipped,
            "skip_reason": self.skip_reason or None,
            "custom_info": self.custom_info or None,
            "fail_info": list(self.fail_info),
        }
