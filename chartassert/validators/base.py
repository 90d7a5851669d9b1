"""
The validator family.

Each kind is an independent dataclass that owns its configuration and
matching policy and exposes ``validate(context) -> (passed, fail_info)``.
The runner only talks to that method.
"""

from __future__ import annotations

from typing import Protocol, Union

from .aggregate import Verdict
from .context import ValidateContext
from .equal import EqualValidator
from .exists import ExistsValidator
from .length import LengthEqualValidator
from .match_regex import MatchRegexValidator
from .string_contains import StringContainsValidator


class Validator(Protocol):
    """Shared capability of every validator kind."""

    assert_type: str

    def validate(self, context: ValidateContext) -> Verdict:
        ...


AnyValidator = Union[
    StringContainsValidator,
    EqualValidator,
    MatchRegexValidator,
    ExistsValidator,
    LengthEqualValidator,
]

# Declarative assertion keyword -> validator kind
VALIDATOR_TYPES: dict[str, type] = {
    StringContainsValidator.assert_type: StringContainsValidator,
    EqualValidator.assert_type: EqualValidator,
    MatchRegexValidator.assert_type: MatchRegexValidator,
    ExistsValidator.assert_type: ExistsValidator,
    LengthEqualValidator.assert_type: LengthEqualValidator,
}
