"""
Schema parser for assertion suites.

This module converts validated YAML data into typed Suite structures
holding ready-to-run validators.
"""

from __future__ import annotations

from typing import Any

from ..validators import (
    AnyValidator,
    EqualValidator,
    ExistsValidator,
    LengthEqualValidator,
    MatchRegexValidator,
    StringContainsValidator,
    as_content,
)
from .models import Assertion, Defaults, Suite


class SchemaParser:
    """Parses and converts validated YAML to typed Suite structure."""

    def __init__(self, data: dict[str, Any]):
        self.data = data

    def parse(self) -> Suite:
        """Convert validated data to typed Suite."""
        return Suite(
            version=self.data["version"],
            name=self.data["name"],
            defaults=self._parse_defaults(),
            asserts=self._parse_asserts(),
        )

    def _parse_defaults(self) -> Defaults:
        defaults = self.data.get("defaults") or {}
        return Defaults(
            fail_fast=bool(defaults.get("fail_fast")),
        )

    def _parse_asserts(self) -> list[Assertion]:
        return [self._parse_assert(item) for item in self.data.get("asserts", [])]

    def _parse_assert(self, item: dict[str, Any]) -> Assertion:
        skip = item.get("skip")
        return Assertion(
            validator=self._parse_validator(item),
            not_=bool(item.get("not")),
            document_index=item.get("documentIndex"),
            custom_info=item.get("customInfo") or "",
            skip_reason=skip["reason"] if skip else None,
        )

    def _parse_validator(self, item: dict[str, Any]) -> AnyValidator:
        if "stringContains" in item:
            config = item["stringContains"]
            return StringContainsValidator(
                path=config["path"],
                content=as_content(config["content"]),
                ignore_formatting=bool(config.get("ignoreFormatting")),
                from_json=bool(config.get("fromJson")),
                from_yaml=bool(config.get("fromYaml")),
            )
        if "equal" in item:
            config = item["equal"]
            return EqualValidator(
                path=config["path"],
                value=config["value"],
                ignore_formatting=bool(config.get("ignoreFormatting")),
            )
        if "matchRegex" in item:
            config = item["matchRegex"]
            return MatchRegexValidator(path=config["path"], pattern=config["pattern"])
        if "exists" in item:
            return ExistsValidator(path=item["exists"]["path"])
        if "lengthEqual" in item:
            config = item["lengthEqual"]
            return LengthEqualValidator(path=config["path"], count=config["count"])

        raise ValueError(f"Unknown assertion type in {sorted(item)}")
