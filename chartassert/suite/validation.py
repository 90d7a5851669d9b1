"""
Schema validation for assertion suites.

This module checks raw parsed YAML against the suite schema and reports
every problem found, with the location and a suggestion where possible.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

from ..validators import VALIDATOR_TYPES
from ..validators.path import compile_path
from ..errors import PathError


# ─────────────────────────────────────────────────────────────────────────────
# Validation Result Types
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class ValidationError:
    """Represents a single validation error with context."""
    path: str  # e.g., "asserts[0].stringContains.path"
    message: str
    value: Any = None
    suggestion: str | None = None

    def __str__(self) -> str:
        parts = [f"❌ {self.path}: {self.message}"]
        if self.value is not None:
            parts.append(f"   Got: {repr(self.value)}")
        if self.suggestion:
            parts.append(f"   💡 {self.suggestion}")
        return "\n".join(parts)


@dataclass
class ValidationResult:
    """Result of schema validation."""
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def add_error(
        self,
        path: str,
        message: str,
        value: Any = None,
        suggestion: str | None = None
    ) -> None:
        self.errors.append(ValidationError(path, message, value, suggestion))

    def __str__(self) -> str:
        if self.is_valid:
            return "✅ Schema validation passed"
        lines = [f"Schema validation failed with {len(self.errors)} error(s):\n"]
        lines.extend(str(e) for e in self.errors)
        return "\n".join(lines)


# ─────────────────────────────────────────────────────────────────────────────
# Schema Validator
# ─────────────────────────────────────────────────────────────────────────────

_TYPE_NAMES = {
    bool: "a boolean",
    int: "an integer",
    float: "a number",
    str: "a string",
    list: "a list",
    dict: "an object",
}


def _describe_types(types: tuple[type, ...]) -> str:
    """Human name for a field's accepted types, e.g. 'a string or a list'."""
    return " or ".join(_TYPE_NAMES.get(t, t.__name__) for t in types)


class SchemaValidator:
    """Validates raw parsed YAML against the suite schema."""

    REQUIRED_TOP_LEVEL = {"version", "name", "asserts"}
    OPTIONAL_TOP_LEVEL = {"defaults"}
    VALID_KINDS = set(VALIDATOR_TYPES)
    MODIFIERS = {"not", "documentIndex", "customInfo", "skip"}

    # kind -> (required keys, optional keys with their expected types)
    KIND_FIELDS: dict[str, tuple[set[str], dict[str, tuple[type, ...]]]] = {
        "stringContains": (
            {"path", "content"},
            {"ignoreFormatting": (bool,), "fromJson": (bool,), "fromYaml": (bool,)},
        ),
        "equal": ({"path", "value"}, {"ignoreFormatting": (bool,)}),
        "matchRegex": ({"path", "pattern"}, {}),
        "exists": ({"path"}, {}),
        "lengthEqual": ({"path", "count"}, {}),
    }

    def __init__(self, data: dict[str, Any]):
        self.data = data
        self.result = ValidationResult()

    def validate(self) -> ValidationResult:
        """Run all validation checks and return result."""
        self._validate_top_level()
        if not self.result.is_valid:
            return self.result

        self._validate_version()
        self._validate_name()
        self._validate_defaults()
        self._validate_asserts()

        return self.result

    def _validate_top_level(self) -> None:
        """Check required and unknown top-level keys."""
        keys = set(self.data.keys())
        missing = self.REQUIRED_TOP_LEVEL - keys
        unknown = keys - self.REQUIRED_TOP_LEVEL - self.OPTIONAL_TOP_LEVEL

        for key in sorted(missing):
            self.result.add_error(
                key,
                f"Required field '{key}' is missing",
                suggestion=f"Add '{key}:' to your suite file"
            )

        for key in sorted(unknown):
            self.result.add_error(
                key,
                f"Unknown top-level field '{key}'",
                suggestion=f"Valid fields are: {', '.join(sorted(self.REQUIRED_TOP_LEVEL | self.OPTIONAL_TOP_LEVEL))}"
            )

    def _validate_version(self) -> None:
        version = self.data.get("version")
        if not isinstance(version, int) or isinstance(version, bool):
            self.result.add_error(
                "version",
                "Must be an integer",
                value=version,
                suggestion="Use 'version: 1'"
            )
        elif version < 1:
            self.result.add_error(
                "version",
                "Must be >= 1",
                value=version
            )

    def _validate_name(self) -> None:
        name = self.data.get("name")
        if not isinstance(name, str):
            self.result.add_error(
                "name",
                "Must be a string",
                value=name
            )
        elif not name.strip():
            self.result.add_error(
                "name",
                "Cannot be empty",
                suggestion="Provide a descriptive name for your suite"
            )

    def _validate_defaults(self) -> None:
        defaults = self.data.get("defaults")
        if defaults is None:
            return
        if not isinstance(defaults, dict):
            self.result.add_error(
                "defaults",
                "Must be an object",
                value=defaults
            )
            return

        fail_fast = defaults.get("fail_fast")
        if "fail_fast" in defaults and not isinstance(fail_fast, bool):
            self.result.add_error(
                "defaults.fail_fast",
                "Must be a boolean",
                value=fail_fast
            )

        for key in sorted(set(defaults) - {"fail_fast"}):
            self.result.add_error(
                f"defaults.{key}",
                "Unknown field",
                suggestion="Valid fields are: fail_fast"
            )

    def _validate_asserts(self) -> None:
        asserts = self.data.get("asserts")
        if not isinstance(asserts, list):
            self.result.add_error(
                "asserts",
                "Must be a list",
                value=asserts
            )
            return

        if len(asserts) == 0:
            self.result.add_error(
                "asserts",
                "Must contain at least one assertion",
                suggestion=f"Add an assertion such as: {', '.join(sorted(self.VALID_KINDS))}"
            )
            return

        for i, item in enumerate(asserts):
            self._validate_assert(i, item)

    def _validate_assert(self, index: int, item: Any) -> None:
        path = f"asserts[{index}]"

        if not isinstance(item, dict):
            self.result.add_error(
                path,
                "Assertion must be an object",
                value=item
            )
            return

        kinds = [key for key in item if key not in self.MODIFIERS]
        if len(kinds) != 1:
            self.result.add_error(
                path,
                "Assertion must declare exactly one assertion type",
                value=kinds or None,
                suggestion=f"Valid types: {', '.join(sorted(self.VALID_KINDS))}"
            )
            return

        kind = kinds[0]
        if kind not in self.VALID_KINDS:
            self.result.add_error(
                f"{path}.{kind}",
                "Unknown assertion type",
                suggestion=f"Valid types: {', '.join(sorted(self.VALID_KINDS))}"
            )
            return

        self._validate_modifiers(path, item)
        self._validate_kind(f"{path}.{kind}", kind, item[kind])

    def _validate_modifiers(self, path: str, item: dict[str, Any]) -> None:
        if "not" in item and not isinstance(item["not"], bool):
            self.result.add_error(f"{path}.not", "Must be a boolean", value=item["not"])

        document_index = item.get("documentIndex")
        if document_index is not None and (
            not isinstance(document_index, int)
            or isinstance(document_index, bool)
            or document_index < 0
        ):
            self.result.add_error(
                f"{path}.documentIndex",
                "Must be a non-negative integer",
                value=document_index
            )

        custom_info = item.get("customInfo")
        if custom_info is not None and not isinstance(custom_info, str):
            self.result.add_error(f"{path}.customInfo", "Must be a string", value=custom_info)

        skip = item.get("skip")
        if skip is not None:
            if not isinstance(skip, dict) or not isinstance(skip.get("reason"), str):
                self.result.add_error(
                    f"{path}.skip",
                    "Must be an object with a 'reason' string",
                    value=skip,
                    suggestion="Use 'skip: {reason: \"...\"}'"
                )

    def _validate_kind(self, path: str, kind: str, config: Any) -> None:
        if not isinstance(config, dict):
            self.result.add_error(path, "Must be an object", value=config)
            return

        required, optional = self.KIND_FIELDS[kind]
        for key in sorted(required - set(config)):
            self.result.add_error(
                f"{path}.{key}",
                f"Required field '{key}' is missing"
            )

        for key in sorted(set(config) - required - set(optional)):
            self.result.add_error(
                f"{path}.{key}",
                "Unknown field",
                suggestion=f"Valid fields are: {', '.join(sorted(required | set(optional)))}"
            )

        for key, types in optional.items():
            if key in config and not isinstance(config[key], types):
                self.result.add_error(
                    f"{path}.{key}",
                    f"Must be {_describe_types(types)}",
                    value=config[key]
                )

        if "path" in config:
            self._validate_path(f"{path}.path", config["path"])

        if kind == "matchRegex" and "pattern" in config:
            self._validate_pattern(f"{path}.pattern", config["pattern"])

        if kind == "lengthEqual" and "count" in config:
            count = config["count"]
            if not isinstance(count, int) or isinstance(count, bool) or count < 0:
                self.result.add_error(
                    f"{path}.count",
                    "Must be a non-negative integer",
                    value=count
                )

        if kind == "stringContains" and config.get("fromJson") and config.get("fromYaml"):
            self.result.add_error(
                path,
                "'fromJson' and 'fromYaml' are mutually exclusive",
                suggestion="Set only one of them"
            )

    def _validate_path(self, path: str, value: Any) -> None:
        if not isinstance(value, str):
            self.result.add_error(path, "Must be a string", value=value)
            return
        try:
            compile_path(value)
        except PathError as e:
            self.result.add_error(
                path,
                "Invalid path expression",
                value=value,
                suggestion=str(e)
            )

    def _validate_pattern(self, path: str, value: Any) -> None:
        if not isinstance(value, str):
            self.result.add_error(path, "Must be a string", value=value)
            return
        try:
            re.compile(value)
        except re.error as e:
            self.result.add_error(
                path,
                f"Invalid regular expression: {e}",
                value=value
            )
