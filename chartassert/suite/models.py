"""
Typed data structures for assertion suites.

A suite is a named list of assertions run against one set of rendered
manifests.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..validators import AnyValidator


# ─────────────────────────────────────────────────────────────────────────────
# Defaults
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class Defaults:
    """Suite-wide settings."""
    fail_fast: bool = False


# ─────────────────────────────────────────────────────────────────────────────
# Assertions
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class Assertion:
    """
    One declared assertion: a validator plus the modifiers that control how
    it is applied.
    """
    validator: AnyValidator
    not_: bool = False  # 'not' in YAML, renamed to avoid keyword
    document_index: int | None = None
    custom_info: str = ""
    skip_reason: str | None = None

    @property
    def assert_type(self) -> str:
        return self.validator.assert_type

    @property
    def skipped(self) -> bool:
        return self.skip_reason is not None


# ─────────────────────────────────────────────────────────────────────────────
# Suite
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class Suite:
    """Fully parsed and validated suite."""
    version: int
    name: str
    defaults: Defaults = field(default_factory=Defaults)
    asserts: list[Assertion] = field(default_factory=list)
