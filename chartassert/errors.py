"""
Exception types raised by chartassert.

Engine errors (PathError, DecodeError) never escape a validator: they are
caught at the assertion boundary and rendered as ``Error:`` diagnostics.
"""

from __future__ import annotations


class ChartAssertError(Exception):
    """Base class for all chartassert errors."""


class PathError(ChartAssertError):
    """A path is malformed or walks through a scalar value."""


class DecodeError(ChartAssertError):
    """Embedded JSON/YAML (actual or expected content) could not be decoded."""


class DocumentLoadError(ChartAssertError):
    """A rendered manifest file could not be loaded."""
