"""
Structural containment for decoded mappings.

``contains_mapping(big, small)`` is true when every key of ``small`` is
present in ``big`` with an equal value, recursing into nested mappings.
Keys that only exist in ``big`` are ignored.
"""

from __future__ import annotations

from typing import Any


def contains_mapping(container: dict[str, Any], subset: dict[str, Any]) -> bool:
    """Check whether ``container`` structurally contains ``subset``."""
    for key, expected in subset.items():
        if key not in container:
            return False

        actual = container[key]
        if isinstance(expected, dict):
            if not isinstance(actual, dict):
                return False
            if not contains_mapping(actual, expected):
                return False
        elif not deep_equal(actual, expected):
            return False

    return True


def deep_equal(left: Any, right: Any) -> bool:
    """
    Type-strict deep equality.

    Unlike ``==`` this distinguishes ``True`` from ``1`` and ``1`` from
    ``1.0``.
    """
    if type(left) is not type(right):
        return False

    if isinstance(left, dict):
        if left.keys() != right.keys():
            return False
        return all(deep_equal(left[k], right[k]) for k in left)

    if isinstance(left, list):
        if len(left) != len(right):
            return False
        return all(deep_equal(a, b) for a, b in zip(left, right))

    return left == right
