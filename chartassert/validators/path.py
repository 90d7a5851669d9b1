"""
Path resolution for rendered manifests.

Paths are written relative to the document root (``spec.replicas``,
``spec.template.spec.containers[0].image``) and evaluated with the
extended JSONPath grammar from jsonpath_ng, so wildcards, quoted keys and
filters are available as well.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from jsonpath_ng.exceptions import JSONPathError
from jsonpath_ng.ext import parse as parse_jsonpath
from jsonpath_ng.jsonpath import Child, DatumInContext, JSONPath, Root, This

from ..errors import PathError


def resolve_path(document: Any, path: str) -> list[tuple[int, Any]]:
    """
    Resolve a path against a document.

    Args:
        document: Decoded manifest (mapping)
        path: Path expression, e.g. ``a.b`` or ``items[*].name``

    Returns:
        List of ``(index, value)`` pairs in traversal order. An empty list
        means the path does not exist in this document.

    Raises:
        PathError: If the path cannot be parsed, or a segment has to be
            applied to a scalar value.
    """
    segments = _segments(compile_path(path))

    current = [DatumInContext(document, path=Root())]
    for segment in segments:
        if isinstance(segment, (Root, This)):
            continue

        matches: list[DatumInContext] = []
        for datum in current:
            if datum.value is None:
                continue
            if not isinstance(datum.value, (dict, list)):
                raise PathError(
                    f"cannot traverse into {type(datum.value).__name__} "
                    f"at '{_location(datum)}' in path {path}"
                )
            matches.extend(segment.find(datum))
        current = matches

    return [(index, datum.value) for index, datum in enumerate(current)]


@lru_cache(maxsize=256)
def compile_path(path: str) -> JSONPath:
    """Parse a path expression, raising PathError for bad syntax."""
    expression = path.strip()
    if not expression:
        expression = "$"
    elif not expression.startswith("$"):
        expression = f"$.{expression}"

    try:
        return parse_jsonpath(expression)
    except JSONPathError as e:
        raise PathError(f"invalid path {path}: {e}") from e


def _segments(expression: JSONPath) -> list[JSONPath]:
    """Flatten nested Child nodes into the ordered list of steps."""
    if isinstance(expression, Child):
        return _segments(expression.left) + _segments(expression.right)
    return [expression]


def _location(datum: DatumInContext) -> str:
    location = str(datum.full_path)
    if location.startswith("$."):
        location = location[2:]
    return location.replace(".[", "[")
