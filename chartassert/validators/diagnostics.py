"""
Diagnostic line builders.

Failure information is a flat list of lines. Labels are followed by a tab
and values are indented with a tab, one line per line of text:

    DocumentIndex:	0
    ValuesIndex:	0
    Path:	a.b
    Expected to contain:
    	hello world
    Actual:
    	hello world foo bar
"""

from __future__ import annotations


def indent_text(text: str) -> list[str]:
    """Split text into lines, each prefixed with a tab."""
    return [f"\t{line}" for line in text.strip("\n").split("\n")]


def location_info(document_index: int = -1, values_index: int = -1) -> list[str]:
    lines = []
    if document_index >= 0:
        lines.append(f"DocumentIndex:\t{document_index}")
    if values_index >= 0:
        lines.append(f"ValuesIndex:\t{values_index}")
    return lines


def fail_info(
    verb: str,
    path: str,
    expected: str,
    actual: str,
    *,
    negative: bool,
    document_index: int = -1,
    values_index: int = -1,
) -> list[str]:
    """
    Build the Expected/Actual block for a content mismatch.

    ``verb`` completes the header, e.g. "to contain" gives
    "Expected to contain:" (or "Expected NOT to contain:" when negated).
    """
    not_annotation = " NOT" if negative else ""
    return [
        *location_info(document_index, values_index),
        f"Path:\t{path}",
        f"Expected{not_annotation} {verb}:",
        *indent_text(expected),
        "Actual:",
        *indent_text(actual),
    ]


def error_info(
    message: str,
    *,
    document_index: int = -1,
    values_index: int = -1,
) -> list[str]:
    """Build the Error block used for path and decode failures."""
    return [
        *location_info(document_index, values_index),
        "Error:",
        *indent_text(message),
    ]
