"""
Expected content and text normalization.

Expected content supplied by a test author is either plain text or a
structured value. Conversions between the two are explicit:

    - StructuredValue -> text: canonical YAML re-encoding (marshal_yaml)
    - PlainText -> mapping: YAML decoding (YAML is a superset of JSON)
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Any, Iterator, Union

import yaml

from ..errors import DecodeError

_WHITESPACE = re.compile(r"\s+")
_DOCUMENT_END = "\n...\n"
_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class PlainScalarLoader(yaml.SafeLoader):
    """SafeLoader that keeps date-like scalars as strings."""


PlainScalarLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def load_yaml(text: str) -> Any:
    """Decode one YAML document; timestamps stay strings like JSON values do."""
    return yaml.load(text, Loader=PlainScalarLoader)


def load_all_yaml(text: str) -> Iterator[Any]:
    """Decode a multi-document YAML stream with the same rules as load_yaml."""
    return yaml.load_all(text, Loader=PlainScalarLoader)


@dataclass(frozen=True)
class PlainText:
    """Expected content given as a string."""
    text: str


@dataclass(frozen=True)
class StructuredValue:
    """Expected content given as a mapping, list or non-string scalar."""
    value: Any


# Closed set of expected-content variants
Content = Union[PlainText, StructuredValue]


def as_content(raw: Any) -> Content:
    """Wrap a raw author-supplied value in the matching Content variant."""
    if isinstance(raw, (PlainText, StructuredValue)):
        return raw
    if isinstance(raw, str):
        return PlainText(raw)
    return StructuredValue(raw)


def marshal_yaml(value: Any) -> str:
    """
    Re-encode a value as block-style YAML text.

    Keys keep their insertion order, so identical input always produces
    identical output. Long scalars are never folded onto several lines.
    The trailing newline (and the document end marker PyYAML emits for
    bare scalars) is removed.
    """
    text = yaml.safe_dump(
        value,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
        width=float("inf"),
    )
    if text.endswith(_DOCUMENT_END):
        text = text[: -len(_DOCUMENT_END)]
    return text.rstrip("\n")


def to_text(value: Any) -> str:
    """Strings are used as-is, anything else is re-encoded as YAML."""
    if isinstance(value, str):
        return value
    return marshal_yaml(value)


def content_text(content: Content) -> str:
    if isinstance(content, PlainText):
        return content.text
    return to_text(content.value)


def fold_whitespace(text: str) -> str:
    """Collapse every run of whitespace into a single space."""
    return _WHITESPACE.sub(" ", text)


def content_mapping(content: Content) -> dict[str, Any]:
    """
    Decode expected content into a mapping for structural comparison.

    Raises:
        DecodeError: If the content is not (and does not decode to) a mapping
    """
    if isinstance(content, StructuredValue) and isinstance(content.value, dict):
        return content.value

    if isinstance(content, PlainText):
        try:
            decoded = load_yaml(content.text)
        except yaml.YAMLError as e:
            raise DecodeError(f"failed to parse Content as YAML: {e}") from e
    else:
        try:
            decoded = load_yaml(marshal_yaml(content.value))
        except yaml.YAMLError as e:
            raise DecodeError(f"failed to convert Content to map: {e}") from e

    if decoded is None:
        return {}
    if not isinstance(decoded, dict):
        raise DecodeError(
            f"failed to convert Content to map: got {type(decoded).__name__}"
        )
    return decoded


def decode_json_mapping(text: str, path: str) -> dict[str, Any]:
    """Decode the actual value at ``path`` as a JSON object."""
    try:
        decoded = json.loads(text)
    except json.JSONDecodeError as e:
        raise DecodeError(f"failed to parse JSON from '{path}': {e}") from e

    if not isinstance(decoded, dict):
        raise DecodeError(
            f"failed to parse JSON from '{path}': expected an object, "
            f"got {type(decoded).__name__}"
        )
    return decoded


def decode_yaml_mapping(text: str, path: str) -> dict[str, Any]:
    """Decode the actual value at ``path`` as a YAML mapping."""
    try:
        decoded = load_yaml(text)
    except yaml.YAMLError as e:
        raise DecodeError(f"failed to parse YAML from '{path}': {e}") from e

    if decoded is None:
        return {}
    if not isinstance(decoded, dict):
        raise DecodeError(
            f"failed to parse YAML from '{path}': expected a mapping, "
            f"got {type(decoded).__name__}"
        )
    return decoded
