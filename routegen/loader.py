"""Load and parse an OpenAPI document.

Reads a YAML or JSON file and extracts the ``paths`` map. Nothing beyond
``paths`` is consulted; the rest of the document may be anything.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from .errors import FileAccessError, SpecParseError, UnsupportedFormatError

logger = logging.getLogger(__name__)

_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class _SpecLoader(yaml.SafeLoader):
    """SafeLoader that keeps date-like scalars as plain strings."""


_SpecLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}

# File extension -> format
_EXTENSIONS: dict[str, str] = {
    ".yaml": "yaml",
    ".yml": "yaml",
    ".json": "json",
}


def detect_format(path: str | Path) -> str:
    """Return ``"yaml"`` or ``"json"`` based on the file extension."""
    suffix = Path(path).suffix.lower()
    try:
        return _EXTENSIONS[suffix]
    except KeyError:
        raise UnsupportedFormatError(
            f"Unsupported file extension: {suffix or '(none)'}"
            " (expected .yaml, .yml or .json)"
        ) from None


def parse_spec(content: bytes | str, fmt: str) -> dict[str, Any]:
    """Parse raw document content in the given format.

    Raises:
        UnsupportedFormatError: If ``fmt`` is not ``"yaml"`` or ``"json"``.
        SpecParseError: If the content is malformed or not a mapping.
    """
    if fmt not in ("yaml", "json"):
        raise UnsupportedFormatError(f"Unsupported format: {fmt!r}")

    if isinstance(content, bytes):
        try:
            content = content.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise SpecParseError(f"Spec is not valid UTF-8: {exc}") from exc

    if fmt == "json":
        try:
            result = json.loads(content)
        except json.JSONDecodeError as exc:
            raise SpecParseError(f"Invalid JSON: {exc}") from exc
    else:
        try:
            result = yaml.load(content, Loader=_SpecLoader)
        except yaml.YAMLError as exc:
            raise SpecParseError(f"Invalid YAML: {exc}") from exc
        except ValueError as exc:
            # Explicitly tagged scalars such as !!timestamp can still fail
            raise SpecParseError(f"Invalid YAML value: {exc}") from exc
        # Empty YAML document
        if result is None:
            result = {}

    if not isinstance(result, dict):
        raise SpecParseError(
            f"Spec must be a mapping at the top level (got {type(result).__name__})"
        )
    return result


def get_paths(spec: dict[str, Any]) -> dict[str, dict[str, Any]]:
    """Extract the path -> path item map from the spec.

    Path items are returned as mappings keyed by string; a null path item
    becomes an empty mapping.
    """
    paths = spec.get("paths")
    if paths is None:
        return {}
    if not isinstance(paths, dict):
        raise SpecParseError(
            f"'paths' must be a mapping (got {type(paths).__name__})"
        )

    result: dict[str, dict[str, Any]] = {}
    for path, path_item in paths.items():
        if path_item is None:
            path_item = {}
        elif not isinstance(path_item, dict):
            raise SpecParseError(
                f"Path item for {path!r} must be a mapping"
                f" (got {type(path_item).__name__})"
            )
        result[str(path)] = {str(key): value for key, value in path_item.items()}
    return result


def load_spec(path: str | Path) -> dict[str, Any]:
    """Load an OpenAPI document from disk."""
    spec_file = Path(path)
    fmt = detect_format(spec_file)
    logger.debug("Reading %s as %s", spec_file, fmt)

    try:
        content = spec_file.read_bytes()
    except OSError as exc:
        raise FileAccessError(f"Failed to read input file {spec_file}: {exc}") from exc

    return parse_spec(content, fmt)
