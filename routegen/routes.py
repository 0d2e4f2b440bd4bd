"""Derive gin routes from OpenAPI paths.

Path parameters are rewritten to gin placeholders:
  /pets/{petId}            -> /pets/:petId
  /users/{id}/posts/{pid}  -> /users/:id/posts/:pid
  /files/{}                -> /files/:

Only segments that start with '{' and end with '}' are rewritten; anything
else, including malformed braces, is left exactly as written.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)

# Recognized operation keys, in emission order
HTTP_METHODS: tuple[str, ...] = (
    "get",
    "post",
    "put",
    "delete",
    "patch",
    "head",
    "options",
    "trace",
)


@dataclass(frozen=True)
class Route:
    """One path and the methods registered on it."""

    path: str
    gin_path: str
    methods: tuple[str, ...]


def translate_path(path: str) -> str:
    """Rewrite ``{name}`` segments to gin's ``:name`` form."""
    parts = path.split("/")
    for i, part in enumerate(parts):
        if part.startswith("{") and part.endswith("}"):
            parts[i] = ":" + part[1:-1]
    return "/".join(parts)


def collect_methods(path_item: dict[str, Any]) -> tuple[str, ...]:
    """Return the upper-cased HTTP methods declared on a path item.

    Keys are matched case-insensitively; path-level fields such as
    ``parameters`` or ``summary`` are ignored.
    """
    present = {str(key).lower() for key in path_item}
    return tuple(method.upper() for method in HTTP_METHODS if method in present)


def derive_routes(paths: dict[str, dict[str, Any]]) -> list[Route]:
    """Build the route list, sorted by path."""
    routes: list[Route] = []

    for path, path_item in sorted(paths.items()):
        methods = collect_methods(path_item)
        if not methods:
            logger.debug("Skipping %s: no HTTP methods", path)
            continue

        routes.append(Route(path=path, gin_path=translate_path(path), methods=methods))

    logger.debug("Derived %d routes from %d paths", len(routes), len(paths))
    return routes
