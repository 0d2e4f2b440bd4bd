"""Build Jinja2 template context from a parsed OpenAPI spec.

Derives the route list and assembles the full context dict for routes.go.j2.
"""

from __future__ import annotations

import re
from typing import Any

from .errors import UsageError
from .loader import get_paths
from .routes import derive_routes

_GO_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")

_GO_KEYWORDS = {
    "break", "case", "chan", "const", "continue", "default", "defer",
    "else", "fallthrough", "for", "func", "go", "goto", "if", "import",
    "interface", "map", "package", "range", "return", "select", "struct",
    "switch", "type", "var",
}


def validate_package_name(name: str) -> str:
    """Check that ``name`` can be used in a Go package clause."""
    # The blank identifier is a valid identifier but not a package name
    if not _GO_IDENTIFIER.fullmatch(name) or name in _GO_KEYWORDS or name == "_":
        raise UsageError(f"Invalid Go package name: {name!r}")
    return name


def build_context(spec: dict[str, Any], package_name: str = "main") -> dict[str, Any]:
    """Build the full template context from the OpenAPI spec."""
    package_name = validate_package_name(package_name)
    routes = derive_routes(get_paths(spec))

    return {
        "package_name": package_name,
        "routes": routes,
        "route_count": len(routes),
        "registration_count": sum(len(route.methods) for route in routes),
    }
