"""Render templates and write generated output.

Takes the context from context_builder and produces the Go routes file.
Output is rendered fully in memory before anything is written.
"""

from __future__ import annotations

import json
import logging
import re
import sys
from pathlib import Path
from typing import Any

import jinja2

from .errors import FileAccessError, RenderError

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"
TEMPLATE_NAME = "routes.go.j2"

_LONE_SURROGATE = re.compile("[\ud800-\udfff]")


def go_string(value: str) -> str:
    """Quote a value as a Go interpreted string literal.

    Lone surrogates (valid in JSON escapes, not in UTF-8) become U+FFFD, and
    a BOM is escaped since Go rejects one inside a source file.
    """
    value = _LONE_SURROGATE.sub("\ufffd", value)
    # JSON string escapes are a subset of Go's
    return json.dumps(value, ensure_ascii=False).replace("\ufeff", "\\uFEFF")


def _environment() -> jinja2.Environment:
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        undefined=jinja2.StrictUndefined,
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["go_string"] = go_string
    return env


def render(context: dict[str, Any]) -> str:
    """Render the routes template to a string."""
    try:
        template = _environment().get_template(TEMPLATE_NAME)
        return template.render(**context)
    except jinja2.TemplateError as exc:
        raise RenderError(f"Failed to render {TEMPLATE_NAME}: {exc}") from exc


def write_output(text: str, output_path: str | Path | None = None) -> Path | None:
    """Write rendered text to ``output_path``, or to stdout when it is None.

    The text is encoded before the target is touched, so an unencodable
    result never truncates an existing file.
    """
    try:
        data = text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise RenderError(f"Generated output is not valid UTF-8: {exc}") from exc

    if output_path is None:
        logger.debug("Writing to stdout")
        sys.stdout.write(text)
        sys.stdout.flush()
        return None

    path = Path(output_path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
    except OSError as exc:
        raise FileAccessError(f"Failed to write output file {path}: {exc}") from exc

    logger.debug("Wrote %d bytes to %s", len(data), path)
    return path


def generate(context: dict[str, Any], output_path: str | Path | None = None) -> Path | None:
    """Render the routes template and write it out."""
    output = render(context)
    return write_output(output, output_path)
