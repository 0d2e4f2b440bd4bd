"""Exception hierarchy for routegen.

Every exception carries an ``exit_code`` that the CLI passes to the process
on failure. Library code raises; only :mod:`routegen.cli` exits.

    RoutegenError            (exit 1)
    +-- UsageError           (exit 2)
    |   +-- UnsupportedFormatError
    +-- SpecParseError       (exit 3)
    +-- FileAccessError      (exit 4)
    +-- RenderError          (exit 5)
"""

from __future__ import annotations

EXIT_SUCCESS = 0
EXIT_GENERIC_FAILURE = 1
EXIT_INVALID_USAGE = 2
EXIT_SPEC_PARSE_ERROR = 3
EXIT_FILE_ACCESS_ERROR = 4
EXIT_RENDER_ERROR = 5


class RoutegenError(Exception):
    """Base exception for all routegen errors.

    Args:
        message: Human-readable error description printed to stderr.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class UsageError(RoutegenError):
    """Raised for missing required options or invalid option values."""

    exit_code = EXIT_INVALID_USAGE


class UnsupportedFormatError(UsageError):
    """Raised when the input is neither YAML nor JSON."""


class SpecParseError(RoutegenError):
    """Raised when the document is malformed or has the wrong structure."""

    exit_code = EXIT_SPEC_PARSE_ERROR


class FileAccessError(RoutegenError):
    """Raised when reading the input or writing the output fails."""

    exit_code = EXIT_FILE_ACCESS_ERROR


class RenderError(RoutegenError):
    """Raised when the built-in template fails to render."""

    exit_code = EXIT_RENDER_ERROR
