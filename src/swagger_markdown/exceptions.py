"""Exception hierarchy for swagger-markdown.

All exceptions inherit from :class:`SwaggerMarkdownError`, which carries an
``exit_code`` taken from :mod:`swagger_markdown.exit_codes`. The CLI catches
``SwaggerMarkdownError``, prints the message to stderr and exits with that
code. Broken ``$ref`` links are not errors and never reach this hierarchy.

Subclass hierarchy::

    SwaggerMarkdownError       (exit 1)
    +-- DocumentLoadError      (exit 3)
    +-- DocumentStructureError (exit 4)
    +-- OutputWriteError       (exit 5)
"""

from swagger_markdown.exit_codes import (
    EXIT_GENERIC_FAILURE,
    EXIT_LOAD_ERROR,
    EXIT_STRUCTURE_ERROR,
    EXIT_WRITE_ERROR,
)


class SwaggerMarkdownError(Exception):
    """Base exception for all swagger-markdown errors.

    Args:
        message: Human-readable error description printed to stderr.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class DocumentLoadError(SwaggerMarkdownError):
    """Raised when the input file cannot be read or parsed as JSON/YAML."""

    exit_code = EXIT_LOAD_ERROR


class DocumentStructureError(SwaggerMarkdownError):
    """Raised when a required key is missing or a field has the wrong shape.

    Examples: no top-level ``paths``, an operation without ``responses``.
    """

    exit_code = EXIT_STRUCTURE_ERROR


class OutputWriteError(SwaggerMarkdownError):
    """Raised when the Markdown file cannot be written."""

    exit_code = EXIT_WRITE_ERROR
