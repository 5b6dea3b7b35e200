"""Process exit codes for the ``swagger-markdown`` command.

Each constant is referenced by the matching
:class:`~swagger_markdown.exceptions.SwaggerMarkdownError` subclass so a
calling script can tell failure classes apart without parsing stderr.
"""

EXIT_SUCCESS = 0
"""The Markdown file was written."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred."""

EXIT_INVALID_USAGE = 2
"""Invalid command-line arguments (raised by click itself)."""

EXIT_LOAD_ERROR = 3
"""The input file could not be read or is not valid JSON/YAML."""

EXIT_STRUCTURE_ERROR = 4
"""The input parsed but lacks a required key or has the wrong shape."""

EXIT_WRITE_ERROR = 5
"""The Markdown output could not be written."""
