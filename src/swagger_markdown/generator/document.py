"""Top-level Markdown rendering of a Swagger document.

Output layout, always in this order: title block, paths table of contents,
definitions table of contents, one section per tag, then the definitions.
"""

from datetime import datetime, timezone
from typing import Any

from swagger_markdown.generator.anchors import anchor
from swagger_markdown.generator.definitions import render_definitions
from swagger_markdown.generator.grouper import GroupedOperations, group_by_tag
from swagger_markdown.generator.parameters import render_parameters
from swagger_markdown.generator.responses import render_responses
from swagger_markdown.parser.loader import parse_document
from swagger_markdown.parser.models import Document, Operation

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S UTC"


def render_document(document: Document, generated_at: datetime | None = None) -> str:
    """Render a validated document into one Markdown string."""
    generated_at = generated_at or datetime.now(timezone.utc)
    groups = group_by_tag(document)
    definitions = render_definitions(document.definitions)

    parts = [
        _render_title(document, generated_at),
        _render_paths_toc(groups),
        "## Table of Contents for Definitions\n\n",
        "".join(f"{entry}\n" for entry in definitions.toc_entries),
        "\n",
        _render_tags(groups, document.definitions),
        "# Definitions\n\n",
        definitions.markdown,
    ]
    return "".join(parts)


def convert(raw: dict[str, Any], generated_at: datetime | None = None) -> str:
    """Validate a decoded JSON mapping and render it."""
    return render_document(parse_document(raw), generated_at)


def _render_title(document: Document, generated_at: datetime) -> str:
    title = document.info.title or "API Documentation"
    block = f"# {title}\n\n"
    block += f"Version: {document.info.version}\n\n"
    block += f"Generated: {generated_at.strftime(TIMESTAMP_FORMAT)}\n\n"
    return block


def _render_paths_toc(groups: GroupedOperations) -> str:
    toc = "## Table of Contents for Paths\n\n"
    for tag, operations in groups.items():
        toc += f"- [{tag}](#{anchor(tag)})\n"
        for method_path in operations:
            method, path = method_path.split(" ", 1)
            toc += f"  - [{method_path}](#{anchor(tag, method, path)})\n"
    return toc + "\n"


def _render_tags(groups: GroupedOperations, definitions: dict) -> str:
    markdown = ""
    for tag, operations in groups.items():
        markdown += f'<a id="{anchor(tag)}"></a>\n'
        markdown += f"# {tag}\n\n"
        for method_path, operation in operations.items():
            method, path = method_path.split(" ", 1)
            markdown += f'<a id="{anchor(tag, method, path)}"></a>\n'
            markdown += f"## {method_path}\n\n"
            markdown += _render_operation(operation, definitions)
            markdown += "\n---\n\n"
    return markdown


def _render_operation(operation: Operation, definitions: dict) -> str:
    section = f"OperationId: {operation.operation_id or ''}\n\n"
    section += f"### Summary\n\n{operation.summary}\n\n"
    if operation.description:
        section += f"### Description\n\n{operation.description}\n\n"
    section += "### Parameters\n\n"
    section += render_parameters(operation.parameters, definitions)
    section += "\n### Responses\n\n"
    section += render_responses(operation.responses)
    return section
