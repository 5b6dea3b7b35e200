"""Convert Swagger 2.0 documents into a single cross-linked Markdown file."""

from swagger_markdown.generator.document import convert, render_document

__all__ = ["convert", "render_document"]
