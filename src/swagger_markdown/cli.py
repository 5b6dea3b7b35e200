"""CLI entry point for swagger-markdown."""

import sys
from pathlib import Path

import click

from swagger_markdown.exceptions import OutputWriteError, SwaggerMarkdownError
from swagger_markdown.generator.document import render_document
from swagger_markdown.generator.grouper import count_operations, group_by_tag
from swagger_markdown.parser.loader import load_document


def default_output_path(doc_path: Path) -> Path:
    """Input file name with its extension replaced by ``.md``, same directory."""
    return doc_path.with_suffix(".md")


def _convert(doc_path: Path, output: Path, fmt: str) -> None:
    click.echo(f"Parsing {doc_path} (format: {fmt})...")
    document = load_document(doc_path, fmt)
    groups = group_by_tag(document)
    click.echo(
        f"Found {count_operations(groups)} operations in {len(groups)} tags, "
        f"{len(document.definitions)} definitions."
    )

    if output.resolve() == doc_path.resolve():
        raise OutputWriteError(f"Output path {output} would overwrite the input document")

    markdown = render_document(document)

    try:
        output.write_text(markdown, encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(f"Cannot write {output}: {e}") from e
    click.echo(f"Markdown file has been created at: {output}")


@click.command()
@click.argument("doc_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-o", "--output", default=None, type=click.Path(dir_okay=False, path_type=Path), help="Output Markdown path (default: input path with a .md extension).")
@click.option("--format", "fmt", default="auto", type=click.Choice(["auto", "json", "yaml"]), help="Input document format.")
def main(doc_path: Path, output: Path | None, fmt: str):
    """Convert a Swagger 2.0 document into a cross-linked Markdown file."""
    try:
        _convert(doc_path, output or default_output_path(doc_path), fmt)
    except SwaggerMarkdownError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(e.exit_code)
