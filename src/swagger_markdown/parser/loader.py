"""Swagger 2.0 document loader.

Reads a JSON (or YAML) file and validates it into a :class:`Document`.
"""

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from swagger_markdown.exceptions import DocumentLoadError, DocumentStructureError
from swagger_markdown.parser.models import Document

YAML_SUFFIXES = (".yaml", ".yml")


def detect_format(file_path: Path) -> str:
    """Pick the parser for a file from its extension: 'yaml' or 'json'."""
    if file_path.suffix.lower() in YAML_SUFFIXES:
        return "yaml"
    return "json"


def load_document(file_path: Path, fmt: str = "auto") -> Document:
    """Read, parse and validate a Swagger file."""
    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentLoadError(f"Cannot read {file_path}: {e}") from e

    if fmt == "auto":
        fmt = detect_format(file_path)

    return parse_document(_parse_text(text, fmt, file_path))


def parse_document(raw: Any) -> Document:
    """Validate an already-decoded mapping into a :class:`Document`."""
    if not isinstance(raw, dict):
        raise DocumentStructureError(
            f"Expected a JSON object at the document root, got {type(raw).__name__}"
        )
    try:
        return Document.model_validate(raw)
    except ValidationError as e:
        raise DocumentStructureError(_describe(e)) from e


def _parse_text(text: str, fmt: str, file_path: Path) -> Any:
    if fmt == "yaml":
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise DocumentLoadError(f"{file_path} is not valid YAML: {e}") from e
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise DocumentLoadError(
            f"{file_path} is not valid JSON: {e.msg} (line {e.lineno})"
        ) from e


def _describe(error: ValidationError) -> str:
    """Turn a pydantic error into one line per failing location."""
    lines = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "<root>"
        lines.append(f"{location}: {item['msg']}")
    return "Invalid Swagger document:\n  " + "\n  ".join(lines)
