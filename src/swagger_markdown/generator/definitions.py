"""Definitions section: property tables and enum listings."""

import json
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict

from swagger_markdown.generator.anchors import anchor, ref_link
from swagger_markdown.parser.models import (
    EnumDefinition,
    ObjectDefinition,
    Property,
)


class RenderedDefinitions(BaseModel):
    model_config = ConfigDict(frozen=True)

    markdown: str
    toc_entries: list[str]


def render_definitions(definitions: Mapping) -> RenderedDefinitions:
    """Render every definition in document order with its TOC entry."""
    markdown = ""
    toc_entries = []
    for name, definition in definitions.items():
        def_anchor = anchor(name)
        toc_entries.append(f"- [{name}](#{def_anchor})")

        markdown += f'<a id="{def_anchor}"></a>\n'
        markdown += f"## {name}\n\n"
        if definition.title:
            markdown += f"Summary: {definition.title}\n\n"

        if isinstance(definition, EnumDefinition):
            markdown += _render_enum(definition)
        elif isinstance(definition, ObjectDefinition):
            markdown += _render_properties(definition.properties)
        # bare definitions have nothing beyond the heading

        markdown += "\n"
    return RenderedDefinitions(markdown=markdown, toc_entries=toc_entries)


def _render_enum(definition: EnumDefinition) -> str:
    lines = [f"- {format_value(value)}\n" for value in definition.enum]
    if definition.default is not None:
        lines.append(f"- Default: {format_value(definition.default)}\n")
    return "".join(lines)


def _render_properties(properties: dict[str, Property]) -> str:
    table = "| Property | Type | Title |\n"
    table += "|----------|------|-------|\n"
    for name, prop in properties.items():
        table += f"| {name} | {_property_type(prop)} | {_property_title(prop)} |\n"
    return table


def _property_type(prop: Property) -> str:
    if prop.ref:
        return ref_link(prop.ref)
    if prop.items is not None and prop.items.ref:
        return ref_link(prop.items.ref)
    return prop.type


def _property_title(prop: Property) -> str:
    title = prop.title
    if prop.enum:
        title += f" Enum: {', '.join(format_value(v) for v in prop.enum)}."
    if prop.default is not None:
        title += f" Default: {format_value(prop.default)}."
    return title


def format_value(value: Any) -> str:
    """Strings as-is, everything else in its JSON spelling (``true``, ``1.5``)."""
    if isinstance(value, str):
        return value
    return json.dumps(value)
