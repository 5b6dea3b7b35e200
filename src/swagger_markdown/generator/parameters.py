"""Parameter tables for an operation section."""

from typing import Mapping

from swagger_markdown.generator.anchors import resolve_ref
from swagger_markdown.parser.models import Param

BODY_PARAM_NAME = "body"
BODY_DESCRIPTION = "Request body, see the schema in the Type column"
INLINE_OBJECT_TYPE = "object"


def render_parameters(parameters: list[Param], definitions: Mapping) -> str:
    """Render the parameters table plus one sub-table per inline body schema."""
    table = "| Name | Description | Type | Required | In |\n"
    table += "|------|-------------|------|----------|----|\n"
    sub_tables = []
    for param in parameters:
        description = BODY_DESCRIPTION if param.name == BODY_PARAM_NAME else param.description
        param_type = param.type
        schema = param.schema_
        if schema is not None and schema.ref:
            param_type = resolve_ref(schema.ref, definitions).link()
        elif schema is not None and schema.properties is not None:
            param_type = INLINE_OBJECT_TYPE
            sub_tables.append(_render_inline_schema(param))
        elif schema is not None and schema.items is not None and schema.items.ref:
            param_type = resolve_ref(schema.items.ref, definitions).link()
        elif schema is not None and schema.type:
            param_type = schema.type
        table += f"| {param.name} | {description} | {param_type} | {str(param.required).lower()} | {param.location} |\n"

    return "".join([table, *sub_tables])


def _render_inline_schema(param: Param) -> str:
    table = f"\n#### {param.name}\n\n"
    table += "| Property | Type | Title |\n"
    table += "|----------|------|-------|\n"
    for name, prop in param.schema_.properties.items():
        table += f"| {name} | {prop.type} | {prop.title} |\n"
    return table
