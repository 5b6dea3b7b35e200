"""Response table for an operation section."""

from swagger_markdown.generator.anchors import definition_link, ref_name
from swagger_markdown.parser.models import Response


def render_responses(responses: dict[str, Response]) -> str:
    """One row per status code; the schema cell is always a link.

    Responses without a schema get an empty ``[](#)`` link.
    """
    table = "| Code | Description | Schema |\n"
    table += "|------|-------------|--------|\n"
    for code, response in responses.items():
        schema_name = ""
        if response.schema_ is not None and response.schema_.ref:
            schema_name = ref_name(response.schema_.ref)
        table += f"| {code} | {response.description} | {definition_link(schema_name)} |\n"
    return table
