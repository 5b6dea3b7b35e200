from swagger_markdown.generator.parameters import BODY_DESCRIPTION, render_parameters
from swagger_markdown.parser.models import Param

DEFINITIONS = {"Pet": object()}


def _param(**data) -> Param:
    return Param.model_validate(data)


class TestRenderParameters:
    def test_header_only_when_empty(self):
        result = render_parameters([], DEFINITIONS)
        assert result == (
            "| Name | Description | Type | Required | In |\n"
            "|------|-------------|------|----------|----|\n"
        )

    def test_plain_row(self):
        p = _param(name="limit", **{"in": "query"}, description="How many", type="integer")
        result = render_parameters([p], DEFINITIONS)
        assert "| limit | How many | integer | false | query |\n" in result

    def test_body_ref_links_definition(self):
        p = _param(name="body", **{"in": "body"}, description="ignored", required=True,
                   schema={"$ref": "#/definitions/Pet"})
        result = render_parameters([p], DEFINITIONS)
        assert f"| body | {BODY_DESCRIPTION} | [Pet](#Pet) | true | body |\n" in result
        assert "ignored" not in result

    def test_unresolved_ref_degrades(self):
        p = _param(name="payload", **{"in": "body"}, schema={"$ref": "#/definitions/Ghost"})
        result = render_parameters([p], DEFINITIONS)
        assert "| payload |  | [#/definitions/Ghost](#Ghost) | false | body |\n" in result

    def test_inline_properties_sub_table(self):
        p = _param(name="filter", **{"in": "body"}, schema={"properties": {
            "from": {"type": "string", "title": "Start date"},
            "to": {"type": "string"},
        }})
        q = _param(name="page", **{"in": "query"}, type="integer")
        result = render_parameters([p, q], DEFINITIONS)
        main, sub = result.split("\n#### filter\n\n")
        assert "| filter |  | object | false | body |\n" in main
        assert main.index("| filter |") < main.index("| page |")
        assert sub == (
            "| Property | Type | Title |\n"
            "|----------|------|-------|\n"
            "| from | string | Start date |\n"
            "| to | string |  |\n"
        )

    def test_sub_tables_in_parameter_order(self):
        a = _param(name="a", **{"in": "body"}, schema={"properties": {"x": {"type": "string"}}})
        b = _param(name="b", **{"in": "body"}, schema={"properties": {"y": {"type": "string"}}})
        result = render_parameters([a, b], DEFINITIONS)
        assert result.index("#### a") < result.index("#### b")

    def test_body_array_of_refs_links_item_definition(self):
        p = _param(name="body", **{"in": "body"}, schema={"type": "array", "items": {"$ref": "#/definitions/Pet"}})
        result = render_parameters([p], DEFINITIONS)
        assert f"| body | {BODY_DESCRIPTION} | [Pet](#Pet) | false | body |\n" in result

    def test_body_array_of_missing_refs_degrades(self):
        p = _param(name="body", **{"in": "body"}, schema={"type": "array", "items": {"$ref": "#/definitions/Ghost"}})
        result = render_parameters([p], DEFINITIONS)
        assert "[#/definitions/Ghost](#Ghost)" in result

    def test_body_schema_type_fallback(self):
        p = _param(name="body", **{"in": "body"}, schema={"type": "string"})
        result = render_parameters([p], DEFINITIONS)
        assert f"| body | {BODY_DESCRIPTION} | string | false | body |\n" in result
