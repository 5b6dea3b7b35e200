from pathlib import Path

from swagger_markdown.generator.grouper import DEFAULT_TAG, count_operations, group_by_tag
from swagger_markdown.parser.loader import load_document
from swagger_markdown.parser.models import Document

FIXTURES = Path(__file__).parent / "fixtures"


def _op(tags=None) -> dict:
    op = {"responses": {"200": {"description": "OK"}}}
    if tags is not None:
        op["tags"] = tags
    return op


def _make_document(paths: dict) -> Document:
    return Document.model_validate({"info": {}, "paths": paths})


class TestGroupByTag:
    def test_petstore_buckets(self):
        groups = group_by_tag(load_document(FIXTURES / "petstore.json"))
        assert list(groups) == ["pet", "admin", "Other"]
        assert list(groups["pet"]) == ["GET /pets", "POST /pets", "GET /pets/{petId}"]
        assert list(groups["admin"]) == ["POST /pets"]
        assert list(groups["Other"]) == ["GET /health"]

    def test_untagged_goes_to_other(self):
        groups = group_by_tag(_make_document({"/a": {"get": _op()}}))
        assert DEFAULT_TAG == "Other"
        assert list(groups) == ["Other"]

    def test_empty_tags_goes_to_other(self):
        groups = group_by_tag(_make_document({"/a": {"get": _op([])}}))
        assert list(groups["Other"]) == ["GET /a"]

    def test_fan_out_law(self):
        paths = {
            "/a": {"get": _op(["x", "y"]), "post": _op()},
            "/b": {"delete": _op(["y"]), "put": _op(["x", "y", "z"])},
        }
        doc = _make_document(paths)
        expected = sum(
            max(1, len(op.tags)) for methods in doc.paths.values() for op in methods.values()
        )
        assert count_operations(group_by_tag(doc)) == expected == 7

    def test_same_operation_object_under_each_tag(self):
        doc = _make_document({"/a": {"get": _op(["x", "y"])}})
        groups = group_by_tag(doc)
        assert groups["x"]["GET /a"] is groups["y"]["GET /a"]

    def test_repeated_tag_keeps_single_entry(self):
        groups = group_by_tag(_make_document({"/a": {"get": _op(["x", "x"])}}))
        assert list(groups["x"]) == ["GET /a"]

    def test_method_uppercased(self):
        groups = group_by_tag(_make_document({"/a": {"patch": _op(["t"])}}))
        assert list(groups["t"]) == ["PATCH /a"]

    def test_empty_paths(self):
        assert group_by_tag(_make_document({})) == {}

    def test_null_tags_goes_to_other(self):
        groups = group_by_tag(_make_document({"/a": {"get": _op(None) | {"tags": None}}}))
        assert list(groups) == ["Other"]
        assert list(groups["Other"]) == ["GET /a"]
