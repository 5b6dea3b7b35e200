"""Data models for a parsed Swagger 2.0 document.

The loader validates the raw JSON/YAML mapping into these frozen models
before anything is rendered. Optional fields default to empty values so
the renderers never have to probe for missing keys.
"""

from typing import Annotated, Any, Literal, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    field_validator,
    model_validator,
)

HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch")


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # an explicit null means the same as an absent key
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class Info(_Frozen):
    title: str = ""
    version: str = ""

    @field_validator("version", mode="before")
    @classmethod
    def _version_as_text(cls, value: Any) -> Any:
        # YAML reads `version: 1.0` as a float
        return value if value is None or isinstance(value, str) else str(value)


class RefTarget(_Frozen):
    """Anything that only carries a ``$ref`` (response schema, array items)."""

    ref: str | None = Field(default=None, alias="$ref")


class InlineProperty(_Frozen):
    """A property of an inline body schema."""

    type: str = ""
    title: str = ""


class Schema(_Frozen):
    """Inline schema attached to a body parameter."""

    ref: str | None = Field(default=None, alias="$ref")
    type: str = ""
    items: RefTarget | None = None
    properties: dict[str, InlineProperty] | None = None


class Param(_Frozen):
    """A single operation parameter (query, path, header, body, formData)."""

    name: str
    location: str = Field(alias="in")  # query / path / header / body / formData
    description: str = ""
    type: str = ""
    required: bool = False
    schema_: Schema | None = Field(default=None, alias="schema")


class Response(_Frozen):
    description: str = ""
    schema_: RefTarget | None = Field(default=None, alias="schema")


class Operation(_Frozen):
    """One method on one path."""

    operation_id: str | None = Field(default=None, alias="operationId")
    summary: str = ""
    description: str = ""
    tags: list[str] = []
    parameters: list[Param] = []
    responses: dict[str, Response]

    @field_validator("responses", mode="before")
    @classmethod
    def _status_codes_as_text(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return {str(code): resp for code, resp in value.items()}
        return value


class Property(_Frozen):
    """A property of an object definition."""

    type: str = ""
    title: str = ""
    ref: str | None = Field(default=None, alias="$ref")
    items: RefTarget | None = None
    enum: list[Any] | None = None
    default: Any = None


class EnumDefinition(_Frozen):
    kind: Literal["enum"] = "enum"
    title: str = ""
    enum: list[Any]
    default: Any = None


class ObjectDefinition(_Frozen):
    kind: Literal["object"] = "object"
    title: str = ""
    properties: dict[str, Property]


class BareDefinition(_Frozen):
    """A definition with neither ``enum`` nor ``properties``."""

    kind: Literal["bare"] = "bare"
    title: str = ""


def _definition_kind(value: Any) -> str | None:
    if isinstance(value, dict):
        if value.get("enum") is not None:
            return "enum"
        if value.get("properties") is not None:
            return "object"
        return "bare"
    return getattr(value, "kind", None)


Definition = Annotated[
    Union[
        Annotated[EnumDefinition, Tag("enum")],
        Annotated[ObjectDefinition, Tag("object")],
        Annotated[BareDefinition, Tag("bare")],
    ],
    Discriminator(_definition_kind),
]


class Document(_Frozen):
    """The whole input document.

    ``paths`` maps each path to its operations keyed by lowercase method.
    Path-item keys that are not HTTP methods (shared ``parameters``,
    ``$ref``, ``x-`` extensions) are dropped during validation.
    """

    info: Info
    paths: dict[str, dict[str, Operation]]
    definitions: dict[str, Definition] = {}

    @field_validator("paths", mode="before")
    @classmethod
    def _keep_operations(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return value
        return {
            path: (
                {m: op for m, op in item.items() if m.lower() in HTTP_METHODS}
                if isinstance(item, dict)
                else item
            )
            for path, item in value.items()
        }
