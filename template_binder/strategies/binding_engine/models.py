"""Binding engine domain models.

Pydantic models shared by the binding engine and the API layer.
Schema nodes form a tagged union keyed on ``type``.
"""

from collections.abc import Mapping
from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Schema Nodes
# =============================================================================


class ScalarSchema(BaseModel):
    """A leaf field such as a string, number or boolean."""

    model_config = ConfigDict(extra="ignore")

    type: str = Field(default="string", description="Scalar type name")
    title: str | None = None
    description: str | None = None


class ObjectSchema(BaseModel):
    """A field holding named sub-fields."""

    model_config = ConfigDict(extra="ignore")

    type: Literal["object"] = "object"
    title: str | None = None
    description: str | None = None
    properties: dict[str, "SchemaNode"] | None = None


class ArraySchema(BaseModel):
    """A field holding a list of items sharing one schema."""

    model_config = ConfigDict(extra="ignore")

    type: Literal["array"] = "array"
    title: str | None = None
    description: str | None = None
    items: "SchemaNode | None" = None


SchemaNode = Union[ScalarSchema, ObjectSchema, ArraySchema]

ObjectSchema.model_rebuild()
ArraySchema.model_rebuild()


def parse_schema_node(raw: Any) -> SchemaNode:
    """Convert a loosely-typed JSON schema node into a typed node.

    Nodes without a ``type`` (or that are not mappings at all) become
    string scalars.
    """
    if isinstance(raw, (ScalarSchema, ObjectSchema, ArraySchema)):
        return raw
    if not isinstance(raw, Mapping):
        return ScalarSchema()

    node_type = raw.get("type") or "string"
    title = raw.get("title")
    description = raw.get("description")

    match node_type:
        case "object":
            properties = raw.get("properties")
            return ObjectSchema(
                title=title,
                description=description,
                properties=(
                    parse_schema(properties) if isinstance(properties, Mapping) else None
                ),
            )
        case "array":
            items = raw.get("items")
            return ArraySchema(
                title=title,
                description=description,
                items=parse_schema_node(items) if items is not None else None,
            )
        case _:
            return ScalarSchema(type=str(node_type), title=title, description=description)


def parse_schema(raw: Mapping[str, Any] | None) -> dict[str, SchemaNode]:
    """Convert a top-level ``{key: node}`` mapping into typed nodes."""
    if not raw:
        return {}
    return {str(key): parse_schema_node(value) for key, value in raw.items()}


# =============================================================================
# Engine Results
# =============================================================================


class TokenContext(BaseModel):
    """Where and how a token appears in the template markup."""

    token: str
    clean_name: str
    html_tag: str | None = None
    parent_tag: str | None = None
    surrounding_text: str | None = None
    in_repeated_block: bool = False
    section: str | None = Field(
        default=None, description="Expression of the innermost enclosing #each block"
    )


class FlattenedField(BaseModel):
    """A schema field resolved to an addressable path."""

    path: str = Field(description="Dotted/bracketed path, e.g. education[0].degree")
    name: str = Field(description="Human-readable field name")
    type: str = "string"
    description: str | None = None
    title: str | None = None


class BindingSuggestion(BaseModel):
    """A proposed token to field binding."""

    token: str
    field_path: str
    confidence: float = Field(ge=0.0, le=1.0)
    reasoning: str


class ExistingBinding(BaseModel):
    """A binding already confirmed for a template."""

    model_config = ConfigDict(populate_by_name=True)

    id: int | None = None
    template_id: int | None = Field(default=None, alias="templateId")
    placeholder_token: str = Field(alias="placeholderToken")
    data_field: str | None = Field(default="", alias="dataField")
