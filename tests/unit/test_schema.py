"""Unit tests for schema flattening."""

import copy

from template_binder.strategies.binding_engine.models import (
    ArraySchema,
    ObjectSchema,
    ScalarSchema,
    parse_schema_node,
)
from template_binder.strategies.binding_engine.resume_schema import get_resume_schema
from template_binder.strategies.binding_engine.schema import flatten_schema, humanize_key


class TestHumanizeKey:
    """Test suite for humanize_key."""

    def test_camel_case(self):
        assert humanize_key("jobTitle") == "Job Title"

    def test_snake_case(self):
        assert humanize_key("postal_code") == "Postal code"

    def test_single_word(self):
        assert humanize_key("email") == "Email"


class TestParseSchemaNode:
    """Test suite for parse_schema_node."""

    def test_missing_type_defaults_to_string(self):
        node = parse_schema_node({"description": "No type"})

        assert isinstance(node, ScalarSchema)
        assert node.type == "string"

    def test_non_mapping_is_string(self):
        assert parse_schema_node(42) == ScalarSchema()

    def test_object_and_array(self):
        node = parse_schema_node(
            {
                "type": "array",
                "items": {"type": "object", "properties": {"a": {"type": "number"}}},
            }
        )

        assert isinstance(node, ArraySchema)
        assert isinstance(node.items, ObjectSchema)
        assert node.items.properties["a"].type == "number"

    def test_extra_keys_ignored(self):
        node = parse_schema_node({"type": "string", "nullable": True})

        assert node == ScalarSchema(type="string")


class TestFlattenSchema:
    """Test suite for flatten_schema."""

    def test_empty_schema(self):
        assert flatten_schema({}) == []
        assert flatten_schema(None) == []

    def test_object_with_two_string_properties(self):
        """Test that child paths are prefixed with the parent path."""
        schema = {
            "personalInfo": {
                "type": "object",
                "properties": {
                    "firstName": {"type": "string"},
                    "lastName": {"type": "string"},
                },
            }
        }
        fields = flatten_schema(schema)
        paths = [f.path for f in fields]

        assert paths == ["personalInfo", "personalInfo.firstName", "personalInfo.lastName"]
        children = [f for f in fields if f.path.startswith("personalInfo.")]
        assert len(children) == 2
        assert fields[0].type == "object"
        assert fields[1].name == "First Name"

    def test_array_of_strings(self):
        """Test that scalar array items yield one synthetic field."""
        schema = {"skills": {"type": "array", "items": {"type": "string"}}}
        fields = flatten_schema(schema)

        assert [f.path for f in fields] == ["skills", "skills[0]"]
        item = fields[1]
        assert item.name == "Skills Item"
        assert item.type == "string"
        assert item.description == "First item in Skills array"

    def test_array_of_objects(self):
        """Test that object array items are expanded under path[0]."""
        schema = {
            "workExperience": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {
                        "jobTitle": {"type": "string"},
                        "employer": {"type": "string"},
                    },
                },
            }
        }
        paths = [f.path for f in flatten_schema(schema)]

        assert paths == [
            "workExperience",
            "workExperience[0].jobTitle",
            "workExperience[0].employer",
        ]

    def test_array_items_without_properties(self):
        schema = {"certifications": {"type": "array", "items": {"type": "object"}}}
        fields = flatten_schema(schema)

        assert fields[1].path == "certifications[0]"
        assert fields[1].type == "object"
        assert fields[1].name == "Certifications Item"

    def test_array_without_items(self):
        fields = flatten_schema({"tags": {"type": "array"}})

        assert [f.path for f in fields] == ["tags"]

    def test_missing_type_defaults_to_string(self):
        fields = flatten_schema({"nickname": {"description": "Preferred name"}})

        assert fields[0].type == "string"
        assert fields[0].description == "Preferred name"

    def test_title_used_as_name(self):
        fields = flatten_schema({"fullName": {"type": "string", "title": "Full Name"}})

        assert fields[0].name == "Full Name"
        assert fields[0].title == "Full Name"

    def test_parent_path_prefix(self):
        fields = flatten_schema({"city": {"type": "string"}}, parent_path="address")

        assert fields[0].path == "address.city"

    def test_deep_nesting(self):
        paths = [f.path for f in flatten_schema(get_resume_schema())]

        assert "education[0].achievements[0].title" in paths
        assert "skills[0]" in paths
        assert paths.index("education") < paths.index("education[0].degree")

    def test_input_not_mutated(self):
        schema = get_resume_schema()
        original = copy.deepcopy(schema)
        flatten_schema(schema)

        assert schema == original
