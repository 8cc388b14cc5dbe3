#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for AST serialization and deserialization."""
import json
import logging

import pytest

from wikirender.ast import (
    DefinitionList,
    Document,
    Heading,
    Link,
    Note,
    Paragraph,
    Plain,
    Strong,
    Table,
    TableCell,
    TableRow,
    Text,
    UnknownNode,
)
from wikirender.ast.serialization import SCHEMA_VERSION, ast_to_dict, ast_to_json, dict_to_ast, json_to_ast
from wikirender.exceptions import ParsingError


@pytest.mark.unit
class TestAstToDict:
    """Test AST to dictionary conversion."""

    def test_text_node_to_dict(self) -> None:
        """Test converting Text node to dict."""
        result = ast_to_dict(Text(content="Hello"))

        assert result == {"node_type": "Text", "content": "Hello", "metadata": {}}

    def test_heading_to_dict(self) -> None:
        result = ast_to_dict(Heading(level=1, content=[Text(content="Title")]))

        assert result["node_type"] == "Heading"
        assert result["level"] == 1
        assert result["content"][0]["node_type"] == "Text"
        assert result["attributes"] == {}

    def test_table_header_is_nested_object(self) -> None:
        table = Table(header=TableRow(cells=[TableCell(content=[Plain(content=[Text(content="A")])])]))
        result = ast_to_dict(table)

        assert result["header"]["node_type"] == "TableRow"
        assert result["rows"] == []

    def test_definition_list_pairs_become_arrays(self) -> None:
        dl = DefinitionList(items=[([Text(content="T")], [[Plain(content=[Text(content="D")])]])])
        result = ast_to_dict(dl)

        assert isinstance(result["items"][0], list)
        assert result["items"][0][0][0]["content"] == "T"

    def test_unknown_node_keeps_its_payload(self) -> None:
        node = UnknownNode(node_type="Marquee", data={"speed": 3})
        assert ast_to_dict(node) == {"node_type": "Marquee", "speed": 3}


@pytest.mark.unit
class TestDictToAst:
    """Test dictionary to AST conversion."""

    def test_paragraph_from_dict(self) -> None:
        data = {
            "node_type": "Paragraph",
            "content": [
                {"node_type": "Text", "content": "Hello "},
                {"node_type": "Strong", "content": [{"node_type": "Text", "content": "World"}]},
            ],
        }
        node = dict_to_ast(data)

        assert isinstance(node, Paragraph)
        assert isinstance(node.content[1], Strong)
        assert node.content[1].content[0].content == "World"

    def test_missing_optional_fields_use_defaults(self) -> None:
        node = dict_to_ast({"node_type": "Link", "target": "https://example.com"})

        assert isinstance(node, Link)
        assert node.content == []
        assert node.title == ""

    def test_definition_list_items_are_tuples(self) -> None:
        data = {
            "node_type": "DefinitionList",
            "items": [[[{"node_type": "Text", "content": "T"}], [[{"node_type": "Plain", "content": []}]]]],
        }
        node = dict_to_ast(data)

        assert isinstance(node.items[0], tuple)
        term, definitions = node.items[0]
        assert term[0].content == "T"
        assert isinstance(definitions[0][0], Plain)

    def test_metadata_mapping_is_not_a_node(self) -> None:
        node = dict_to_ast({"node_type": "Document", "children": [], "metadata": {"image_format": "svg"}})
        assert node.metadata == {"image_format": "svg"}

    def test_missing_node_type(self) -> None:
        with pytest.raises(ParsingError, match="node_type"):
            dict_to_ast({"content": "x"})

    def test_non_object(self) -> None:
        with pytest.raises(ParsingError):
            dict_to_ast(["not", "a", "node"])  # type: ignore[arg-type]

    def test_missing_required_field(self) -> None:
        with pytest.raises(ParsingError) as exc_info:
            dict_to_ast({"node_type": "Heading", "content": []})
        assert isinstance(exc_info.value.original_error, TypeError)

    def test_invalid_field_value(self) -> None:
        """Constructor validation errors surface as parsing errors."""
        with pytest.raises(ParsingError, match="Heading"):
            dict_to_ast({"node_type": "Heading", "level": 0})


@pytest.mark.unit
class TestStrictAndLenientModes:
    """Test handling of unknown node types and fields."""

    def test_unknown_type_strict(self) -> None:
        with pytest.raises(ParsingError, match="Marquee"):
            dict_to_ast({"node_type": "Marquee"})

    def test_unknown_type_lenient(self, caplog) -> None:
        with caplog.at_level(logging.WARNING):
            node = dict_to_ast({"node_type": "Marquee", "speed": 3}, strict_mode=False)

        assert isinstance(node, UnknownNode)
        assert node.kind == "Marquee"
        assert node.data == {"speed": 3}
        assert "Marquee" in caplog.text

    def test_unknown_type_nested_lenient(self) -> None:
        data = {
            "node_type": "Paragraph",
            "content": [{"node_type": "Text", "content": "a"}, {"node_type": "Marquee"}],
        }
        node = dict_to_ast(data, strict_mode=False)
        assert isinstance(node.content[1], UnknownNode)

    def test_unknown_field_strict(self) -> None:
        with pytest.raises(ParsingError, match="colour"):
            dict_to_ast({"node_type": "Text", "content": "x", "colour": "red"})

    def test_unknown_field_lenient(self, caplog) -> None:
        with caplog.at_level(logging.WARNING):
            node = dict_to_ast({"node_type": "Text", "content": "x", "colour": "red"}, strict_mode=False)

        assert node == Text(content="x")
        assert "colour" in caplog.text


@pytest.mark.unit
class TestJsonSerialization:
    """Test JSON string serialization."""

    def test_json_carries_schema_version(self) -> None:
        data = json.loads(ast_to_json(Document()))
        assert data["schema_version"] == SCHEMA_VERSION
        assert data["node_type"] == "Document"

    def test_json_keeps_non_ascii(self) -> None:
        assert "Grüße" in ast_to_json(Text(content="Grüße"))

    def test_indent(self) -> None:
        assert "\n" in ast_to_json(Document(), indent=2)
        assert "\n" not in ast_to_json(Document())

    def test_round_trip(self) -> None:
        doc = Document(
            children=[
                Heading(level=2, content=[Text(content="Title")]),
                Paragraph(content=[Text(content="Hi"), Note(children=[Paragraph(content=[Text(content="n")])])]),
                DefinitionList(items=[([Text(content="T")], [[Plain(content=[Text(content="D")])]])]),
            ],
            metadata={"image_format": "svg"},
        )
        assert json_to_ast(ast_to_json(doc)) == doc

    def test_missing_schema_version_accepted(self) -> None:
        node = json_to_ast('{"node_type": "Document", "children": []}')
        assert node == Document()

    def test_unsupported_schema_version(self) -> None:
        with pytest.raises(ParsingError) as exc_info:
            json_to_ast('{"schema_version": 99, "node_type": "Document"}')
        assert exc_info.value.parsing_stage == "schema"

    def test_malformed_json(self) -> None:
        with pytest.raises(ParsingError) as exc_info:
            json_to_ast("{not json")
        assert exc_info.value.parsing_stage == "json"
        assert isinstance(exc_info.value.original_error, json.JSONDecodeError)

    def test_json_root_must_be_object(self) -> None:
        with pytest.raises(ParsingError, match="must be an object"):
            json_to_ast("[1, 2]")
