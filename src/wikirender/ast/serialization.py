#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wikirender/ast/serialization.py
"""JSON serialization and deserialization for AST nodes.

This is the wire format the command line accepts: a front end parses a
source document, dumps the tree with :func:`ast_to_json`, and the renderer
loads it back with :func:`json_to_ast`.

Every node is an object with a ``node_type`` key holding the node's kind tag
plus one key per dataclass field. Child nodes nest as objects, node lists as
arrays. The root object additionally carries ``schema_version``.

Examples
--------
    >>> from wikirender.ast import Document, Heading, Text
    >>> doc = Document(children=[Heading(level=1, content=[Text(content="Title")])])
    >>> json_str = ast_to_json(doc)
    >>> json_to_ast(json_str).children[0].level
    1

"""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any

from wikirender.ast.nodes import (
    BlockQuote,
    BulletList,
    Cite,
    Code,
    CodeBlock,
    DefinitionList,
    Div,
    DisplayMath,
    Document,
    DoubleQuoted,
    Emph,
    Figure,
    Heading,
    HorizontalRule,
    Image,
    InlineMath,
    LineBlock,
    LineBreak,
    Link,
    Node,
    Note,
    OrderedList,
    Paragraph,
    Plain,
    RawBlock,
    RawInline,
    SingleQuoted,
    SmallCaps,
    SoftBreak,
    Space,
    Span,
    Strikeout,
    Strong,
    Subscript,
    Superscript,
    Table,
    TableCell,
    TableRow,
    Text,
    UnknownNode,
)
from wikirender.exceptions import ParsingError

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1

# Node kind tag -> node class
_NODE_CLASSES: dict[str, type[Node]] = {
    cls.kind: cls
    for cls in (
        Document,
        Plain,
        Paragraph,
        Heading,
        BlockQuote,
        HorizontalRule,
        CodeBlock,
        BulletList,
        OrderedList,
        DefinitionList,
        Table,
        TableRow,
        TableCell,
        Div,
        RawBlock,
        LineBlock,
        Figure,
        Text,
        Space,
        SoftBreak,
        LineBreak,
        Emph,
        Strong,
        Subscript,
        Superscript,
        SmallCaps,
        Strikeout,
        Link,
        Image,
        Code,
        InlineMath,
        DisplayMath,
        SingleQuoted,
        DoubleQuoted,
        Note,
        Span,
        RawInline,
        Cite,
    )
}


def _encode_value(value: Any) -> Any:
    if isinstance(value, Node):
        return ast_to_dict(value)
    if isinstance(value, (list, tuple)):
        return [_encode_value(item) for item in value]
    if isinstance(value, dict):
        return {key: _encode_value(item) for key, item in value.items()}
    return value


def ast_to_dict(node: Node) -> dict[str, Any]:
    """Convert an AST node to a JSON-compatible dictionary.

    Parameters
    ----------
    node : Node
        Node to convert

    Returns
    -------
    dict
        Dictionary with a ``node_type`` key and one key per field

    """
    if isinstance(node, UnknownNode):
        return {"node_type": node.node_type, **node.data}

    result: dict[str, Any] = {"node_type": node.kind}
    for node_field in dataclasses.fields(node):  # type: ignore[arg-type]
        result[node_field.name] = _encode_value(getattr(node, node_field.name))
    return result


def _decode_value(value: Any, strict_mode: bool) -> Any:
    if isinstance(value, dict):
        if "node_type" in value:
            return dict_to_ast(value, strict_mode=strict_mode)
        return {key: _decode_value(item, strict_mode) for key, item in value.items()}
    if isinstance(value, list):
        return [_decode_value(item, strict_mode) for item in value]
    return value


def dict_to_ast(data: dict[str, Any], strict_mode: bool = True) -> Node:
    """Convert a dictionary representation back to an AST node.

    Parameters
    ----------
    data : dict
        Dictionary representation of a node
    strict_mode : bool, default True
        If True, raise ParsingError on unknown node types and unknown fields.
        If False, unknown node types become :class:`UnknownNode` placeholders
        (rendered as empty output with a warning) and unknown fields are
        dropped with a warning.

    Returns
    -------
    Node
        Reconstructed AST node

    Raises
    ------
    ParsingError
        If the data is not a valid node

    """
    if not isinstance(data, dict):
        raise ParsingError(f"Expected a node object, got {type(data).__name__}", parsing_stage="deserialize")

    node_type = data.get("node_type")
    if not node_type:
        raise ParsingError("Node object must contain a 'node_type' field", parsing_stage="deserialize")

    node_class = _NODE_CLASSES.get(node_type)
    if node_class is None:
        if strict_mode:
            raise ParsingError(f"Unknown node type: {node_type}", parsing_stage="deserialize")
        logger.warning(f"Unknown node type '{node_type}', keeping it as a placeholder")
        payload = {key: value for key, value in data.items() if key != "node_type"}
        return UnknownNode(node_type=node_type, data=payload)

    field_names = {node_field.name for node_field in dataclasses.fields(node_class)}  # type: ignore[arg-type]
    kwargs: dict[str, Any] = {}
    for key, value in data.items():
        if key == "node_type":
            continue
        if key not in field_names:
            if strict_mode:
                raise ParsingError(f"Unknown field '{key}' for node type {node_type}", parsing_stage="deserialize")
            logger.warning(f"Ignoring unknown field '{key}' on {node_type}")
            continue
        kwargs[key] = _decode_value(value, strict_mode)

    if node_class is DefinitionList and "items" in kwargs:
        kwargs["items"] = [(term, definitions) for term, definitions in kwargs["items"]]

    try:
        return node_class(**kwargs)
    except (TypeError, ValueError) as e:
        raise ParsingError(f"Invalid {node_type} node: {e}", parsing_stage="deserialize", original_error=e) from e


def ast_to_json(node: Node, indent: int | None = None) -> str:
    """Serialize an AST node to a JSON string with schema versioning.

    Parameters
    ----------
    node : Node
        The AST node to serialize
    indent : int or None, default = None
        Number of spaces for indentation (None for compact format)

    Returns
    -------
    str
        JSON string representation

    """
    versioned_dict = {"schema_version": SCHEMA_VERSION, **ast_to_dict(node)}
    return json.dumps(versioned_dict, indent=indent, ensure_ascii=False)


def json_to_ast(json_str: str, strict_mode: bool = True) -> Node:
    """Deserialize a JSON string to an AST node.

    A missing ``schema_version`` is treated as version 1.

    Parameters
    ----------
    json_str : str
        JSON string representation
    strict_mode : bool, default True
        See :func:`dict_to_ast`

    Returns
    -------
    Node
        Reconstructed AST node

    Raises
    ------
    ParsingError
        If the JSON is malformed, has an unsupported schema version, or
        contains invalid nodes

    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ParsingError(f"Malformed JSON document tree: {e}", parsing_stage="json", original_error=e) from e

    if not isinstance(data, dict):
        raise ParsingError("Document tree JSON must be an object", parsing_stage="json")

    schema_version = data.pop("schema_version", SCHEMA_VERSION)
    if schema_version != SCHEMA_VERSION:
        raise ParsingError(
            f"Unsupported schema version: {schema_version}. Only version {SCHEMA_VERSION} is supported.",
            parsing_stage="schema",
        )

    return dict_to_ast(data, strict_mode=strict_mode)


__all__ = [
    "SCHEMA_VERSION",
    "ast_to_dict",
    "dict_to_ast",
    "ast_to_json",
    "json_to_ast",
]
