#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wikirender/ast/__init__.py
"""Generic document tree for wikirender.

Examples
--------
    >>> from wikirender.ast import BulletList, Document, Heading, Paragraph, Plain, Text
    >>> doc = Document(children=[
    ...     Heading(level=2, content=[Text(content="Title")]),
    ...     Paragraph(content=[Text(content="Hello")]),
    ...     BulletList(items=[[Plain(content=[Text(content="a")])], [Plain(content=[Text(content="b")])]]),
    ... ])

"""

from wikirender.ast.nodes import (
    Alignment,
    Attributes,
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
    get_node_children,
    make_attributes,
)
from wikirender.ast.serialization import ast_to_dict, ast_to_json, dict_to_ast, json_to_ast
from wikirender.ast.utils import first_class, stringify

__all__ = [
    "Alignment",
    "Attributes",
    "BlockQuote",
    "BulletList",
    "Cite",
    "Code",
    "CodeBlock",
    "DefinitionList",
    "Div",
    "DisplayMath",
    "Document",
    "DoubleQuoted",
    "Emph",
    "Figure",
    "Heading",
    "HorizontalRule",
    "Image",
    "InlineMath",
    "LineBlock",
    "LineBreak",
    "Link",
    "Node",
    "Note",
    "OrderedList",
    "Paragraph",
    "Plain",
    "RawBlock",
    "RawInline",
    "SingleQuoted",
    "SmallCaps",
    "SoftBreak",
    "Space",
    "Span",
    "Strikeout",
    "Strong",
    "Subscript",
    "Superscript",
    "Table",
    "TableCell",
    "TableRow",
    "Text",
    "UnknownNode",
    "ast_to_dict",
    "ast_to_json",
    "dict_to_ast",
    "first_class",
    "get_node_children",
    "json_to_ast",
    "make_attributes",
    "stringify",
]
