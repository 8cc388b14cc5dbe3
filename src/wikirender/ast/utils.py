#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wikirender/ast/utils.py
"""Utility functions for working with AST nodes.

Functions
---------
stringify : Flatten a node, node list or metadata value to plain text
first_class : Return the first class name of an attribute set

Examples
--------
    >>> from wikirender.ast import Emph, Space, Text
    >>> stringify([Text(content="Hello"), Space(), Emph(content=[Text(content="world")])])
    'Hello world'

"""

from __future__ import annotations

from typing import Any, Mapping

from wikirender.ast.nodes import (
    Code,
    DisplayMath,
    InlineMath,
    LineBreak,
    Node,
    RawInline,
    SoftBreak,
    Space,
    Text,
    get_node_children,
)


def stringify(value: Any) -> str:
    """Convert a node, a list of nodes or a metadata value to plain text.

    Formatting is dropped; spaces and breaks become single spaces. Strings,
    numbers and booleans are converted with ``str`` (booleans as
    ``true``/``false``). Mappings are flattened value by value.

    Parameters
    ----------
    value : Any
        Value to flatten

    Returns
    -------
    str
        Plain text

    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    if isinstance(value, Node):
        return _stringify_node(value)
    if isinstance(value, Mapping):
        return "".join(stringify(item) for item in value.values())
    if isinstance(value, (list, tuple)):
        return "".join(stringify(item) for item in value)
    return str(value)


def _stringify_node(node: Node) -> str:
    if isinstance(node, Text):
        return node.content
    if isinstance(node, (Space, SoftBreak, LineBreak)):
        return " "
    if isinstance(node, (Code, InlineMath, DisplayMath)):
        return node.content
    if isinstance(node, RawInline):
        return ""
    return "".join(_stringify_node(child) for child in get_node_children(node))


def first_class(attributes: Mapping[str, str]) -> str:
    """Return the first entry of the ``class`` attribute, or ``""``.

    Parameters
    ----------
    attributes : Mapping[str, str]
        Attribute set

    Returns
    -------
    str
        First class name

    Examples
    --------
        >>> first_class({"class": "mermaid numberLines"})
        'mermaid'
        >>> first_class({})
        ''

    """
    classes = (attributes.get("class") or "").split()
    return classes[0] if classes else ""
