#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wikirender/ast/nodes.py
"""AST node classes for document representation.

This module defines the generic document tree consumed by the wiki renderers.
The tree is produced by an external front end (a parser or a JSON file, see
:mod:`wikirender.ast.serialization`) and is never mutated by rendering.

Node Hierarchy
--------------
Every node class carries a class-level ``kind`` tag. The tag is the key the
renderer's dispatch table uses to find the rule for a node, so adding a new
node kind only requires a new class and a rule registered under its tag.

Block-level nodes:
    - Plain, Paragraph, Heading, BlockQuote, HorizontalRule, CodeBlock
    - BulletList, OrderedList, DefinitionList
    - Table (TableRow, TableCell), Div, RawBlock, LineBlock, Figure

Inline nodes:
    - Text, Space, SoftBreak, LineBreak
    - Emph, Strong, Subscript, Superscript, SmallCaps, Strikeout
    - Link, Image, Code, InlineMath, DisplayMath
    - SingleQuoted, DoubleQuoted, Note, Span, RawInline, Cite

Attribute sets are plain ``dict[str, str]`` mappings. Use
:func:`make_attributes` to build one from an identifier, a class list and
key/value pairs.

"""

from __future__ import annotations

from abc import ABC
from dataclasses import dataclass, field
from typing import Any, ClassVar, Iterable, Literal, Optional

Attributes = dict[str, str]
Alignment = Literal["left", "center", "right"]


def make_attributes(
    identifier: str = "",
    classes: Iterable[str] = (),
    pairs: Iterable[tuple[str, str]] = (),
) -> Attributes:
    """Build an attribute set.

    Parameters
    ----------
    identifier : str, default = ""
        Element identifier, stored under ``id``
    classes : iterable of str, default = ()
        Class names, joined with single spaces under ``class``
    pairs : iterable of (str, str), default = ()
        Additional key/value pairs. Later pairs win over earlier ones and
        over ``id``/``class``.

    Returns
    -------
    dict
        Attribute mapping

    Examples
    --------
        >>> make_attributes("intro", ["lead", "wide"], [("data-x", "1")])
        {'id': 'intro', 'class': 'lead wide', 'data-x': '1'}

    """
    attributes: Attributes = {}
    if identifier:
        attributes["id"] = identifier
    class_list = [name for name in classes if name]
    if class_list:
        attributes["class"] = " ".join(class_list)
    for key, value in pairs:
        attributes[key] = value
    return attributes


class Node(ABC):
    """Base class for all AST nodes.

    Attributes
    ----------
    kind : str
        Node-kind tag used for rule dispatch
    metadata : dict
        Arbitrary metadata associated with the node

    """

    kind: ClassVar[str] = "Node"
    metadata: dict[str, Any]


# ============================================================================
# Document
# ============================================================================


@dataclass
class Document(Node):
    """Root document node.

    Parameters
    ----------
    children : list of Node, default = empty list
        Top-level block nodes
    metadata : dict, default = empty dict
        Document metadata. Only consulted for renderer configuration
        (for example ``image_format``); never rendered.

    """

    kind: ClassVar[str] = "Document"

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Plain(Node):
    """Inline content that is not wrapped as a paragraph (tight list items)."""

    kind: ClassVar[str] = "Plain"

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Paragraph(Node):
    """Paragraph node containing inline content."""

    kind: ClassVar[str] = "Paragraph"

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Heading(Node):
    """Heading node.

    Parameters
    ----------
    level : int
        Heading level, 1 is the most important. Levels beyond what a dialect
        supports natively are passed through unchanged.
    content : list of Node, default = empty list
        Inline heading text
    attributes : dict, default = empty dict
        Heading attributes

    """

    kind: ClassVar[str] = "Heading"

    level: int
    content: list[Node] = field(default_factory=list)
    attributes: Attributes = field(default_factory=dict)
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate that the heading level is positive."""
        if self.level < 1:
            raise ValueError(f"Heading level must be >= 1, got {self.level}")


@dataclass
class BlockQuote(Node):
    """Block quote containing block nodes."""

    kind: ClassVar[str] = "BlockQuote"

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class HorizontalRule(Node):
    """Horizontal rule (thematic break)."""

    kind: ClassVar[str] = "HorizontalRule"

    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class CodeBlock(Node):
    """Literal code block.

    Parameters
    ----------
    content : str
        Code text, not parsed
    attributes : dict, default = empty dict
        Block attributes. The first entry of ``class`` is treated as the
        language.

    """

    kind: ClassVar[str] = "CodeBlock"

    content: str
    attributes: Attributes = field(default_factory=dict)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class BulletList(Node):
    """Unordered list. Each item is a sequence of block nodes."""

    kind: ClassVar[str] = "BulletList"

    items: list[list[Node]] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class OrderedList(Node):
    """Ordered list.

    Parameters
    ----------
    items : list of list of Node, default = empty list
        List items, each a sequence of block nodes
    start : int, default = 1
        Starting number. Wiki dialects number implicitly, so this is
        informational only.

    """

    kind: ClassVar[str] = "OrderedList"

    items: list[list[Node]] = field(default_factory=list)
    start: int = 1
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class DefinitionList(Node):
    """Definition list.

    Parameters
    ----------
    items : list of (list of Node, list of list of Node)
        ``(term, definitions)`` pairs. The term is inline content; each
        definition is a sequence of block nodes.

    """

    kind: ClassVar[str] = "DefinitionList"

    items: list[tuple[list[Node], list[list[Node]]]] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class TableCell(Node):
    """Table cell holding block content (usually a single Plain)."""

    kind: ClassVar[str] = "TableCell"

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class TableRow(Node):
    """Table row."""

    kind: ClassVar[str] = "TableRow"

    cells: list[TableCell] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Table(Node):
    """Table node.

    Parameters
    ----------
    header : TableRow or None, default = None
        Header row
    rows : list of TableRow, default = empty list
        Body rows
    caption : list of Node, default = empty list
        Inline caption
    alignments : list of Alignment or None, default = empty list
        Per-column alignment
    widths : list of float or None, default = empty list
        Relative column widths

    Notes
    -----
    The wiki dialects only use the header and body rows.

    """

    kind: ClassVar[str] = "Table"

    header: Optional[TableRow] = None
    rows: list[TableRow] = field(default_factory=list)
    caption: list[Node] = field(default_factory=list)
    alignments: list[Optional[Alignment]] = field(default_factory=list)
    widths: list[Optional[float]] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Div(Node):
    """Generic block container with attributes."""

    kind: ClassVar[str] = "Div"

    children: list[Node] = field(default_factory=list)
    attributes: Attributes = field(default_factory=dict)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class RawBlock(Node):
    """Raw block content destined for a specific output format (e.g. ``html``)."""

    kind: ClassVar[str] = "RawBlock"

    format: str
    content: str
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class LineBlock(Node):
    """Block of lines whose line breaks are significant (poetry, addresses)."""

    kind: ClassVar[str] = "LineBlock"

    lines: list[list[Node]] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Figure(Node):
    """Captioned image standing on its own as a block.

    Parameters
    ----------
    target : str
        Image URL or path
    caption : list of Node, default = empty list
        Inline caption
    title : str, default = ""
        Image title
    attributes : dict, default = empty dict
        Image attributes

    """

    kind: ClassVar[str] = "Figure"

    target: str
    caption: list[Node] = field(default_factory=list)
    title: str = ""
    attributes: Attributes = field(default_factory=dict)
    metadata: dict[str, Any] = field(default_factory=dict)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class Text(Node):
    """Plain text run."""

    kind: ClassVar[str] = "Text"

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Space(Node):
    """Inter-word space."""

    kind: ClassVar[str] = "Space"

    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class SoftBreak(Node):
    """Soft line break from the source."""

    kind: ClassVar[str] = "SoftBreak"

    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class LineBreak(Node):
    """Hard line break."""

    kind: ClassVar[str] = "LineBreak"

    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Emph(Node):
    """Emphasized text."""

    kind: ClassVar[str] = "Emph"

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Strong(Node):
    """Strongly emphasized text."""

    kind: ClassVar[str] = "Strong"

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Subscript(Node):
    """Subscript text."""

    kind: ClassVar[str] = "Subscript"

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Superscript(Node):
    """Superscript text."""

    kind: ClassVar[str] = "Superscript"

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class SmallCaps(Node):
    """Small caps text."""

    kind: ClassVar[str] = "SmallCaps"

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Strikeout(Node):
    """Struck-out text."""

    kind: ClassVar[str] = "Strikeout"

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Link(Node):
    """Hyperlink.

    Parameters
    ----------
    target : str
        Link destination URL
    content : list of Node, default = empty list
        Inline link label
    title : str, default = ""
        Link title. Accepted but not emitted by the shipped dialects.
    attributes : dict, default = empty dict
        Link attributes

    """

    kind: ClassVar[str] = "Link"

    target: str
    content: list[Node] = field(default_factory=list)
    title: str = ""
    attributes: Attributes = field(default_factory=dict)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Image(Node):
    """Inline image.

    Parameters
    ----------
    target : str
        Image URL or path
    content : list of Node, default = empty list
        Inline alternative text
    title : str, default = ""
        Image title. Accepted but not emitted by the shipped dialects.
    attributes : dict, default = empty dict
        Image attributes

    """

    kind: ClassVar[str] = "Image"

    target: str
    content: list[Node] = field(default_factory=list)
    title: str = ""
    attributes: Attributes = field(default_factory=dict)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Code(Node):
    """Inline code span."""

    kind: ClassVar[str] = "Code"

    content: str
    attributes: Attributes = field(default_factory=dict)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class InlineMath(Node):
    """Inline TeX math."""

    kind: ClassVar[str] = "InlineMath"

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class DisplayMath(Node):
    """Display TeX math."""

    kind: ClassVar[str] = "DisplayMath"

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class SingleQuoted(Node):
    """Single-quoted inline content."""

    kind: ClassVar[str] = "SingleQuoted"

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class DoubleQuoted(Node):
    """Double-quoted inline content."""

    kind: ClassVar[str] = "DoubleQuoted"

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Note(Node):
    """Footnote. The body is a sequence of block nodes rendered out of band."""

    kind: ClassVar[str] = "Note"

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Span(Node):
    """Generic inline container with attributes."""

    kind: ClassVar[str] = "Span"

    content: list[Node] = field(default_factory=list)
    attributes: Attributes = field(default_factory=dict)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class RawInline(Node):
    """Raw inline content destined for a specific output format."""

    kind: ClassVar[str] = "RawInline"

    format: str
    content: str
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Cite(Node):
    """Citation.

    Parameters
    ----------
    citation_ids : list of str
        Cited identifiers, in order
    content : list of Node, default = empty list
        Rendered citation text

    """

    kind: ClassVar[str] = "Cite"

    citation_ids: list[str]
    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


# ============================================================================
# Placeholder
# ============================================================================


@dataclass
class UnknownNode(Node):
    """Placeholder for a node kind this library does not define.

    Produced by lenient deserialization so that an unsupported node reaches
    the renderer, which degrades it to empty output with a diagnostic.

    Parameters
    ----------
    node_type : str
        The unrecognized node-kind tag
    data : dict, default = empty dict
        The raw serialized payload

    """

    node_type: str
    data: dict[str, Any] = field(default_factory=dict)
    metadata: dict[str, Any] = field(default_factory=dict)

    @property  # type: ignore[override]
    def kind(self) -> str:  # type: ignore[override]
        """Return the unrecognized tag as this node's kind."""
        return self.node_type


def get_node_children(node: Node) -> list[Node]:
    """Return the direct child nodes of a node, in document order.

    Parameters
    ----------
    node : Node
        Node to inspect

    Returns
    -------
    list of Node
        Child nodes. Leaf nodes return an empty list.

    """
    if isinstance(node, (Document, BlockQuote, Div, Note)):
        return list(node.children)
    if isinstance(node, (BulletList, OrderedList)):
        return [child for item in node.items for child in item]
    if isinstance(node, DefinitionList):
        children: list[Node] = []
        for term, definitions in node.items:
            children.extend(term)
            for definition in definitions:
                children.extend(definition)
        return children
    if isinstance(node, Table):
        rows = ([node.header] if node.header else []) + list(node.rows)
        return [*node.caption, *rows]
    if isinstance(node, TableRow):
        return list(node.cells)
    if isinstance(node, LineBlock):
        return [child for line in node.lines for child in line]
    if isinstance(node, Figure):
        return list(node.caption)
    content = getattr(node, "content", None)
    if isinstance(content, list):
        return list(content)
    return []
