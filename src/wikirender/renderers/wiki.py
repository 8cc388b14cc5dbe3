#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wikirender/renderers/wiki.py
"""Wiki markup rendering from the document tree.

This module provides :class:`WikiRenderer`, a single rendering engine
parameterized by a :class:`~wikirender.dialects.base.Dialect`. The engine
owns the traversal: it renders children first, keeps the list nesting stack
and the footnote store in a per-call :class:`RenderContext`, and hands
already-rendered strings to the dialect.

Rules are looked up by node kind in a :class:`DispatchTable`, so a caller can
teach a renderer new node kinds with :meth:`WikiRenderer.register_rule`
without subclassing.

"""

from __future__ import annotations

import logging
from typing import Sequence

from wikirender.ast.nodes import (
    BlockQuote,
    BulletList,
    Cite,
    Code,
    CodeBlock,
    DefinitionList,
    DisplayMath,
    Div,
    Document,
    DoubleQuoted,
    Emph,
    Figure,
    Heading,
    Image,
    InlineMath,
    LineBlock,
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
    Span,
    Strikeout,
    Strong,
    Subscript,
    Superscript,
    Table,
    TableCell,
    TableRow,
    Text,
)
from wikirender.ast.utils import stringify
from wikirender.constants import IMAGE_FORMAT_METADATA_KEY, IMAGE_MIME_TYPES
from wikirender.dialects import Dialect, get_dialect_class
from wikirender.exceptions import ConfigurationError, RenderingError, WikiRenderError
from wikirender.options.base import BaseRendererOptions
from wikirender.renderers.base import BaseRenderer
from wikirender.renderers.dispatch import DispatchTable, Rule
from wikirender.utils.state import RenderContext

logger = logging.getLogger(__name__)


class WikiRenderer(BaseRenderer):
    """Render a document tree to the markup of one dialect.

    Parameters
    ----------
    dialect : Dialect or str
        Dialect instance, or the name of a registered dialect
    options : BaseRendererOptions or None, default = None
        Options used when ``dialect`` is given by name. Ignored when a
        dialect instance is passed, since the instance carries its own.

    Examples
    --------
        >>> from wikirender.ast import BulletList, Document, Heading, Paragraph, Plain, Text
        >>> doc = Document(children=[
        ...     Heading(level=2, content=[Text(content="Title")]),
        ...     Paragraph(content=[Text(content="Hello")]),
        ...     BulletList(items=[[Plain(content=[Text(content="a")])], [Plain(content=[Text(content="b")])]]),
        ... ])
        >>> print(WikiRenderer("redmine").render_to_string(doc))
        h2. Title
        <BLANKLINE>
        Hello
        <BLANKLINE>
        * a
        * b
        <BLANKLINE>

    Notes
    -----
    A renderer holds no state between calls. All mutable state lives in the
    :class:`RenderContext` created by :meth:`render_to_string`, so one
    instance may be shared between threads.

    """

    def __init__(self, dialect: Dialect | str, options: BaseRendererOptions | None = None):
        """Initialize the renderer with a dialect."""
        if isinstance(dialect, str):
            dialect_class = get_dialect_class(dialect)
            BaseRenderer._validate_options_type(options, dialect_class.options_class, dialect_class.name)
            dialect = dialect_class(options) if options is not None else dialect_class()
        super().__init__(dialect.options)
        self.dialect = dialect
        self._rules = DispatchTable()
        self._register_default_rules()

    # ------------------------------------------------------------------
    # Rule table
    # ------------------------------------------------------------------

    def register_rule(self, kind: str, rule: Rule) -> None:
        """Register or replace the rule used for nodes of ``kind``.

        Parameters
        ----------
        kind : str
            Node kind, e.g. ``"Paragraph"`` or the ``kind`` of a custom node
        rule : callable
            ``rule(node, ctx) -> str``. Use :meth:`render_inlines` and
            :meth:`render_blocks` to render children.

        Examples
        --------
            >>> renderer = WikiRenderer("tiddlywiki")
            >>> renderer.register_rule("Strong", lambda node, ctx: "!!" + renderer.render_inlines(node.content, ctx))

        """
        self._rules.register(kind, rule)

    def rule_for(self, kind: str) -> Rule:
        """Return the rule used for ``kind`` (the logging fallback if none is registered)."""
        return self._rules.lookup(kind)

    def _register_default_rules(self) -> None:
        rules: dict[str, Rule] = {
            # blocks
            "Document": self._render_document_body,
            "Plain": self._render_plain,
            "Paragraph": self._render_paragraph,
            "Heading": self._render_heading,
            "BlockQuote": self._render_block_quote,
            "HorizontalRule": lambda node, ctx: self.dialect.horizontal_rule(),
            "CodeBlock": self._render_code_block,
            "BulletList": self._render_bullet_list,
            "OrderedList": self._render_ordered_list,
            "DefinitionList": self._render_definition_list,
            "Table": self._render_table,
            "TableRow": self._render_table_row,
            "TableCell": self._render_table_cell,
            "Div": self._render_div,
            "RawBlock": self._render_raw_block,
            "LineBlock": self._render_line_block,
            "Figure": self._render_figure,
            # inlines
            "Text": self._render_text,
            "Space": lambda node, ctx: self.dialect.space(),
            "SoftBreak": lambda node, ctx: self.dialect.soft_break(),
            "LineBreak": lambda node, ctx: self.dialect.line_break(),
            "Emph": self._render_emph,
            "Strong": self._render_strong,
            "Subscript": self._render_subscript,
            "Superscript": self._render_superscript,
            "SmallCaps": self._render_small_caps,
            "Strikeout": self._render_strikeout,
            "Link": self._render_link,
            "Image": self._render_image,
            "Code": self._render_code,
            "InlineMath": self._render_inline_math,
            "DisplayMath": self._render_display_math,
            "SingleQuoted": self._render_single_quoted,
            "DoubleQuoted": self._render_double_quoted,
            "Note": self._render_note,
            "Span": self._render_span,
            "RawInline": self._render_raw_inline,
            "Cite": self._render_cite,
        }
        for kind, rule in rules.items():
            self._rules.register(kind, rule)

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def render_node(self, node: Node, ctx: RenderContext) -> str:
        """Render one node with the rule registered for its kind."""
        return self._rules.lookup(node.kind)(node, ctx)

    def render_inlines(self, nodes: Sequence[Node], ctx: RenderContext) -> str:
        """Render inline nodes and concatenate them."""
        return "".join(self.render_node(node, ctx) for node in nodes)

    def render_blocks(self, nodes: Sequence[Node], ctx: RenderContext) -> str:
        """Render a block sequence.

        The separator is decided once, before any block of the sequence is
        rendered: one newline while a list is open, a blank line otherwise.
        Blocks that render empty keep their place.

        """
        separator = ctx.block_separator()
        return separator.join(self.render_node(node, ctx) for node in nodes)

    def render_to_string(self, doc: Document) -> str:
        """Render a document to dialect markup.

        Parameters
        ----------
        doc : Document
            Root node to render

        Returns
        -------
        str
            The body, followed by the footnote list if the document has
            notes, ending in exactly one trailing newline.

        Raises
        ------
        ConfigurationError
            If the document's ``image_format`` metadata is not a supported
            format. Raised before anything is rendered.
        RenderingError
            If a rule fails on a malformed node

        """
        ctx = self._create_context(doc)
        logger.debug(f"Rendering {len(doc.children)} top-level blocks as {self.dialect.name}")

        try:
            parts = [self.render_blocks(doc.children, ctx)]
            if ctx.footnotes.has_notes:
                parts.append(self.dialect.footnote_list(ctx.footnotes.notes()))
        except WikiRenderError:
            raise
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise RenderingError(
                f"Failed to render document as {self.dialect.name}: {e}",
                rendering_stage="render",
                original_error=e,
            ) from e

        return "\n".join(parts) + "\n"

    def _create_context(self, doc: Document) -> RenderContext:
        image_format = self.resolve_image_format(doc)
        return RenderContext(image_format=image_format, image_mime_type=IMAGE_MIME_TYPES[image_format])

    def resolve_image_format(self, doc: Document) -> str:
        """Return the image format for ``doc``.

        The document's ``image_format`` metadata, stringified, wins over the
        ``default_image_format`` option. Surrounding whitespace and case are
        ignored.

        Raises
        ------
        ConfigurationError
            If the format is not one of the supported image formats

        """
        value = doc.metadata.get(IMAGE_FORMAT_METADATA_KEY)
        if value is None:
            return self.options.default_image_format

        image_format = stringify(value).strip().lower()
        if image_format not in IMAGE_MIME_TYPES:
            raise ConfigurationError(
                f"Unsupported image_format {stringify(value)!r}; expected one of {', '.join(IMAGE_MIME_TYPES)}",
                parameter_name=IMAGE_FORMAT_METADATA_KEY,
                parameter_value=stringify(value),
            )
        return image_format

    # ------------------------------------------------------------------
    # Block rules
    # ------------------------------------------------------------------

    def _render_document_body(self, node: Document, ctx: RenderContext) -> str:
        return self.render_blocks(node.children, ctx)

    def _render_plain(self, node: Plain, ctx: RenderContext) -> str:
        return self.dialect.plain(self.render_inlines(node.content, ctx))

    def _render_paragraph(self, node: Paragraph, ctx: RenderContext) -> str:
        return self.dialect.paragraph(self.render_inlines(node.content, ctx))

    def _render_heading(self, node: Heading, ctx: RenderContext) -> str:
        return self.dialect.heading(node.level, self.render_inlines(node.content, ctx), node.attributes)

    def _render_block_quote(self, node: BlockQuote, ctx: RenderContext) -> str:
        return self.dialect.block_quote(self.render_blocks(node.children, ctx))

    def _render_code_block(self, node: CodeBlock, ctx: RenderContext) -> str:
        return self.dialect.code_block(node.content, node.attributes)

    def _render_list(self, items: Sequence[Sequence[Node]], marker: str, ctx: RenderContext) -> str:
        rendered = []
        with ctx.lists.nested(marker):
            for item in items:
                rendered.append(self.dialect.list_item(ctx.lists.prefix(), self.render_blocks(item, ctx)))
        return self.dialect.list_items(rendered)

    def _render_bullet_list(self, node: BulletList, ctx: RenderContext) -> str:
        return self._render_list(node.items, self.dialect.bullet_marker, ctx)

    def _render_ordered_list(self, node: OrderedList, ctx: RenderContext) -> str:
        # Textile and TiddlyWiki numbering always restarts at 1, so start is not emitted
        return self._render_list(node.items, self.dialect.ordered_marker, ctx)

    def _render_definition_list(self, node: DefinitionList, ctx: RenderContext) -> str:
        items = [
            (self.render_inlines(term, ctx), [self.render_blocks(definition, ctx) for definition in definitions])
            for term, definitions in node.items
        ]
        return self.dialect.definition_list(items)

    def _render_row_cells(self, row: TableRow, ctx: RenderContext) -> list[str]:
        return [self._render_table_cell(cell, ctx) for cell in row.cells]

    def _render_table(self, node: Table, ctx: RenderContext) -> str:
        header = self._render_row_cells(node.header, ctx) if node.header and node.header.cells else None
        rows = [self._render_row_cells(row, ctx) for row in node.rows]
        return self.dialect.table(header, rows)

    def _render_table_row(self, node: TableRow, ctx: RenderContext) -> str:
        return self.dialect.table(None, [self._render_row_cells(node, ctx)])

    def _render_table_cell(self, node: TableCell, ctx: RenderContext) -> str:
        return self.render_blocks(node.content, ctx)

    def _render_div(self, node: Div, ctx: RenderContext) -> str:
        return self.dialect.div(self.render_blocks(node.children, ctx), node.attributes)

    def _render_raw_block(self, node: RawBlock, ctx: RenderContext) -> str:
        return self.dialect.raw(node.format, node.content)

    def _render_line_block(self, node: LineBlock, ctx: RenderContext) -> str:
        return self.dialect.line_block([self.render_inlines(line, ctx) for line in node.lines])

    def _render_figure(self, node: Figure, ctx: RenderContext) -> str:
        return self.dialect.figure(node.target, self.render_inlines(node.caption, ctx))

    # ------------------------------------------------------------------
    # Inline rules
    # ------------------------------------------------------------------

    def _render_text(self, node: Text, ctx: RenderContext) -> str:
        return self.dialect.text(node.content)

    def _render_emph(self, node: Emph, ctx: RenderContext) -> str:
        return self.dialect.emph(self.render_inlines(node.content, ctx))

    def _render_strong(self, node: Strong, ctx: RenderContext) -> str:
        return self.dialect.strong(self.render_inlines(node.content, ctx))

    def _render_subscript(self, node: Subscript, ctx: RenderContext) -> str:
        return self.dialect.subscript(self.render_inlines(node.content, ctx))

    def _render_superscript(self, node: Superscript, ctx: RenderContext) -> str:
        return self.dialect.superscript(self.render_inlines(node.content, ctx))

    def _render_small_caps(self, node: SmallCaps, ctx: RenderContext) -> str:
        return self.dialect.small_caps(self.render_inlines(node.content, ctx))

    def _render_strikeout(self, node: Strikeout, ctx: RenderContext) -> str:
        return self.dialect.strikeout(self.render_inlines(node.content, ctx))

    def _render_link(self, node: Link, ctx: RenderContext) -> str:
        return self.dialect.link(self.render_inlines(node.content, ctx), node.target, node.title)

    def _render_image(self, node: Image, ctx: RenderContext) -> str:
        return self.dialect.image(node.target, self.render_inlines(node.content, ctx), node.title)

    def _render_code(self, node: Code, ctx: RenderContext) -> str:
        return self.dialect.code(node.content, node.attributes)

    def _render_inline_math(self, node: InlineMath, ctx: RenderContext) -> str:
        return self.dialect.inline_math(node.content)

    def _render_display_math(self, node: DisplayMath, ctx: RenderContext) -> str:
        return self.dialect.display_math(node.content)

    def _render_single_quoted(self, node: SingleQuoted, ctx: RenderContext) -> str:
        return self.dialect.single_quoted(self.render_inlines(node.content, ctx))

    def _render_double_quoted(self, node: DoubleQuoted, ctx: RenderContext) -> str:
        return self.dialect.double_quoted(self.render_inlines(node.content, ctx))

    def _render_note(self, node: Note, ctx: RenderContext) -> str:
        """Store the rendered note and return its inline reference.

        The number is reserved before the body is rendered, so notes nested in
        this body are numbered after it.

        """
        index = ctx.footnotes.reserve()
        body = self.render_blocks(node.children, ctx)
        ctx.footnotes.fill(index, self.dialect.footnote_item(index, body))
        return self.dialect.footnote_reference(index)

    def _render_span(self, node: Span, ctx: RenderContext) -> str:
        return self.dialect.span(self.render_inlines(node.content, ctx), node.attributes)

    def _render_raw_inline(self, node: RawInline, ctx: RenderContext) -> str:
        return self.dialect.raw(node.format, node.content)

    def _render_cite(self, node: Cite, ctx: RenderContext) -> str:
        return self.dialect.cite(self.render_inlines(node.content, ctx), node.citation_ids)


__all__ = ["WikiRenderer"]
