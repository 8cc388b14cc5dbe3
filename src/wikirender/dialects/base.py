#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wikirender/dialects/base.py
"""Base class for dialect rule tables.

A dialect turns already-rendered fragments into markup. It never sees the
document tree and never touches render state: the engine in
:mod:`wikirender.renderers.wiki` walks the tree, keeps the list stack and the
footnote store, and calls one dialect method per node with strings.

Rules both shipped dialects share (raw HTML spans, math delimiters, quote
entities, the HTML footnote block, ...) are implemented here. Dialects
override what differs.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, Mapping, Optional, Sequence

from wikirender.constants import (
    BULLET_MARKER,
    FOOTNOTE_BACKREF_SYMBOL,
    FOOTNOTE_LIST_CLOSE,
    FOOTNOTE_LIST_OPEN,
    ORDERED_MARKER,
)
from wikirender.options.base import BaseRendererOptions
from wikirender.utils.attributes import serialize_attributes
from wikirender.utils.escape import EscapeStrategy, IdentityEscape


class Dialect(ABC):
    """Markup rules for one target dialect.

    Parameters
    ----------
    options : BaseRendererOptions
        Renderer options. Dialect subclasses read their own option fields.
    escape : EscapeStrategy or None, default = None
        Escaping policy. Defaults to :class:`IdentityEscape`.

    Attributes
    ----------
    name : str
        Dialect name used on the command line and in the registry
    bullet_marker : str
        List marker pushed for bullet lists
    ordered_marker : str
        List marker pushed for ordered lists
    options_class : type
        Options class the dialect reads its settings from

    """

    name: ClassVar[str] = ""
    bullet_marker: ClassVar[str] = BULLET_MARKER
    ordered_marker: ClassVar[str] = ORDERED_MARKER
    options_class: ClassVar[type[BaseRendererOptions]] = BaseRendererOptions

    def __init__(self, options: BaseRendererOptions, escape: EscapeStrategy | None = None):
        """Initialize the dialect with options and an escaping policy."""
        self.options = options
        self.escape = escape or IdentityEscape()

    def attributes(self, attributes: Mapping[str, Optional[str]]) -> str:
        """Serialize an attribute set with this dialect's escaping."""
        return serialize_attributes(attributes, self.escape)

    # ------------------------------------------------------------------
    # Raw passthrough
    # ------------------------------------------------------------------

    def accepts_raw(self, raw_format: str) -> bool:
        """Return True if raw content declared as ``raw_format`` is passed through."""
        return raw_format.strip().lower() == self.options.raw_format.strip().lower()

    def raw(self, raw_format: str, content: str) -> str:
        """Pass raw content through, or drop it when it targets another format."""
        return content if self.accepts_raw(raw_format) else ""

    # ------------------------------------------------------------------
    # Inline rules
    # ------------------------------------------------------------------

    def text(self, text: str) -> str:
        return self.escape.escape_text(text)

    def space(self) -> str:
        return " "

    def soft_break(self) -> str:
        return "\n"

    def line_break(self) -> str:
        return "---"

    @abstractmethod
    def emph(self, content: str) -> str:
        """Render emphasized text."""

    @abstractmethod
    def strong(self, content: str) -> str:
        """Render strongly emphasized text."""

    @abstractmethod
    def subscript(self, content: str) -> str:
        """Render subscript text."""

    @abstractmethod
    def superscript(self, content: str) -> str:
        """Render superscript text."""

    @abstractmethod
    def strikeout(self, content: str) -> str:
        """Render struck-out text."""

    def small_caps(self, content: str) -> str:
        return f'<span style="font-variant: small-caps;">{content}</span>'

    @abstractmethod
    def link(self, label: str, target: str, title: str = "") -> str:
        """Render a hyperlink. ``title`` is accepted but not emitted by the shipped dialects."""

    @abstractmethod
    def image(self, target: str, alt: str = "", title: str = "") -> str:
        """Render an inline image."""

    @abstractmethod
    def code(self, code: str, attributes: Mapping[str, str]) -> str:
        """Render an inline code span."""

    def inline_math(self, tex: str) -> str:
        return "\\(" + self.escape.escape_text(tex) + "\\)"

    def display_math(self, tex: str) -> str:
        return "\\[" + self.escape.escape_text(tex) + "\\]"

    def single_quoted(self, content: str) -> str:
        return f"&lsquo;{content}&rsquo;"

    def double_quoted(self, content: str) -> str:
        return f"&ldquo;{content}&rdquo;"

    def span(self, content: str, attributes: Mapping[str, str]) -> str:
        return f"<span{self.attributes(attributes)}>{content}</span>"

    def cite(self, content: str, citation_ids: Sequence[str]) -> str:
        ids = self.escape.escape_attribute(",".join(citation_ids))
        return f'<span class="cite" data-citation-ids="{ids}">{content}</span>'

    # ------------------------------------------------------------------
    # Footnotes
    # ------------------------------------------------------------------

    def footnote_reference(self, index: int) -> str:
        """Inline forward reference to footnote ``index``."""
        return f'<a id="fnref{index}" href="#fn{index}"><sup>{index}</sup></a>'

    def footnote_backreference(self, index: int) -> str:
        """Link from footnote ``index`` back to its reference."""
        return f'<a href="#fnref{index}">{FOOTNOTE_BACKREF_SYMBOL}</a>'

    def footnote_item(self, index: int, body: str) -> str:
        """Footnote list entry: the body with the back-reference appended at its end."""
        return f'<li id="fn{index}">{body} {self.footnote_backreference(index)}</li>'

    def footnote_list(self, items: Sequence[str]) -> str:
        """Wrap the collected footnote entries, one per line."""
        return "\n".join([FOOTNOTE_LIST_OPEN, *items, FOOTNOTE_LIST_CLOSE])

    # ------------------------------------------------------------------
    # Block rules
    # ------------------------------------------------------------------

    def plain(self, content: str) -> str:
        return content

    def paragraph(self, content: str) -> str:
        """Render a paragraph, replacing a table-of-contents sentinel paragraph.

        The whole rendered paragraph must equal the sentinel (ignoring case);
        a paragraph that merely contains it is left alone.

        """
        if content.lower() == self.options.toc_sentinel.lower():
            return self.table_of_contents()
        return content

    @abstractmethod
    def table_of_contents(self) -> str:
        """Directive emitted for a table-of-contents paragraph (may be empty)."""

    @abstractmethod
    def heading(self, level: int, content: str, attributes: Mapping[str, str]) -> str:
        """Render a heading. Levels are never clamped."""

    @abstractmethod
    def block_quote(self, content: str) -> str:
        """Render a block quote around already-rendered blocks."""

    def horizontal_rule(self) -> str:
        return "---"

    def line_block(self, lines: Sequence[str]) -> str:
        return '<div style="white-space: pre-line;">' + "\n".join(lines) + "</div>"

    @abstractmethod
    def code_block(self, code: str, attributes: Mapping[str, str]) -> str:
        """Render a literal code block."""

    def list_item(self, prefix: str, content: str) -> str:
        """Prefix an item with every open list marker and one space."""
        return f"{prefix} {content}"

    def list_items(self, items: Sequence[str]) -> str:
        return "\n".join(items)

    def definition_entries(self, items: Sequence[tuple[str, Sequence[str]]]) -> str:
        """Render ``<dt>``/``<dd>`` pairs; each definition is its own sibling ``<dd>``."""
        entries = []
        for term, definitions in items:
            entries.append(f"<dt>{term}</dt>\n<dd>" + "</dd>\n<dd>".join(definitions) + "</dd>")
        return "\n".join(entries)

    @abstractmethod
    def definition_list(self, items: Sequence[tuple[str, Sequence[str]]]) -> str:
        """Render a definition list from rendered terms and definitions."""

    @abstractmethod
    def table(self, header: Optional[Sequence[str]], rows: Sequence[Sequence[str]]) -> str:
        """Render a table from rendered header cells and body rows.

        Caption, alignment and column widths are not part of the shipped
        dialects' table syntax and are not passed in.

        """

    def div(self, content: str, attributes: Mapping[str, str]) -> str:
        return f"<div{self.attributes(attributes)}>\n{content}</div>"

    @abstractmethod
    def figure(self, target: str, caption: str) -> str:
        """Render a captioned image block."""
