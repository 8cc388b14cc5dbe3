#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wikirender/dialects/tiddlywiki.py
"""TiddlyWiki 5 wikitext."""

from __future__ import annotations

from typing import Mapping, Optional, Sequence

from wikirender.ast.utils import first_class
from wikirender.dialects.base import Dialect
from wikirender.options.tiddlywiki import TiddlyWikiRendererOptions
from wikirender.utils.escape import EscapeStrategy


class TiddlyWikiDialect(Dialect):
    """Markup rules for TiddlyWiki.

    Parameters
    ----------
    options : TiddlyWikiRendererOptions or None, default = None
        TiddlyWiki rendering options
    escape : EscapeStrategy or None, default = None
        Escaping policy (identity by default)

    """

    name = "tiddlywiki"
    options_class = TiddlyWikiRendererOptions

    def __init__(self, options: TiddlyWikiRendererOptions | None = None, escape: EscapeStrategy | None = None):
        """Initialize the TiddlyWiki dialect."""
        options = options or TiddlyWikiRendererOptions()
        super().__init__(options, escape)
        self.options: TiddlyWikiRendererOptions = options

    def emph(self, content: str) -> str:
        return f"''{content}''"

    def strong(self, content: str) -> str:
        return f"''{content}''"

    def subscript(self, content: str) -> str:
        return f",,{content},,"

    def superscript(self, content: str) -> str:
        return f"^^{content}^^"

    def strikeout(self, content: str) -> str:
        return f"~~{content}~~"

    def link(self, label: str, target: str, title: str = "") -> str:
        return f"[[{label}|{self.escape.escape_attribute(target)}]]"

    def image(self, target: str, alt: str = "", title: str = "") -> str:
        # Paths are kept as-is; TiddlyWiki resolves them relative to the wiki.
        return f"[img[{self.escape.escape_attribute(target)}]]"

    def code(self, code: str, attributes: Mapping[str, str]) -> str:
        return f"`{self.escape.escape_text(code)}`"

    def table_of_contents(self) -> str:
        return ""

    def heading(self, level: int, content: str, attributes: Mapping[str, str]) -> str:
        return "!" * level + " " + content

    def block_quote(self, content: str) -> str:
        return f"<<<\n{content}\n<<<"

    def code_block(self, code: str, attributes: Mapping[str, str]) -> str:
        """Render a fenced code block, or a diagram widget for diagram languages.

        Examples
        --------
            >>> TiddlyWikiDialect().code_block("graph TD; A-->B", {"class": "mermaid"})
            '<$mermaid text="\\ngraph TD; A-->B"></$mermaid>'

        """
        language = first_class(attributes)
        if language and language in self.options.diagram_languages:
            return f'<${language} text="\n{code}"></${language}>'
        return f"```{language}\n{code}\n```"

    def definition_list(self, items: Sequence[tuple[str, Sequence[str]]]) -> str:
        return "\n" + self.definition_entries(items) + "\n"

    def table(self, header: Optional[Sequence[str]], rows: Sequence[Sequence[str]]) -> str:
        """Render a TiddlyWiki table; the header row ends with the ``h`` row marker.

        A header row without cells is left out, and the last row has no
        trailing newline; the block separator supplies the line break.
        """
        lines = []
        if header:
            lines.append("|" + "".join(f"{cell}|" for cell in header) + "h")
        for row in rows:
            lines.append("|" + "".join(f"{cell}|" for cell in row))
        return "\n".join(lines)

    def figure(self, target: str, caption: str) -> str:
        target = self.escape.escape_attribute(target)
        if caption:
            return f"[img[{caption}|{target}]]"
        return f"[img[{target}]]"
