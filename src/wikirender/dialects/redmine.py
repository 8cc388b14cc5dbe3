#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wikirender/dialects/redmine.py
"""Redmine wiki markup (Textile flavour).

Redmine renders Textile with HTML allowed inline, so anything Textile cannot
express (subscripts, code spans with attributes, definition lists, footnote
lists) is emitted as HTML.

"""

from __future__ import annotations

from typing import Mapping, Optional, Sequence

from wikirender.dialects.base import Dialect
from wikirender.options.redmine import RedmineRendererOptions
from wikirender.utils.escape import EscapeStrategy


class RedmineDialect(Dialect):
    """Markup rules for Redmine.

    Parameters
    ----------
    options : RedmineRendererOptions or None, default = None
        Redmine rendering options
    escape : EscapeStrategy or None, default = None
        Escaping policy (identity by default)

    Notes
    -----
    Emphasis and strong emphasis both render as ``*text*``. Hard line breaks
    render as ``---``. Both follow the established output of this writer and
    are kept for compatibility with existing pages.

    """

    name = "redmine"
    options_class = RedmineRendererOptions

    def __init__(self, options: RedmineRendererOptions | None = None, escape: EscapeStrategy | None = None):
        """Initialize the Redmine dialect."""
        options = options or RedmineRendererOptions()
        super().__init__(options, escape)
        self.options: RedmineRendererOptions = options

    def normalize_image_path(self, target: str) -> str:
        """Strip a single leading ``/`` from an image path when enabled.

        Examples
        --------
            >>> RedmineDialect().normalize_image_path("/img/x.png")
            'img/x.png'
            >>> RedmineDialect().normalize_image_path("//cdn/x.png")
            '/cdn/x.png'

        """
        if self.options.normalize_image_paths and target.startswith("/"):
            return target[1:]
        return target

    def emph(self, content: str) -> str:
        return f"*{content}*"

    def strong(self, content: str) -> str:
        return f"*{content}*"

    def subscript(self, content: str) -> str:
        return f"<sub>{content}</sub>"

    def superscript(self, content: str) -> str:
        return f"<sup>{content}</sup>"

    def strikeout(self, content: str) -> str:
        return f"-{content}-"

    def link(self, label: str, target: str, title: str = "") -> str:
        return f'"{label}":{self.escape.escape_attribute(target)}'

    def image(self, target: str, alt: str = "", title: str = "") -> str:
        return f"!{self.escape.escape_attribute(self.normalize_image_path(target))}!"

    def code(self, code: str, attributes: Mapping[str, str]) -> str:
        return f"<code{self.attributes(attributes)}>{self.escape.escape_text(code)}</code>"

    def table_of_contents(self) -> str:
        return self.options.toc_directive

    def heading(self, level: int, content: str, attributes: Mapping[str, str]) -> str:
        return f"h{level}. {content}"

    def block_quote(self, content: str) -> str:
        return f"bq. {content}"

    def code_block(self, code: str, attributes: Mapping[str, str]) -> str:
        return f"<pre><code{self.attributes(attributes)}>{code}\n</code></pre>"

    def definition_list(self, items: Sequence[tuple[str, Sequence[str]]]) -> str:
        return "<dl>\n" + self.definition_entries(items) + "\n</dl>"

    def table(self, header: Optional[Sequence[str]], rows: Sequence[Sequence[str]]) -> str:
        """Render a Textile table; header cells carry the ``_.`` modifier.

        A header row without cells is left out, and the last row has no
        trailing newline; the block separator supplies the line break.
        """
        lines = []
        if header:
            lines.append("|" + "".join(f"_. {cell}|" for cell in header))
        for row in rows:
            lines.append("|" + "".join(f"{cell}|" for cell in row))
        return "\n".join(lines)

    def figure(self, target: str, caption: str) -> str:
        return f"!{self.escape.escape_attribute(self.normalize_image_path(target))}!"
