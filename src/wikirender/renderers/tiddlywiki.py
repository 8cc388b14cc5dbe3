#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wikirender/renderers/tiddlywiki.py
"""TiddlyWiki rendering from the document tree."""

from __future__ import annotations

from wikirender.dialects.tiddlywiki import TiddlyWikiDialect
from wikirender.options.tiddlywiki import TiddlyWikiRendererOptions
from wikirender.registry import DialectMetadata
from wikirender.renderers.base import BaseRenderer
from wikirender.renderers.wiki import WikiRenderer
from wikirender.utils.escape import EscapeStrategy


class TiddlyWikiRenderer(WikiRenderer):
    """Render a document tree to TiddlyWiki wikitext.

    Parameters
    ----------
    options : TiddlyWikiRendererOptions or None, default = None
        TiddlyWiki rendering options
    escape : EscapeStrategy or None, default = None
        Escaping policy for text and attribute values

    Examples
    --------
        >>> from wikirender.ast import Document, Heading, Text
        >>> doc = Document(children=[Heading(level=3, content=[Text(content="Title")])])
        >>> print(TiddlyWikiRenderer().render_to_string(doc), end="")
        !!! Title

    """

    def __init__(self, options: TiddlyWikiRendererOptions | None = None, escape: EscapeStrategy | None = None):
        """Initialize the TiddlyWiki renderer with options."""
        BaseRenderer._validate_options_type(options, TiddlyWikiRendererOptions, "tiddlywiki")
        super().__init__(TiddlyWikiDialect(options or TiddlyWikiRendererOptions(), escape))
        self.options: TiddlyWikiRendererOptions = self.dialect.options


DIALECT_METADATA = DialectMetadata(
    dialect_name="tiddlywiki",
    renderer_class=TiddlyWikiRenderer,
    options_class=TiddlyWikiRendererOptions,
    extensions=[".tid"],
    description="TiddlyWiki 5 wikitext",
)
