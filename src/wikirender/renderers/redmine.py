#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wikirender/renderers/redmine.py
"""Redmine rendering from the document tree.

This module provides the RedmineRenderer class, which binds the wiki
rendering engine to the Redmine (Textile) dialect.

"""

from __future__ import annotations

from wikirender.dialects.redmine import RedmineDialect
from wikirender.options.redmine import RedmineRendererOptions
from wikirender.registry import DialectMetadata
from wikirender.renderers.base import BaseRenderer
from wikirender.renderers.wiki import WikiRenderer
from wikirender.utils.escape import EscapeStrategy


class RedmineRenderer(WikiRenderer):
    """Render a document tree to Redmine wiki markup.

    Parameters
    ----------
    options : RedmineRendererOptions or None, default = None
        Redmine rendering options
    escape : EscapeStrategy or None, default = None
        Escaping policy for text and attribute values

    Examples
    --------
        >>> from wikirender.ast import Document, Heading, Text
        >>> doc = Document(children=[Heading(level=1, content=[Text(content="Title")])])
        >>> print(RedmineRenderer().render_to_string(doc), end="")
        h1. Title

    """

    def __init__(self, options: RedmineRendererOptions | None = None, escape: EscapeStrategy | None = None):
        """Initialize the Redmine renderer with options."""
        BaseRenderer._validate_options_type(options, RedmineRendererOptions, "redmine")
        super().__init__(RedmineDialect(options or RedmineRendererOptions(), escape))
        self.options: RedmineRendererOptions = self.dialect.options


# Dialect metadata for registry auto-discovery
DIALECT_METADATA = DialectMetadata(
    dialect_name="redmine",
    renderer_class=RedmineRenderer,
    options_class=RedmineRendererOptions,
    extensions=[".textile", ".redmine"],
    description="Redmine wiki markup (Textile with inline HTML)",
)
