#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderer option classes."""

from wikirender.options.base import BaseRendererOptions, CloneFrozenMixin
from wikirender.options.redmine import RedmineRendererOptions
from wikirender.options.tiddlywiki import TiddlyWikiRendererOptions

__all__ = [
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "RedmineRendererOptions",
    "TiddlyWikiRendererOptions",
]
