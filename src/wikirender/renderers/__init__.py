#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderers from the document tree to wiki markup."""

from wikirender.renderers.base import BaseRenderer
from wikirender.renderers.dispatch import DispatchTable
from wikirender.renderers.redmine import RedmineRenderer
from wikirender.renderers.tiddlywiki import TiddlyWikiRenderer
from wikirender.renderers.wiki import WikiRenderer

__all__ = ["BaseRenderer", "DispatchTable", "RedmineRenderer", "TiddlyWikiRenderer", "WikiRenderer"]
