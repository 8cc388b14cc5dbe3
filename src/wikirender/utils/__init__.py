#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wikirender/utils/__init__.py
"""Utility modules for the wikirender package.

This package holds the escaping strategies, the attribute serializer, the
per-render state objects and the output writing helpers used by the
renderers.
"""

from wikirender.utils.attributes import serialize_attributes
from wikirender.utils.escape import BackslashEscape, EscapeStrategy, IdentityEscape
from wikirender.utils.footnotes import FootnoteCollector
from wikirender.utils.state import ListNestingStack, RenderContext

__all__ = [
    "BackslashEscape",
    "EscapeStrategy",
    "FootnoteCollector",
    "IdentityEscape",
    "ListNestingStack",
    "RenderContext",
    "serialize_attributes",
]
