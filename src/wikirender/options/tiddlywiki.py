#  Copyright (c) 2025 Tom Villani, Ph.D.

# wikirender/options/tiddlywiki.py
"""Configuration options for TiddlyWiki rendering."""

from __future__ import annotations

from dataclasses import dataclass, field

from wikirender.constants import DEFAULT_TIDDLYWIKI_DIAGRAM_LANGUAGES
from wikirender.options.base import BaseRendererOptions


@dataclass(frozen=True)
class TiddlyWikiRendererOptions(BaseRendererOptions):
    """Configuration options for AST-to-TiddlyWiki rendering.

    Parameters
    ----------
    diagram_languages : tuple of str, default ("mermaid",)
        Code block languages rendered through the matching diagram widget
        (``<$mermaid text="...">``) instead of a fenced code block.

    Notes
    -----
    TiddlyWiki has no table-of-contents macro equivalent to a bare
    paragraph, so a table-of-contents paragraph always renders as empty
    text.

    """

    diagram_languages: tuple[str, ...] = field(
        default=DEFAULT_TIDDLYWIKI_DIAGRAM_LANGUAGES,
        metadata={
            "help": "Code block languages rendered as diagram widgets",
            "cli_name": "diagram-languages",
            "importance": "advanced",
        },
    )

    def __post_init__(self) -> None:
        """Validate options and normalize ``diagram_languages`` to a tuple."""
        super().__post_init__()
        if isinstance(self.diagram_languages, str):
            raise ValueError("diagram_languages must be a sequence of language names, not a string")
        object.__setattr__(self, "diagram_languages", tuple(self.diagram_languages))
