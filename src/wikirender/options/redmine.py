#  Copyright (c) 2025 Tom Villani, Ph.D.

# wikirender/options/redmine.py
"""Configuration options for Redmine (Textile) rendering."""

from __future__ import annotations

from dataclasses import dataclass, field

from wikirender.constants import DEFAULT_REDMINE_TOC_DIRECTIVE
from wikirender.options.base import BaseRendererOptions


@dataclass(frozen=True)
class RedmineRendererOptions(BaseRendererOptions):
    """Configuration options for AST-to-Redmine rendering.

    Parameters
    ----------
    normalize_image_paths : bool, default True
        Strip a single leading ``/`` from image URLs, so that site-absolute
        paths become Redmine attachment names.
    toc_directive : str, default "{{toc}}"
        Macro emitted in place of a table-of-contents paragraph.

    Examples
    --------
        >>> from wikirender.renderers.redmine import RedmineRenderer
        >>> renderer = RedmineRenderer(RedmineRendererOptions(normalize_image_paths=False))

    """

    normalize_image_paths: bool = field(
        default=True,
        metadata={
            "help": "Strip one leading '/' from image URLs",
            "cli_name": "no-normalize-image-paths",
            "importance": "core",
        },
    )
    toc_directive: str = field(
        default=DEFAULT_REDMINE_TOC_DIRECTIVE,
        metadata={"help": "Macro emitted for a table-of-contents paragraph", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate options by calling parent validation."""
        super().__post_init__()
