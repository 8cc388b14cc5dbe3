#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the wikirender library.

Constants are organized by category:
1. Type Definitions
2. Renderer Configuration
3. Dialect Markup
4. Command Line
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

DialectName = Literal["redmine", "tiddlywiki"]
ImageFormat = Literal["jpeg", "jpg", "gif", "png", "svg"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# =============================================================================
# Renderer Configuration
# =============================================================================

# Metadata key consulted for the image format
IMAGE_FORMAT_METADATA_KEY = "image_format"

IMAGE_MIME_TYPES: dict[str, str] = {
    "jpeg": "image/jpeg",
    "jpg": "image/jpeg",
    "gif": "image/gif",
    "png": "image/png",
    "svg": "image/svg+xml",
}
DEFAULT_IMAGE_FORMAT: ImageFormat = "png"

# Raw inline/block content is passed through only for this format
DEFAULT_RAW_FORMAT = "html"

# A paragraph consisting of exactly this text (any case) asks for a table of contents
DEFAULT_TOC_SENTINEL = "[toc]"

# =============================================================================
# Dialect Markup
# =============================================================================

BULLET_MARKER = "*"
ORDERED_MARKER = "#"

FOOTNOTE_BACKREF_SYMBOL = "&#8617;"
FOOTNOTE_LIST_OPEN = '<ol class="footnotes">'
FOOTNOTE_LIST_CLOSE = "</ol>"

DEFAULT_REDMINE_TOC_DIRECTIVE = "{{toc}}"
DEFAULT_TIDDLYWIKI_DIAGRAM_LANGUAGES: tuple[str, ...] = ("mermaid",)

# =============================================================================
# Command Line
# =============================================================================

CONFIG_FILENAMES = [".wikirender.toml", ".wikirender.yaml", ".wikirender.yml", ".wikirender.json"]
PYPROJECT_TOOL_SECTION = "wikirender"
DEFAULT_LOG_LEVEL: LogLevel = "WARNING"

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_FORMAT_ERROR = 5
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7
