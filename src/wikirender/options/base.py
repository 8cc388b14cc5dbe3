"""Base classes for renderer options.

This module defines the foundation classes for the dialect-specific options
used by the wikirender renderers.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from wikirender.constants import (
    DEFAULT_IMAGE_FORMAT,
    DEFAULT_RAW_FORMAT,
    DEFAULT_TOC_SENTINEL,
    IMAGE_MIME_TYPES,
)


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Copy-with-changes support for frozen option dataclasses."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Return a copy with the given fields replaced.

        ``__post_init__`` runs again on the copy, so invalid replacement
        values raise ``ValueError`` just as they do at construction.
        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Options every wiki dialect understands.

    Parameters
    ----------
    default_image_format : {"jpeg", "jpg", "gif", "png", "svg"}, default "png"
        Image format used when the document metadata has no ``image_format``.
    raw_format : str, default "html"
        Format of raw inline/block content that is passed through. Raw
        content declared for any other format is dropped.
    toc_sentinel : str, default "[toc]"
        Paragraph text (compared case-insensitively against the whole
        paragraph) that requests a table of contents.

    Notes
    -----
    Subclasses define dialect-specific options as frozen dataclass fields.

    """

    default_image_format: str = field(
        default=DEFAULT_IMAGE_FORMAT,
        metadata={
            "help": "Image format used when document metadata does not set image_format",
            "cli_name": "image-format",
            "choices": list(IMAGE_MIME_TYPES),
            "importance": "core",
        },
    )
    raw_format: str = field(
        default=DEFAULT_RAW_FORMAT,
        metadata={"help": "Raw content format passed through unchanged", "importance": "advanced"},
    )
    toc_sentinel: str = field(
        default=DEFAULT_TOC_SENTINEL,
        metadata={"help": "Paragraph text that requests a table of contents", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate base renderer options.

        Raises
        ------
        ValueError
            If any field value is invalid.

        """
        if self.default_image_format not in IMAGE_MIME_TYPES:
            raise ValueError(
                f"default_image_format must be one of {', '.join(IMAGE_MIME_TYPES)}, "
                f"got {self.default_image_format!r}"
            )
        if not self.raw_format.strip():
            raise ValueError("raw_format must not be empty")
        if not self.toc_sentinel.strip():
            raise ValueError("toc_sentinel must not be empty")
