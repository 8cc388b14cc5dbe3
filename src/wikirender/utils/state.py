#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wikirender/utils/state.py
"""Mutable state scoped to a single render call.

A renderer creates one :class:`RenderContext` per document and threads it
through every rule. Nothing here is module-level, so renders running in
parallel never share a stack or a footnote store.

"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator

from wikirender.exceptions import RenderingError
from wikirender.utils.footnotes import FootnoteCollector


class ListNestingStack:
    """Markers of the lists currently open, outermost first.

    The prefix of a list item is every open marker concatenated, so an
    item two bullet lists deep gets ``**`` and a numbered list inside a
    bullet list gets ``*#``.

    Examples
    --------
        >>> stack = ListNestingStack()
        >>> with stack.nested("*"):
        ...     with stack.nested("#"):
        ...         stack.prefix()
        '*#'
        >>> stack.is_open
        False

    """

    def __init__(self) -> None:
        """Initialize an empty stack."""
        self._markers: list[str] = []

    def __len__(self) -> int:
        """Return the current nesting depth."""
        return len(self._markers)

    @property
    def depth(self) -> int:
        """Current list nesting depth."""
        return len(self._markers)

    @property
    def is_open(self) -> bool:
        """Whether any list is currently being rendered."""
        return bool(self._markers)

    def push(self, marker: str) -> None:
        """Enter a list using ``marker``."""
        self._markers.append(marker)

    def pop(self) -> str:
        """Leave the innermost list and return its marker.

        Raises
        ------
        RenderingError
            If no list is open

        """
        if not self._markers:
            raise RenderingError("List nesting stack underflow", rendering_stage="lists")
        return self._markers.pop()

    def prefix(self) -> str:
        """Return all open markers concatenated, outermost first."""
        return "".join(self._markers)

    @contextmanager
    def nested(self, marker: str) -> Iterator[None]:
        """Push ``marker`` for the duration of the block, popping it even on error."""
        self.push(marker)
        try:
            yield
        finally:
            self.pop()


@dataclass
class RenderContext:
    """Per-render mutable state.

    Parameters
    ----------
    image_format : str
        Image format resolved from document metadata or options
    image_mime_type : str
        MIME type for ``image_format``. The built-in rules emit bare image
        paths and never read it; it is there for rules added with
        ``WikiRenderer.register_rule`` that need to label embedded images.

    """

    image_format: str = "png"
    image_mime_type: str = "image/png"
    lists: ListNestingStack = field(default_factory=ListNestingStack)
    footnotes: FootnoteCollector = field(default_factory=FootnoteCollector)
    reported_kinds: set[str] = field(default_factory=set)

    def mark_reported(self, kind: str) -> bool:
        """Record that a missing rule for ``kind`` was reported.

        Returns True the first time ``kind`` is seen in this render, False
        afterwards.
        """
        if kind in self.reported_kinds:
            return False
        self.reported_kinds.add(kind)
        return True

    def block_separator(self) -> str:
        """Return the separator for a block sequence rendered right now.

        Blocks inside an open list are separated by one line break so the
        item stays on consecutive lines; elsewhere blocks get a blank line.

        """
        return "\n" if self.lists.is_open else "\n\n"


__all__ = ["ListNestingStack", "RenderContext"]
