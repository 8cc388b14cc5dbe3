#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wikirender/utils/footnotes.py
"""Ordered, per-render storage of rendered footnotes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from wikirender.exceptions import RenderingError


@dataclass
class FootnoteCollector:
    """Store rendered footnotes numbered by first-reference order.

    A note's number is taken with :meth:`reserve` *before* its body is
    rendered, and the body is stored later with :meth:`fill`. A note
    referenced from inside another note's body therefore gets the next
    number after its parent, and entry ``N`` always belongs to the ``N``-th
    reference met in document order.

    Examples
    --------
        >>> notes = FootnoteCollector()
        >>> outer = notes.reserve()
        >>> inner = notes.reserve()
        >>> notes.fill(inner, "<li>inner</li>")
        >>> notes.fill(outer, "<li>outer</li>")
        >>> notes.notes()
        ['<li>outer</li>', '<li>inner</li>']

    """

    _slots: List[Optional[str]] = field(default_factory=list, init=False, repr=False)

    def __len__(self) -> int:
        """Return the number of footnotes referenced so far."""
        return len(self._slots)

    @property
    def has_notes(self) -> bool:
        """Whether any footnote has been referenced."""
        return bool(self._slots)

    def reserve(self) -> int:
        """Claim the next 1-based footnote number."""
        self._slots.append(None)
        return len(self._slots)

    def fill(self, index: int, body: str) -> None:
        """Store the rendered body for a reserved footnote number.

        Raises
        ------
        RenderingError
            If ``index`` was never reserved or is already filled

        """
        if not 1 <= index <= len(self._slots):
            raise RenderingError(f"Footnote {index} was never reserved", rendering_stage="footnotes")
        if self._slots[index - 1] is not None:
            raise RenderingError(f"Footnote {index} is already filled", rendering_stage="footnotes")
        self._slots[index - 1] = body

    def notes(self) -> List[str]:
        """Return the stored footnotes in number order.

        Raises
        ------
        RenderingError
            If a reserved footnote was never filled

        """
        missing = [str(i) for i, body in enumerate(self._slots, start=1) if body is None]
        if missing:
            raise RenderingError(f"Footnotes never filled: {', '.join(missing)}", rendering_stage="footnotes")
        return [body for body in self._slots if body is not None]
