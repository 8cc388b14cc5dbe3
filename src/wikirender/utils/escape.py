#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wikirender/utils/escape.py
"""Dialect text-escaping strategies.

Every dialect owns one :class:`EscapeStrategy`. Renderers pass literal text
(text runs, code, math) through :meth:`EscapeStrategy.escape_text` and
attribute values and URLs through :meth:`EscapeStrategy.escape_attribute`.

The shipped Redmine and TiddlyWiki dialects use :class:`IdentityEscape`:
their output is meant to pass source text through verbatim, including any
markup characters the author typed. A dialect that needs real escaping
supplies another strategy, for example :class:`BackslashEscape`, and nothing
else in the renderer changes.

"""

from __future__ import annotations

from typing import Iterable


class EscapeStrategy:
    """Base escaping policy. Subclasses override one or both methods."""

    def escape_text(self, text: str) -> str:
        """Escape literal text content.

        Parameters
        ----------
        text : str
            Text to escape

        Returns
        -------
        str
            Escaped text

        """
        return text

    def escape_attribute(self, text: str) -> str:
        """Escape text placed inside an attribute value or link target.

        Parameters
        ----------
        text : str
            Text to escape

        Returns
        -------
        str
            Escaped text

        """
        return text


class IdentityEscape(EscapeStrategy):
    """Escape nothing."""


class BackslashEscape(EscapeStrategy):
    r"""Backslash-escape a set of dialect metacharacters.

    Parameters
    ----------
    metacharacters : iterable of str
        Characters to escape in text content. Backslash itself is always
        escaped first.

    Examples
    --------
        >>> BackslashEscape("*_").escape_text("2*3_4")
        '2\\*3\\_4'
        >>> BackslashEscape("*").escape_attribute('say "hi"')
        'say &quot;hi&quot;'

    """

    def __init__(self, metacharacters: Iterable[str]):
        """Initialize the strategy with the characters to escape."""
        self.metacharacters = tuple(dict.fromkeys(ch for ch in metacharacters if ch != "\\"))

    def escape_text(self, text: str) -> str:
        """Prefix every metacharacter (and backslash) with a backslash."""
        if not text:
            return text
        result = text.replace("\\", "\\\\")
        for char in self.metacharacters:
            result = result.replace(char, "\\" + char)
        return result

    def escape_attribute(self, text: str) -> str:
        """Escape characters that would terminate a double-quoted attribute."""
        return text.replace("&", "&amp;").replace('"', "&quot;")


__all__ = ["EscapeStrategy", "IdentityEscape", "BackslashEscape"]
