#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Dialect rule tables.

Examples
--------
    >>> from wikirender.dialects import get_dialect_class
    >>> get_dialect_class("redmine")().heading(2, "Title", {})
    'h2. Title'

"""

from __future__ import annotations

from wikirender.dialects.base import Dialect
from wikirender.dialects.redmine import RedmineDialect
from wikirender.dialects.tiddlywiki import TiddlyWikiDialect
from wikirender.exceptions import FormatError

DIALECTS: dict[str, type[Dialect]] = {
    RedmineDialect.name: RedmineDialect,
    TiddlyWikiDialect.name: TiddlyWikiDialect,
}


def get_dialect_class(name: str) -> type[Dialect]:
    """Return the dialect class registered under ``name`` (case-insensitive).

    Raises
    ------
    FormatError
        If no dialect has that name

    """
    try:
        return DIALECTS[name.strip().lower()]
    except KeyError:
        raise FormatError(format_type=name, supported_formats=sorted(DIALECTS)) from None


__all__ = ["DIALECTS", "Dialect", "RedmineDialect", "TiddlyWikiDialect", "get_dialect_class"]
