#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wikirender/utils/attributes.py
"""Serialization of attribute sets into markup attribute fragments."""

from __future__ import annotations

from typing import Mapping, Optional

from wikirender.utils.escape import EscapeStrategy, IdentityEscape

# Keys emitted ahead of the alphabetically sorted remainder
_LEADING_KEYS = ("id", "class")


def serialize_attributes(attributes: Mapping[str, Optional[str]], escape: EscapeStrategy | None = None) -> str:
    """Turn an attribute set into a ``' key="value"'`` fragment.

    Entries with empty or missing values are omitted, so an element without a
    class never renders ``class=""``. The order is deterministic regardless of
    how the mapping was built: ``id``, ``class``, then the other keys sorted.

    Parameters
    ----------
    attributes : Mapping[str, str or None]
        Attribute set
    escape : EscapeStrategy or None, default = None
        Strategy applied to each value via ``escape_attribute``

    Returns
    -------
    str
        Fragment with a leading space per attribute, or ``""``

    Examples
    --------
        >>> serialize_attributes({"class": "python", "id": "ex1", "data-line": ""})
        ' id="ex1" class="python"'
        >>> serialize_attributes({"class": ""})
        ''

    """
    escape = escape or IdentityEscape()
    ordered_keys = [key for key in _LEADING_KEYS if key in attributes]
    ordered_keys += sorted(key for key in attributes if key not in _LEADING_KEYS)

    parts = []
    for key in ordered_keys:
        value = attributes[key]
        if value:
            parts.append(f' {key}="{escape.escape_attribute(str(value))}"')
    return "".join(parts)


__all__ = ["serialize_attributes"]
