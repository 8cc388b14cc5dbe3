#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wikirender/renderers/dispatch.py
"""Node-kind to rendering-rule lookup.

Rules are plain callables ``rule(node, ctx) -> str``. Looking up a kind that
has no rule never fails: the table hands back a fallback rule that reports
the kind through the logging module and renders nothing. The table itself
is immutable during a render; which kinds were already reported is tracked
on the :class:`RenderContext`, so every document gets its own report.

"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Iterator

from wikirender.ast.nodes import Node

if TYPE_CHECKING:
    from wikirender.utils.state import RenderContext

logger = logging.getLogger(__name__)

Rule = Callable[[Node, "RenderContext"], str]


class DispatchTable:
    """Mapping from node kind to rendering rule.

    Examples
    --------
        >>> table = DispatchTable()
        >>> table.register("Text", lambda node, ctx: node.content)
        >>> "Text" in table
        True
        >>> table.lookup("Widget")(None, None)
        ''

    """

    def __init__(self) -> None:
        """Initialize an empty table."""
        self._rules: dict[str, Rule] = {}

    def __contains__(self, kind: object) -> bool:
        """Return True if a rule is registered for ``kind``."""
        return kind in self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def register(self, kind: str, rule: Rule) -> None:
        """Register ``rule`` for ``kind``, replacing any existing rule."""
        self._rules[kind] = rule

    def kinds(self) -> Iterator[str]:
        """Iterate over the registered node kinds."""
        return iter(sorted(self._rules))

    def lookup(self, kind: str) -> Rule:
        """Return the rule for ``kind``, or the fallback rule if none is registered."""
        rule = self._rules.get(kind)
        if rule is not None:
            return rule
        return self._fallback(kind)

    @staticmethod
    def _fallback(kind: str) -> Rule:
        def render_nothing(node: Node, ctx: "RenderContext | None") -> str:
            # without a context there is nothing to deduplicate against
            if ctx is None or ctx.mark_reported(kind):
                logger.warning(f"No rendering rule for node kind '{kind}'; rendering it as empty text")
            return ""

        return render_nothing


__all__ = ["DispatchTable", "Rule"]
