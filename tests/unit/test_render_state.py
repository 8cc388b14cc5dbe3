#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for per-render state: list nesting and footnote storage."""

import pytest

from wikirender.exceptions import RenderingError
from wikirender.utils.footnotes import FootnoteCollector
from wikirender.utils.state import ListNestingStack, RenderContext


@pytest.mark.unit
class TestListNestingStack:
    """Test the list marker stack."""

    def test_empty(self) -> None:
        stack = ListNestingStack()
        assert stack.prefix() == ""
        assert stack.depth == 0
        assert not stack.is_open

    def test_push_and_pop(self) -> None:
        stack = ListNestingStack()
        stack.push("*")
        stack.push("#")
        assert stack.prefix() == "*#"
        assert len(stack) == 2
        assert stack.pop() == "#"
        assert stack.prefix() == "*"

    def test_pop_empty_raises(self) -> None:
        with pytest.raises(RenderingError, match="underflow"):
            ListNestingStack().pop()

    def test_nested_restores_on_error(self) -> None:
        """The marker is popped even when rendering the list fails."""
        stack = ListNestingStack()
        with pytest.raises(KeyError):
            with stack.nested("*"):
                assert stack.is_open
                raise KeyError("boom")
        assert not stack.is_open


@pytest.mark.unit
class TestFootnoteCollector:
    """Test reserve-then-fill footnote numbering."""

    def test_numbers_start_at_one(self) -> None:
        notes = FootnoteCollector()
        assert notes.reserve() == 1
        assert notes.reserve() == 2
        assert len(notes) == 2

    def test_fill_out_of_order(self) -> None:
        notes = FootnoteCollector()
        outer = notes.reserve()
        inner = notes.reserve()
        notes.fill(inner, "inner")
        notes.fill(outer, "outer")
        assert notes.notes() == ["outer", "inner"]

    def test_has_notes(self) -> None:
        notes = FootnoteCollector()
        assert not notes.has_notes
        notes.reserve()
        assert notes.has_notes

    def test_fill_unreserved(self) -> None:
        with pytest.raises(RenderingError, match="never reserved"):
            FootnoteCollector().fill(1, "x")

    def test_fill_twice(self) -> None:
        notes = FootnoteCollector()
        index = notes.reserve()
        notes.fill(index, "x")
        with pytest.raises(RenderingError, match="already filled"):
            notes.fill(index, "y")

    def test_unfilled_reported(self) -> None:
        notes = FootnoteCollector()
        notes.reserve()
        notes.fill(notes.reserve(), "second")
        with pytest.raises(RenderingError, match="never filled: 1"):
            notes.notes()


@pytest.mark.unit
class TestRenderContext:
    """Test the per-render context."""

    def test_block_separator_outside_list(self) -> None:
        assert RenderContext().block_separator() == "\n\n"

    def test_block_separator_inside_list(self) -> None:
        ctx = RenderContext()
        with ctx.lists.nested("*"):
            assert ctx.block_separator() == "\n"
        assert ctx.block_separator() == "\n\n"

    def test_contexts_do_not_share_state(self) -> None:
        first = RenderContext()
        first.footnotes.reserve()
        first.lists.push("*")
        second = RenderContext()
        assert len(second.footnotes) == 0
        assert not second.lists.is_open
        first.mark_reported("Widget")
        assert second.reported_kinds == set()

    def test_mark_reported_once_per_kind(self) -> None:
        ctx = RenderContext()
        assert ctx.mark_reported("Widget") is True
        assert ctx.mark_reported("Widget") is False
        assert ctx.mark_reported("Gadget") is True
