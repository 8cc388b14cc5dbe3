"""Property-based tests for the rendering engine.

Test Coverage:
- Footnotes are numbered in reference order and listed in that order
- List item prefixes concatenate every open marker, outermost first
- Plain text passes through unchanged with identity escaping
- Attribute serialization does not depend on mapping order
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from wikirender.ast import BulletList, Document, Note, OrderedList, Paragraph, Plain, Text
from wikirender.renderers import RedmineRenderer, TiddlyWikiRenderer
from wikirender.utils.attributes import serialize_attributes

_words = st.text(alphabet="abcdefghijklmnopqrstuvwxyz", min_size=1, max_size=8)


def _nested_lists(bullets: list[bool]):
    """Build a chain of single-item lists, one level per flag (True for bullets)."""
    child = None
    for depth in reversed(range(len(bullets))):
        item = [Plain(content=[Text(content=f"L{depth}")])]
        if child is not None:
            item.append(child)
        child = BulletList(items=[item]) if bullets[depth] else OrderedList(items=[item])
    return child


@pytest.mark.unit
@pytest.mark.property
class TestRenderProperties:
    """Invariants that hold for any document shape."""

    @given(st.lists(_words, min_size=1, max_size=12))
    def test_footnotes_numbered_in_reference_order(self, bodies: list[str]) -> None:
        doc = Document(
            children=[
                Paragraph(content=[Text(content=f"p{i}"), Note(children=[Paragraph(content=[Text(content=body)])])])
                for i, body in enumerate(bodies)
            ]
        )
        result = RedmineRenderer().render_to_string(doc)

        positions = [result.index(f'<a id="fnref{n}" href="#fn{n}">') for n in range(1, len(bodies) + 1)]
        assert positions == sorted(positions)
        for n, body in enumerate(bodies, start=1):
            assert f'<li id="fn{n}">{body} <a href="#fnref{n}">&#8617;</a></li>' in result
        assert result.count("<li id=") == len(bodies)

    @given(st.lists(st.booleans(), min_size=1, max_size=6))
    def test_list_prefix_is_marker_stack(self, bullets: list[bool]) -> None:
        markers = ["*" if bullet else "#" for bullet in bullets]
        expected = "\n".join(f"{''.join(markers[: depth + 1])} L{depth}" for depth in range(len(markers))) + "\n"

        doc = Document(children=[_nested_lists(bullets)])
        assert RedmineRenderer().render_to_string(doc) == expected
        assert TiddlyWikiRenderer().render_to_string(doc) == expected

    @given(st.text(max_size=50))
    def test_text_passes_through(self, text: str) -> None:
        doc = Document(children=[Paragraph(content=[Text(content=text)])])
        result = TiddlyWikiRenderer().render_to_string(doc)

        if text.lower() == "[toc]":
            assert result == "\n"
        else:
            assert result == text + "\n"

    @given(st.dictionaries(_words, st.text(max_size=5), max_size=6))
    def test_attribute_order_is_canonical(self, attributes: dict[str, str]) -> None:
        reversed_attributes = dict(reversed(list(attributes.items())))
        assert serialize_attributes(attributes) == serialize_attributes(reversed_attributes)
