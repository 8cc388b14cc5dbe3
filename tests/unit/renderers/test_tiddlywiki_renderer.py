#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the TiddlyWiki renderer."""

import pytest

from wikirender.ast import (
    BlockQuote,
    BulletList,
    Code,
    CodeBlock,
    DefinitionList,
    Document,
    Emph,
    Figure,
    Heading,
    Image,
    Link,
    Note,
    OrderedList,
    Paragraph,
    Plain,
    Strikeout,
    Strong,
    Subscript,
    Superscript,
    Table,
    TableCell,
    TableRow,
    Text,
)
from wikirender.exceptions import InvalidOptionsError
from wikirender.options import RedmineRendererOptions, TiddlyWikiRendererOptions
from wikirender.renderers.tiddlywiki import TiddlyWikiRenderer


def _text(content: str) -> Text:
    return Text(content=content)


def _para(*inlines) -> Paragraph:
    return Paragraph(content=list(inlines))


def _cell(content: str) -> TableCell:
    return TableCell(content=[Plain(content=[_text(content)])])


def _render(*blocks, renderer=None) -> str:
    return (renderer or TiddlyWikiRenderer()).render_to_string(Document(children=list(blocks)))


@pytest.mark.unit
class TestTiddlyWikiBlocks:
    """Tests for block-level TiddlyWiki markup."""

    @pytest.mark.parametrize("level,marks", [(1, "!"), (2, "!!"), (4, "!!!!")])
    def test_heading(self, level: int, marks: str) -> None:
        assert _render(Heading(level=level, content=[_text("Title")])) == f"{marks} Title\n"

    def test_block_quote(self) -> None:
        assert _render(BlockQuote(children=[_para(_text("quoted"))])) == "<<<\nquoted\n<<<\n"

    def test_code_block_with_language(self) -> None:
        block = CodeBlock(content="print(1)", attributes={"class": "python"})
        assert _render(block) == "```python\nprint(1)\n```\n"

    def test_code_block_without_language(self) -> None:
        assert _render(CodeBlock(content="raw")) == "```\nraw\n```\n"

    def test_mermaid_code_block_renders_widget(self) -> None:
        block = CodeBlock(content="graph TD; A-->B", attributes={"class": "mermaid"})
        assert _render(block) == '<$mermaid text="\ngraph TD; A-->B"></$mermaid>\n'

    def test_only_first_class_selects_language(self) -> None:
        block = CodeBlock(content="x", attributes={"class": "numberLines mermaid"})
        assert _render(block) == "```numberLines\nx\n```\n"

    def test_custom_diagram_languages(self) -> None:
        renderer = TiddlyWikiRenderer(TiddlyWikiRendererOptions(diagram_languages=["graphviz"]))
        block = CodeBlock(content="digraph {}", attributes={"class": "graphviz"})
        assert _render(block, renderer=renderer) == '<$graphviz text="\ndigraph {}"></$graphviz>\n'
        mermaid = CodeBlock(content="graph TD", attributes={"class": "mermaid"})
        assert _render(mermaid, renderer=renderer) == "```mermaid\ngraph TD\n```\n"

    def test_bullet_and_ordered_lists(self) -> None:
        inner = OrderedList(items=[[Plain(content=[_text("b")])]])
        outer = BulletList(items=[[Plain(content=[_text("a")]), inner]])
        assert _render(outer) == "* a\n*# b\n"

    def test_definition_list_has_no_wrapper(self) -> None:
        dl = DefinitionList(items=[([_text("Term")], [[Plain(content=[_text("Def")])]])])
        assert _render(dl) == "\n<dt>Term</dt>\n<dd>Def</dd>\n\n"

    def test_table_header_row_marker(self) -> None:
        table = Table(
            header=TableRow(cells=[_cell("A"), _cell("B"), _cell("C")]),
            rows=[TableRow(cells=[_cell("1"), _cell("2"), _cell("3")])],
        )
        assert _render(table) == "|A|B|C|h\n|1|2|3|\n"

    def test_table_with_empty_header_row(self) -> None:
        table = Table(header=TableRow(cells=[]), rows=[TableRow(cells=[_cell("x")])])
        assert _render(table) == "|x|\n"

    def test_table_followed_by_block(self) -> None:
        table = Table(rows=[TableRow(cells=[_cell("x")])])
        assert _render(table, _para(_text("after"))) == "|x|\n\nafter\n"

    def test_toc_paragraph_renders_empty(self) -> None:
        assert _render(_para(_text("[TOC]"))) == "\n"

    def test_figure_with_caption(self) -> None:
        assert _render(Figure(target="/fig.png", caption=[_text("Cap")])) == "[img[Cap|/fig.png]]\n"

    def test_figure_without_caption(self) -> None:
        assert _render(Figure(target="fig.png")) == "[img[fig.png]]\n"


@pytest.mark.unit
class TestTiddlyWikiInlines:
    """Tests for inline TiddlyWiki markup."""

    @pytest.mark.parametrize(
        "node_class,expected",
        [
            (Emph, "''x''"),
            (Strong, "''x''"),
            (Subscript, ",,x,,"),
            (Superscript, "^^x^^"),
            (Strikeout, "~~x~~"),
        ],
    )
    def test_wrapping_inlines(self, node_class, expected: str) -> None:
        assert _render(_para(node_class(content=[_text("x")]))) == expected + "\n"

    def test_link(self) -> None:
        link = Link(target="https://example.com", content=[_text("site")])
        assert _render(_para(link)) == "[[site|https://example.com]]\n"

    def test_image_path_not_normalized(self) -> None:
        assert _render(_para(Image(target="/img/a.png"))) == "[img[/img/a.png]]\n"

    def test_inline_code(self) -> None:
        assert _render(_para(Code(content="x = 1", attributes={"class": "py"}))) == "`x = 1`\n"

    def test_footnotes_use_html_block(self) -> None:
        result = _render(_para(_text("Hi"), Note(children=[_para(_text("n"))])))
        assert result == (
            'Hi<a id="fnref1" href="#fn1"><sup>1</sup></a>\n'
            '<ol class="footnotes">\n'
            '<li id="fn1">n <a href="#fnref1">&#8617;</a></li>\n'
            "</ol>\n"
        )


@pytest.mark.unit
class TestTiddlyWikiOptions:
    """Tests for TiddlyWiki options."""

    def test_wrong_options_type_rejected(self) -> None:
        with pytest.raises(InvalidOptionsError):
            TiddlyWikiRenderer(RedmineRendererOptions())

    def test_diagram_languages_normalized_to_tuple(self) -> None:
        options = TiddlyWikiRendererOptions(diagram_languages=["mermaid", "graphviz"])
        assert options.diagram_languages == ("mermaid", "graphviz")

    def test_diagram_languages_string_rejected(self) -> None:
        with pytest.raises(ValueError):
            TiddlyWikiRendererOptions(diagram_languages="mermaid")
