#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Integration tests for the public rendering functions."""

from io import BytesIO, StringIO
from pathlib import Path

import pytest

from wikirender import render, render_json
from wikirender.ast import Document, Image, Paragraph, Text, ast_to_json
from wikirender.exceptions import ConfigurationError, FormatError, InvalidOptionsError, ParsingError
from wikirender.options import RedmineRendererOptions, TiddlyWikiRendererOptions

EXPECTED_REDMINE = (
    "h2. Title\n\n"
    'Hello<a id="fnref1" href="#fn1"><sup>1</sup></a>\n\n'
    "* a\n* b\n"
    '<ol class="footnotes">\n'
    '<li id="fn1">A note <a href="#fnref1">&#8617;</a></li>\n'
    "</ol>\n"
)


@pytest.mark.integration
class TestRender:
    """Test render() with in-memory documents."""

    def test_default_dialect_is_redmine(self, sample_document: Document) -> None:
        assert render(sample_document) == EXPECTED_REDMINE

    def test_tiddlywiki(self, sample_document: Document) -> None:
        result = render(sample_document, to="tiddlywiki")
        assert result is not None
        assert result.startswith("!! Title\n\n")

    def test_unknown_dialect(self, sample_document: Document) -> None:
        with pytest.raises(FormatError):
            render(sample_document, to="mediawiki")

    def test_options_for_wrong_dialect(self, sample_document: Document) -> None:
        with pytest.raises(InvalidOptionsError):
            render(sample_document, to="redmine", options=TiddlyWikiRendererOptions())

    def test_kwargs_create_options(self) -> None:
        doc = Document(children=[Paragraph(content=[Image(target="/a.png")])])
        assert render(doc, to="redmine", normalize_image_paths=False) == "!/a.png!\n"

    def test_kwargs_override_options(self) -> None:
        doc = Document(children=[Paragraph(content=[Text(content="[toc]")])])
        options = RedmineRendererOptions(toc_directive="{{>toc}}")
        assert render(doc, options=options) == "{{>toc}}\n"
        assert render(doc, options=options, toc_directive="{{<toc}}") == "{{<toc}}\n"

    def test_unknown_kwargs_ignored(self, sample_document: Document) -> None:
        assert render(sample_document, to="redmine", diagram_languages=["x"]) == EXPECTED_REDMINE

    def test_invalid_kwarg_value(self, sample_document: Document) -> None:
        with pytest.raises(ConfigurationError):
            render(sample_document, default_image_format="bmp")

    def test_invalid_metadata_image_format(self) -> None:
        doc = Document(metadata={"image_format": "tiff"})
        with pytest.raises(ConfigurationError):
            render(doc)


@pytest.mark.integration
class TestRenderOutput:
    """Test writing to output targets."""

    def test_text_stream(self, sample_document: Document) -> None:
        buffer = StringIO()
        assert render(sample_document, output=buffer) is None
        assert buffer.getvalue() == EXPECTED_REDMINE

    def test_binary_stream(self, sample_document: Document) -> None:
        buffer = BytesIO()
        render(sample_document, output=buffer)
        assert buffer.getvalue() == EXPECTED_REDMINE.encode("utf-8")

    def test_path(self, sample_document: Document, tmp_path: Path) -> None:
        target = tmp_path / "page.textile"
        render(sample_document, output=target)
        assert target.read_text(encoding="utf-8") == EXPECTED_REDMINE

    def test_str_path_non_ascii(self, tmp_path: Path) -> None:
        target = tmp_path / "page.tid"
        doc = Document(children=[Paragraph(content=[Text(content="Grüße")])])
        render(doc, to="tiddlywiki", output=str(target))
        assert target.read_bytes() == "Grüße\n".encode("utf-8")


@pytest.mark.integration
class TestRenderJson:
    """Test render_json() with serialized trees."""

    def test_round_trip_through_json(self, sample_document: Document) -> None:
        assert render_json(ast_to_json(sample_document)) == EXPECTED_REDMINE

    def test_root_must_be_document(self) -> None:
        with pytest.raises(ParsingError, match="Document"):
            render_json(ast_to_json(Paragraph(content=[])))

    def test_unknown_node_strict(self) -> None:
        json_str = '{"node_type": "Document", "children": [{"node_type": "Marquee"}]}'
        with pytest.raises(ParsingError):
            render_json(json_str)

    def test_unknown_node_lenient(self, caplog) -> None:
        json_str = (
            '{"node_type": "Document", "children": ['
            '{"node_type": "Paragraph", "content": [{"node_type": "Text", "content": "a"}]},'
            '{"node_type": "Marquee"}]}'
        )
        assert render_json(json_str, to="tiddlywiki", strict_mode=False) == "a\n\n\n"
        assert "Marquee" in caplog.text

    def test_kwargs_forwarded(self) -> None:
        json_str = ast_to_json(Document(children=[Paragraph(content=[Image(target="/x.png")])]))
        assert render_json(json_str, to="redmine", normalize_image_paths=False) == "!/x.png!\n"
