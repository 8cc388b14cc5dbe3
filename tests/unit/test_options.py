#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for renderer options classes."""

from dataclasses import FrozenInstanceError, fields

import pytest

from wikirender.options import BaseRendererOptions, RedmineRendererOptions, TiddlyWikiRendererOptions


@pytest.mark.unit
class TestBaseRendererOptions:
    """Test options shared by every dialect."""

    def test_defaults(self) -> None:
        options = BaseRendererOptions()
        assert options.default_image_format == "png"
        assert options.raw_format == "html"
        assert options.toc_sentinel == "[toc]"

    def test_frozen(self) -> None:
        options = BaseRendererOptions()
        with pytest.raises(FrozenInstanceError):
            options.raw_format = "latex"  # type: ignore[misc]

    @pytest.mark.parametrize("image_format", ["jpeg", "jpg", "gif", "png", "svg"])
    def test_supported_image_formats(self, image_format: str) -> None:
        assert BaseRendererOptions(default_image_format=image_format).default_image_format == image_format

    def test_unsupported_image_format(self) -> None:
        with pytest.raises(ValueError, match="default_image_format"):
            BaseRendererOptions(default_image_format="webp")

    @pytest.mark.parametrize("field_name", ["raw_format", "toc_sentinel"])
    def test_blank_values_rejected(self, field_name: str) -> None:
        with pytest.raises(ValueError, match=field_name):
            BaseRendererOptions(**{field_name: "  "})


@pytest.mark.unit
class TestCreateUpdated:
    """Test cloning frozen options."""

    def test_returns_new_instance(self) -> None:
        original = RedmineRendererOptions()
        updated = original.create_updated(toc_directive="{{>toc}}")

        assert updated is not original
        assert updated.toc_directive == "{{>toc}}"
        assert original.toc_directive == "{{toc}}"
        assert isinstance(updated, RedmineRendererOptions)

    def test_validates_new_values(self) -> None:
        with pytest.raises(ValueError):
            RedmineRendererOptions().create_updated(default_image_format="bmp")

    def test_unknown_field(self) -> None:
        with pytest.raises(TypeError):
            RedmineRendererOptions().create_updated(colour="red")


@pytest.mark.unit
class TestDialectOptions:
    """Test dialect-specific option classes."""

    def test_redmine_defaults(self) -> None:
        options = RedmineRendererOptions()
        assert options.normalize_image_paths is True
        assert options.toc_directive == "{{toc}}"

    def test_tiddlywiki_defaults(self) -> None:
        assert TiddlyWikiRendererOptions().diagram_languages == ("mermaid",)

    def test_tiddlywiki_empty_diagram_languages(self) -> None:
        assert TiddlyWikiRendererOptions(diagram_languages=[]).diagram_languages == ()

    def test_every_field_has_help(self) -> None:
        for options_class in (RedmineRendererOptions, TiddlyWikiRendererOptions):
            for option_field in fields(options_class):
                assert option_field.metadata.get("help"), option_field.name
