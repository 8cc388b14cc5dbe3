"""Pytest configuration and shared fixtures for the wikirender test suite."""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from wikirender.ast import (
    BulletList,
    Document,
    Heading,
    Note,
    Paragraph,
    Plain,
    Text,
)
from wikirender.renderers import RedmineRenderer, TiddlyWikiRenderer

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "property: Hypothesis property-based tests")


@pytest.fixture
def redmine() -> RedmineRenderer:
    """Redmine renderer with default options."""
    return RedmineRenderer()


@pytest.fixture
def tiddlywiki() -> TiddlyWikiRenderer:
    """TiddlyWiki renderer with default options."""
    return TiddlyWikiRenderer()


@pytest.fixture
def sample_document() -> Document:
    """Heading, paragraph with a footnote, and a two-item bullet list.

    Returns
    -------
    Document
        Small document exercising blocks, lists and notes together.

    """
    return Document(
        children=[
            Heading(level=2, content=[Text(content="Title")]),
            Paragraph(
                content=[
                    Text(content="Hello"),
                    Note(children=[Paragraph(content=[Text(content="A note")])]),
                ]
            ),
            BulletList(
                items=[
                    [Plain(content=[Text(content="a")])],
                    [Plain(content=[Text(content="b")])],
                ]
            ),
        ]
    )
