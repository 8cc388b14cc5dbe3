"""wikirender - render a generic document tree to wiki markup dialects.

wikirender takes a document tree (headings, paragraphs, lists, tables,
footnotes, inline formatting, ...) and renders it as Redmine (Textile) or
TiddlyWiki markup. Trees are built in Python from :mod:`wikirender.ast` or
loaded from their JSON serialization.

Supported Dialects
------------------
- **redmine**: Textile with inline HTML, ``{{toc}}`` table of contents
- **tiddlywiki**: TiddlyWiki 5 wikitext, mermaid diagram widgets

Requirements
------------
- Python 3.10+

Examples
--------
Render a tree built in Python:

    >>> from wikirender import render
    >>> from wikirender.ast import Document, Heading, Text
    >>> render(Document(children=[Heading(level=2, content=[Text(content="Title")])]), to="redmine")
    'h2. Title\\n'

Render a serialized tree:

    >>> from wikirender import render_json
    >>> markup = render_json(open("page.json").read(), to="tiddlywiki")

"""

import sys

# Check Python version before any imports
if sys.version_info < (3, 10):
    raise RuntimeError(
        f"wikirender requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "0.1.0"

from wikirender.api import render, render_json  # noqa: E402
from wikirender.exceptions import (  # noqa: E402
    ConfigurationError,
    FileError,
    FormatError,
    InvalidOptionsError,
    OutputWriteError,
    ParsingError,
    RenderingError,
    ValidationError,
    WikiRenderError,
)
from wikirender.options import (  # noqa: E402
    BaseRendererOptions,
    RedmineRendererOptions,
    TiddlyWikiRendererOptions,
)
from wikirender.registry import DialectMetadata, registry  # noqa: E402
from wikirender.renderers import RedmineRenderer, TiddlyWikiRenderer, WikiRenderer  # noqa: E402

__all__ = [
    "__version__",
    "render",
    "render_json",
    "registry",
    "DialectMetadata",
    "BaseRendererOptions",
    "RedmineRendererOptions",
    "TiddlyWikiRendererOptions",
    "RedmineRenderer",
    "TiddlyWikiRenderer",
    "WikiRenderer",
    "WikiRenderError",
    "ValidationError",
    "InvalidOptionsError",
    "ConfigurationError",
    "FileError",
    "FormatError",
    "ParsingError",
    "RenderingError",
    "OutputWriteError",
]
