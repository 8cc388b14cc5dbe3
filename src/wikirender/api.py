#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wikirender/api.py
"""Public rendering functions."""

from __future__ import annotations

import logging
from dataclasses import fields
from typing import Any, Optional

from wikirender.ast import Document, json_to_ast
from wikirender.exceptions import ConfigurationError, InvalidOptionsError, ParsingError
from wikirender.options.base import BaseRendererOptions
from wikirender.registry import registry
from wikirender.utils.io_utils import OutputTarget

logger = logging.getLogger(__name__)


def _create_renderer_options(
    options_class: type[BaseRendererOptions],
    options: Optional[BaseRendererOptions],
    **kwargs: Any,
) -> BaseRendererOptions:
    """Build options for a dialect, letting keyword arguments override ``options``.

    Raises
    ------
    ConfigurationError
        If an option value is rejected by the options class

    """
    option_names = {f.name for f in fields(options_class)}
    valid_kwargs = {k: v for k, v in kwargs.items() if k in option_names}
    unknown = [k for k in kwargs if k not in option_names]
    if unknown:
        logger.debug(f"Skipping unknown renderer options: {unknown}")

    try:
        if options is None:
            return options_class(**valid_kwargs)
        return options.create_updated(**valid_kwargs) if valid_kwargs else options
    except ValueError as e:
        raise ConfigurationError(str(e), original_error=e) from e


def render(
    doc: Document,
    to: str = "redmine",
    output: OutputTarget | None = None,
    options: Optional[BaseRendererOptions] = None,
    **kwargs: Any,
) -> Optional[str]:
    """Render a document tree to a wiki dialect.

    Parameters
    ----------
    doc : Document
        Root of the document tree
    to : str, default "redmine"
        Target dialect name (see ``registry.list_formats()``)
    output : str, Path, IO[bytes], IO[str] or None, default None
        Where to write the result. If None, the markup is returned.
    options : BaseRendererOptions or None, default None
        Options for the target dialect
    kwargs : Any
        Individual option values that override ``options``

    Returns
    -------
    str or None
        The rendered markup, or None when written to ``output``

    Raises
    ------
    FormatError
        If ``to`` is not a registered dialect
    InvalidOptionsError
        If ``options`` belongs to another dialect
    ConfigurationError
        If an option value or the document's image format is invalid

    Examples
    --------
        >>> from wikirender.ast import Document, Paragraph, Text
        >>> render(Document(children=[Paragraph(content=[Text(content="Hi")])]), to="tiddlywiki")
        'Hi\\n'

    """
    renderer_class = registry.get_renderer(to)
    options_class = registry.get_options_class(to)
    if options is not None and not isinstance(options, options_class):
        raise InvalidOptionsError(renderer_name=to, expected_type=options_class, received_type=type(options))

    renderer = renderer_class(_create_renderer_options(options_class, options, **kwargs))
    if output is None:
        return renderer.render_to_string(doc)
    renderer.render(doc, output)
    return None


def render_json(
    json_str: str,
    to: str = "redmine",
    output: OutputTarget | None = None,
    options: Optional[BaseRendererOptions] = None,
    strict_mode: bool = True,
    **kwargs: Any,
) -> Optional[str]:
    """Render a JSON-serialized document tree.

    Parameters
    ----------
    json_str : str
        Document tree as produced by :func:`wikirender.ast.ast_to_json`
    to : str, default "redmine"
        Target dialect name
    output : str, Path, IO[bytes], IO[str] or None, default None
        Where to write the result. If None, the markup is returned.
    options : BaseRendererOptions or None, default None
        Options for the target dialect
    strict_mode : bool, default True
        If False, unknown node types are kept as placeholders that render
        empty (with a warning) instead of failing the parse.

    Raises
    ------
    ParsingError
        If the JSON is invalid or its root is not a document

    """
    doc = json_to_ast(json_str, strict_mode=strict_mode)
    if not isinstance(doc, Document):
        raise ParsingError(f"Expected a Document at the root, got {doc.kind}", parsing_stage="document")
    return render(doc, to=to, output=output, options=options, **kwargs)


__all__ = ["render", "render_json"]
