#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wikirender/renderers/base.py
"""Abstract renderer interface.

A renderer turns a :class:`~wikirender.ast.Document` into markup. Concrete
renderers only implement ``render_to_string``; writing to paths and streams
is shared here.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from wikirender.ast import Document
from wikirender.exceptions import InvalidOptionsError
from wikirender.options.base import BaseRendererOptions
from wikirender.utils.io_utils import OutputTarget, write_content


class BaseRenderer(ABC):
    """Common base for wikirender renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Options for the target dialect. None selects the defaults.

    Examples
    --------
    A renderer that ignores its input:

        >>> class BlankRenderer(BaseRenderer):
        ...     def render_to_string(self, doc):
        ...         return "\\n"
        >>> BlankRenderer().render_to_string(Document())
        '\\n'

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        self.options = options or BaseRendererOptions()

    @abstractmethod
    def render_to_string(self, doc: Document) -> str:
        """Return the rendered markup for ``doc``.

        Raises
        ------
        ConfigurationError
            If the document metadata asks for something the options cannot
            provide, such as an unknown image format
        RenderingError
            If per-render state is left inconsistent

        """

    def render(self, doc: Document, output: OutputTarget) -> None:
        """Render ``doc`` and write the markup to a path or stream.

        Raises
        ------
        OutputWriteError
            If the destination cannot be written

        """
        self.write_text_output(self.render_to_string(doc), output)

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        # None means "use the defaults" and is always accepted
        if options is None or isinstance(options, expected_type):
            return
        raise InvalidOptionsError(
            renderer_name=renderer_name,
            expected_type=expected_type,
            received_type=type(options),
        )

    @staticmethod
    def write_text_output(text: str, output: OutputTarget) -> None:
        """Write ``text`` as UTF-8 to a path, a text stream or a binary stream.

        Examples
        --------
            >>> from io import BytesIO
            >>> sink = BytesIO()
            >>> BaseRenderer.write_text_output("h2. Notes\\n", sink)
            >>> sink.getvalue()
            b'h2. Notes\\n'

        """
        write_content(text, output)


__all__ = ["BaseRenderer"]
